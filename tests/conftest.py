"""pytest configuration and fixtures for bean-helper tests."""

import pytest

from bean_helper import BeanRegistry, reset_bean_registry
from bean_helper.protocols import bean_config


@pytest.fixture
def registry():
    """Isolated registry using the default configuration."""
    return BeanRegistry(bean_config.BeanConfig())


@pytest.fixture(autouse=True)
def restore_global_state():
    """Restore the global config and registry after each test."""
    saved = bean_config._bean_config
    yield
    bean_config._bean_config = saved
    reset_bean_registry()
