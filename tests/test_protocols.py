"""Tests for bean protocols and configuration."""

import pytest


def test_default_descriptors_implement_protocols():
    """Test DefaultBean/DefaultProperty implement the Bean/Property ABCs."""
    from bean_helper import Bean, Property, discover_bean

    class Item:
        label: str = ""

    bean = discover_bean(Item)
    assert isinstance(bean, Bean)
    assert isinstance(bean.get_property("label"), Property)

    # Test value roundtrip
    item = Item()
    bean.get_property("label").set_value(item, "test")
    assert bean.get_property("label").get_value(item) == "test"


def test_protocols_are_abstract():
    """Test the ABCs cannot be instantiated directly."""
    from bean_helper import Bean, Property

    with pytest.raises(TypeError):
        Bean()
    with pytest.raises(TypeError):
        Property()


@pytest.mark.parametrize("method_name, expected", [
    ("get_name", "name"),
    ("is_active", "active"),
    ("set_first_name", "first_name"),
    ("get_", None),
    ("get", None),
    ("getName", None),
    ("get_Foo", "Foo"),
    ("fetch_name", None),
])
def test_snake_property_names(method_name, expected):
    """Test property names under the snake convention."""
    from bean_helper import AccessorNaming

    assert AccessorNaming.SNAKE.property_name(method_name) == expected


@pytest.mark.parametrize("method_name, expected", [
    ("getName", "name"),
    ("isActive", "active"),
    ("setFirstName", "firstName"),
    ("getURL", "uRL"),
    ("get", None),
    ("is", None),
    ("fetchName", None),
])
def test_camel_property_names(method_name, expected):
    """Test property names under the camel convention."""
    from bean_helper import AccessorNaming

    assert AccessorNaming.CAMEL.property_name(method_name) == expected


def test_accessor_names():
    """Test accessor names are built per convention."""
    from bean_helper import AccessorNaming

    assert AccessorNaming.SNAKE.accessor_name("get", "first_name") == "get_first_name"
    assert AccessorNaming.CAMEL.accessor_name("set", "firstName") == "setFirstName"
    assert AccessorNaming.CAMEL.accessor_name("is", "uRL") == "isURL"


def test_bean_config_defaults():
    """Test get_bean_config falls back to defaults until set."""
    from bean_helper import AccessorNaming, BeanConfig, get_bean_config, set_bean_config

    config = get_bean_config()
    assert config.naming is AccessorNaming.SNAKE
    assert config.boolean_types == frozenset({bool})
    assert config.include_descriptors

    custom = BeanConfig(naming=AccessorNaming.CAMEL)
    set_bean_config(custom)
    assert get_bean_config() is custom
