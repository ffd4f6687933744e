"""
bean-helper: runtime property introspection for Python data classes.

Given a class, discovers its declared fields and accessor methods, unifies
them into named properties with read/write capability, type and metadata,
and caches the result per class.

Architecture:
- Core: exceptions, type utilities, metadata attachment
- Protocols: Bean/Property ABCs and discovery configuration
- Beans: DefaultProperty/DefaultBean, discovery, BeanRegistry

Example:
    >>> from bean_helper import get_bean
    >>> bean = get_bean(User)
    >>> [p.name for p in bean.get_properties() if p.is_writable]
    ['email', 'name']
"""

__version__ = "0.1.0"

from bean_helper.core import (
    BeanError,
    InvalidPropertyError,
    BeanInstantiationError,
    PropertyAccessError,
    InvocationError,
    annotate,
    attached_annotations,
)
from bean_helper.protocols import (
    Bean,
    Property,
    AccessorNaming,
    BeanConfig,
    set_bean_config,
    get_bean_config,
)
from bean_helper.beans import (
    DefaultBean,
    DefaultProperty,
    BeanRegistry,
    discover_bean,
    get_bean,
    get_bean_registry,
    reset_bean_registry,
)

__all__ = [
    "__version__",
    "BeanError",
    "InvalidPropertyError",
    "BeanInstantiationError",
    "PropertyAccessError",
    "InvocationError",
    "annotate",
    "attached_annotations",
    "Bean",
    "Property",
    "AccessorNaming",
    "BeanConfig",
    "set_bean_config",
    "get_bean_config",
    "DefaultBean",
    "DefaultProperty",
    "BeanRegistry",
    "discover_bean",
    "get_bean",
    "get_bean_registry",
    "reset_bean_registry",
]
