"""
Bean descriptors, discovery and the registry.
"""

from .field_info import FieldInfo
from .default_property import DefaultProperty
from .default_bean import DefaultBean
from .discovery import discover_bean
from .bean_registry import BeanRegistry, get_bean_registry, reset_bean_registry, get_bean

__all__ = [
    "FieldInfo",
    "DefaultProperty",
    "DefaultBean",
    "discover_bean",
    "BeanRegistry",
    "get_bean_registry",
    "reset_bean_registry",
    "get_bean",
]
