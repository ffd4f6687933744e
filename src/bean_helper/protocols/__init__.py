"""
Bean protocol definitions and configuration.

ABC-based contracts for bean and property descriptors, plus the
process-wide discovery configuration.
"""

from .bean_protocols import AnnotationQueryable, Bean, Property
from .bean_config import AccessorNaming, BeanConfig, set_bean_config, get_bean_config

__all__ = [
    "AnnotationQueryable",
    "Bean",
    "Property",
    "AccessorNaming",
    "BeanConfig",
    "set_bean_config",
    "get_bean_config",
]
