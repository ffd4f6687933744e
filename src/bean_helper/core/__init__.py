"""
Core utilities.

Exceptions, annotation/type helpers and metadata attachment shared by the
bean descriptors. No dependencies on the rest of the package.
"""

from .exceptions import (
    BeanError,
    InvalidPropertyError,
    BeanInstantiationError,
    PropertyAccessError,
    InvocationError,
)
from .metadata import annotate, attached_annotations
from .type_utils import TypeUtils

__all__ = [
    "BeanError",
    "InvalidPropertyError",
    "BeanInstantiationError",
    "PropertyAccessError",
    "InvocationError",
    "annotate",
    "attached_annotations",
    "TypeUtils",
]
