"""Default bean descriptor."""

import inspect
from types import MappingProxyType
from typing import Any, Collection, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar

from bean_helper.core.exceptions import BeanInstantiationError, InvocationError
from bean_helper.core.metadata import attached_annotations, find_annotation
from bean_helper.protocols import Bean, Property

T = TypeVar("T")
A = TypeVar("A")


def qualified_name(bean_class: Type) -> str:
    """``module.QualName`` of a class."""
    return f"{bean_class.__module__}.{bean_class.__qualname__}"


class DefaultBean(Bean[T]):
    """
    Bean descriptor holding its properties by name.

    Immutable after construction. Supports weak references so the registry can
    hold it without keeping it alive.
    """

    def __init__(self, bean_class: Type[T], name: str, properties: Iterable[Property[T]]):
        properties = list(properties)
        for prop in properties:
            if not issubclass(bean_class, prop.bean_class):
                raise ValueError(
                    f"property '{prop.name}' of {prop.bean_class.__qualname__} does not belong to {bean_class.__qualname__}"
                )
        self._bean_class = bean_class
        self._name = name
        self._properties: Mapping[str, Property[T]] = MappingProxyType(
            {prop.name: prop for prop in properties}
        )

    @property
    def bean_class(self) -> Type[T]:
        return self._bean_class

    @property
    def name(self) -> str:
        return self._name

    def new_bean(self) -> T:
        if inspect.isabstract(self._bean_class):
            raise BeanInstantiationError(f"{self._name} is abstract")
        try:
            inspect.signature(self._bean_class).bind()
        except TypeError as e:
            raise BeanInstantiationError(f"{self._name} has no zero-argument constructor: {e}") from e
        except ValueError:
            # No introspectable signature (some builtins); let the call decide
            pass
        try:
            return self._bean_class()
        except Exception as e:
            raise InvocationError(f"constructor of {self._name} failed: {e}") from e

    def new_bean_array(self, length: int) -> List[Optional[T]]:
        if length < 0:
            raise ValueError(f"length should not be negative, got {length}")
        return [None] * length

    def get_property(self, name: str) -> Optional[Property[T]]:
        return self._properties.get(name)

    def get_properties(self) -> Collection[Property[T]]:
        return self._properties.values()

    @property
    def properties(self) -> Mapping[str, Property[T]]:
        """Read-only name → property mapping."""
        return self._properties

    def is_annotation_present(self, kind: Type) -> bool:
        return self.get_annotation(kind) is not None

    def get_annotation(self, kind: Type[A]) -> Optional[A]:
        return find_annotation(attached_annotations(self._bean_class), kind)

    def get_annotations(self) -> Tuple[Any, ...]:
        return attached_annotations(self._bean_class)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DefaultBean):
            return NotImplemented
        return self._bean_class is other._bean_class

    def __hash__(self) -> int:
        return hash(self._bean_class)

    def __repr__(self) -> str:
        return f"DefaultBean({self._name}, properties={sorted(self._properties)})"
