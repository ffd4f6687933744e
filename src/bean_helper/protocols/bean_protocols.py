"""
Bean and property contracts.

ABC-based interfaces implemented by the descriptors that discovery produces.
Callers program against these; ``DefaultBean``/``DefaultProperty`` are the
stock implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Collection, Generic, List, Optional, Tuple, Type, TypeVar

T = TypeVar("T")
A = TypeVar("A")


class AnnotationQueryable(ABC):
    """Anything that exposes attached metadata."""

    @abstractmethod
    def is_annotation_present(self, kind: Type) -> bool:
        """Check if metadata of ``kind`` is attached."""
        pass

    @abstractmethod
    def get_annotation(self, kind: Type[A]) -> Optional[A]:
        """Return the first attached metadata of ``kind``, or None."""
        pass

    @abstractmethod
    def get_annotations(self) -> Tuple[Any, ...]:
        """Return all attached metadata."""
        pass


class Property(AnnotationQueryable, Generic[T]):
    """A named, typed slot of a bean class."""

    @property
    @abstractmethod
    def bean_class(self) -> Type[T]:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def type(self) -> Any:
        pass

    @property
    @abstractmethod
    def is_readable(self) -> bool:
        pass

    @property
    @abstractmethod
    def is_writable(self) -> bool:
        pass

    @abstractmethod
    def get_value(self, bean: T) -> Any:
        """
        Read the property from a bean instance.

        Raises:
            PropertyAccessError: If the property is not readable
            InvocationError: If the underlying accessor fails
        """
        pass

    @abstractmethod
    def set_value(self, bean: T, value: Any) -> None:
        """
        Write the property on a bean instance.

        Raises:
            PropertyAccessError: If the property is not writable
            InvocationError: If the underlying accessor fails
        """
        pass


class Bean(AnnotationQueryable, Generic[T]):
    """Descriptor of a bean class and its properties."""

    @property
    @abstractmethod
    def bean_class(self) -> Type[T]:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Fully qualified class name."""
        pass

    @abstractmethod
    def new_bean(self) -> T:
        """
        Create an instance with the zero-argument constructor.

        Raises:
            BeanInstantiationError: If the class is abstract or needs arguments
            InvocationError: If the constructor raises
        """
        pass

    @abstractmethod
    def new_bean_array(self, length: int) -> List[Optional[T]]:
        """Allocate ``length`` empty slots for instances of the bean class."""
        pass

    @abstractmethod
    def get_property(self, name: str) -> Optional[Property[T]]:
        pass

    @abstractmethod
    def get_properties(self) -> Collection[Property[T]]:
        pass
