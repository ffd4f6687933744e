"""
Default property descriptor.

A DefaultProperty unifies an optional backing field, an optional getter and an
optional setter under one name and type. The constructor validates the shape
of the members and raises InvalidPropertyError when they cannot form a
property; discovery relies on that to drop malformed candidates.
"""

import inspect
from typing import Any, Callable, List, Optional, Tuple, Type, TypeVar

from bean_helper.beans.field_info import FieldInfo
from bean_helper.core.exceptions import InvalidPropertyError, InvocationError, PropertyAccessError
from bean_helper.core.metadata import attached_annotations, find_annotation
from bean_helper.core.type_utils import ANNOTATION_ERRORS, NONE_TYPE, TypeUtils
from bean_helper.protocols import Property

T = TypeVar("T")
A = TypeVar("A")

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _hints(func: Callable) -> dict:
    try:
        return inspect.get_annotations(func, eval_str=True)
    except ANNOTATION_ERRORS as e:
        raise InvalidPropertyError(f"annotations of {func.__qualname__} cannot be resolved: {e}") from e


def is_public_accessor(bean_class: Type, name: str, func: Optional[Callable]) -> bool:
    """
    Whether ``func`` is reachable through a public name of ``bean_class``.

    That is a public function name, or the fget/fset of a public ``property``
    called ``name`` (``code = property(_read_code)``).
    """
    if func is None:
        return False
    if TypeUtils.is_public(func.__name__):
        return True
    descriptor = inspect.getattr_static(bean_class, name, None)
    return (TypeUtils.is_public(name) and isinstance(descriptor, property)
            and func in (descriptor.fget, descriptor.fset))


def _value_parameters(func: Callable, role: str) -> List[inspect.Parameter]:
    """Parameters after the bean instance."""
    params = list(inspect.signature(func).parameters.values())
    if not params or params[0].kind not in _POSITIONAL:
        raise InvalidPropertyError(f"{role} {func.__qualname__} should accept the bean instance")
    return params[1:]


def return_type(func: Callable) -> Any:
    """Declared return type of ``func``; ``Any`` when unannotated."""
    hints = _hints(func)
    if "return" not in hints:
        return Any
    return TypeUtils.normalize(hints["return"])


def first_parameter_type(func: Callable) -> Optional[Any]:
    """
    Declared type of the first value parameter of ``func``.

    Returns:
        The type (``Any`` when unannotated), or None if there is no value parameter
    """
    params = list(inspect.signature(func).parameters.values())[1:]
    if not params:
        return None
    return TypeUtils.normalize(_hints(func).get(params[0].name, Any))


class DefaultProperty(Property[T]):
    """
    Property backed by a field and/or a getter and setter.

    Instances are immutable. ``getter``/``setter`` are plain functions taking the
    bean instance first. A non-public accessor is kept for its annotations but
    grants neither read nor write access.
    """

    def __init__(self, bean_class: Type[T], name: str, type: Any,
                 field: Optional[FieldInfo] = None,
                 getter: Optional[Callable] = None,
                 setter: Optional[Callable] = None):
        if field is None and getter is None and setter is None:
            raise InvalidPropertyError(f"property '{name}' should have a field, getter or setter")

        if field is not None:
            if not field.is_resolved:
                raise InvalidPropertyError(f"annotation of field '{name}' cannot be resolved")
            if field.is_static:
                raise InvalidPropertyError("field should not be static")
            if not TypeUtils.is_assignable(type, field.type):
                raise InvalidPropertyError("field type is not assignable to the property type")

        if getter is not None:
            if not inspect.isfunction(getter):
                raise InvalidPropertyError("getter should be an instance method")
            if _value_parameters(getter, "getter"):
                raise InvalidPropertyError("getter should not have parameters")
            if not TypeUtils.is_assignable(type, return_type(getter)):
                raise InvalidPropertyError("getter return type is not assignable to the property type")

        if setter is not None:
            if not inspect.isfunction(setter):
                raise InvalidPropertyError("setter should be an instance method")
            if return_type(setter) not in (Any, NONE_TYPE):
                raise InvalidPropertyError("setter should not return a value")
            params = _value_parameters(setter, "setter")
            if len(params) != 1 or params[0].kind not in _POSITIONAL:
                raise InvalidPropertyError("setter should have only one parameter")
            if not TypeUtils.is_assignable(first_parameter_type(setter), type):
                raise InvalidPropertyError("setter parameter type should be assignable from the property type")

        self._bean_class = bean_class
        self._name = name
        self._type = type
        self._field = field
        self._getter = getter
        self._setter = setter

        field_public = field is not None and field.is_public
        self._field_writable = field_public and not field.is_final
        self._getter_public = is_public_accessor(bean_class, name, getter)
        self._setter_public = is_public_accessor(bean_class, name, setter)
        self._is_readable = field_public or self._getter_public
        self._is_writable = self._field_writable or self._setter_public

    @property
    def bean_class(self) -> Type[T]:
        return self._bean_class

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> Any:
        return self._type

    @property
    def field(self) -> Optional[FieldInfo]:
        return self._field

    @property
    def getter(self) -> Optional[Callable]:
        return self._getter

    @property
    def setter(self) -> Optional[Callable]:
        return self._setter

    @property
    def is_readable(self) -> bool:
        return self._is_readable

    @property
    def is_writable(self) -> bool:
        return self._is_writable

    def get_value(self, bean: T) -> Any:
        self._check_bean(bean)
        if self._getter_public:
            return self._invoke(self._getter, bean)
        if self._field is not None and self._field.is_public:
            return self._invoke(getattr, bean, self._name)
        raise PropertyAccessError(f"property '{self._name}' of {self._bean_class.__qualname__} is not readable")

    def set_value(self, bean: T, value: Any) -> None:
        self._check_bean(bean)
        if self._setter_public:
            self._invoke(self._setter, bean, value)
        elif self._field_writable:
            self._invoke(setattr, bean, self._name, value)
        else:
            raise PropertyAccessError(f"property '{self._name}' of {self._bean_class.__qualname__} is not writable")

    def _check_bean(self, bean: Any) -> None:
        if not isinstance(bean, self._bean_class):
            raise TypeError(
                f"expected an instance of {self._bean_class.__qualname__}, got {type(bean).__qualname__}"
            )

    def _invoke(self, func: Callable, *args) -> Any:
        try:
            return func(*args)
        except Exception as e:
            raise InvocationError(f"accessing property '{self._name}' failed: {e}") from e

    def _sources(self) -> Tuple[Tuple[Any, ...], ...]:
        field_annotations = self._field.annotations if self._field is not None else ()
        return (field_annotations, attached_annotations(self._getter), attached_annotations(self._setter))

    def is_annotation_present(self, kind: Type) -> bool:
        return self.get_annotation(kind) is not None

    def get_annotation(self, kind: Type[A]) -> Optional[A]:
        for annotations in self._sources():
            annotation = find_annotation(annotations, kind)
            if annotation is not None:
                return annotation
        return None

    def get_annotations(self) -> Tuple[Any, ...]:
        field_annotations, getter_annotations, setter_annotations = self._sources()
        return field_annotations + getter_annotations + setter_annotations

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DefaultProperty):
            return NotImplemented
        return (self._bean_class, self._name, self._type) == (other._bean_class, other._name, other._type)

    def __hash__(self) -> int:
        return hash((self._bean_class, self._name))

    def __repr__(self) -> str:
        return (
            f"DefaultProperty({self._bean_class.__qualname__}.{self._name}: {TypeUtils.type_name(self._type)}, "
            f"readable={self._is_readable}, writable={self._is_writable})"
        )
