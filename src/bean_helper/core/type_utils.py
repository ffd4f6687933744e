"""
Type utilities for bean property discovery.

This module centralizes the annotation handling used when fields and accessors
are reconciled into properties: unwrapping ``Annotated``/``Final``/``ClassVar``
wrappers, boolean detection for getter selection, and the assignability
relation that property validation relies on.
"""

import types
from typing import (
    Annotated, Any, ClassVar, Final, FrozenSet, NamedTuple, Tuple, Type, TypeVar, Union,
    get_args, get_origin,
)

NONE_TYPE = type(None)

_UNION_ORIGINS = (Union, types.UnionType)

# Raised while evaluating a string annotation, e.g. a name imported only under TYPE_CHECKING
ANNOTATION_ERRORS = (NameError, AttributeError, SyntaxError, TypeError)


class AnnotationInfo(NamedTuple):
    """Result of unwrapping a declared annotation."""
    type: Any
    metadata: Tuple[Any, ...]
    is_final: bool
    is_class_var: bool


class TypeUtils:
    """
    Utility class for annotation inspection and type compatibility.

    All methods are static; unannotated members are represented by ``Any``,
    which is compatible with every type in both directions.
    """

    @staticmethod
    def normalize(annotation: Any) -> Any:
        """Map ``None`` to ``NoneType`` so it can be compared like any other type."""
        if annotation is None:
            return NONE_TYPE
        return annotation

    @staticmethod
    def unwrap_annotation(annotation: Any) -> AnnotationInfo:
        """
        Strip ``Annotated``, ``Final`` and ``ClassVar`` wrappers from a field annotation.

        Wrappers may be nested in any order. Metadata from every ``Annotated``
        layer is collected outermost first.

        Args:
            annotation: The raw (evaluated) annotation

        Returns:
            AnnotationInfo with the bare type, metadata and qualifier flags

        Example:
            >>> info = TypeUtils.unwrap_annotation(Final[Annotated[int, "id"]])
            >>> info.type, info.metadata, info.is_final
            (<class 'int'>, ('id',), True)
        """
        metadata = []
        is_final = False
        is_class_var = False
        current = annotation

        while True:
            origin = get_origin(current)
            if origin is Annotated:
                metadata.extend(current.__metadata__)
                current = current.__origin__
            elif origin is Final or current is Final:
                is_final = True
                args = get_args(current)
                current = args[0] if args else Any
            elif origin is ClassVar or current is ClassVar:
                is_class_var = True
                args = get_args(current)
                current = args[0] if args else Any
            else:
                break

        return AnnotationInfo(TypeUtils.normalize(current), tuple(metadata), is_final, is_class_var)

    @staticmethod
    def is_union(annotation: Any) -> bool:
        """Check if annotation is a ``Union``/``Optional`` or a PEP 604 ``X | Y``."""
        return get_origin(annotation) in _UNION_ORIGINS

    @staticmethod
    def is_boolean(annotation: Any, boolean_types: FrozenSet[Type] = frozenset({bool})) -> bool:
        """
        Check if a property type is boolean-like.

        ``Optional[bool]`` counts as boolean, mirroring a boxed boolean.

        Args:
            annotation: The property type
            boolean_types: Types considered boolean

        Returns:
            True if the type is one of ``boolean_types`` or ``Optional`` of one
        """
        if annotation in boolean_types:
            return True
        if TypeUtils.is_union(annotation):
            args = [arg for arg in get_args(annotation) if arg is not NONE_TYPE]
            return len(args) == 1 and args[0] in boolean_types
        return False

    @staticmethod
    def is_assignable(target: Any, source: Any) -> bool:
        """
        Check if a value of type ``source`` may be stored where ``target`` is expected.

        Args:
            target: The expected type
            source: The type of the supplied value

        Returns:
            True if ``source`` is compatible with ``target``

        Example:
            >>> TypeUtils.is_assignable(object, str)
            True
            >>> TypeUtils.is_assignable(Optional[int], int)
            True
            >>> TypeUtils.is_assignable(int, Optional[int])
            False
        """
        target = TypeUtils.normalize(target)
        source = TypeUtils.normalize(source)

        if target is Any or source is Any or target is object:
            return True
        if isinstance(target, TypeVar) or isinstance(source, TypeVar):
            return True
        if target == source:
            return True

        # Every member of a source union must fit; a target union needs one fitting member
        if TypeUtils.is_union(source):
            return all(TypeUtils.is_assignable(target, arg) for arg in get_args(source))
        if TypeUtils.is_union(target):
            return any(TypeUtils.is_assignable(arg, source) for arg in get_args(target))

        target_origin = get_origin(target) or target
        source_origin = get_origin(source) or source
        if not (isinstance(target_origin, type) and isinstance(source_origin, type)):
            return False

        try:
            if not issubclass(source_origin, target_origin):
                return False
        except TypeError:
            # Non-runtime protocols refuse issubclass()
            return False

        target_args = get_args(target)
        source_args = get_args(source)
        if not target_args or not source_args:
            return True
        if len(target_args) != len(source_args):
            return False
        return all(TypeUtils.is_assignable(t, s) for t, s in zip(target_args, source_args))

    @staticmethod
    def is_public(name: str) -> bool:
        """Names without a leading underscore are public."""
        return not name.startswith("_")

    @staticmethod
    def type_name(annotation: Any) -> str:
        """Readable name for log and error messages."""
        if isinstance(annotation, type):
            return annotation.__qualname__
        return repr(annotation)
