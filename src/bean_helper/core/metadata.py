"""
Declarative metadata attached to bean classes, fields and accessors.

Metadata objects play the role of annotations: any object can be attached,
and queries match by kind with ``isinstance``. Classes and functions carry
metadata through the ``annotate`` decorator; fields carry it as the extras of
``typing.Annotated``.

Example:
    @dataclass(frozen=True)
    class Column:
        name: str

    @annotate(Entity())
    class User:
        id: Annotated[int, Column("user_id")]

        @annotate(Column("display"))
        def get_label(self) -> str: ...
"""

import logging
from typing import Any, Callable, Iterable, Optional, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

ANNOTATIONS_ATTR = "__bean_annotations__"

T = TypeVar("T")
A = TypeVar("A")


def annotate(*metadata: Any) -> Callable[[T], T]:
    """
    Attach metadata objects to a class or function.

    Stacked decorators keep source order, top to bottom.

    Args:
        *metadata: Metadata objects to attach

    Returns:
        Decorator returning the target unchanged apart from its metadata

    Raises:
        TypeError: If the target is not a class or function
    """
    def decorator(target: T) -> T:
        if not (isinstance(target, type) or callable(target)) or isinstance(target, (staticmethod, classmethod, property)):
            raise TypeError(
                f"annotate() expects a class or function, got {type(target).__name__}; "
                f"apply it below @property/@staticmethod/@classmethod"
            )
        # Decorators run bottom-up, so earlier (upper) decorators prepend
        existing = target.__dict__.get(ANNOTATIONS_ATTR, ())
        setattr(target, ANNOTATIONS_ATTR, tuple(metadata) + tuple(existing))
        logger.debug(f"Attached {len(metadata)} annotation(s) to {getattr(target, '__qualname__', target)}")
        return target
    return decorator


def attached_annotations(target: Any) -> Tuple[Any, ...]:
    """
    Metadata attached directly to a class or function (not inherited).

    Args:
        target: Class or function, or None

    Returns:
        Tuple of metadata objects in declaration order
    """
    if target is None:
        return ()
    own = getattr(target, "__dict__", {})
    return tuple(own.get(ANNOTATIONS_ATTR, ()))


def find_annotation(annotations: Iterable[Any], kind: Type[A]) -> Optional[A]:
    """Return the first metadata object that is an instance of ``kind``."""
    for annotation in annotations:
        if isinstance(annotation, kind):
            return annotation
    return None
