"""Declared bean fields as seen by property discovery."""

import dataclasses
import inspect
import logging
import sys
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Type

from bean_helper.core.type_utils import ANNOTATION_ERRORS, TypeUtils

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldInfo:
    """
    A field declared through a class-level annotation.

    Attributes:
        name: Attribute name
        type: Declared type with Annotated/Final/ClassVar unwrapped
        owner: Class whose own annotations declare the field
        is_public: Name has no leading underscore
        is_final: Annotated ``Final`` or declared on a frozen dataclass
        is_static: Annotated ``ClassVar``
        annotations: ``Annotated`` metadata in declaration order
        is_resolved: False when a string annotation could not be evaluated
    """
    name: str
    type: Any
    owner: Type
    is_public: bool
    is_final: bool = False
    is_static: bool = False
    annotations: Tuple[Any, ...] = ()
    is_resolved: bool = True

    @classmethod
    def from_annotation(cls, owner: Type, name: str, annotation: Any) -> "FieldInfo":
        info = TypeUtils.unwrap_annotation(annotation)
        return cls(
            name=name,
            type=info.type,
            owner=owner,
            is_public=TypeUtils.is_public(name),
            is_final=info.is_final or _is_frozen_dataclass(owner),
            is_static=info.is_class_var,
            annotations=info.metadata,
        )


def _is_frozen_dataclass(owner: Type) -> bool:
    if not dataclasses.is_dataclass(owner):
        return False
    params = owner.__dict__.get("__dataclass_params__")
    return bool(params is not None and params.frozen)


def declared_fields(owner: Type) -> Dict[str, FieldInfo]:
    """
    Fields declared directly on ``owner``, static ones included.

    String annotations are evaluated one by one in the owner's module
    namespace. A field whose annotation cannot be evaluated is kept with
    ``is_resolved=False`` so it still shadows base fields of the same name.
    """
    module = sys.modules.get(owner.__module__)
    module_globals = getattr(module, "__dict__", {})
    fields = {}
    for name, annotation in inspect.get_annotations(owner).items():
        if isinstance(annotation, str):
            try:
                annotation = eval(annotation, module_globals, dict(vars(owner)))
            except ANNOTATION_ERRORS as e:
                logger.debug(f"Cannot resolve annotation of {owner.__qualname__}.{name}: {e}")
                fields[name] = FieldInfo(name, Any, owner, TypeUtils.is_public(name), is_resolved=False)
                continue
        fields[name] = FieldInfo.from_annotation(owner, name, annotation)
    return fields
