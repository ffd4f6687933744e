"""
Bean property discovery.

Walks a class's MRO and reconciles declared fields, prefixed accessor methods
and (optionally) ``property`` descriptors into named properties.

Shadowing rule: the walk starts at the most-derived class and a name, once
seen, is never overwritten by a base class. Any attribute of a derived class
hides a same-named base member, qualifying or not, because Python resolves
attributes the same way.

Candidates that fail DefaultProperty validation are dropped and logged; they
never abort discovery of the rest of the bean.
"""

import inspect
import logging
from typing import Any, Callable, Dict, List, Optional, Set, Type, TypeVar

from bean_helper.beans.default_bean import DefaultBean, qualified_name
from bean_helper.beans.default_property import DefaultProperty, first_parameter_type, return_type
from bean_helper.beans.field_info import FieldInfo, declared_fields
from bean_helper.core.exceptions import InvalidPropertyError
from bean_helper.core.type_utils import TypeUtils
from bean_helper.protocols import BeanConfig, get_bean_config

logger = logging.getLogger(__name__)

T = TypeVar("T")

IS_PREFIX = "is"
GET_PREFIX = "get"
SET_PREFIX = "set"


def hierarchy(bean_class: Type) -> List[Type]:
    """Classes of the MRO from most- to least-derived, ``object`` excluded."""
    return [klass for klass in bean_class.__mro__ if klass is not object]


def collect_fields(bean_class: Type) -> Dict[str, FieldInfo]:
    """
    Collect non-static declared fields across the hierarchy.

    ``ClassVar`` annotations shadow base fields of the same name but are not
    collected themselves.
    """
    fields: Dict[str, FieldInfo] = {}
    seen: Set[str] = set()
    for klass in hierarchy(bean_class):
        for name, field in declared_fields(klass).items():
            if name in seen:
                continue
            seen.add(name)
            if not field.is_static:
                fields[name] = field
    return fields


def collect_members(bean_class: Type, config: BeanConfig) -> Dict[str, Any]:
    """
    Collect public accessor methods and ``property`` descriptors by name.

    Only plain functions qualify as methods; ``staticmethod`` and
    ``classmethod`` objects are static and skipped.
    """
    members: Dict[str, Any] = {}
    seen: Set[str] = set()
    for klass in hierarchy(bean_class):
        for name, value in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)
            if not TypeUtils.is_public(name):
                continue
            if inspect.isfunction(value) and config.naming.property_name(name) is not None:
                members[name] = value
            elif config.include_descriptors and isinstance(value, property):
                members[name] = value
    return members


def candidate_names(fields: Dict[str, FieldInfo], members: Dict[str, Any], config: BeanConfig) -> Set[str]:
    """Field names, descriptor names, and accessor names with the prefix stripped."""
    names = set(fields)
    for name, member in members.items():
        if isinstance(member, property):
            names.add(name)
        else:
            property_name = config.naming.property_name(name)
            if property_name is not None:
                names.add(property_name)
    return names


def _method(members: Dict[str, Any], name: str) -> Optional[Callable]:
    member = members.get(name)
    return member if inspect.isfunction(member) else None


def resolve_property(bean_class: Type[T], name: str, fields: Dict[str, FieldInfo],
                     members: Dict[str, Any], config: BeanConfig) -> DefaultProperty[T]:
    """
    Build the property for one candidate name.

    Raises:
        InvalidPropertyError: If the resolved members cannot form a property
    """
    naming = config.naming
    field = fields.get(name)
    getter_is = _method(members, naming.accessor_name(IS_PREFIX, name))
    getter_get = _method(members, naming.accessor_name(GET_PREFIX, name))
    setter = _method(members, naming.accessor_name(SET_PREFIX, name))

    descriptor = members.get(name)
    if not isinstance(descriptor, property):
        descriptor = None

    property_type: Any = object
    if field is not None:
        property_type = field.type
    elif getter_is is not None:
        property_type = return_type(getter_is)
    elif getter_get is not None:
        property_type = return_type(getter_get)
    elif setter is not None:
        # A setter without a value parameter keeps the object fallback and fails validation
        parameter_type = first_parameter_type(setter)
        if parameter_type is not None:
            property_type = parameter_type
    elif descriptor is not None and descriptor.fget is not None:
        property_type = return_type(descriptor.fget)
    elif descriptor is not None and descriptor.fset is not None:
        parameter_type = first_parameter_type(descriptor.fset)
        if parameter_type is not None:
            property_type = parameter_type

    if TypeUtils.is_boolean(property_type, config.boolean_types):
        getter = getter_is if getter_is is not None else getter_get
    else:
        getter = getter_get

    if descriptor is not None:
        if getter is None:
            getter = descriptor.fget
        if setter is None:
            setter = descriptor.fset

    return DefaultProperty(bean_class, name, property_type, field, getter, setter)


def discover_bean(bean_class: Type[T], config: Optional[BeanConfig] = None) -> DefaultBean[T]:
    """
    Discover the properties of ``bean_class``.

    Args:
        bean_class: The class to introspect
        config: Discovery configuration; the global one when omitted

    Returns:
        DefaultBean with every candidate that forms a valid property

    Raises:
        TypeError: If ``bean_class`` is not a class
    """
    if not isinstance(bean_class, type):
        raise TypeError(f"expected a class, got {type(bean_class).__name__}")
    config = config or get_bean_config()

    fields = collect_fields(bean_class)
    members = collect_members(bean_class, config)

    properties = []
    for name in sorted(candidate_names(fields, members, config)):
        try:
            properties.append(resolve_property(bean_class, name, fields, members, config))
        except InvalidPropertyError as e:
            logger.debug(f"Dropped property candidate '{name}' of {bean_class.__qualname__}: {e}")

    logger.debug(f"Discovered {len(properties)} properties for {bean_class.__qualname__}")
    return DefaultBean(bean_class, qualified_name(bean_class), properties)
