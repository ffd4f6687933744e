"""Tests for bean descriptors."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import pytest

from bean_helper import (
    BeanInstantiationError,
    DefaultBean,
    InvocationError,
    annotate,
    attached_annotations,
    discover_bean,
)


@dataclass(frozen=True)
class Entity:
    table: str


@dataclass(frozen=True)
class Audited:
    pass


@annotate(Entity("users"), Audited())
class User:
    name: str = ""
    email: str = ""


class Admin(User):
    level: int = 0


class NeedsArgs:
    def __init__(self, value):
        self.value = value


class Exploding:
    def __init__(self):
        raise RuntimeError("boom")


class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        pass


def test_bean_identity():
    """Test the bean exposes its class and qualified name."""
    bean = discover_bean(User)
    assert bean.bean_class is User
    assert bean.name == f"{User.__module__}.User"
    assert isinstance(bean, DefaultBean)


def test_nested_class_name_uses_qualname():
    """Test nested classes are named by module and qualified name."""
    class Inner:
        pass

    assert discover_bean(Inner).name == f"{__name__}.{Inner.__qualname__}"


def test_properties_by_name():
    """Test property lookup and enumeration."""
    bean = discover_bean(Admin)
    assert sorted(p.name for p in bean.get_properties()) == ["email", "level", "name"]
    assert bean.get_property("level").type is int
    assert bean.get_property("missing") is None
    assert set(bean.properties) == {"email", "level", "name"}


def test_properties_mapping_is_read_only():
    """Test the property mapping cannot be modified."""
    bean = discover_bean(User)
    with pytest.raises(TypeError):
        bean.properties["name"] = None


def test_new_bean():
    """Test new_bean calls the zero-argument constructor."""
    user = discover_bean(User).new_bean()
    assert isinstance(user, User)
    assert user.name == ""


def test_new_bean_requires_zero_argument_constructor():
    """Test classes needing arguments cannot be instantiated."""
    with pytest.raises(BeanInstantiationError):
        discover_bean(NeedsArgs).new_bean()


def test_new_bean_rejects_abstract_class():
    """Test abstract classes cannot be instantiated."""
    with pytest.raises(BeanInstantiationError):
        discover_bean(Shape).new_bean()


def test_new_bean_wraps_constructor_failure():
    """Test a failing constructor surfaces as InvocationError."""
    with pytest.raises(InvocationError) as exc_info:
        discover_bean(Exploding).new_bean()
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_new_bean_array():
    """Test new_bean_array allocates empty slots, not instances."""
    bean = discover_bean(User)
    assert bean.new_bean_array(3) == [None, None, None]
    assert bean.new_bean_array(0) == []
    with pytest.raises(ValueError):
        bean.new_bean_array(-1)


def test_class_annotations():
    """Test type-level metadata queries."""
    bean = discover_bean(User)
    assert bean.is_annotation_present(Entity)
    assert bean.get_annotation(Entity) == Entity("users")
    assert bean.get_annotations() == (Entity("users"), Audited())


def test_class_annotations_are_not_inherited():
    """Test subclasses only expose their own metadata."""
    bean = discover_bean(Admin)
    assert not bean.is_annotation_present(Entity)
    assert bean.get_annotation(Entity) is None
    assert bean.get_annotations() == ()


def test_stacked_annotate_keeps_source_order():
    """Test stacked decorators keep top-to-bottom order."""
    @annotate(Entity("a"))
    @annotate(Entity("b"))
    def handler():
        pass

    assert attached_annotations(handler) == (Entity("a"), Entity("b"))


def test_annotate_rejects_property_objects():
    """Test annotate must be applied to the function, not the property."""
    with pytest.raises(TypeError):
        annotate(Audited())(property(lambda self: 1))


def test_bean_equality_by_class():
    """Test beans for the same class compare equal."""
    assert discover_bean(User) == discover_bean(User)
    assert discover_bean(User) != discover_bean(Admin)


def test_properties_must_belong_to_bean_hierarchy():
    """Test a bean accepts inherited properties but rejects unrelated ones."""
    inherited = discover_bean(User).get_properties()
    bean = DefaultBean(Admin, "admin", inherited)
    assert bean.get_property("email") is not None

    with pytest.raises(ValueError):
        DefaultBean(User, "user", discover_bean(Admin).get_properties())
    with pytest.raises(ValueError):
        DefaultBean(NeedsArgs, "needs_args", inherited)
