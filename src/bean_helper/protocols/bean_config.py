"""Configuration for bean property discovery.

Provides hooks for applications to customize accessor naming and boolean
handling. Configure once at startup, before the first registry lookup.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Type


class AccessorNaming(Enum):
    """Accessor naming conventions recognised by discovery."""
    SNAKE = "snake"  # is_foo / get_foo / set_foo
    CAMEL = "camel"  # isFoo / getFoo / setFoo

    @property
    def prefixes(self) -> tuple:
        """Accessor prefixes in (is, get, set) order."""
        if self is AccessorNaming.SNAKE:
            return ("is_", "get_", "set_")
        return ("is", "get", "set")

    def property_name(self, method_name: str) -> Optional[str]:
        """
        Derive the property name from an accessor method name.

        Only ``CAMEL`` lower-cases the first remaining character; under ``SNAKE``
        the remainder is kept as written, so ``get_Foo`` names the property ``Foo``.

        Args:
            method_name: Method name such as ``get_foo`` or ``getFoo``

        Returns:
            Property name, or None if the name carries no prefix or nothing follows it
        """
        for prefix in self.prefixes:
            if method_name.startswith(prefix) and len(method_name) > len(prefix):
                remainder = method_name[len(prefix):]
                if self is AccessorNaming.CAMEL:
                    return remainder[0].lower() + remainder[1:]
                return remainder
        return None

    def accessor_name(self, prefix: str, property_name: str) -> str:
        """Build the accessor name for ``property_name``; ``prefix`` is one of is/get/set."""
        if self is AccessorNaming.SNAKE:
            return f"{prefix}_{property_name}"
        return f"{prefix}{property_name[:1].upper()}{property_name[1:]}"


@dataclass(frozen=True)
class BeanConfig:
    """Discovery configuration.

    Attributes:
        naming: Accessor naming convention
        boolean_types: Types whose getter may use the ``is`` prefix
        include_descriptors: Treat ``property`` objects as getter/setter pairs
    """

    naming: AccessorNaming = AccessorNaming.SNAKE
    boolean_types: FrozenSet[Type] = field(default_factory=lambda: frozenset({bool}))
    include_descriptors: bool = True


# Global config instance (set by application)
_bean_config: Optional[BeanConfig] = None


def set_bean_config(config: BeanConfig) -> None:
    """Set the global discovery configuration.

    Args:
        config: BeanConfig instance
    """
    global _bean_config
    _bean_config = config


def get_bean_config() -> BeanConfig:
    """Get the current discovery configuration.

    Returns:
        Current BeanConfig or default if not set
    """
    if _bean_config is None:
        return BeanConfig()
    return _bean_config
