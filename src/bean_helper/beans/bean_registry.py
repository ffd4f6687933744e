"""
Process-wide cache of discovered bean descriptors.

Beans are computed on first lookup and held weakly: once no caller keeps a
reference, the descriptor may be collected and is recomputed on the next
lookup. Callers should not rely on getting the identical object back after
dropping their reference.
"""

import logging
import threading
import weakref
from typing import Optional, Type, TypeVar

from bean_helper.beans.default_bean import DefaultBean
from bean_helper.beans.discovery import discover_bean
from bean_helper.protocols import Bean, BeanConfig, get_bean_config

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BeanRegistry:
    """
    Thread-safe, weakly-held cache from bean class to its Bean descriptor.

    Discovery runs outside the lock. When two threads race on the same class,
    both may compute a descriptor but only the first one published is ever
    returned; discovery has no shared side effects so the loser is discarded.
    Failed discoveries are never cached.

    Example:
        >>> registry = BeanRegistry()
        >>> bean = registry.get(User)
        >>> bean.get_property("name").get_value(user)
        'alice'
    """

    def __init__(self, config: Optional[BeanConfig] = None):
        """
        Initialize an isolated registry.

        Args:
            config: Discovery configuration; the global config at construction time when omitted
        """
        self.config = config or get_bean_config()
        self._lock = threading.Lock()
        self._beans: "weakref.WeakValueDictionary[type, DefaultBean]" = weakref.WeakValueDictionary()

    def get(self, bean_class: Type[T]) -> Bean[T]:
        """
        Get the Bean descriptor for ``bean_class``, discovering it if needed.

        Args:
            bean_class: The class to describe

        Returns:
            The cached or freshly discovered Bean

        Raises:
            TypeError: If ``bean_class`` is not a class
        """
        if not isinstance(bean_class, type):
            raise TypeError(f"expected a class, got {type(bean_class).__name__}")

        with self._lock:
            bean = self._beans.get(bean_class)
        if bean is not None:
            return bean

        discovered = discover_bean(bean_class, self.config)

        with self._lock:
            bean = self._beans.get(bean_class)
            if bean is not None:
                logger.debug(f"Discarding concurrently discovered bean for {bean_class.__qualname__}")
                return bean
            self._beans[bean_class] = discovered
            logger.debug(f"Cached bean descriptor for {discovered.name}")
            return discovered

    def __contains__(self, bean_class: Type) -> bool:
        """True if a live descriptor for ``bean_class`` is cached."""
        with self._lock:
            return self._beans.get(bean_class) is not None

    def __len__(self) -> int:
        """Number of live cached descriptors."""
        with self._lock:
            return len(self._beans)


# Global registry instance
_global_bean_registry: Optional[BeanRegistry] = None
_global_lock = threading.Lock()


def get_bean_registry() -> BeanRegistry:
    """Get global bean registry instance, created on first use."""
    global _global_bean_registry
    with _global_lock:
        if _global_bean_registry is None:
            _global_bean_registry = BeanRegistry()
        return _global_bean_registry


def reset_bean_registry() -> None:
    """Drop the global registry; the next lookup builds one from the current config."""
    global _global_bean_registry
    with _global_lock:
        _global_bean_registry = None
    logger.debug("Reset global bean registry")


def get_bean(bean_class: Type[T]) -> Bean[T]:
    """
    Convenience function to look up a bean in the global registry.

    Args:
        bean_class: The class to describe

    Returns:
        The Bean descriptor
    """
    return get_bean_registry().get(bean_class)
