"""Bean helper exceptions."""


class BeanError(Exception):
    """Base class for all bean helper errors."""


class InvalidPropertyError(BeanError, ValueError):
    """Raised when a field/getter/setter combination cannot form a property."""


class BeanInstantiationError(BeanError):
    """Raised when a bean class cannot be instantiated without arguments."""


class PropertyAccessError(BeanError, AttributeError):
    """Raised when reading a non-readable or writing a non-writable property."""


class InvocationError(BeanError):
    """Raised when an underlying getter, setter or constructor fails.

    The original exception is available as ``__cause__``.
    """
