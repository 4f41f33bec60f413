class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""


class BindingError(Exception):
    """Raised when a signal cannot be bound to its declared observers."""


class SwitchStateError(Exception):
    """Raised when the double switch is used in a state it does not allow."""


class DoubleVerificationError(AssertionError):
    """Raised when a signal double was not called as expected."""


class CommandError(Exception):
    """Raised for invalid manage.py commands."""
