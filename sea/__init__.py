"""Side-effect abstraction: synchronous, ordered signals for decoupled side effects."""

from sea.core.doubles import SignalDouble
from sea.core.exceptions import (
    BindingError,
    ConfigurationError,
    DoubleVerificationError,
    SwitchStateError,
)
from sea.core.naming import resolve_observer_names
from sea.core.observer import Observer
from sea.core.registry import SignalRegistry
from sea.core.signals import Signal, emit
from sea.core.switch import SwitchBoard, current_switchboard, switchboard_scope

__all__ = [
    "BindingError",
    "ConfigurationError",
    "DoubleVerificationError",
    "Observer",
    "Signal",
    "SignalDouble",
    "SignalRegistry",
    "SwitchBoard",
    "SwitchStateError",
    "current_switchboard",
    "emit",
    "resolve_observer_names",
    "switchboard_scope",
]
