"""Per-signal switch between live dispatch and a registered double.

Toggles live on a ``SwitchBoard``. The board in effect is looked up through
a ``ContextVar`` so each test (thread, task) can install its own board with
``switchboard_scope()`` and never observe another test's toggles. Code that
runs outside any scope shares the process-wide default board.
"""

import logging
import threading
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Type

from sea.core.doubles import SignalDouble
from sea.core.exceptions import SwitchStateError
from sea.settings import settings
from sea.settings.base import DOUBLED, LIVE, SIGNAL_STATES

logger = logging.getLogger(__name__)


@dataclass
class Registration:
    double: SignalDouble
    state: str


class SwitchBoard:
    """Registry of signal doubles keyed by signal name."""

    def __init__(self, project_settings=None, default_state: Optional[str] = None) -> None:
        self.settings = project_settings or settings
        self.default_state = default_state or self.settings.default_signal_state
        if self.default_state not in SIGNAL_STATES:
            raise SwitchStateError(f"Unknown signal state '{self.default_state}'")
        self._registrations: Dict[str, Registration] = {}
        self._lock = threading.RLock()

    def register(self, signal_cls: Type, double: Optional[SignalDouble] = None) -> SignalDouble:
        """Register a double for the signal; re-registering returns the existing one."""
        name = _key(signal_cls)
        with self._lock:
            registration = self._registrations.get(name)
            if registration is None:
                double = double or SignalDouble(signal_cls)
                double.attach(self)
                registration = Registration(double=double, state=self.default_state)
                self._registrations[name] = registration
                logger.debug("Registered double for %s (%s)", name, registration.state)
            elif double is not None and double is not registration.double:
                raise SwitchStateError(f"{name} already has a registered double")
            return registration.double

    def enable(self, signal_cls: Type) -> None:
        self._set_state(signal_cls, LIVE)

    def disable(self, signal_cls: Type) -> None:
        self._set_state(signal_cls, DOUBLED)

    def is_registered(self, signal_cls: Type) -> bool:
        with self._lock:
            return _key(signal_cls) in self._registrations

    def is_doubled(self, signal_cls: Type) -> bool:
        return self.state_of(signal_cls) == DOUBLED

    def double_for(self, signal_cls: Type) -> SignalDouble:
        return self._registration(signal_cls).double

    def state_of(self, signal_cls: Type) -> str:
        """Unregistered signals are in the board's default state."""
        with self._lock:
            registration = self._registrations.get(_key(signal_cls))
            return registration.state if registration else self.default_state

    def route(self, signal_cls: Type) -> Optional[SignalDouble]:
        """Return the double an emission must go to, or None to dispatch live.

        On a board that doubles by default, an unregistered signal gets a
        double registered on the spot; it records the emission as an
        unexpected call for verify() to report.
        """
        with self._lock:
            registration = self._registrations.get(_key(signal_cls))
            if registration is None:
                if self.default_state != DOUBLED:
                    return None
                self.register(signal_cls)
                registration = self._registrations[_key(signal_cls)]
            return registration.double if registration.state == DOUBLED else None

    def reset(self) -> None:
        with self._lock:
            self._registrations.clear()

    def _set_state(self, signal_cls: Type, state: str) -> None:
        with self._lock:
            registration = self._registration(signal_cls)
            registration.state = state
        logger.debug("%s switched to %s", _key(signal_cls), state)

    def _registration(self, signal_cls: Type) -> Registration:
        with self._lock:
            registration = self._registrations.get(_key(signal_cls))
        if registration is None:
            raise SwitchStateError(
                f"{_key(signal_cls)} has no registered double; call register() first"
            )
        return registration


_default_board: Optional[SwitchBoard] = None
_default_board_lock = threading.Lock()
_current_board: ContextVar[Optional[SwitchBoard]] = ContextVar("sea_switchboard", default=None)


def default_switchboard() -> SwitchBoard:
    """Provide the process-wide board used outside any scope."""
    global _default_board
    with _default_board_lock:
        if _default_board is None:
            _default_board = SwitchBoard()
        return _default_board


def current_switchboard() -> SwitchBoard:
    return _current_board.get() or default_switchboard()


@contextmanager
def switchboard_scope(board: Optional[SwitchBoard] = None) -> Iterator[SwitchBoard]:
    """Route emissions in this context through an isolated board."""
    board = board or SwitchBoard()
    token = _current_board.set(board)
    try:
        yield board
    finally:
        _current_board.reset(token)


def _key(signal_cls: Type) -> str:
    return f"{signal_cls.__module__}.{signal_cls.__qualname__}"
