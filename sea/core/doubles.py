"""Verifiable substitutes for signal emission.

A ``SignalDouble`` stands in for a signal's ``emit`` while the signal is
doubled on a switch board. It records every emitted signal and checks them
against expectations registered up front::

    double.expect({"product_id": 42})
    service.call(product_id=42, customer_id=7)
    double.verify()

Mismatches are collected rather than raised so that the code under test runs
to completion; ``verify()`` reports them all at once.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Type

from sea.core.exceptions import DoubleVerificationError, SwitchStateError

logger = logging.getLogger(__name__)

_NOT_SET = object()


@dataclass
class Expectation:
    matcher: Any = None
    times: int = 1
    returns: Any = None
    side_effect: Optional[Callable[[Any], Any]] = None
    calls: int = field(default=0, init=False)

    @property
    def pending(self) -> bool:
        return self.calls < self.times

    def matches(self, signal) -> bool:
        matcher = self.matcher
        if matcher is None:
            return True
        if isinstance(matcher, dict):
            return all(
                getattr(signal, name, _NOT_SET) == value
                for name, value in matcher.items()
            )
        if isinstance(matcher, type):
            return isinstance(signal, matcher)
        if callable(matcher):
            return bool(matcher(signal))
        return signal == matcher

    def respond(self, signal) -> Any:
        if self.side_effect is not None:
            return self.side_effect(signal)
        return self.returns

    def describe(self) -> str:
        return f"expectation {self.matcher!r} (called {self.calls} of {self.times} times)"


class SignalDouble:
    """Records emissions of one signal type and verifies expectations."""

    def __init__(self, signal_cls: Type) -> None:
        self.signal_cls = signal_cls
        self.calls: List[Any] = []
        self._expectations: List[Expectation] = []
        self._stub: Optional[Expectation] = None
        self._unexpected: List[Any] = []
        self._mismatches: List[str] = []
        self._switch = None
        self._lock = threading.RLock()

    def attach(self, switch) -> None:
        """Bind the double to the switch board that routes emissions to it."""
        self._switch = switch

    def expect(
        self,
        matcher: Any = None,
        times: int = 1,
        returns: Any = None,
        side_effect: Optional[Callable[[Any], Any]] = None,
    ) -> "SignalDouble":
        if times < 1:
            raise ValueError("An expectation must allow at least one call")
        with self._lock:
            self._expectations.append(
                Expectation(matcher=matcher, times=times, returns=returns, side_effect=side_effect)
            )
        return self

    def stub(
        self, returns: Any = None, side_effect: Optional[Callable[[Any], Any]] = None
    ) -> "SignalDouble":
        """Answer any call that no pending expectation claims."""
        with self._lock:
            self._stub = Expectation(returns=returns, side_effect=side_effect)
        return self

    def emit(self, signal) -> Any:
        if self._switch is not None and not self._switch.is_doubled(self.signal_cls):
            raise SwitchStateError(
                f"{self.name} is live; its double must not be called directly"
            )
        return self.respond(signal)

    def respond(self, signal) -> Any:
        """Record and answer an emission the switch board already routed here."""
        with self._lock:
            self.calls.append(signal)
            expectation = next((e for e in self._expectations if e.pending), None)
            if expectation is not None:
                expectation.calls += 1
                if not expectation.matches(signal):
                    self._mismatches.append(
                        f"call #{len(self.calls)} with {signal!r} did not match {expectation.matcher!r}"
                    )
                    return None
            elif self._stub is not None:
                expectation = self._stub
            else:
                self._unexpected.append(signal)
                logger.debug("Unexpected emission of %s: %r", self.name, signal)
                return None

        return expectation.respond(signal)

    __call__ = emit

    @property
    def name(self) -> str:
        return f"{self.signal_cls.__module__}.{self.signal_cls.__qualname__}"

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def called(self) -> bool:
        return bool(self.calls)

    def verify(self) -> None:
        """Raise DoubleVerificationError unless every expectation was met exactly."""
        with self._lock:
            problems = list(self._mismatches)
            problems.extend(f"unexpected call with {signal!r}" for signal in self._unexpected)
            problems.extend(
                f"unmet {expectation.describe()}"
                for expectation in self._expectations
                if expectation.pending
            )
        if problems:
            raise DoubleVerificationError(
                f"{self.name} double verification failed:\n- " + "\n- ".join(problems)
            )

    def reset(self) -> None:
        with self._lock:
            self.calls.clear()
            self._expectations.clear()
            self._stub = None
            self._unexpected.clear()
            self._mismatches.clear()

    def __repr__(self) -> str:
        return f"<SignalDouble {self.name} calls={self.call_count}>"
