"""Signal definitions.

A signal is a frozen dataclass subclassing ``Signal``. Its fields are the
payload; ``emit_to`` and ``emit_within`` declare who observes it::

    @dataclass(frozen=True)
    class InvoiceCreatedSignal(Signal):
        emit_to = ("myapp.audit.AuditObserver",)
        emit_within = ("myapp.analytics", "myapp.inventory")

        customer_id: int
        product_id: int

``emit_to`` lists observer references (dotted paths, ``Observer`` classes or
instances). ``emit_within`` lists contexts (dotted paths or modules)
expanded by the naming convention, here to
``myapp.analytics.InvoiceCreatedObserver`` and
``myapp.inventory.InvoiceCreatedObserver``. The bound order is every
``emit_to`` entry followed by every ``emit_within`` expansion.

References are resolved once by ``bind()`` (see ``SignalRegistry``), never
lazily on emission.
"""

import dataclasses
import logging
import threading
from types import ModuleType
from typing import Any, ClassVar, List, Sequence, Tuple, Union

from sea.core.binding import bind_observers
from sea.core.dispatch import dispatch
from sea.core.exceptions import BindingError
from sea.core.naming import resolve_observer_names
from sea.core.observer import Observer
from sea.core.switch import current_switchboard

logger = logging.getLogger(__name__)

_bind_lock = threading.RLock()


def _as_tuple(value) -> tuple:
    if isinstance(value, (str, type)) or not isinstance(value, Sequence):
        return (value,)
    return tuple(value)


def _context_name(signal_name: str, context) -> str:
    if isinstance(context, ModuleType):
        return context.__name__
    if isinstance(context, str):
        return context
    raise BindingError(f"{signal_name}: context {context!r} is neither a module nor a dotted path")


class Signal:
    """Base class for signals emitted synchronously to their observers."""

    emit_to: ClassVar[Union[Any, Sequence[Any]]] = ()
    emit_within: ClassVar[Union[str, Sequence[str]]] = ()

    @classmethod
    def signal_name(cls) -> str:
        return f"{cls.__module__}.{cls.__qualname__}"

    @classmethod
    def observer_references(cls) -> List[Any]:
        """Declared references, explicit ones first, in declaration order."""
        references = list(_as_tuple(cls.emit_to))
        name = cls.signal_name()
        contexts = [_context_name(name, context) for context in _as_tuple(cls.emit_within)]
        try:
            references.extend(resolve_observer_names(name, contexts))
        except ValueError as exc:
            raise BindingError(str(exc)) from exc
        return references

    @classmethod
    def bind(cls) -> Tuple[Observer, ...]:
        """Resolve and validate the observers; idempotent."""
        with _bind_lock:
            if cls.is_bound():
                return cls._observers

            if not dataclasses.is_dataclass(cls) or not cls.__dataclass_params__.frozen:
                raise BindingError(f"{cls.signal_name()} must be a frozen dataclass")

            references = cls.observer_references()
            if not references:
                raise BindingError(
                    f"{cls.signal_name()} declares no observers (emit_to / emit_within)"
                )

            observers = bind_observers(cls, references)
            cls._observers = observers
            logger.debug(
                "Bound %s to %s", cls.signal_name(), ", ".join(map(repr, observers))
            )
            return observers

    @classmethod
    def is_bound(cls) -> bool:
        return "_observers" in cls.__dict__

    @classmethod
    def observers(cls) -> Tuple[Observer, ...]:
        if not cls.is_bound():
            raise BindingError(
                f"{cls.signal_name()} is not bound; install it or call bind() at startup"
            )
        return cls._observers

    @classmethod
    def emit(cls, signal) -> Any:
        """Emit an already built signal to the configured implementation.

        Returns the observers' results in order (or the double's result while
        the signal is doubled). An observer's exception propagates unchanged.
        """
        if not isinstance(signal, cls):
            raise TypeError(
                f"{cls.signal_name()}.emit() expects a {cls.__qualname__}, "
                f"got {type(signal).__qualname__}"
            )

        double = current_switchboard().route(cls)
        if double is not None:
            logger.debug("%s is doubled; skipping observers", cls.signal_name())
            return double.respond(signal)
        return dispatch(signal, cls.observers())


def emit(signal: Signal) -> Any:
    """Emit a signal through its own type."""
    if not isinstance(signal, Signal):
        raise TypeError(f"{signal!r} is not a Signal")
    return type(signal).emit(signal)
