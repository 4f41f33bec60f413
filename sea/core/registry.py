import logging
from typing import Any, Dict, Iterable, List, Optional, Type

from sea.core.binding import import_string
from sea.core.exceptions import BindingError, ConfigurationError
from sea.core.signals import Signal
from sea.settings import settings

logger = logging.getLogger(__name__)


class SignalRegistry:
    """Loads, binds and hands out every installed signal."""

    def __init__(self, project_settings=None) -> None:
        self.settings = project_settings or settings
        self.signals: Dict[str, Type[Signal]] = {}
        self.implementations: Dict[str, Any] = {}

    def load_signals(self) -> None:
        """Bind every installed signal; the first bad binding aborts loading."""
        for dotted_path in self.settings.INSTALLED_SIGNALS:
            signal_cls = self._load_signal(dotted_path)
            signal_cls.bind()
            self.signals[signal_cls.signal_name()] = signal_cls
            logger.info(
                "Installed %s (%s observers)", signal_cls.signal_name(), len(signal_cls.observers())
            )

        for name, dotted_path in self.settings.signal_implementations.items():
            if name not in self.signals:
                raise ConfigurationError(
                    f"Implementation configured for {name}, which is not installed"
                )
            self.implementations[name] = self._load_implementation(name, dotted_path)

    def _load_signal(self, dotted_path: str) -> Type[Signal]:
        try:
            signal_cls = import_string(dotted_path)
        except ImportError as exc:
            raise BindingError(f"Signal '{dotted_path}' could not be imported ({exc})") from exc
        if not isinstance(signal_cls, type) or not issubclass(signal_cls, Signal):
            raise BindingError(f"'{dotted_path}' is not a Signal subclass")
        return signal_cls

    def _load_implementation(self, name: str, dotted_path: str) -> Any:
        try:
            implementation = import_string(dotted_path)
        except ImportError as exc:
            raise ConfigurationError(
                f"Implementation '{dotted_path}' for {name} could not be imported ({exc})"
            ) from exc
        if not callable(getattr(implementation, "emit", None)):
            raise ConfigurationError(f"Implementation '{dotted_path}' for {name} has no emit()")
        return implementation

    def get_signal(self, name: str) -> Any:
        """Return the configured implementation of a signal's emit."""
        if name in self.implementations:
            return self.implementations[name]
        try:
            return self.signals[name]
        except KeyError:
            raise ConfigurationError(f"Signal {name} is not installed") from None

    def find_signal(self, name: str) -> Optional[Type[Signal]]:
        return self.signals.get(name)

    def iter_signals(self) -> Iterable[Type[Signal]]:
        return self.signals.values()

    def describe(self) -> List[str]:
        """One line per installed signal with its observers in bound order."""
        lines = []
        for name, signal_cls in self.signals.items():
            observers = ", ".join(repr(observer) for observer in signal_cls.observers())
            implementation = self.implementations.get(name)
            suffix = f" [implementation: {implementation!r}]" if implementation is not None else ""
            lines.append(f"{name} -> {observers}{suffix}")
        return lines
