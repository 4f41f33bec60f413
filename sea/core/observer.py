from abc import ABC, abstractmethod
from typing import Any, Tuple, Type, Union


class Observer(ABC):
    """Contract every observer bound to a signal must implement."""

    # Signal class(es) this observer accepts; empty accepts any signal
    observes: Union[type, Tuple[type, ...]] = ()

    @abstractmethod
    def handle(self, signal) -> Any:
        """Act upon an emitted signal; raise to abort the emission."""

    @classmethod
    def accepts(cls, signal_cls: Type) -> bool:
        observed = cls.observes
        if not isinstance(observed, tuple):
            observed = (observed,)
        if not observed:
            return True
        return issubclass(signal_cls, observed)

    def __repr__(self) -> str:
        return f"<{type(self).__module__}.{type(self).__qualname__}>"
