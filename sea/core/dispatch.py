import logging
from typing import Any, List, Sequence

from sea.core.observer import Observer

logger = logging.getLogger(__name__)


def dispatch(signal, observers: Sequence[Observer]) -> List[Any]:
    """Invoke every observer with the signal, in order, on the calling thread.

    The first observer that raises aborts the emission: the remaining
    observers are not invoked and the exception reaches the emitter as is.
    """
    results = []
    for position, observer in enumerate(observers):
        logger.debug("Dispatching %s to %r", type(signal).__qualname__, observer)
        try:
            results.append(observer.handle(signal))
        except Exception:
            logger.warning(
                "%r failed handling %s; %s remaining observer(s) skipped",
                observer,
                type(signal).__qualname__,
                len(observers) - position - 1,
            )
            raise
    return results
