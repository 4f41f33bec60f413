"""Signal/observer naming convention.

A signal named ``MyApp.Sales.InvoiceCreatedSignal`` emitted within the
contexts ``MyApp.Analytics`` and ``MyApp.Inventory`` is observed by
``MyApp.Analytics.InvoiceCreatedObserver`` and
``MyApp.Inventory.InvoiceCreatedObserver``.
"""

from typing import Iterable, List

SIGNAL_SUFFIX = "Signal"
OBSERVER_SUFFIX = "Observer"


def event_name(signal_name: str) -> str:
    """Return the bare event name of a (possibly dotted) signal name."""
    local_name = signal_name.rsplit(".", 1)[-1]
    if not local_name:
        raise ValueError(f"Signal name '{signal_name}' has no local name")
    if local_name.endswith(SIGNAL_SUFFIX) and local_name != SIGNAL_SUFFIX:
        return local_name[: -len(SIGNAL_SUFFIX)]
    return local_name


def resolve_observer_names(signal_name: str, contexts: Iterable[str]) -> List[str]:
    """Compute the observer names expected in each context, in context order.

    No import or existence check happens here.
    """
    observer_name = event_name(signal_name) + OBSERVER_SUFFIX
    names = []
    for context in contexts:
        context = context.strip(".")
        if not context:
            raise ValueError(f"Empty context given for signal '{signal_name}'")
        names.append(f"{context}.{observer_name}")
    return names
