import pytest

from sea.core.naming import event_name, resolve_observer_names


def test_resolves_one_observer_per_context_in_order():
    assert resolve_observer_names("A.B.SomeSignal", ["Y", "Z"]) == [
        "Y.SomeObserver",
        "Z.SomeObserver",
    ]


def test_name_without_signal_suffix_is_kept():
    assert resolve_observer_names(
        "Sales.InvoiceCreated", ["Analytics", "Customers", "Inventory"]
    ) == [
        "Analytics.InvoiceCreatedObserver",
        "Customers.InvoiceCreatedObserver",
        "Inventory.InvoiceCreatedObserver",
    ]


def test_dotted_contexts_are_kept_whole():
    assert resolve_observer_names(
        "myapp.sales.signals.InvoiceCreatedSignal", ["myapp.analytics"]
    ) == ["myapp.analytics.InvoiceCreatedObserver"]


def test_resolution_is_repeatable():
    first = resolve_observer_names("A.B.SomeSignal", ("Y", "Z"))
    second = resolve_observer_names("A.B.SomeSignal", ("Y", "Z"))
    assert first == second


def test_no_contexts_resolve_to_nothing():
    assert resolve_observer_names("A.SomeSignal", []) == []


def test_event_name_strips_only_trailing_suffix():
    assert event_name("SignalLostSignal") == "SignalLost"
    assert event_name("Signal") == "Signal"
    assert event_name("pkg.Shipped") == "Shipped"


def test_malformed_input_is_rejected():
    with pytest.raises(ValueError):
        resolve_observer_names("A.", ["Y"])
    with pytest.raises(ValueError):
        resolve_observer_names("A.SomeSignal", [""])
