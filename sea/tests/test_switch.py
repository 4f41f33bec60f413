import threading
from dataclasses import dataclass

import pytest

from sea import (
    DoubleVerificationError,
    Observer,
    Signal,
    SwitchBoard,
    SwitchStateError,
    current_switchboard,
)
from sea.core.switch import default_switchboard, switchboard_scope
from sea.settings.base import DOUBLED, LIVE
from sea.testing import disable_signal, double_signal, enable_signal, isolated_switchboard


class Collect(Observer):
    def __init__(self):
        self.received = []

    def handle(self, signal):
        self.received.append(signal)
        return "real"


def make_signal():
    collector = Collect()

    @dataclass(frozen=True)
    class StockChangedSignal(Signal):
        emit_to = [collector]
        product_id: int

    StockChangedSignal.bind()
    return StockChangedSignal, collector


class DummySettings:
    default_signal_state = DOUBLED


def test_unregistered_signals_dispatch_live(switchboard):
    signal_cls, collector = make_signal()

    assert signal_cls.emit(signal_cls(product_id=1)) == ["real"]
    assert switchboard.state_of(signal_cls) == LIVE
    assert len(collector.received) == 1


def test_disable_routes_to_double_and_enable_restores(switchboard):
    signal_cls, collector = make_signal()
    double = switchboard.register(signal_cls)
    double.stub(returns="fake")

    switchboard.disable(signal_cls)
    assert signal_cls.emit(signal_cls(product_id=1)) == "fake"
    assert collector.received == []
    assert double.call_count == 1

    switchboard.enable(signal_cls)
    assert signal_cls.emit(signal_cls(product_id=2)) == ["real"]
    assert [signal.product_id for signal in collector.received] == [2]
    assert double.call_count == 1


def test_registration_starts_in_the_configured_state():
    signal_cls, collector = make_signal()
    board = SwitchBoard(DummySettings())

    with switchboard_scope(board):
        board.register(signal_cls)
        signal_cls.emit(signal_cls(product_id=1))

    assert board.is_doubled(signal_cls)
    assert collector.received == []


def test_register_returns_the_existing_double(switchboard):
    signal_cls, _ = make_signal()
    double = switchboard.register(signal_cls)

    assert switchboard.register(signal_cls) is double
    assert switchboard.double_for(signal_cls) is double


def test_toggling_an_unregistered_signal_is_an_error(switchboard):
    signal_cls, _ = make_signal()

    with pytest.raises(SwitchStateError):
        switchboard.enable(signal_cls)
    with pytest.raises(SwitchStateError):
        switchboard.disable(signal_cls)
    with pytest.raises(SwitchStateError):
        switchboard.double_for(signal_cls)


def test_calling_a_double_while_live_is_an_error(switchboard):
    signal_cls, _ = make_signal()
    double = switchboard.register(signal_cls)

    with pytest.raises(SwitchStateError):
        double.emit(signal_cls(product_id=1))


def test_unknown_default_state_is_rejected():
    with pytest.raises(SwitchStateError):
        SwitchBoard(default_state="sometimes")


def test_scopes_restore_the_previous_board(switchboard):
    assert current_switchboard() is switchboard

    with switchboard_scope() as inner:
        assert current_switchboard() is inner
        assert inner is not switchboard

    assert current_switchboard() is switchboard


def test_outside_any_scope_the_default_board_is_used():
    assert current_switchboard() is default_switchboard()


def test_toggles_do_not_leak_between_threads():
    signal_cls, collector = make_signal()
    doubled = threading.Event()
    emitted = threading.Event()
    results = {}

    def doubling_test():
        with isolated_switchboard(default_state=LIVE):
            disable_signal(signal_cls)
            doubled.set()
            emitted.wait(timeout=5)
            results["doubling"] = signal_cls.emit(signal_cls(product_id=1))

    def live_test():
        with isolated_switchboard(default_state=LIVE):
            doubled.wait(timeout=5)
            results["live"] = signal_cls.emit(signal_cls(product_id=2))
            emitted.set()

    threads = [threading.Thread(target=doubling_test), threading.Thread(target=live_test)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert results == {"doubling": None, "live": ["real"]}
    assert [signal.product_id for signal in collector.received] == [2]


def test_helpers_act_on_the_current_board(switchboard):
    signal_cls, collector = make_signal()

    double = double_signal(signal_cls)
    assert switchboard.is_doubled(signal_cls)
    assert switchboard.double_for(signal_cls) is double

    enable_signal(signal_cls)
    assert not switchboard.is_doubled(signal_cls)

    disable_signal(signal_cls)
    signal_cls.emit(signal_cls(product_id=3))
    assert collector.received == []
    assert double.calls == [signal_cls(product_id=3)]


def test_doubled_default_applies_to_unregistered_signals():
    signal_cls, collector = make_signal()
    board = SwitchBoard(default_state=DOUBLED)

    with switchboard_scope(board):
        assert signal_cls.emit(signal_cls(product_id=1)) is None

    assert collector.received == []
    assert board.is_doubled(signal_cls)
    double = board.double_for(signal_cls)
    assert double.calls == [signal_cls(product_id=1)]
    with pytest.raises(DoubleVerificationError, match="unexpected call"):
        double.verify()


def test_doubled_profile_covers_signals_nobody_registered():
    signal_cls, collector = make_signal()

    with switchboard_scope(SwitchBoard(DummySettings())):
        signal_cls.emit(signal_cls(product_id=1))

    assert collector.received == []


def test_route_picks_the_double_in_one_step(switchboard):
    signal_cls, _ = make_signal()

    assert switchboard.route(signal_cls) is None
    assert not switchboard.is_registered(signal_cls)

    double = double_signal(signal_cls)
    assert switchboard.route(signal_cls) is double

    switchboard.reset()
    assert switchboard.route(signal_cls) is None
    assert signal_cls.emit(signal_cls(product_id=2)) == ["real"]


def test_routed_double_answers_after_a_concurrent_reset(switchboard):
    signal_cls, collector = make_signal()
    double = double_signal(signal_cls)
    double.stub(returns="fake")

    routed = switchboard.route(signal_cls)
    switchboard.reset()

    assert routed.respond(signal_cls(product_id=4)) == "fake"
    assert double.calls == [signal_cls(product_id=4)]
    assert collector.received == []
