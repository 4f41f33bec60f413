"""Helpers for tests that emit signals.

Unit tests usually want a signal stubbed away while still verifying that it
was emitted; integration tests want it live::

    def test_create_invoice(switchboard):
        double = double_signal(InvoiceCreatedSignal)
        double.expect({"product_id": 42})
        CreateInvoiceService().call(product_id=42, customer_id=7)
        double.verify()

All helpers act on the switch board in effect, which is the isolated board
installed by ``isolated_switchboard()`` (or the ``switchboard`` fixture).
"""

from contextlib import contextmanager
from typing import Iterator, Optional, Type

from sea.core.doubles import SignalDouble
from sea.core.switch import SwitchBoard, current_switchboard, switchboard_scope


def double_signal(signal_cls: Type, board: Optional[SwitchBoard] = None) -> SignalDouble:
    """Register the signal's double and switch the signal to it."""
    board = board or current_switchboard()
    double = board.register(signal_cls)
    board.disable(signal_cls)
    return double


def enable_signal(signal_cls: Type, board: Optional[SwitchBoard] = None) -> None:
    board = board or current_switchboard()
    board.register(signal_cls)
    board.enable(signal_cls)


def disable_signal(signal_cls: Type, board: Optional[SwitchBoard] = None) -> None:
    board = board or current_switchboard()
    board.register(signal_cls)
    board.disable(signal_cls)


@contextmanager
def isolated_switchboard(default_state: Optional[str] = None) -> Iterator[SwitchBoard]:
    with switchboard_scope(SwitchBoard(default_state=default_state)) as board:
        yield board
