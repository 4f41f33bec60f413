from sea import Observer

from invoicing_app.inventory.repositories import ProductRepository
from invoicing_app.sales.signals import InvoiceCreatedSignal


class InvoiceCreatedObserver(Observer):
    """Takes one unit of the invoiced product out of stock."""

    observes = InvoiceCreatedSignal

    def __init__(self) -> None:
        self.repository = ProductRepository()

    def handle(self, signal: InvoiceCreatedSignal) -> None:
        self.repository.decrease_stock(signal.product_id)
