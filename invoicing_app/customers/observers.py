from sea import Observer

from invoicing_app.customers.repositories import CustomerRepository
from invoicing_app.sales.signals import InvoiceCreatedSignal


class InvoiceCreatedObserver(Observer):
    observes = InvoiceCreatedSignal

    def __init__(self) -> None:
        self.repository = CustomerRepository()

    def handle(self, signal: InvoiceCreatedSignal) -> bool:
        return self.repository.mark_active(signal.customer_id)
