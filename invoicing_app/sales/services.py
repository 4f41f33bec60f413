import logging

from invoicing_app.infrastructure.database import connection
from invoicing_app.sales.models import Invoice
from invoicing_app.sales.repositories import InvoiceRepository
from invoicing_app.sales.signals import InvoiceCreatedSignal

logger = logging.getLogger(__name__)


class CreateInvoiceService:
    """Creates an invoice and leaves every side effect to its observers."""

    def __init__(self, repository: InvoiceRepository | None = None) -> None:
        self.repository = repository or InvoiceRepository()

    def call(self, product_id: int, customer_id: int) -> Invoice:
        logger.info("Creating invoice for customer %s (product %s)", customer_id, product_id)
        with connection():
            invoice = self.repository.insert(customer_id=customer_id, product_id=product_id)
            InvoiceCreatedSignal.emit(InvoiceCreatedSignal.build(invoice))
        return invoice
