import logging

from sea import Observer

from invoicing_app.analytics.repositories import INVOICE_COUNT, StatsRepository
from invoicing_app.sales.signals import InvoiceCreatedSignal

logger = logging.getLogger(__name__)


class InvoiceCreatedObserver(Observer):
    observes = InvoiceCreatedSignal

    def __init__(self) -> None:
        self.repository = StatsRepository()

    def handle(self, signal: InvoiceCreatedSignal) -> None:
        self.repository.increment(INVOICE_COUNT)
        logger.debug("Invoice count increased")
