from dataclasses import dataclass

from sea import Signal

from invoicing_app.sales.models import Invoice


@dataclass(frozen=True)
class InvoiceCreatedSignal(Signal):
    """Emitted inside the transaction that created the invoice."""

    emit_within = (
        "invoicing_app.analytics",
        "invoicing_app.customers",
        "invoicing_app.inventory",
    )

    customer_id: int
    product_id: int

    @classmethod
    def build(cls, invoice: Invoice) -> "InvoiceCreatedSignal":
        return cls(customer_id=invoice.customer_id, product_id=invoice.product_id)
