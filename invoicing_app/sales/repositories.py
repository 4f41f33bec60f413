import logging

from sqlalchemy import text

from invoicing_app.infrastructure.database import connection
from invoicing_app.infrastructure.time import timestamp, utcnow
from invoicing_app.sales.models import Invoice

logger = logging.getLogger(__name__)


class InvoiceRepository:
    table_name = "invoices"

    def insert(self, customer_id: int, product_id: int) -> Invoice:
        created_at = utcnow()
        with connection() as conn:
            result = conn.execute(
                text(
                    f"INSERT INTO {self.table_name} (customer_id, product_id, created_at) "
                    "VALUES (:customer_id, :product_id, :created_at)"
                ),
                {
                    "customer_id": customer_id,
                    "product_id": product_id,
                    "created_at": timestamp(created_at),
                },
            )
            invoice_id = result.lastrowid
        logger.info("Invoice %s stored for customer %s", invoice_id, customer_id)
        return Invoice(
            id=invoice_id,
            customer_id=customer_id,
            product_id=product_id,
            created_at=created_at,
        )

    def count(self) -> int:
        with connection() as conn:
            return conn.execute(text(f"SELECT COUNT(*) FROM {self.table_name}")).scalar_one()
