import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import text

from invoicing_app.customers.models import Customer
from invoicing_app.infrastructure.database import connection
from invoicing_app.infrastructure.time import timestamp

logger = logging.getLogger(__name__)


class CustomerRepository:
    table_name = "customers"

    def add(self, customer_id: int, name: str) -> None:
        with connection() as conn:
            conn.execute(
                text(f"INSERT INTO {self.table_name} (id, name, active) VALUES (:id, :name, 0)"),
                {"id": customer_id, "name": name},
            )

    def mark_active(self, customer_id: int) -> bool:
        with connection() as conn:
            result = conn.execute(
                text(
                    f"UPDATE {self.table_name} SET active = 1, last_active_at = :now "
                    "WHERE id = :id"
                ),
                {"id": customer_id, "now": timestamp()},
            )
        if not result.rowcount:
            logger.warning("Customer %s not found; nothing marked active", customer_id)
        return bool(result.rowcount)

    def get(self, customer_id: int) -> Optional[Customer]:
        with connection() as conn:
            row = conn.execute(
                text(
                    f"SELECT id, name, active, last_active_at FROM {self.table_name} "
                    "WHERE id = :id"
                ),
                {"id": customer_id},
            ).first()
        if row is None:
            return None
        return Customer(
            id=row.id,
            name=row.name,
            active=bool(row.active),
            last_active_at=(
                datetime.fromisoformat(row.last_active_at) if row.last_active_at else None
            ),
        )
