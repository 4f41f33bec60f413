from sqlalchemy import text

from invoicing_app.infrastructure.database import connection

INVOICE_COUNT = "invoice_count"


class StatsRepository:
    table_name = "invoice_stats"

    def increment(self, name: str) -> None:
        with connection() as conn:
            conn.execute(
                text(
                    f"INSERT INTO {self.table_name} (name, value) VALUES (:name, 1) "
                    "ON CONFLICT (name) DO UPDATE SET value = value + 1"
                ),
                {"name": name},
            )

    def get(self, name: str) -> int:
        with connection() as conn:
            value = conn.execute(
                text(f"SELECT value FROM {self.table_name} WHERE name = :name"),
                {"name": name},
            ).scalar_one_or_none()
        return value or 0
