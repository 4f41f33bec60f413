import logging

from sqlalchemy import text

from invoicing_app.infrastructure.database import connection
from invoicing_app.inventory.exceptions import OutOfStockError

logger = logging.getLogger(__name__)


class ProductRepository:
    table_name = "products"

    def add(self, product_id: int, name: str, stock: int = 0) -> None:
        with connection() as conn:
            conn.execute(
                text(
                    f"INSERT INTO {self.table_name} (id, name, stock) "
                    "VALUES (:id, :name, :stock)"
                ),
                {"id": product_id, "name": name, "stock": stock},
            )

    def decrease_stock(self, product_id: int) -> None:
        with connection() as conn:
            result = conn.execute(
                text(
                    f"UPDATE {self.table_name} SET stock = stock - 1 "
                    "WHERE id = :id AND stock > 0"
                ),
                {"id": product_id},
            )
        if not result.rowcount:
            raise OutOfStockError(product_id)
        logger.debug("Stock of product %s decreased", product_id)

    def stock_of(self, product_id: int) -> int:
        with connection() as conn:
            return conn.execute(
                text(f"SELECT stock FROM {self.table_name} WHERE id = :id"),
                {"id": product_id},
            ).scalar_one()
