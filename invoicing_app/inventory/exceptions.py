class OutOfStockError(Exception):
    """Raised when an invoiced product has no stock left."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} is out of stock")
        self.product_id = product_id
