from dataclasses import dataclass
from datetime import datetime


@dataclass
class Invoice:
    id: int
    customer_id: int
    product_id: int
    created_at: datetime
