from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Customer:
    id: int
    name: str
    active: bool
    last_active_at: Optional[datetime]
