# inventory/models.py
from decimal import Decimal

from pydantic import BaseModel


class Product(BaseModel):
    # id 0 asks the repository to assign the next free identifier
    id: int = 0
    name: str
    category: str
    price: Decimal
    stock: int
