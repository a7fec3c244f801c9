# inventory/seed.py
from decimal import Decimal
from typing import List

from .database import ProductRepository
from .models import Product

SAMPLE_PRODUCTS = [
    Product(id=1, name="Laptop", category="Electronics", price=Decimal("999.99"), stock=10),
    Product(id=2, name="Smartphone", category="Electronics", price=Decimal("699.99"), stock=15),
    Product(id=3, name="Desk Chair", category="Furniture", price=Decimal("149.99"), stock=5),
    Product(id=4, name="Coffee Maker", category="Appliances", price=Decimal("79.99"), stock=8),
    Product(id=5, name="Headphones", category="Electronics", price=Decimal("129.99"), stock=20),
]


def load_sample_products(repo: ProductRepository) -> List[Product]:
    return [repo.add(p) for p in SAMPLE_PRODUCTS]
