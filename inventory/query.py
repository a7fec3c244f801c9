# inventory/query.py
from typing import Iterable, List

from .models import Product


def matches(product: Product, keyword: str) -> bool:
    term = keyword.lower()
    return term in product.name.lower() or term in product.category.lower()


def search_products(products: Iterable[Product], keyword: str) -> List[Product]:
    # An empty keyword is a substring of everything, so it matches all products
    return [p for p in products if matches(p, keyword)]
