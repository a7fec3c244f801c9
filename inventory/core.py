# inventory/core.py
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from .models import Product


class ProductIn(BaseModel):
    name: str
    category: str
    price: Decimal
    stock: int


class ProductPatch(BaseModel):
    # None keeps the current value
    name: Optional[str] = None
    category: Optional[str] = None
    price: Optional[Decimal] = None


def _make_product(p: ProductIn, product_id: int = 0) -> Product:
    return Product(
        id=product_id,
        name=p.name,
        category=p.category,
        price=p.price,
        stock=p.stock,
    )


def apply_patch(product: Product, patch: ProductPatch) -> Product:
    """Return a full replacement record for ``product`` with the patched fields."""
    changes = patch.model_dump(exclude_none=True)
    return product.model_copy(update=changes)
