# inventory/database.py
import logging
import threading
from typing import Dict, List, Optional

from .errors import InvalidQuantityError, ProductNotFoundError
from .models import Product
from .query import search_products

# This file holds the in-memory product store and the lock guarding it.

logger = logging.getLogger(__name__)


class ProductRepository:
    """
    In-memory store of products keyed by integer id.

    Stored records are private copies: everything handed in is copied before
    it is kept and everything handed out is a copy, so callers must go
    through ``update`` or ``adjust_stock`` to change a record.
    """

    def __init__(self) -> None:
        self._products: Dict[int, Product] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        with self._lock:
            return product_id in self._products

    def add(self, product: Product) -> Product:
        with self._lock:
            if product.id == 0:
                stored = product.model_copy(update={"id": self._next_id})
                self._next_id += 1
            else:
                # Colliding ids overwrite the existing record
                if product.id in self._products:
                    logger.warning("Product %s already exists, overwriting it", product.id)
                stored = product.model_copy()
                self._next_id = max(self._next_id, product.id + 1)
            self._products[stored.id] = stored
            logger.info("Added product %s (%s)", stored.id, stored.name)
            return stored.model_copy()

    def update(self, product: Product) -> Product:
        with self._lock:
            if product.id not in self._products:
                raise ProductNotFoundError(product.id)
            stored = product.model_copy()
            self._products[stored.id] = stored
            logger.info("Updated product %s", stored.id)
            return stored.model_copy()

    def delete(self, product_id: int) -> bool:
        with self._lock:
            if self._products.pop(product_id, None) is None:
                return False
            logger.info("Deleted product %s", product_id)
            return True

    def get(self, product_id: int) -> Product:
        with self._lock:
            p = self._products.get(product_id)
            if p is None:
                raise ProductNotFoundError(product_id)
            return p.model_copy()

    def list(self, category: Optional[str] = None, in_stock_only: bool = False) -> List[Product]:
        with self._lock:
            out = []
            for p in self._products.values():
                if category and p.category.lower() != category.lower():
                    continue
                if in_stock_only and p.stock <= 0:
                    continue
                out.append(p.model_copy())
            return out

    def search(self, keyword: str) -> List[Product]:
        with self._lock:
            return [p.model_copy() for p in search_products(self._products.values(), keyword)]

    def adjust_stock(self, product_id: int, delta: int) -> Product:
        with self._lock:
            p = self._products.get(product_id)
            if p is None:
                raise ProductNotFoundError(product_id)
            new_stock = p.stock + delta
            if new_stock < 0:
                raise InvalidQuantityError(product_id, p.stock, delta)
            stored = p.model_copy(update={"stock": new_stock})
            self._products[product_id] = stored
            logger.info("Stock of product %s changed by %+d to %d", product_id, delta, new_stock)
            return stored.model_copy()
