# inventory/errors.py
"""Errors raised by the product repository.

The menu catches ``InventoryError`` around every action and reports it,
so none of these ever terminate the program.
"""


class InventoryError(Exception):
    """Base class for repository failures."""


class ProductNotFoundError(InventoryError):
    def __init__(self, product_id: int):
        super().__init__(f"Product not found with ID: {product_id}")
        self.product_id = product_id


class InvalidQuantityError(InventoryError):
    """A stock delta would leave the product with negative stock."""

    def __init__(self, product_id: int, stock: int, delta: int):
        super().__init__(
            f"Cannot change stock of product {product_id} by {delta}: only {stock} available"
        )
        self.product_id = product_id
        self.stock = stock
        self.delta = delta
