#!/usr/bin/env python
from decimal import Decimal

from inventory.database import ProductRepository
from inventory.errors import InvalidQuantityError, ProductNotFoundError
from inventory.models import Product
from inventory.seed import load_sample_products


def main():
    repo = ProductRepository()

    # -----------------------------
    # Seed sample products
    # -----------------------------
    print("Loading sample products...")
    for p in load_sample_products(repo):
        print(p)

    # -----------------------------
    # Add a product
    # -----------------------------
    print("\nAdding a product...")
    monitor = repo.add(Product(name="Monitor", category="Electronics", price=Decimal("249.50"), stock=7))
    print(monitor)

    # -----------------------------
    # Search products
    # -----------------------------
    print("\nSearching for 'electr'...")
    for p in repo.search("electr"):
        print(p)

    # -----------------------------
    # Update a product
    # -----------------------------
    print("\nUpdating the desk chair price...")
    chair = repo.get(3)
    print(repo.update(chair.model_copy(update={"price": Decimal("129.99")})))

    # -----------------------------
    # Adjust stock
    # -----------------------------
    print("\nSelling 3 coffee makers...")
    print(repo.adjust_stock(4, -3))

    print("\nTrying to sell 100 headphones...")
    try:
        repo.adjust_stock(5, -100)
    except InvalidQuantityError as e:
        print(f"Rejected: {e}")

    # -----------------------------
    # Delete a product
    # -----------------------------
    print(f"\nDeleting product {monitor.id}...")
    print(repo.delete(monitor.id))
    try:
        repo.get(monitor.id)
    except ProductNotFoundError as e:
        print(e)

    # -----------------------------
    # List products
    # -----------------------------
    print("\nListing all products...")
    for p in repo.list():
        print(p)


if __name__ == "__main__":
    main()
