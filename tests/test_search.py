# tests/test_search.py
from decimal import Decimal

from inventory.database import ProductRepository
from inventory.models import Product
from inventory.query import matches, search_products
from inventory.seed import SAMPLE_PRODUCTS, load_sample_products


def seeded():
    repo = ProductRepository()
    load_sample_products(repo)
    return repo


def test_search_electr_returns_electronics():
    names = {p.name for p in seeded().search("electr")}
    assert names == {"Laptop", "Smartphone", "Headphones"}


def test_search_is_case_insensitive_on_name():
    assert [p.name for p in seeded().search("COFFEE")] == ["Coffee Maker"]
    assert [p.name for p in seeded().search("chair")] == ["Desk Chair"]


def test_search_matches_category():
    assert [p.id for p in seeded().search("furn")] == [3]


def test_search_no_match():
    assert seeded().search("zzz") == []


def test_empty_keyword_matches_everything():
    assert len(search_products(SAMPLE_PRODUCTS, "")) == 5


def test_matches():
    p = Product(name="Desk Lamp", category="Lighting", price=Decimal("19.99"), stock=1)
    assert matches(p, "lamp")
    assert matches(p, "LIGHT")
    assert not matches(p, "desk chair")
