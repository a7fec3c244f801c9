# tests/test_config.py
from inventory.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.app_name == "Product Management System"
    assert s.currency_symbol == "$"
    assert s.seed_samples is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("INVENTORY_SEED_SAMPLES", "false")
    monkeypatch.setenv("INVENTORY_CURRENCY_SYMBOL", "€")
    s = Settings(_env_file=None)
    assert s.seed_samples is False
    assert s.currency_symbol == "€"
