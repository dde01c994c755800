from __future__ import annotations

import logging
from pathlib import Path

import pytest

from sellerstats import AnalysisOptions, calculate_bonus_by_profit, calculate_simple_revenue
from sellerstats.config import Settings


@pytest.fixture()
def dataset() -> dict:
    return {
        "sellers": [
            {"id": "seller_1", "first_name": "Иван", "last_name": "Петров"},
            {"id": "seller_2", "first_name": "Анна", "last_name": "Смирнова"},
            {"id": "seller_3", "first_name": "Олег", "last_name": "Иванов"},
        ],
        "products": [
            {"sku": "SKU_001", "name": "Чайник", "sale_price": 100, "purchase_price": 60},
            {"sku": "SKU_002", "name": "Кружка", "sale_price": 50, "purchase_price": 20},
            {"sku": "SKU_003", "name": "Ложка", "sale_price": 10, "purchase_price": 4},
        ],
        "purchase_records": [
            {
                "receipt_id": "r1",
                "seller_id": "seller_1",
                "total_amount": 200,
                "items": [{"sku": "SKU_001", "sale_price": 100, "quantity": 2, "discount": 0}],
            },
            {
                "receipt_id": "r2",
                "seller_id": "seller_2",
                "items": [{"sku": "SKU_002", "sale_price": 50, "quantity": 3, "discount": 10}],
            },
            {
                "receipt_id": "r3",
                "seller_id": "seller_1",
                "total_amount": 100,
                "items": [
                    {"sku": "SKU_003", "sale_price": 10, "quantity": 5, "discount": 0},
                    {"sku": "SKU_002", "sale_price": 50, "quantity": 1, "discount": 0},
                ],
            },
            {
                "receipt_id": "r4",
                "seller_id": "seller_999",
                "total_amount": 1000,
                "items": [{"sku": "SKU_001", "sale_price": 100, "quantity": 10, "discount": 0}],
            },
        ],
    }


@pytest.fixture()
def options() -> AnalysisOptions:
    return AnalysisOptions(
        calculate_revenue=calculate_simple_revenue,
        calculate_bonus=calculate_bonus_by_profit,
    )


@pytest.fixture()
def settings(tmp_path: Path, monkeypatch) -> Settings:  # noqa: ANN001
    for key in (
        "SELLERSTATS_LOG_DIR",
        "SELLERSTATS_LOG_LEVEL",
        "SELLERSTATS_TOP_PRODUCTS_LIMIT",
        "SELLERSTATS_REVENUE_MODEL",
        "SELLERSTATS_BONUS_MODEL",
    ):
        monkeypatch.delenv(key, raising=False)
    root = tmp_path / "project"
    root.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("SELLERSTATS_HOME", str(root))
    s = Settings.load(base_dir=root)
    s.ensure_directories()
    return s


@pytest.fixture()
def test_logger() -> logging.Logger:
    logger = logging.getLogger("sellerstats-test")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.INFO)
    return logger


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        yield root
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
