from __future__ import annotations

import math

import pytest

from sellerstats.core.metrics import (
    REVENUE_STRATEGIES,
    calculate_catalog_revenue,
    calculate_simple_revenue,
)


def test_simple_revenue_applies_percentage_discount() -> None:
    item = {"sku": "SKU_001", "sale_price": 200, "quantity": 3, "discount": 25}
    assert calculate_simple_revenue(item, None) == pytest.approx(450.0)


def test_simple_revenue_without_discount_field() -> None:
    assert calculate_simple_revenue({"sale_price": 10, "quantity": 4}) == pytest.approx(40.0)


@pytest.mark.parametrize(
    "item",
    [
        {},
        {"sale_price": None, "quantity": 2},
        {"sale_price": "abc", "quantity": 2},
        {"sale_price": 10, "quantity": float("nan")},
        {"sale_price": 10},
    ],
)
def test_simple_revenue_treats_unusable_fields_as_zero(item: dict) -> None:
    assert calculate_simple_revenue(item) == 0


def test_simple_revenue_parses_numeric_strings() -> None:
    item = {"sale_price": "19.5", "quantity": "2", "discount": "50"}
    assert calculate_simple_revenue(item) == pytest.approx(19.5)


def test_simple_revenue_ignores_product_card() -> None:
    item = {"sku": "SKU_001", "sale_price": 100, "quantity": 1}
    product = {"sku": "SKU_001", "sale_price": 999, "purchase_price": 1}
    assert calculate_simple_revenue(item, product) == pytest.approx(100.0)


def test_catalog_revenue_prices_from_product_card() -> None:
    item = {"sku": "SKU_001", "sale_price": 100, "quantity": 2, "discount": 10}
    product = {"sku": "SKU_001", "sale_price": 150, "purchase_price": 90}
    assert calculate_catalog_revenue(item, product) == pytest.approx(270.0)


def test_catalog_revenue_falls_back_to_item_price() -> None:
    item = {"sku": "SKU_404", "sale_price": 100, "quantity": 2}
    assert calculate_catalog_revenue(item, None) == pytest.approx(200.0)


def test_revenue_strategies_registry() -> None:
    assert REVENUE_STRATEGIES["simple"] is calculate_simple_revenue
    assert REVENUE_STRATEGIES["catalog"] is calculate_catalog_revenue


def test_simple_revenue_huge_quantity_becomes_infinite() -> None:
    assert calculate_simple_revenue({"sale_price": 1, "quantity": 10**400}) == math.inf
    assert calculate_simple_revenue({"sale_price": 1, "quantity": -(10**400)}) == -math.inf
