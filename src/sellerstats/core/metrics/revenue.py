from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from sellerstats.core.normalize import get_field, to_number

RevenueFunction = Callable[[Any, Any], float]


def _discount_factor(item: Any) -> float:
    discount = to_number(get_field(item, "discount"))  # проценты
    return 1 - discount / 100


def calculate_simple_revenue(item: Any, product: Any = None) -> float:
    """Выручка позиции по цене из чека: sale_price * quantity * (1 - discount/100)."""
    sale_price = to_number(get_field(item, "sale_price"))
    quantity = to_number(get_field(item, "quantity"))
    return sale_price * quantity * _discount_factor(item)


def calculate_catalog_revenue(item: Any, product: Any = None) -> float:
    """Выручка позиции по цене из карточки товара; без карточки берётся цена из чека."""
    catalog_price = get_field(product, "sale_price")
    if catalog_price is None:
        catalog_price = get_field(item, "sale_price")
    quantity = to_number(get_field(item, "quantity"))
    return to_number(catalog_price) * quantity * _discount_factor(item)


REVENUE_STRATEGIES: Mapping[str, RevenueFunction] = {
    "simple": calculate_simple_revenue,
    "catalog": calculate_catalog_revenue,
}
