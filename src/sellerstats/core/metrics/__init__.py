from .bonus import BONUS_STRATEGIES, BonusFunction, calculate_bonus_by_profit
from .revenue import (
    REVENUE_STRATEGIES,
    RevenueFunction,
    calculate_catalog_revenue,
    calculate_simple_revenue,
)

__all__ = [
    "BONUS_STRATEGIES",
    "REVENUE_STRATEGIES",
    "BonusFunction",
    "RevenueFunction",
    "calculate_bonus_by_profit",
    "calculate_catalog_revenue",
    "calculate_simple_revenue",
]
