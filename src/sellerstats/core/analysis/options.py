from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sellerstats.config import DEFAULT_TOP_PRODUCTS_LIMIT
from sellerstats.core.metrics import (
    BONUS_STRATEGIES,
    REVENUE_STRATEGIES,
    BonusFunction,
    RevenueFunction,
)

from .errors import InvalidOptionsError

if TYPE_CHECKING:
    from sellerstats.config import Settings


@dataclass(slots=True, frozen=True)
class AnalysisOptions:
    calculate_revenue: RevenueFunction
    calculate_bonus: BonusFunction
    top_products_limit: int = DEFAULT_TOP_PRODUCTS_LIMIT
    chunk_size: int | None = None

    @classmethod
    def from_settings(cls, settings: Settings, chunk_size: int | None = None) -> AnalysisOptions:
        revenue = REVENUE_STRATEGIES.get(settings.revenue_model)
        if revenue is None:
            raise InvalidOptionsError(
                f"Неизвестная модель выручки: {settings.revenue_model} "
                f"(доступны: {', '.join(sorted(REVENUE_STRATEGIES))})"
            )
        bonus = BONUS_STRATEGIES.get(settings.bonus_model)
        if bonus is None:
            raise InvalidOptionsError(
                f"Неизвестная модель бонусов: {settings.bonus_model} "
                f"(доступны: {', '.join(sorted(BONUS_STRATEGIES))})"
            )
        return resolve_options(
            {
                "calculate_revenue": revenue,
                "calculate_bonus": bonus,
                "top_products_limit": settings.top_products_limit,
                "chunk_size": chunk_size,
            }
        )


def _positive_int_or_none(name: str, value: Any, *, optional: bool) -> int | None:
    if value is None and optional:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidOptionsError(f"{name} должен быть положительным целым числом: {value!r}")
    return value


def resolve_options(options: Any) -> AnalysisOptions:
    if isinstance(options, AnalysisOptions):
        raw: Mapping[str, Any] = {
            "calculate_revenue": options.calculate_revenue,
            "calculate_bonus": options.calculate_bonus,
            "top_products_limit": options.top_products_limit,
            "chunk_size": options.chunk_size,
        }
    elif isinstance(options, Mapping):
        raw = options
    else:
        raise InvalidOptionsError()

    calculate_revenue = raw.get("calculate_revenue")
    calculate_bonus = raw.get("calculate_bonus")
    if not callable(calculate_revenue) or not callable(calculate_bonus):
        raise InvalidOptionsError()

    top_products_limit = _positive_int_or_none(
        "top_products_limit",
        raw.get("top_products_limit", DEFAULT_TOP_PRODUCTS_LIMIT),
        optional=False,
    )
    chunk_size = _positive_int_or_none("chunk_size", raw.get("chunk_size"), optional=True)

    return AnalysisOptions(
        calculate_revenue=calculate_revenue,
        calculate_bonus=calculate_bonus,
        top_products_limit=top_products_limit,
        chunk_size=chunk_size,
    )
