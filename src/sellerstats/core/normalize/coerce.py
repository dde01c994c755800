from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

MONEY_QUANT = Decimal("0.01")


def _overflow_to_inf(value: Any) -> float:
    # слишком большое целое становится бесконечностью со знаком, а не исключением
    return -math.inf if value < 0 else math.inf


def to_number(value: Any) -> float:
    """Приведение к числу без исключений: всё непригодное превращается в 0.0."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except OverflowError:
        return _overflow_to_inf(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def to_quantity(value: Any) -> int | float:
    number = to_number(value)
    return int(number) if number.is_integer() else number


def is_numeric(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return not value.is_nan()
    if isinstance(value, float):
        return not math.isnan(value)
    if isinstance(value, int):
        return True
    if isinstance(value, str) and value.strip():
        try:
            return not math.isnan(float(value))
        except ValueError:
            return False
    return False


def round_money(value: float) -> float:
    # округление half-up по точному двоичному значению: 1.005 -> 1.0, 0.125 -> 0.13
    if not math.isfinite(value):
        return value
    return float(Decimal(value).quantize(MONEY_QUANT, rounding=ROUND_HALF_UP))


def get_field(record: Any, name: str, default: Any = None) -> Any:
    if record is None:
        return default
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)
