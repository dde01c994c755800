from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from sellerstats.core.normalize import get_field, to_number

BonusFunction = Callable[[int, int, Any], float]

TOP_RATE = 0.15
RUNNER_UP_RATE = 0.10
DEFAULT_RATE = 0.05


def calculate_bonus_by_profit(index: int, total: int, seller: Any) -> float:
    """
    Бонус по месту в рейтинге прибыли (index 0 = лучший):
     - 15% первому месту
     - 10% второму и третьему
     - 0% последнему
     - 5% всем остальным
    Проверки идут в этом порядке, поэтому единственный продавец получает 15%.
    """
    profit = to_number(get_field(seller, "profit"))
    if index == 0:
        return profit * TOP_RATE
    if index in (1, 2):
        return profit * RUNNER_UP_RATE
    if index == total - 1:
        return 0.0
    return profit * DEFAULT_RATE


BONUS_STRATEGIES: Mapping[str, BonusFunction] = {
    "profit": calculate_bonus_by_profit,
}
