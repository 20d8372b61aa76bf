from __future__ import annotations

from ...core.constants import MAX_BONUS_PERCENT, MIN_BONUS_PERCENT
from ...core.exceptions import InvalidRateError
from .base import BonusPolicy


class PercentageBonusPolicy(BonusPolicy):
    """Percentage bonus on top of base pay."""

    def __init__(self, percent: float):
        if not percent >= MIN_BONUS_PERCENT:
            raise InvalidRateError("bonus percent must be >= 0")
        if percent > MAX_BONUS_PERCENT:
            raise InvalidRateError("bonus percent cannot exceed 100%")
        self._percent = float(percent)

    @property
    def percent(self) -> float:
        return self._percent

    def compute_pay(self, base_pay: float) -> float:
        return base_pay * (1.0 + self._percent / 100.0)

    def __repr__(self) -> str:
        return f"PercentageBonusPolicy(percent={self._percent!r})"
