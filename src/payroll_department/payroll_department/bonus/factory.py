from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import MAX_BONUS_PERCENT
from ..core.exceptions import InvalidRateError
from .policies.base import BonusPolicy
from .policies.no_bonus_policy import NoBonusPolicy
from .policies.percentage_bonus_policy import PercentageBonusPolicy


@dataclass
class BonusPolicyFactory:
    """Factory Pattern: choose the bonus policy for a given percent."""

    def for_percent(self, percent: float) -> BonusPolicy:
        # 0% is stored as "no bonus"; the result is the same as PercentageBonusPolicy(0).
        if percent == 0:
            return NoBonusPolicy()

        if percent > MAX_BONUS_PERCENT:
            raise InvalidRateError("bonus percent cannot exceed 100%")
        return PercentageBonusPolicy(percent)
