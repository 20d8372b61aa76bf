from __future__ import annotations

from .base import BonusPolicy


class NoBonusPolicy(BonusPolicy):
    """No bonus: final pay equals base pay."""

    def compute_pay(self, base_pay: float) -> float:
        return base_pay
