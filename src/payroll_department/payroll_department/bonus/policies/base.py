from __future__ import annotations

from abc import ABC, abstractmethod


class BonusPolicy(ABC):
    """Strategy Pattern: encapsulate how final pay is derived from base pay."""

    @abstractmethod
    def compute_pay(self, base_pay: float) -> float:
        raise NotImplementedError
