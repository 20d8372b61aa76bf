from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..bonus.policies.base import BonusPolicy
from ..core.constants import MAX_BASE_PAY
from ..core.exceptions import InvalidRateError


@dataclass(frozen=True)
class WorkType:
    """Domain entity: a named kind of work with its base pay and bonus policy."""

    name: str
    base_pay: float
    bonus_policy: Optional[BonusPolicy]

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidRateError("work type name must not be empty")
        if not self.base_pay > 0:
            raise InvalidRateError("base pay must be > 0")
        if self.base_pay > MAX_BASE_PAY:
            raise InvalidRateError("base pay cannot exceed 1,000,000")
        if self.bonus_policy is None:
            raise InvalidRateError("bonus strategy must not be null")

    @property
    def final_pay(self) -> float:
        return self.bonus_policy.compute_pay(self.base_pay)


@dataclass(frozen=True)
class WorkTypeRow:
    name: str
    base_pay: float
    final_pay: float


@dataclass(frozen=True)
class WorkTypeListing:
    """Snapshot of the registry for display, in insertion order."""

    rows: tuple[WorkTypeRow, ...]

    @property
    def is_empty(self) -> bool:
        return not self.rows
