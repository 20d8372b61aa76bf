from __future__ import annotations

import logging
from typing import Optional

from ..bonus.factory import BonusPolicyFactory
from ..core.constants import DEFAULT_LONG_NAME_WARNING_LENGTH
from ..core.exceptions import DuplicateWorkTypeError, EmptyWorkListError
from .model import WorkType, WorkTypeListing, WorkTypeRow
from .repository import WorkTypeRepository

logger = logging.getLogger(__name__)


class PayrollDepartmentService:
    """Registry of work types for the current session."""

    def __init__(
        self,
        work_types: WorkTypeRepository,
        *,
        policy_factory: Optional[BonusPolicyFactory] = None,
        long_name_warning_length: int = DEFAULT_LONG_NAME_WARNING_LENGTH,
    ):
        self._work_types = work_types
        self._factory = policy_factory or BonusPolicyFactory()
        self._long_name_warning_length = int(long_name_warning_length)

    def add_work_type(self, name: str, base_pay: float, bonus_percent: float = 0.0) -> WorkType:
        """Validate and register a new work type.

        Raises DuplicateWorkTypeError when the name is taken and InvalidRateError
        when the pay, percent or name is rejected. Nothing is stored on failure.
        """
        if len(name) > self._long_name_warning_length:
            logger.warning("Предупреждение: название типа работ очень длинное")

        if self._work_types.get_by_name(name) is not None:
            raise DuplicateWorkTypeError(f"work type '{name}' already exists")

        policy = self._factory.for_percent(bonus_percent)
        work_type = WorkType(name=name, base_pay=base_pay, bonus_policy=policy)
        self._work_types.add(work_type)
        return work_type

    def calculate_average_pay(self) -> float:
        items = self._work_types.list_all()
        if not items:
            raise EmptyWorkListError("cannot calculate average")

        total = 0.0
        for w in items:
            total += w.final_pay
        return total / float(len(items))

    def list_all(self) -> WorkTypeListing:
        rows = tuple(
            WorkTypeRow(name=w.name, base_pay=w.base_pay, final_pay=w.final_pay)
            for w in self._work_types.list_all()
        )
        return WorkTypeListing(rows=rows)

    def get_work_type(self, name: str) -> Optional[WorkType]:
        return self._work_types.get_by_name(name)

    def count(self) -> int:
        return self._work_types.count()
