from __future__ import annotations

from typing import Optional, Sequence

from .model import WorkType
from .repository import WorkTypeRepository


class InMemoryWorkTypeRepository(WorkTypeRepository):
    """Session-only storage; everything is lost when the process exits."""

    def __init__(self):
        self._items: list[WorkType] = []
        self._by_name: dict[str, WorkType] = {}

    def list_all(self) -> Sequence[WorkType]:
        return tuple(self._items)

    def get_by_name(self, name: str) -> Optional[WorkType]:
        return self._by_name.get(name)

    def add(self, work_type: WorkType) -> None:
        self._items.append(work_type)
        self._by_name[work_type.name] = work_type

    def count(self) -> int:
        return len(self._items)
