from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import WorkType


class WorkTypeRepository(Protocol):
    def list_all(self) -> Sequence[WorkType]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[WorkType]:
        raise NotImplementedError

    def add(self, work_type: WorkType) -> None:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
