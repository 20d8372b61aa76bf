from __future__ import annotations

import pytest

from src.payroll_department.payroll_department.console.io import ConsoleIO
from src.payroll_department.payroll_department.work_types.in_memory_repository import InMemoryWorkTypeRepository
from src.payroll_department.payroll_department.work_types.service import PayrollDepartmentService


class FakeConsole(ConsoleIO):
    """Scripted console: answers prompts from a list and records output."""

    def __init__(self, lines):
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []
        super().__init__(reader=self._read, writer=self.output.append)

    def _read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def make_console():
    return FakeConsole


@pytest.fixture
def service():
    return PayrollDepartmentService(InMemoryWorkTypeRepository())
