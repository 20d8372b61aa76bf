from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .bonus.factory import BonusPolicyFactory
from .console.io import ConsoleIO
from .console.menu import PayrollMenuController
from .core.constants import DEFAULT_LONG_NAME_WARNING_LENGTH
from .work_types.in_memory_repository import InMemoryWorkTypeRepository
from .work_types.service import PayrollDepartmentService


@dataclass(frozen=True)
class Container:
    work_types_repo: InMemoryWorkTypeRepository

    payroll_service: PayrollDepartmentService
    menu: PayrollMenuController


def build_container(*, settings: object = None, io: Optional[ConsoleIO] = None) -> Container:
    long_name_warning_length = int(
        getattr(settings, "LONG_NAME_WARNING_LENGTH", DEFAULT_LONG_NAME_WARNING_LENGTH)
    )
    debug = bool(getattr(settings, "DEBUG", False))

    work_types_repo = InMemoryWorkTypeRepository()
    payroll_service = PayrollDepartmentService(
        work_types_repo,
        policy_factory=BonusPolicyFactory(),
        long_name_warning_length=long_name_warning_length,
    )
    menu = PayrollMenuController(payroll_service, io or ConsoleIO(), debug=debug)

    return Container(
        work_types_repo=work_types_repo,
        payroll_service=payroll_service,
        menu=menu,
    )
