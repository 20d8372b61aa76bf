"""Example: using the service layer directly (no console menu).

The menu controller is only a thin layer; the rules live in the service.
"""

from src.payroll_department.payroll_department.core.exceptions import PayrollError
from src.payroll_department.payroll_department.work_types.in_memory_repository import InMemoryWorkTypeRepository
from src.payroll_department.payroll_department.work_types.service import PayrollDepartmentService


def main():
    service = PayrollDepartmentService(InMemoryWorkTypeRepository())
    service.add_work_type("Монтаж", 1200.0)
    service.add_work_type("Сварка", 1500.0, 25.0)

    try:
        service.add_work_type("Сварка", 900.0)
    except PayrollError as e:
        print(e)

    for row in service.list_all().rows:
        print(row)
    print(f"{service.calculate_average_pay():.2f}")


if __name__ == "__main__":
    main()
