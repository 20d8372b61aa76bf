from __future__ import annotations

from src.payroll_department.payroll_department.console.menu import PayrollMenuController, format_listing
from src.payroll_department.payroll_department.core.enums import MenuState
from src.payroll_department.payroll_department.work_types.model import WorkTypeListing, WorkTypeRow


def test_exit_choice_stops_loop(make_console, service):
    io = make_console(["0"])
    menu = PayrollMenuController(service, io)

    assert menu.run() == 0
    assert menu.state == MenuState.EXIT
    assert "===== МЕНЮ ОТДЕЛА РАСЧЁТА ЗАРПЛАТЫ =====" in io.output
    assert io.output[-1] == "Выход из программы."


def test_add_list_and_average_session(make_console, service):
    io = make_console([
        "1", "Монтаж", "100", "0",
        "1", "Покраска", "200", "50",
        "2",
        "3",
        "0",
    ])

    PayrollMenuController(service, io).run()

    assert io.output.count("Тип работ успешно добавлен.") == 2
    assert "Текущие типы работ:" in io.output
    assert "  - Монтаж | базовая оплата: 100 | с надбавкой: 100" in io.output
    assert "  - Покраска | базовая оплата: 200 | с надбавкой: 300" in io.output
    assert "Средняя величина оплаты: 200.00" in io.output


def test_domain_errors_are_reported_and_loop_continues(make_console, service):
    io = make_console(["3", "2", "1", "a", "10", "0", "1", "a", "20", "0", "0"])

    PayrollMenuController(service, io).run()

    assert "Ошибка расчёта зарплаты: Work list is empty: cannot calculate average" in io.output
    assert "Список типов работ пуст." in io.output
    assert "Ошибка расчёта зарплаты: Duplicate work type: work type 'a' already exists" in io.output
    assert service.count() == 1


def test_unexpected_errors_do_not_stop_loop(make_console, service, monkeypatch):
    def boom():
        raise RuntimeError("boom")

    monkeypatch.setattr(service, "list_all", boom)
    io = make_console(["2", "0"])
    menu = PayrollMenuController(service, io)

    assert menu.run() == 0
    assert "Непредвиденная ошибка: boom" in io.output
    assert menu.state == MenuState.EXIT


def test_end_of_input_exits_cleanly(make_console, service):
    io = make_console(["1", "Монтаж"])
    menu = PayrollMenuController(service, io)

    assert menu.run() == 0
    assert menu.state == MenuState.EXIT
    assert service.count() == 0


def test_format_listing_uses_short_float_format():
    listing = WorkTypeListing(rows=(WorkTypeRow(name="a", base_pay=12.5, final_pay=1234567.0),))
    assert format_listing(listing) == [
        "Текущие типы работ:",
        "  - a | базовая оплата: 12.5 | с надбавкой: 1.23457e+06",
    ]


def test_unexpected_error_traceback_only_in_debug(make_console, service, monkeypatch, caplog):
    def boom():
        raise RuntimeError("boom")

    monkeypatch.setattr(service, "calculate_average_pay", boom)

    PayrollMenuController(service, make_console(["3", "0"]), debug=False).run()
    assert caplog.records[-1].exc_info is None

    caplog.clear()
    PayrollMenuController(service, make_console(["3", "0"]), debug=True).run()
    assert caplog.records[-1].exc_info is not None
