from __future__ import annotations

import logging
from typing import Callable, Optional

from ..core.constants import MENU_CHOICE_MAX, MENU_CHOICE_MIN
from ..core.enums import MenuChoice, MenuState
from ..core.exceptions import PayrollError
from ..work_types.model import WorkTypeListing
from ..work_types.service import PayrollDepartmentService
from .io import ConsoleIO
from .prompts import (
    input_menu_choice,
    input_non_empty_string,
    input_non_negative_double,
    input_positive_double,
)

logger = logging.getLogger(__name__)

MENU_LINES = (
    "",
    "===== МЕНЮ ОТДЕЛА РАСЧЁТА ЗАРПЛАТЫ =====",
    "1. Добавить тип работ",
    "2. Показать все типы работ",
    "3. Вычислить среднюю величину оплаты",
    "0. Выход",
    "========================================",
)


def format_listing(listing: WorkTypeListing) -> list[str]:
    if listing.is_empty:
        return ["Список типов работ пуст."]

    lines = ["Текущие типы работ:"]
    for row in listing.rows:
        lines.append(f"  - {row.name} | базовая оплата: {row.base_pay:g} | с надбавкой: {row.final_pay:g}")
    return lines


class PayrollMenuController:
    """Thin console layer: reads a menu choice and dispatches to the service."""

    def __init__(self, service: PayrollDepartmentService, io: Optional[ConsoleIO] = None, *, debug: bool = False):
        self._service = service
        self._io = io or ConsoleIO()
        self._debug = bool(debug)
        self._state = MenuState.MAIN_MENU
        self._handlers: dict[MenuChoice, Callable[[], None]] = {
            MenuChoice.EXIT: self._exit,
            MenuChoice.ADD_WORK_TYPE: self._add_work_type,
            MenuChoice.LIST_WORK_TYPES: self._list_work_types,
            MenuChoice.AVERAGE_PAY: self._average_pay,
        }

    @property
    def state(self) -> MenuState:
        return self._state

    def run(self) -> int:
        while self._state is MenuState.MAIN_MENU:
            try:
                self.step()
            except (EOFError, KeyboardInterrupt):
                # input closed: leave the same way as choice 0
                self._io.say()
                self._exit()
        return 0

    def step(self) -> None:
        for line in MENU_LINES:
            self._io.say(line)

        choice = MenuChoice(input_menu_choice(self._io, "Ваш выбор: ", MENU_CHOICE_MIN, MENU_CHOICE_MAX))

        try:
            self._handlers[choice]()
        except PayrollError as e:
            self._io.say(f"Ошибка расчёта зарплаты: {e}")
        except EOFError:
            raise
        except Exception as e:
            if self._debug:
                logger.exception("Unexpected failure while handling menu choice %s", choice.name)
            else:
                logger.error("Unexpected failure while handling menu choice %s: %s", choice.name, e)
            self._io.say(f"Непредвиденная ошибка: {e}")

    def _exit(self) -> None:
        self._io.say("Выход из программы.")
        self._state = MenuState.EXIT

    def _add_work_type(self) -> None:
        name = input_non_empty_string(self._io, "Введите название типа работ: ")
        base_pay = input_positive_double(self._io, "Введите базовую оплату: ")
        bonus_percent = input_non_negative_double(self._io, "Введите надбавку в процентах (0 если нет): ")

        self._service.add_work_type(name, base_pay, bonus_percent)
        self._io.say("Тип работ успешно добавлен.")

    def _list_work_types(self) -> None:
        for line in format_listing(self._service.list_all()):
            self._io.say(line)

    def _average_pay(self) -> None:
        avg = self._service.calculate_average_pay()
        self._io.say(f"Средняя величина оплаты: {avg:.2f}")
