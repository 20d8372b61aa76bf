"""Validated console prompts.

Every helper keeps asking until the answer is acceptable and reports each
rejected line. Bad input never escapes as an exception; only EOFError (input
closed) reaches the caller.
"""

from __future__ import annotations

from ..common.validators import is_float, is_integer
from ..core.constants import MAX_BASE_PAY, MAX_BONUS_PERCENT
from .io import ConsoleIO


def input_non_empty_string(io: ConsoleIO, prompt: str) -> str:
    while True:
        value = io.ask(prompt).strip()
        if value:
            return value
        io.say("Ошибка: строка не может быть пустой. Попробуйте снова.")


def input_positive_double(io: ConsoleIO, prompt: str) -> float:
    while True:
        raw = io.ask(prompt).strip()
        if not is_float(raw):
            io.say("Ошибка! Введите положительное число до 1000000 (разделитель - точка): ")
            continue

        num = float(raw)
        if num <= 0:
            io.say("Ошибка! Введите положительное число больше 0: ")
        elif num > MAX_BASE_PAY:
            io.say("Ошибка! Введите число не больше 1000000: ")
        else:
            return num


def input_non_negative_double(io: ConsoleIO, prompt: str) -> float:
    while True:
        raw = io.ask(prompt).strip()
        if not is_float(raw):
            io.say("Ошибка! Введите неотрицательное число до 100 (разделитель - точка): ")
            continue

        num = float(raw)
        if num < 0:
            io.say("Ошибка! Введите неотрицательное число: ")
        elif num > MAX_BONUS_PERCENT:
            io.say("Ошибка! Введите число не больше 100: ")
        else:
            return num


def input_menu_choice(io: ConsoleIO, prompt: str, low: int, high: int) -> int:
    while True:
        line = io.ask(prompt).strip()
        if not line:
            io.say(f"Ошибка: введите число от {low} до {high}.")
            continue

        if not is_integer(line):
            io.say("Ошибка: введите целое число без букв и других символов.")
            continue

        try:
            value = int(line)
        except ValueError:
            # digit strings past the interpreter's int conversion limit
            io.say("Ошибка: введите корректное целое число.")
            continue

        if value < low or value > high:
            io.say(f"Ошибка: число должно быть в диапазоне от {low} до {high}.")
            continue
        return value
