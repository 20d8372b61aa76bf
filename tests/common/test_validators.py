import pytest

from src.payroll_department.payroll_department.common.validators import is_float, is_integer


@pytest.mark.parametrize("value", ["", ".", "12.3.4", "12a", "-1", " 1", "1e5", "١٢"])
def test_is_float_rejects(value):
    assert is_float(value) is False


@pytest.mark.parametrize("value", ["0", "12.5", "100", "5.", ".5"])
def test_is_float_accepts(value):
    assert is_float(value) is True


def test_is_integer():
    assert is_integer("042") is True
    assert is_integer("") is False
    assert is_integer("4.2") is False
    assert is_integer("+4") is False
