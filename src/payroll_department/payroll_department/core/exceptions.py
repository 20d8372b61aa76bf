class PayrollError(Exception):
    """Base exception for payroll rule violations."""


class InvalidRateError(PayrollError):
    """Raised when a pay amount, bonus percent or required field is invalid."""

    def __init__(self, message: str):
        super().__init__(f"Invalid rate: {message}")


class DuplicateWorkTypeError(PayrollError):
    """Raised when a work type with the same name is already registered."""

    def __init__(self, message: str):
        super().__init__(f"Duplicate work type: {message}")


class EmptyWorkListError(PayrollError):
    """Raised when an aggregate is requested over zero work types."""

    def __init__(self, message: str):
        super().__init__(f"Work list is empty: {message}")
