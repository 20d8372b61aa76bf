from __future__ import annotations

_DIGITS = frozenset("0123456789")


def is_integer(value: str) -> bool:
    """True when value is non-empty and made only of ASCII digits."""
    return bool(value) and all(ch in _DIGITS for ch in value)


def is_float(value: str) -> bool:
    """True for plain decimals like "12" or "12.5" (dot separator, no sign)."""
    if not value or value == ".":
        return False

    seen_dot = False
    for ch in value:
        if ch in _DIGITS:
            continue
        if ch == "." and not seen_dot:
            seen_dot = True
            continue
        return False
    return True
