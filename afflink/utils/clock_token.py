"""Time-based fallback token for slugs."""

import time

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def clock_token() -> str:
    """Return the current millisecond timestamp in base 36."""
    value = int(time.time() * 1000)
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_DIGITS[rem])
    return "".join(reversed(digits))
