"""
Euclid's greatest common divisor on signed 64-bit integers.
"""

from constants import INT64_MAX, INT64_MIN


def _check_int64(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise OverflowError(f"{name}={value} is outside the signed 64-bit range")


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of |a| and |b|.

    gcd(x, 0) == |x| and gcd(0, 0) == 0. The magnitude of INT64_MIN (2**63)
    is a valid result even though it does not fit a signed 64-bit integer.

    Raises:
        TypeError: If an argument is not an int.
        OverflowError: If an argument is outside the signed 64-bit range.
    """
    _check_int64("a", a)
    _check_int64("b", b)

    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a
