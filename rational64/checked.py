# Overflow-checked int32 primitives.
#
# Python ints never wrap, so each operation computes the exact result and
# then narrows it back to the component width. Everything above this module
# must route width-sensitive arithmetic through here.

from .data import INT32_MIN, INT32_MAX
from .errors import RationalOverflow, DivisionByZero


def fits(v: int) -> bool:
    return INT32_MIN <= v <= INT32_MAX


def narrow(v: int) -> int:
    if type(v) != int:
        raise TypeError(f"expected int, got {type(v).__name__}")
    if not fits(v):
        raise RationalOverflow(f"{v} does not fit in a 32-bit component")
    return v


def add(a: int, b: int) -> int:
    return narrow(a + b)


def sub(a: int, b: int) -> int:
    return narrow(a - b)


def mul(a: int, b: int) -> int:
    return narrow(a * b)


def div(a: int, b: int) -> int:
    """Truncating (C-style) division; rounds toward zero rather than down."""
    if b == 0:
        raise DivisionByZero(f"{a} / 0")
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return narrow(q)


def neg(a: int) -> int:
    return narrow(-a)
