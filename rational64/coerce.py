import math
from typing import Optional

from . import checked
from .data import FLOAT_TOLERANCE, INT32_MIN, INT32_MAX
from .codec import parse
from .errors import InvalidInput, RationalOverflow
from .rational import Rational, gcd


def from_int(n: int) -> Rational:
    # Wider ints are rejected by the checked narrowing rather than truncated
    if type(n) != int:
        raise InvalidInput(f"expected int, got {type(n).__name__}")
    return Rational(n, 1)


def from_tuple(t) -> Rational:
    try:
        n, d = t
    except (TypeError, ValueError):
        raise InvalidInput(f"expected a (numerator, denominator) pair, got {t!r}")
    if type(n) != int or type(d) != int:
        raise InvalidInput(f"pair components must be ints, got {t!r}")
    if d == 0:
        raise InvalidInput(f"fraction {n}/0 has zero denominator")
    return Rational(n, d)


def from_float(f: float, tolerance: Optional[float] = None) -> Rational:
    """Convert a float to a fraction.

    The float's exact binary value is used when it fits in 32-bit components
    after reduction. Otherwise the continued-fraction convergents of that
    value are walked, stopping at the first one within `tolerance` or at the
    last one that still fits. A non-zero value too small to reach the
    smallest non-zero fraction raises RationalOverflow rather than becoming 0.
    """
    if tolerance is None:
        tolerance = FLOAT_TOLERANCE
    if type(f) == int:
        if not checked.fits(f):
            raise RationalOverflow(f"value too large for rational: {f}")
        f = float(f)
    elif type(f) != float:
        raise InvalidInput(f"expected float, got {type(f).__name__}")
    if not math.isfinite(f):
        raise InvalidInput(f"cannot represent {f} as a fraction")
    if f < INT32_MIN or f > INT32_MAX:
        raise RationalOverflow(f"value too large for rational: {f}")

    # as_integer_ratio() is mantissa * 2**exponent, already in lowest terms
    p, q = f.as_integer_ratio()
    g = gcd(p, q)
    p, q = p // g, q // g
    if checked.fits(p) and checked.fits(q):
        return Rational(p, q)

    sign = -1 if p < 0 else 1
    p = abs(p)
    # Convergents h/k of p/q; h0/k0 is the previous one
    h0, k0, h, k = 0, 1, 1, 0
    while q != 0:
        a = p // q
        p, q = q, p - a * q
        h0, k0, h, k = h, k, a * h + h0, a * k + k0
        if not (checked.fits(h) and checked.fits(k)):
            h, k = h0, k0
            break
        if abs(abs(f) - h / k) < tolerance:
            break
    if h == 0:
        raise RationalOverflow(f"value too small for rational: {f}")
    return Rational(sign * h, k)


def to_float(x: Rational) -> float:
    return x.n / x.d


def coerce(value) -> Rational:
    if isinstance(value, Rational):
        return value
    if type(value) == int:
        return from_int(value)
    if type(value) == float:
        return from_float(value)
    if type(value) == tuple:
        return from_tuple(value)
    if type(value) == str:
        return parse(value)
    raise InvalidInput(f"cannot convert {type(value).__name__} to a fraction")
