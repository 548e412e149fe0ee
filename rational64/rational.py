from functools import wraps

from . import checked
from .errors import RationalOverflow, DivisionByZero


class Rational:
    """A fraction of two 32-bit signed integers.

    The denominator is always positive; a negative denominator given to the
    constructor is folded into the numerator. Values are not kept in lowest
    terms - call simplify() when the canonical form is needed. Equality and
    ordering use cross multiplication, so 1/2 == 2/4.
    """

    __slots__ = ("_n", "_d")

    def __init__(self, numerator, denominator=1):
        numerator = checked.narrow(numerator)
        denominator = checked.narrow(denominator)
        if denominator == 0:
            raise DivisionByZero(f"fraction {numerator}/0 has zero denominator")
        if denominator < 0:
            if checked.INT32_MIN in (numerator, denominator):
                # -INT32_MIN does not fit; only a reduced pair may be negatable
                g = gcd(numerator, denominator)
                numerator, denominator = numerator // g, denominator // g
            numerator = checked.neg(numerator)
            denominator = checked.neg(denominator)
        self._n = numerator
        self._d = denominator

    @property
    def n(self):
        return self._n

    @property
    def d(self):
        return self._d

    numerator = n
    denominator = d

    def __reduce__(self):
        return (Rational, (self._n, self._d))

    def _norm_op(self, other, op):
        if type(other) == int:
            # Compare exactly; other may not fit in a component
            return op(self._n, other * self._d)
        if not isinstance(other, Rational):
            return NotImplemented
        return op(cmp(self, other), 0)

    def __lt__(self, other):
        return self._norm_op(other, int.__lt__)

    def __gt__(self, other):
        return self._norm_op(other, int.__gt__)

    def __eq__(self, other):
        return self._norm_op(other, int.__eq__)

    def __ne__(self, other):
        return self._norm_op(other, int.__ne__)

    def __le__(self, other):
        return self._norm_op(other, int.__le__)

    def __ge__(self, other):
        return self._norm_op(other, int.__ge__)

    def __hash__(self):
        # Must agree with __eq__, including equality with plain ints
        r = simplify(self)
        if r.d == 1:
            return hash(r.n)
        return hash((r.n, r.d))

    def _arith_op(self, other, op, reflected=False):
        other = _as_rational(other)
        if other is None:
            return NotImplemented
        if reflected:
            return op(other, self)
        return op(self, other)

    def __add__(self, other):
        return self._arith_op(other, add)

    def __radd__(self, other):
        return self._arith_op(other, add, reflected=True)

    def __sub__(self, other):
        return self._arith_op(other, sub)

    def __rsub__(self, other):
        return self._arith_op(other, sub, reflected=True)

    def __mul__(self, other):
        return self._arith_op(other, mul)

    def __rmul__(self, other):
        return self._arith_op(other, mul, reflected=True)

    def __truediv__(self, other):
        return self._arith_op(other, div)

    def __rtruediv__(self, other):
        return self._arith_op(other, div, reflected=True)

    def __neg__(self):
        return neg(self)

    def __float__(self):
        return self._n / self._d

    def __bool__(self):
        return self._n != 0

    def __str__(self):
        return f"{self._n}/{self._d}"

    def __repr__(self):
        return f"Rational({self._n}, {self._d})"


def _as_rational(v):
    if isinstance(v, Rational):
        return v
    if type(v) == int:
        return Rational(v, 1)
    return None


def gcd(a: int, b: int) -> int:
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def simplify(x: Rational) -> Rational:
    # d > 0 so g >= 1, and dividing by g can only shrink magnitudes
    g = gcd(x.n, x.d)
    if g == 1:
        return x
    return Rational(x.n // g, x.d // g)


def cmp(x: Rational, y: Rational) -> int:
    """Return -1, 0 or 1 as x is less than, equal to or greater than y.

    Cross products of two 32-bit components need up to 64 bits; they are
    computed exactly instead of through the checked primitives, so
    comparison never fails.
    """
    lhs = x.n * y.d
    rhs = y.n * x.d
    if lhs < rhs:
        return -1
    if lhs > rhs:
        return 1
    return 0


def smaller(x: Rational, y: Rational) -> Rational:
    return y if cmp(y, x) < 0 else x


def larger(x: Rational, y: Rational) -> Rational:
    return y if cmp(y, x) > 0 else x


def _retry_simplified(name):
    # On overflow, reduce both operands to lowest terms and try once more.
    def decorator(op):
        @wraps(op)
        def wrapped(x, y):
            try:
                return op(x, y)
            except RationalOverflow as e:
                sx, sy = simplify(x), simplify(y)
                if sx is x and sy is y:
                    raise RationalOverflow(
                        f"intermediate value overflow in rational {name}"
                    ) from e
            try:
                return op(sx, sy)
            except RationalOverflow as e:
                raise RationalOverflow(
                    f"intermediate value overflow in rational {name}"
                ) from e

        return wrapped

    return decorator


@_retry_simplified("addition")
def add(x: Rational, y: Rational) -> Rational:
    # (a*d + c*b) / (b*d)
    return Rational(
        checked.add(checked.mul(x.n, y.d), checked.mul(y.n, x.d)),
        checked.mul(x.d, y.d),
    )


@_retry_simplified("subtraction")
def sub(x: Rational, y: Rational) -> Rational:
    # (a*d - c*b) / (b*d)
    return Rational(
        checked.sub(checked.mul(x.n, y.d), checked.mul(y.n, x.d)),
        checked.mul(x.d, y.d),
    )


@_retry_simplified("multiplication")
def mul(x: Rational, y: Rational) -> Rational:
    return Rational(checked.mul(x.n, y.n), checked.mul(x.d, y.d))


def div(x: Rational, y: Rational) -> Rational:
    if y.n == 0:
        raise DivisionByZero(f"division of {x} by zero")
    return _div(x, y)


@_retry_simplified("division")
def _div(x: Rational, y: Rational) -> Rational:
    # (a*d) / (b*c); the constructor moves a negative sign off the denominator
    return Rational(checked.mul(x.n, y.d), checked.mul(x.d, y.n))


def neg(x: Rational) -> Rational:
    return Rational(checked.neg(x.n), x.d)
