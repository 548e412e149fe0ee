from .errors import (
    RationalError,
    RationalOverflow,
    DivisionByZero,
    InvalidInput,
    SearchDepthExceeded,
)
from .rational import (
    Rational,
    gcd,
    simplify,
    cmp,
    smaller,
    larger,
    add,
    sub,
    mul,
    div,
    neg,
)
from .rank import rational_intermediate, mediant
from .coerce import from_int, from_tuple, from_float, to_float, coerce
from .codec import parse, render, to_bytes, from_bytes, rational_hash

__all__ = [
    "RationalError",
    "RationalOverflow",
    "DivisionByZero",
    "InvalidInput",
    "SearchDepthExceeded",
    "Rational",
    "gcd",
    "simplify",
    "cmp",
    "smaller",
    "larger",
    "add",
    "sub",
    "mul",
    "div",
    "neg",
    "rational_intermediate",
    "mediant",
    "from_int",
    "from_tuple",
    "from_float",
    "to_float",
    "coerce",
    "parse",
    "render",
    "to_bytes",
    "from_bytes",
    "rational_hash",
]
