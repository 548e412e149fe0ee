# Implements a Stern-Brocot ordering
# https://begriffs.com/posts/2018-03-20-user-defined-order.html#approach-3-true-fractions

import logging
from typing import Optional

from . import checked
from .data import MAX_SEARCH_DEPTH
from .errors import InvalidInput, SearchDepthExceeded
from .rational import Rational, cmp, simplify

_logger = logging.getLogger(__name__)


class _Bracket:
    # Search bracket; unlike Rational it may hold the infinities -1/0 and 1/0
    __slots__ = ("n", "d")

    def __init__(self, n, d):
        self.n = n
        self.d = d


def mediant(x, y) -> Rational:
    # https://www.cut-the-knot.org/proofs/fords.shtml#mediant
    # mediant of n1/d1 and n2/d2 = (n1 + n2)/(d1 + d2)
    return Rational(checked.add(x.n, y.n), checked.add(x.d, y.d))


def rational_intermediate(
    lo: Optional[Rational] = None,
    hi: Optional[Rational] = None,
    max_depth: Optional[int] = None,
) -> Rational:
    """Find the fraction with the smallest denominator strictly between lo and hi.

    Either bound may be None, meaning unbounded on that side. The search walks
    down the Stern-Brocot tree from 0/1, one mediant per step; it fails with
    SearchDepthExceeded after max_depth mediants (MAX_SEARCH_DEPTH by default)
    and with RationalOverflow if a mediant leaves the 32-bit range.
    """
    if max_depth is None:
        max_depth = MAX_SEARCH_DEPTH
    if max_depth < 1:
        raise InvalidInput(f"max_depth must be positive, got {max_depth}")
    if lo is not None and hi is not None and cmp(lo, hi) >= 0:
        raise InvalidInput(f"lower bound {lo} must be strictly smaller than {hi}")

    left = _Bracket(-1, 0)
    right = _Bracket(1, 0)
    # The mediant of the two infinities is undefined; the tree root is 0/1
    med = Rational(0, 1)
    n = 1
    while True:
        if lo is not None and cmp(med, lo) <= 0:
            left = med
        elif hi is not None and cmp(med, hi) >= 0:
            right = med
        else:
            return simplify(med)
        if n >= max_depth:
            _logger.debug(
                f"intermediate({lo}, {hi}) gave up after {n} mediants at {med}"
            )
            raise SearchDepthExceeded(
                f"rational intermediate depth exceeded ({max_depth} mediants)"
            )
        med = mediant(left, right)
        n += 1
