import re
import struct
import zlib

from .data import BYTE_ORDER
from .errors import InvalidInput
from .rational import Rational, simplify

FRACTION_RE = re.compile(r"^\s*([+-]?[0-9]+)\s*/\s*([+-]?[0-9]+)\s*$", re.ASCII)

_LAYOUT = struct.Struct((">" if BYTE_ORDER == "big" else "<") + "ii")
SIZE = _LAYOUT.size


def parse(text: str) -> Rational:
    m = FRACTION_RE.match(text)
    if m is None:
        raise InvalidInput(f'invalid input syntax for fraction: "{text}"')
    n, d = int(m.group(1)), int(m.group(2))
    if d == 0:
        raise InvalidInput(f'fraction cannot have zero denominator: "{text}"')
    return Rational(n, d)


def render(x: Rational, simplified=False) -> str:
    if simplified:
        x = simplify(x)
    return f"{x.n}/{x.d}"


def to_bytes(x: Rational) -> bytes:
    return _LAYOUT.pack(x.n, x.d)


def from_bytes(buf) -> Rational:
    if len(buf) != SIZE:
        raise InvalidInput(f"expected {SIZE} bytes for a fraction, got {len(buf)}")
    n, d = _LAYOUT.unpack(bytes(buf))
    if d == 0:
        raise InvalidInput("stored fraction has zero denominator")
    return Rational(n, d)


def rational_hash(x: Rational) -> int:
    # Equal fractions share a reduced form, so they hash identically
    return zlib.crc32(to_bytes(simplify(x)))
