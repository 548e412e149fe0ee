# Command line calculator over the rational64 core.

import argparse
import logging
import sys

from rational64 import (
    RationalError,
    add,
    sub,
    mul,
    div,
    cmp,
    simplify,
    parse,
    render,
    from_float,
    to_float,
    rational_intermediate,
)

BINARY_OPS = dict(add=add, sub=sub, mul=mul, div=div)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ratcalc", description="Exact 32/32-bit fraction arithmetic"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="cmd", required=True)

    p = subparsers.add_parser("simplify", help="Reduce a fraction to lowest terms")
    p.add_argument("x")

    p = subparsers.add_parser("between", help="Simplest fraction strictly between two bounds")
    p.add_argument("--lo", default=None, help="Lower bound (unbounded if omitted)")
    p.add_argument("--hi", default=None, help="Upper bound (unbounded if omitted)")
    p.add_argument("--max-depth", type=int, default=None)

    for name in BINARY_OPS:
        p = subparsers.add_parser(name)
        p.add_argument("x")
        p.add_argument("y")

    p = subparsers.add_parser("cmp", help="Print -1, 0 or 1")
    p.add_argument("x")
    p.add_argument("y")

    p = subparsers.add_parser("float", help="Convert a fraction to a float")
    p.add_argument("x")

    p = subparsers.add_parser("from-float", help="Convert a float to a fraction")
    p.add_argument("f", type=float)
    return parser


def run(args) -> str:
    if args.cmd == "simplify":
        return render(simplify(parse(args.x)))
    if args.cmd == "between":
        lo = parse(args.lo) if args.lo is not None else None
        hi = parse(args.hi) if args.hi is not None else None
        return render(rational_intermediate(lo, hi, args.max_depth))
    if args.cmd in BINARY_OPS:
        return render(BINARY_OPS[args.cmd](parse(args.x), parse(args.y)))
    if args.cmd == "cmp":
        return str(cmp(parse(args.x), parse(args.y)))
    if args.cmd == "float":
        return repr(to_float(parse(args.x)))
    if args.cmd == "from-float":
        return render(from_float(args.f))
    raise ValueError(f"Unknown command {args.cmd}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        print(run(args))
    except RationalError as e:
        logging.getLogger("ratcalc").debug("Command failed", exc_info=True)
        sys.stderr.write(f"error: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
