class RationalError(Exception):
    pass


class RationalOverflow(RationalError, ArithmeticError):
    pass


class DivisionByZero(RationalError, ZeroDivisionError):
    pass


class InvalidInput(RationalError, ValueError):
    pass


class SearchDepthExceeded(RationalError, RuntimeError):
    pass
