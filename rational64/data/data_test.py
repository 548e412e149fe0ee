import unittest
from ..data import (
    DEFAULTS,
    WIDTH,
    INT32_MIN,
    INT32_MAX,
    MAX_SEARCH_DEPTH,
    FLOAT_TOLERANCE,
    BYTE_ORDER,
    REBALANCE_STRIDE,
)


class TestDefaults(unittest.TestCase):
    def test_has_all_fields(self):
        self.assertEqual(
            sorted(DEFAULTS.keys()),
            sorted(
                [
                    "max_search_depth",
                    "float_tolerance",
                    "byte_order",
                    "rebalance_stride",
                ]
            ),
        )

    def test_values(self):
        self.assertEqual(MAX_SEARCH_DEPTH, 2 ** (WIDTH // 2))
        self.assertEqual(FLOAT_TOLERANCE, 1e-12)
        self.assertEqual(BYTE_ORDER, "big")
        self.assertGreater(REBALANCE_STRIDE, 0)

    def test_width(self):
        self.assertEqual((INT32_MIN, INT32_MAX), (-(2**31), 2**31 - 1))
