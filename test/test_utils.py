import math
import unittest

from bigfrac.utils import (
    get_lcm, get_lcm_by_addition, log_bigint, reduce_pair, round_half_even, scaled_decimal,
)


class TestUtils(unittest.TestCase):

    def test_reduce_pair(self):
        self.assertEqual(reduce_pair(0, -5), (0, 1))
        self.assertEqual(reduce_pair(-4, -6), (2, 3))
        self.assertEqual(reduce_pair(4, -6), (-2, 3))
        self.assertEqual(reduce_pair(7, 7), (1, 1))
        self.assertEqual(reduce_pair(-7, 7), (-1, 1))

    def test_reduce_idempotent(self):
        for pair in [(2, 3), (-1, 6), (373703, 57536), (0, 1)]:
            self.assertEqual(reduce_pair(*pair), pair)
            self.assertEqual(reduce_pair(*reduce_pair(*pair)), reduce_pair(*pair))

    def test_lcm(self):
        self.assertEqual(get_lcm([4, 6]), 12)
        self.assertEqual(get_lcm([2, 3, 4]), 12)
        self.assertEqual(get_lcm_by_addition(4, 6), 12)
        for a in range(1, 40):
            for b in range(1, 40):
                self.assertEqual(get_lcm([a, b]), get_lcm_by_addition(a, b))

    def test_round_half_even(self):
        self.assertEqual(round_half_even(1, 3, 5), 33333)
        self.assertEqual(round_half_even(2, 3, 2), 67)
        self.assertEqual(round_half_even(1, 8, 2), 12)
        self.assertEqual(round_half_even(3, 8, 2), 38)
        self.assertEqual(round_half_even(-1, 8, 2), -12)
        self.assertEqual(round_half_even(-3, 8, 2), -38)
        self.assertEqual(round_half_even(5, 2, 0), 2)

    def test_scaled_decimal(self):
        self.assertEqual(str(scaled_decimal(33333, 5)), '0.33333')
        self.assertEqual(str(scaled_decimal(-12, 2)), '-0.12')
        # longer than the default decimal context precision
        self.assertEqual(str(scaled_decimal(10**40 + 1, 40)), '1.' + '0' * 39 + '1')

    def test_log_bigint(self):
        self.assertAlmostEqual(log_bigint(2), math.log(2))
        self.assertAlmostEqual(log_bigint(10**400), 400 * math.log(10), places=6)
        self.assertAlmostEqual(log_bigint(2**5000), 5000 * math.log(2), places=6)
        self.assertEqual(log_bigint(0), -math.inf)
        self.assertTrue(math.isnan(log_bigint(-5)))

    def test_log_bigint_logs_shift(self):
        with self.assertLogs(level='DEBUG') as cm:
            log_bigint(2**3000)
        self.assertIn('shifted by 1979', cm.output[0])
