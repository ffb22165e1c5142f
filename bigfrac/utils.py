# coding: utf-8

from decimal import Decimal
import logging
import math


# integers up to this bit length are converted to float without overflow
LOG_SAFE_BITS = 1022
LOG2 = math.log(2.0)


def reduce_pair(n, d):
    """
    Normalize pair (n, d), d != 0, to lowest terms with positive denominator.

    The sign of n/d is moved to the numerator; zero becomes (0, 1).
    """
    sign = -1 if (n < 0) != (d < 0) and n != 0 else 1
    n, d = abs(n), abs(d)
    # gcd(0, d) == d, so zero reduces to 0/1
    common = n if n == d else math.gcd(n, d)
    return sign * (n // common), d // common


def get_lcm(iterable):
    """Least common multiple of integer sequence."""
    lcm = 1
    for x in iterable:
        lcm = (lcm * x) // math.gcd(lcm, x)
    return lcm


def get_lcm_by_addition(a, b):
    """
    Least common multiple of positive a, b by repeated addition of a.

    Needs b / gcd(a, b) steps; kept to check get_lcm against.
    """
    lcm = a
    steps = 0
    while lcm % b:
        lcm += a
        steps += 1
    logging.debug('lcm by addition: %d steps', steps)
    return lcm


def round_half_even(n, d, precision):
    """
    Round n/d (d > 0) to precision fractional digits, ties to even.

    Returns integer q such that q / 10**precision is the rounded value.
    """
    q, r = divmod(n * 10**precision, d)
    # here n/d * 10**precision = q + r/d, 0 <= r < d
    if 2 * r > d or (2 * r == d and q % 2):
        q += 1
    return q


def scaled_decimal(q, precision):
    """Decimal q * 10**(-precision), exact (no context rounding)."""
    sign, digits, exponent = Decimal(q).as_tuple()
    return Decimal((sign, digits, exponent - precision))


def log_bigint(val):
    """
    Natural logarithm of integer of any size.

    Large integers are shifted right to LOG_SAFE_BITS bits before float
    conversion, the shift is added back as shift * ln(2).
    log(0) is -inf and log of a negative integer is nan, as in IEEE.
    """
    if val == 0:
        return -math.inf
    if val < 0:
        return math.nan
    shift = val.bit_length() - LOG_SAFE_BITS
    if shift > 0:
        logging.debug('log_bigint: %d-bit integer shifted by %d', val.bit_length(), shift)
        return math.log(val >> shift) + shift * LOG2
    return math.log(val)
