from .big_fractions import BigFraction


def get_harmonic_number(n):
    """Harmonic number H_n = 1 + 1/2 + ... + 1/n."""
    total = BigFraction(0)
    for k in range(1, n + 1):
        total += BigFraction(1, k)
    return total


def get_geometric_sum(ratio, count):
    """Sum 1 + r + r^2 + ... + r^(count-1)."""
    ratio = BigFraction.convert(ratio)
    total = BigFraction(0)
    term = BigFraction(1)
    for _ in range(count):
        total += term
        term *= ratio
    return total


def get_leibniz_sum(count):
    """Partial sum 1 - 1/3 + 1/5 - ... of count terms, tends to pi/4."""
    total = BigFraction(0)
    for k in range(count):
        term = BigFraction(1, 2 * k + 1)
        total = total.subtract(term) if k % 2 else total.add(term)
    return total


def get_sample_fractions():
    """Fractions with small, large, negative and coprime-heavy terms."""
    return [
        BigFraction(1, 2),
        BigFraction(2, 3),
        BigFraction(-1, 6),
        BigFraction(583, 232),
        BigFraction(641, 248),
        BigFraction(42, 62),
        BigFraction(16, 3),
        BigFraction(5, -15),
        BigFraction(0, 7),
        BigFraction(2**64 + 1, 3**40),
        BigFraction(-(10**50), 7**30),
        get_harmonic_number(30),
    ]
