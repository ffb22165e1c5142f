from numbers import Integral

from .utils import get_lcm, log_bigint, reduce_pair, round_half_even, scaled_decimal


class InvalidArgument(ValueError):
    """Argument outside of the domain of an operation, e.g., zero denominator."""


class BigFraction:
    """
    Exact rational number n/d with python (arbitrary precision) ints.

    Immutable and hashable: all operations return new instances.
    Always stored in lowest terms with positive denominator, so
    equal numbers have equal (numerator, denominator) pairs.
    """

    __slots__ = ('_n', '_d')

    def __init__(self, numerator, denominator=1):
        """
        Create fraction numerator/denominator.

        Params:
            numerator, denominator  --  integers, denominator != 0
        """
        if not isinstance(numerator, Integral) or not isinstance(denominator, Integral):
            raise TypeError("numerator and denominator must be integers")
        if denominator == 0:
            raise InvalidArgument("denominator cannot be zero")
        self._n, self._d = reduce_pair(int(numerator), int(denominator))

    @classmethod
    def convert(cls, x):
        if isinstance(x, cls):
            return x
        elif isinstance(x, Integral):
            return cls(x, 1)
        else:
            raise TypeError("Can't convert {!r} to {}".format(x, cls.__name__))

    @property
    def numerator(self):
        return self._n

    @property
    def denominator(self):
        return self._d

    #
    # named operations: other is a BigFraction or an integer
    #

    def _common_terms(self, other):
        """Numerators of self and other over lcm of denominators, and the lcm."""
        lcm = get_lcm((self._d, other._d))
        return self._n * (lcm // self._d), other._n * (lcm // other._d), lcm

    def add(self, other):
        """Sum self + other."""
        if isinstance(other, Integral):
            return BigFraction(self._n + int(other) * self._d, self._d)
        a, c, lcm = self._common_terms(self.convert(other))
        return BigFraction(a + c, lcm)

    def subtract(self, other):
        """Difference self - other."""
        if isinstance(other, Integral):
            return BigFraction(self._n - int(other) * self._d, self._d)
        a, c, lcm = self._common_terms(self.convert(other))
        return BigFraction(a - c, lcm)

    def multiply(self, other):
        """Product self * other."""
        if isinstance(other, Integral):
            return BigFraction(self._n * int(other), self._d)
        other = self.convert(other)
        return BigFraction(self._n * other._n, self._d * other._d)

    def divide(self, other):
        """Quotient self / other; InvalidArgument if other is zero."""
        if isinstance(other, Integral):
            return BigFraction(self._n, self._d * int(other))
        other = self.convert(other)
        return BigFraction(self._n * other._d, self._d * other._n)

    def pow(self, exponent):
        """Power with non-negative integer exponent."""
        if not isinstance(exponent, Integral):
            raise TypeError("exponent must be an integer")
        if exponent < 0:
            raise InvalidArgument("exponent must be non-negative")
        return BigFraction(self._n ** int(exponent), self._d ** int(exponent))

    def natural_log(self):
        """
        Natural logarithm as float: ln(n) - ln(d).

        Works for numbers far outside the float range.
        Gives -inf for zero and nan for negative numbers.
        """
        return log_bigint(self._n) - log_bigint(self._d)

    def to_decimal(self, precision):
        """Decimal with precision fractional digits, rounded half to even."""
        if not isinstance(precision, Integral):
            raise TypeError("precision must be an integer")
        if precision < 0:
            raise InvalidArgument("precision must be non-negative")
        precision = int(precision)
        return scaled_decimal(round_half_even(self._n, self._d, precision), precision)

    def to_approximate_decimal(self, precision):
        """Float value of to_decimal(precision)."""
        return float(self.to_decimal(precision))

    #
    # python protocol
    #

    @staticmethod
    def _is_operand(x):
        return isinstance(x, (BigFraction, Integral))

    def __add__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not isinstance(other, Integral):
            return NotImplemented
        return BigFraction(other).subtract(self)

    def __mul__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not isinstance(other, Integral):
            return NotImplemented
        return BigFraction(other).divide(self)

    def __pow__(self, power):
        if not isinstance(power, Integral):
            return NotImplemented
        return self.pow(power)

    def __neg__(self):
        return BigFraction(-self._n, self._d)

    def __pos__(self):
        return self

    def __abs__(self):
        return BigFraction(abs(self._n), self._d)

    def __eq__(self, other):
        if isinstance(other, Integral):
            return self._d == 1 and self._n == other
        if not isinstance(other, BigFraction):
            return NotImplemented
        return (self._n, self._d) == (other._n, other._d)

    def __hash__(self):
        # integers must hash as the equal int
        if self._d == 1:
            return hash(self._n)
        return hash((self._n, self._d))

    def _cross(self, other):
        other = self.convert(other)
        return self._n * other._d, other._n * self._d

    def __lt__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        left, right = self._cross(other)
        return left < right

    def __le__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        left, right = self._cross(other)
        return left <= right

    def __gt__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        left, right = self._cross(other)
        return left > right

    def __ge__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        left, right = self._cross(other)
        return left >= right

    def __bool__(self):
        return self._n != 0

    def __float__(self):
        return self._n / self._d

    def __int__(self):
        # truncate toward zero
        if self._n < 0:
            return -(-self._n // self._d)
        return self._n // self._d

    def __str__(self):
        return '{}/{}'.format(self._n, self._d)

    def __repr__(self):
        return 'BigFraction({}, {})'.format(self._n, self._d)
