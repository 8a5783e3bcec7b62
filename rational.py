from __future__ import annotations
import math
import operator
from typing import Any, List, SupportsIndex, Tuple, Union

IntLike = Union[int, SupportsIndex]

# below the smallest str<->int digit limit the interpreter accepts
_CHUNK = 500
_CHUNK_POW = 10 ** _CHUNK


class RationalError(Exception):
	pass

class DivisionByZero(RationalError, ZeroDivisionError):
	pass

class InvalidFormat(RationalError, ValueError):
	def __init__(self, text: Any, reason: str) -> None:
		super().__init__(f"invalid rational {text!r}: {reason}")
		self.text = text
		self.reason = reason


def _as_int(value: Any, what: str) -> int:
	# numpy integers and other __index__ types become exact Python ints
	try:
		return operator.index(value)
	except TypeError:
		raise TypeError(f"{what} must be an integer, not {type(value).__name__}") from None


def int_to_decimal(n: int) -> str:
	if n < 0:
		return "-" + int_to_decimal(-n)
	if n < _CHUNK_POW:
		return str(n)
	parts: List[int] = []
	while n:
		n, r = divmod(n, _CHUNK_POW)
		parts.append(r)
	head = str(parts.pop())
	return head + "".join(str(p).zfill(_CHUNK) for p in reversed(parts))


def int_from_decimal(digits: str) -> int:
	"""Integer value of ``-?[0-9]+`` of any length."""
	if digits.startswith("-"):
		return -int_from_decimal(digits[1:])
	n = 0
	for i in range(0, len(digits), _CHUNK):
		piece = digits[i:i+_CHUNK]
		n = n * 10 ** len(piece) + int(piece)
	return n


class Rational:
	"""Exact fraction numerator/denominator over arbitrary-precision ints.

	The pair is stored as given: it is not reduced and the sign of the
	denominator is not normalized. Reduction happens in simplify(), which
	formatting and hashing go through.
	"""
	__slots__ = ("_num", "_den")

	def __init__(self, numerator: IntLike, denominator: IntLike = 1) -> None:
		num = _as_int(numerator, "numerator")
		den = _as_int(denominator, "denominator")
		if den == 0:
			raise DivisionByZero(f"zero denominator in {int_to_decimal(num)}/0")
		self._num = num
		self._den = den

	@property
	def numerator(self) -> int:
		return self._num

	@property
	def denominator(self) -> int:
		return self._den

	@classmethod
	def parse(cls, text: str) -> Rational:
		from rational_parser import parse_rational
		return parse_rational(text)

	# canonical form

	def simplify(self) -> Rational:
		# gcd(0, |d|) == |d| so zero reduces to 0/1
		g = math.gcd(self._num, self._den)
		num = -self._num if self._den < 0 else self._num
		return Rational(num // g, abs(self._den) // g)

	def to_string(self) -> str:
		s = self.simplify()
		if s._den == 1:
			return int_to_decimal(s._num)
		return f"{int_to_decimal(s._num)}/{int_to_decimal(s._den)}"

	def __str__(self) -> str:
		return self.to_string()

	def __repr__(self) -> str:
		return f"Rational({int_to_decimal(self._num)}, {int_to_decimal(self._den)})"

	def __hash__(self) -> int:
		s = self.simplify()
		return hash((s._num, s._den))

	# ordering and equality

	def compare_to(self, other: Rational) -> int:
		left, right = normalize(self, other)
		if left._num > right._num:
			return 1
		if left._num < right._num:
			return -1
		return 0

	def equals(self, other: object) -> bool:
		if not isinstance(other, Rational):
			return False
		left, right = normalize(self, other)
		return left._num == right._num and left._den == right._den

	def __eq__(self, other: object) -> bool:
		return self.equals(other)

	def __lt__(self, other: Rational) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		return self.compare_to(other) < 0

	def __le__(self, other: Rational) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		return self.compare_to(other) <= 0

	def __gt__(self, other: Rational) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		return self.compare_to(other) > 0

	def __ge__(self, other: Rational) -> bool:
		if not isinstance(other, Rational):
			return NotImplemented
		return self.compare_to(other) >= 0

	def range_to(self, other: Rational):
		"""Closed range ``self..other``, for membership tests."""
		from interval import Interval
		return Interval.closed(self, other)

	# arithmetic

	def add(self, other: Rational) -> Rational:
		left, right = normalize(self, other)
		return Rational(left._num + right._num, left._den)

	def subtract(self, other: Rational) -> Rational:
		left, right = normalize(self, other)
		return Rational(left._num - right._num, left._den)

	def multiply(self, other: Rational) -> Rational:
		return Rational(self._num * other._num, self._den * other._den)

	def divide(self, other: Rational) -> Rational:
		if other._num == 0:
			raise DivisionByZero(f"division of {self} by zero")
		return Rational(self._num * other._den, self._den * other._num)

	def negate(self) -> Rational:
		return Rational(-self._num, self._den)

	def __add__(self, other: Any) -> Rational:
		other = _coerce(other)
		if other is NotImplemented:
			return other
		return self.add(other)

	def __radd__(self, other: Any) -> Rational:
		other = _coerce(other)
		if other is NotImplemented:
			return other
		return other.add(self)

	def __sub__(self, other: Any) -> Rational:
		other = _coerce(other)
		if other is NotImplemented:
			return other
		return self.subtract(other)

	def __rsub__(self, other: Any) -> Rational:
		other = _coerce(other)
		if other is NotImplemented:
			return other
		return other.subtract(self)

	def __mul__(self, other: Any) -> Rational:
		other = _coerce(other)
		if other is NotImplemented:
			return other
		return self.multiply(other)

	def __rmul__(self, other: Any) -> Rational:
		other = _coerce(other)
		if other is NotImplemented:
			return other
		return other.multiply(self)

	def __truediv__(self, other: Any) -> Rational:
		other = _coerce(other)
		if other is NotImplemented:
			return other
		return self.divide(other)

	def __rtruediv__(self, other: Any) -> Rational:
		other = _coerce(other)
		if other is NotImplemented:
			return other
		return other.divide(self)

	def __neg__(self) -> Rational:
		return self.negate()

	def __pos__(self) -> Rational:
		return Rational(self._num, self._den)

	def __abs__(self) -> Rational:
		return Rational(abs(self._num), abs(self._den))

	def __pow__(self, exp: int) -> Rational:
		exp = _as_int(exp, "exponent")
		if exp >= 0:
			return Rational(self._num ** exp, self._den ** exp)
		if self._num == 0:
			raise DivisionByZero(f"zero raised to negative power {exp}")
		return Rational(self._den ** -exp, self._num ** -exp)

	# conversions

	def is_zero(self) -> bool:
		return self._num == 0

	def is_int(self) -> bool:
		return self._num % self._den == 0

	def to_int(self) -> int:
		# truncate towards zero
		q = abs(self._num) // abs(self._den)
		return -q if (self._num < 0) != (self._den < 0) else q

	def __bool__(self) -> bool:
		return self._num != 0

	def __float__(self) -> float:
		return self._num / self._den


def _coerce(value: Any) -> Rational:
	if isinstance(value, Rational):
		return value
	if isinstance(value, float) or not hasattr(value, "__index__"):
		return NotImplemented
	return Rational(value, 1)


def _positive(r: Rational) -> Rational:
	if r.denominator < 0:
		return Rational(-r.numerator, -r.denominator)
	return r


def normalize(left: Rational, right: Rational) -> Tuple[Rational, Rational]:
	"""Rewrite both operands over the common denominator ``|d1| * |d2|``.

	Terms are cross-multiplied, not reduced. Each operand is first given a
	positive denominator so the shared denominator is positive and numerators
	compare in the same order as the values.
	"""
	left, right = _positive(left), _positive(right)
	den = left.denominator * right.denominator
	return (
		Rational(left.numerator * right.denominator, den),
		Rational(right.numerator * left.denominator, den),
	)


def div_by(numerator: IntLike, denominator: IntLike) -> Rational:
	return Rational(numerator, denominator)
