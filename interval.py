from __future__ import annotations
from rational import Rational, _coerce


class Interval:
    """Range of Rationals between two end points, each open or closed."""

    a: Rational
    b: Rational
    left_open: bool
    right_open: bool

    @staticmethod
    def empty():
        zero = Rational(0)
        return Interval(zero, zero, True, True)

    @staticmethod
    def point(p: Rational):
        return Interval(p, p, False, False)

    @staticmethod
    def closed(l: Rational, r: Rational):
        return Interval(l, r, False, False)

    @staticmethod
    def open(l: Rational, r: Rational):
        return Interval(l, r, True, True)

    @staticmethod
    def left_open(l: Rational, r: Rational):
        return Interval(l, r, True, False)

    @staticmethod
    def right_open(l: Rational, r: Rational):
        return Interval(l, r, False, True)

    def __init__(
        self,
        l: Rational,
        r: Rational,
        lo: bool = False,
        ro: bool = False,
    ):
        if not isinstance(l, Rational) or not isinstance(r, Rational):
            raise TypeError("Interval end points must be Rational")
        self.a = l
        self.b = r
        self.left_open = lo
        self.right_open = ro

    def is_empty(self):
        return self.a > self.b or (
            self.a == self.b and (self.left_open or self.right_open)
        )

    def left(self):
        return self.a

    def right(self):
        return self.b

    def __contains__(self, x: Rational) -> bool:
        # plain integers are members as n/1
        x = _coerce(x)
        if x is NotImplemented:
            return False
        lo = x > self.a if self.left_open else x >= self.a
        hi = x < self.b if self.right_open else x <= self.b
        return lo and hi

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        if self.is_empty() and other.is_empty():
            return True
        return (
            self.a == other.a
            and self.b == other.b
            and self.left_open == other.left_open
            and self.right_open == other.right_open
        )

    def __hash__(self):
        if self.is_empty():
            return hash(())
        return hash((self.a, self.b, self.left_open, self.right_open))

    def __str__(self):
        s = "(" if self.left_open else "["
        s += str(self.a)
        s += ", "
        s += str(self.b)
        s += ")" if self.right_open else "]"
        return s
