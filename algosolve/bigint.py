"""Arbitrary-precision non-negative integers stored as decimal digits."""

from __future__ import annotations

from functools import total_ordering
from itertools import zip_longest
from typing import Union

_Digits = list[int]


def _strip(digits: _Digits) -> _Digits:
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits


def _compare(a: _Digits, b: _Digits) -> int:
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def _add(a: _Digits, b: _Digits) -> _Digits:
    out = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        out.append(digit)
    if carry:
        out.append(carry)
    return out


def _sub(a: _Digits, b: _Digits) -> _Digits:
    """``a - b`` for ``a >= b``."""
    out = []
    borrow = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        digit = x - y - borrow
        borrow = 1 if digit < 0 else 0
        out.append(digit + 10 * borrow)
    return _strip(out)


def _normalise(columns: list[int]) -> _Digits:
    out = []
    carry = 0
    for value in columns:
        carry, digit = divmod(value + carry, 10)
        out.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        out.append(digit)
    return _strip(out)


def _mul(a: _Digits, b: _Digits) -> _Digits:
    columns = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        if x == 0:
            continue
        for j, y in enumerate(b):
            columns[i + j] += x * y
    return _normalise(columns)


def _mul_small(a: _Digits, factor: int) -> _Digits:
    return _normalise([x * factor for x in a])


def _divmod(a: _Digits, b: _Digits) -> tuple[_Digits, _Digits]:
    """Schoolbook long division of ``a`` by non-zero ``b``."""
    quotient = []
    remainder = [0]
    for digit in reversed(a):
        remainder = _strip([digit] + remainder)
        factor = 9
        while factor > 0 and _compare(_mul_small(b, factor), remainder) > 0:
            factor -= 1
        remainder = _sub(remainder, _mul_small(b, factor))
        quotient.append(factor)
    return _strip(quotient[::-1]), remainder


IntLike = Union["BigInt", int]


@total_ordering
class BigInt:
    """A non-negative integer of unbounded size."""

    __slots__ = ("_digits",)

    def __init__(self, value: IntLike | str = 0) -> None:
        if isinstance(value, BigInt):
            self._digits = list(value._digits)
        elif isinstance(value, bool):
            raise TypeError("BigInt cannot be built from a bool")
        elif isinstance(value, int):
            if value < 0:
                raise ValueError("BigInt holds only non-negative values")
            self._digits = [int(ch) for ch in reversed(str(value))]
        elif isinstance(value, str):
            if not value or not all(ch in "0123456789" for ch in value):
                raise ValueError(f"invalid number: {value!r}")
            self._digits = _strip([int(ch) for ch in reversed(value)])
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")

    @classmethod
    def _of(cls, digits: _Digits) -> BigInt:
        result = cls.__new__(cls)
        result._digits = digits
        return result

    @staticmethod
    def _coerce(other: object) -> BigInt | None:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigInt(other)
        return None

    def __len__(self) -> int:
        """Number of decimal digits."""
        return len(self._digits)

    def __getitem__(self, index: int) -> int:
        """Decimal digit at ``index``, counting from the least significant."""
        if not 0 <= index < len(self._digits):
            raise IndexError(f"digit index {index} is out of range")
        return self._digits[index]

    def __eq__(self, other: object) -> bool:
        other_value = self._coerce(other)
        if other_value is None:
            return NotImplemented
        return self._digits == other_value._digits

    def __lt__(self, other: object) -> bool:
        other_value = self._coerce(other)
        if other_value is None:
            return NotImplemented
        return _compare(self._digits, other_value._digits) < 0

    def __hash__(self) -> int:
        return hash(int(self))

    def __add__(self, other: object) -> BigInt:
        other_value = self._coerce(other)
        if other_value is None:
            return NotImplemented
        return BigInt._of(_add(self._digits, other_value._digits))

    __radd__ = __add__

    def __sub__(self, other: object) -> BigInt:
        other_value = self._coerce(other)
        if other_value is None:
            return NotImplemented
        if _compare(self._digits, other_value._digits) < 0:
            raise ArithmeticError("underflow: result would be negative")
        return BigInt._of(_sub(self._digits, other_value._digits))

    def __rsub__(self, other: object) -> BigInt:
        other_value = self._coerce(other)
        if other_value is None:
            return NotImplemented
        return other_value - self

    def __mul__(self, other: object) -> BigInt:
        other_value = self._coerce(other)
        if other_value is None:
            return NotImplemented
        if self.is_zero() or other_value.is_zero():
            return BigInt()
        return BigInt._of(_mul(self._digits, other_value._digits))

    __rmul__ = __mul__

    def _divide(self, other: object) -> tuple[BigInt, BigInt] | None:
        other_value = self._coerce(other)
        if other_value is None:
            return None
        if other_value.is_zero():
            raise ZeroDivisionError("division by zero")
        quotient, remainder = _divmod(self._digits, other_value._digits)
        return BigInt._of(quotient), BigInt._of(remainder)

    def __floordiv__(self, other: object) -> BigInt:
        result = self._divide(other)
        if result is None:
            return NotImplemented
        return result[0]

    def __mod__(self, other: object) -> BigInt:
        result = self._divide(other)
        if result is None:
            return NotImplemented
        return result[1]

    def __divmod__(self, other: object) -> tuple[BigInt, BigInt]:
        result = self._divide(other)
        if result is None:
            return NotImplemented
        return result

    def __pow__(self, other: object) -> BigInt:
        exponent = self._coerce(other)
        if exponent is None:
            return NotImplemented
        result = BigInt(1)
        base = self
        while not exponent.is_zero():
            if exponent[0] & 1:
                result = result * base
            base = base * base
            exponent = exponent.halve()
        return result

    def __str__(self) -> str:
        return "".join(str(d) for d in reversed(self._digits))

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __int__(self) -> int:
        return int(str(self))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def is_zero(self) -> bool:
        return self._digits == [0]

    def halve(self) -> BigInt:
        """Return ``self // 2``."""
        out = []
        carry = 0
        for digit in reversed(self._digits):
            out.append((digit >> 1) + carry)
            carry = (digit & 1) * 5
        return BigInt._of(_strip(out[::-1]))

    def increment(self) -> BigInt:
        """Return ``self + 1``."""
        return BigInt._of(_add(self._digits, [1]))

    def decrement(self) -> BigInt:
        """Return ``self - 1``; zero cannot be decremented."""
        if self.is_zero():
            raise ArithmeticError("underflow: cannot decrement zero")
        return BigInt._of(_sub(self._digits, [1]))


def bigint_sqrt(a: IntLike) -> BigInt:
    """Largest integer whose square does not exceed ``a``."""
    value = BigInt(a)
    if value.is_zero():
        return value
    lo, hi, best = BigInt(1), value.halve(), BigInt(1)
    while lo <= hi:
        mid = (lo + hi).halve()
        if mid * mid <= value:
            best = mid
            lo = mid.increment()
        else:
            hi = mid.decrement()
    return best


def factorial(n: int) -> BigInt:
    """``n!``."""
    if n < 0:
        raise ValueError("n must not be negative")
    result = BigInt(1)
    for i in range(2, n + 1):
        result = result * i
    return result


def nth_catalan(n: int) -> BigInt:
    """The n-th Catalan number, ``C(2n, n) / (n + 1)``."""
    if n < 0:
        raise ValueError("n must not be negative")
    n_fact = factorial(n)
    upper = n_fact
    for i in range(n + 1, 2 * n + 1):
        upper = upper * i
    return upper // (n_fact * n_fact * (n + 1))


def nth_fibonacci(n: int) -> BigInt:
    """The n-th Fibonacci number, with ``F(0) = 0`` and ``F(1) = 1``."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = BigInt(0), BigInt(1)
    for _ in range(n):
        current, following = following, current + following
    return current