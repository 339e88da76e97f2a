"""Bit-blasting: bit-vector operations lowered onto a Boolean solver.

A bit-vector is a tuple of Boolean solver results, least significant bit
first. Everything that is not a tuple is a single Boolean result of the
underlying solver. Operations on Booleans that this layer does not
handle itself are passed on to that solver unchanged.
"""

from __future__ import annotations

from typing import Any, Callable

from . import comparators
from .clause import ClauseEncoder
from .result import ResultWrapper
from .tags import BVTag, PredTag

_UINT64_MASK = (1 << 64) - 1
_HEX_DIGITS = "0123456789abcdef"


def _bits(value) -> tuple:
    if not isinstance(value, tuple):
        raise TypeError("expected a bit-vector, got a Boolean")
    return value


def _base(value):
    if isinstance(value, tuple):
        raise TypeError("expected a Boolean, got a bit-vector")
    return value


def _pair(lhs, rhs) -> tuple[tuple, tuple]:
    a, b = _bits(lhs), _bits(rhs)
    if len(a) != len(b):
        raise ValueError(f"bit-vectors differ in width: {len(a)} and {len(b)}")
    return a, b


class BitBlast:
    """Translates bit-vector operations into gates of a Boolean solver.

    ``solver`` must offer ``apply(tag, *args)`` for Boolean operations,
    ``assertion``, ``assumption``, ``solve`` and ``read_value``; by default
    a :class:`ClauseEncoder` over the built-in SAT solver is used.
    """

    def __init__(self, solver=None):
        self._solver = solver if solver is not None else ClauseEncoder()
        g = self._solver
        self._ops: dict[Any, Callable[..., Any]] = {
            BVTag.VAR: self._var,
            BVTag.BVAND: self._bitwise(PredTag.AND),
            BVTag.BVNAND: self._bitwise(PredTag.NAND),
            BVTag.BVOR: self._bitwise(PredTag.OR),
            BVTag.BVNOR: self._bitwise(PredTag.NOR),
            BVTag.BVXOR: self._bitwise(PredTag.XOR),
            BVTag.BVXNOR: self._bitwise(PredTag.XNOR),
            BVTag.BVNOT: self._not,
            BVTag.BVULT: lambda l, r: comparators.unsigned_less(g, *_pair(l, r)),
            BVTag.BVUGT: lambda l, r: comparators.unsigned_greater(g, *_pair(l, r)),
            BVTag.BVSLT: lambda l, r: comparators.signed_less(g, *_pair(l, r)),
            BVTag.BVSGT: lambda l, r: comparators.signed_greater(g, *_pair(l, r)),
            BVTag.BVULE: lambda l, r: comparators.unsigned_less_equal(g, *_pair(l, r)),
            BVTag.BVUGE: self._uge,
            BVTag.BVSLE: lambda l, r: comparators.signed_less_equal(g, *_pair(l, r)),
            BVTag.BVSGE: lambda l, r: comparators.signed_greater_equal(g, *_pair(l, r)),
            BVTag.BVADD: self._add,
            BVTag.BVMUL: self._mul,
            BVTag.BVNEG: self._neg,
            BVTag.BVSUB: self._sub,
            BVTag.BVUDIV: lambda l, r: self._udivrem(l, r, True),
            BVTag.BVUREM: lambda l, r: self._udivrem(l, r, False),
            BVTag.BVSDIV: lambda l, r: self._sdivrem(l, r, True),
            BVTag.BVSREM: lambda l, r: self._sdivrem(l, r, False),
            BVTag.BVCOMP: lambda l, r: (self._equal(l, r),),
            BVTag.ZERO_EXTEND: self._zero_extend,
            BVTag.SIGN_EXTEND: self._sign_extend,
            BVTag.BVUINT: self._uint,
            BVTag.BVSINT: self._sint,
            BVTag.BVBIN: self._bin,
            BVTag.BVHEX: self._hex,
            BVTag.BIT0: lambda *_: (self._false(),),
            BVTag.BIT1: lambda *_: (self._true(),),
            BVTag.BVSHL: self._shl,
            BVTag.BVSHR: self._shr,
            BVTag.BVASHR: self._ashr,
            BVTag.EXTRACT: self._extract,
            BVTag.CONCAT: lambda l, r: _bits(r) + _bits(l),
            PredTag.EQUAL: self._equal,
            PredTag.NEQUAL: self._nequal,
            PredTag.ITE: self._ite,
        }

    @property
    def solver(self):
        """The underlying Boolean solver."""
        return self._solver

    # ------------------------------------------------------------------
    # public interface

    def apply(self, tag, *args):
        """Build operation ``tag`` over ``args`` and return its result."""
        op = self._ops.get(tag)
        if op is not None:
            return op(*args)
        return self._solver.apply(tag, *(_base(a) for a in args))

    def assertion(self, value) -> None:
        """Require the Boolean ``value`` permanently."""
        self._solver.assertion(_base(value))

    def assumption(self, value) -> None:
        """Require the Boolean ``value`` for the next solve only."""
        self._solver.assumption(_base(value))

    def solve(self) -> bool:
        """Solve the constraints collected so far."""
        return self._solver.solve()

    def read_value(self, value) -> ResultWrapper:
        """Read a Boolean or a bit-vector from the last model."""
        if isinstance(value, tuple):
            return ResultWrapper(
                [self._solver.read_value(bit).tribool() for bit in value]
            )
        return self._solver.read_value(value)

    def bv_width(self, value) -> int:
        """Width of a bit-vector result, 0 for a Boolean."""
        return len(value) if isinstance(value, tuple) else 0

    # ------------------------------------------------------------------
    # building blocks

    def _gate(self, tag, *args):
        return self._solver.apply(tag, *args)

    def _false(self):
        return self._gate(PredTag.FALSE)

    def _true(self):
        return self._gate(PredTag.TRUE)

    def _var(self, width):
        return tuple(self._gate(PredTag.VAR) for _ in range(width))

    def _bitwise(self, tag) -> Callable[[Any, Any], tuple]:
        def build(lhs, rhs):
            a, b = _pair(lhs, rhs)
            return tuple(self._gate(tag, x, y) for x, y in zip(a, b))

        return build

    def _not(self, operand):
        return tuple(self._gate(PredTag.NOT, x) for x in _bits(operand))

    def _uge(self, lhs, rhs):
        return comparators.unsigned_greater_equal(self._solver, *_pair(lhs, rhs))

    def _shift_left(self, bits: tuple, amount: int) -> tuple:
        if amount == 0:
            return bits
        k = min(amount, len(bits))
        return (self._false(),) * k + bits[: len(bits) - k]

    @staticmethod
    def _shift_right(bits: tuple, amount: int, fill) -> tuple:
        if amount == 0:
            return bits
        k = min(amount, len(bits))
        return bits[k:] + (fill,) * k

    # ------------------------------------------------------------------
    # arithmetic

    def _add(self, lhs, rhs):
        a, b = _pair(lhs, rhs)
        carry = self._false()
        out = []
        for x, y in zip(a, b):
            partial = self._gate(PredTag.XOR, x, y)
            out.append(self._gate(PredTag.XOR, partial, carry))
            both = self._gate(PredTag.AND, x, y)
            either = self._gate(PredTag.OR, x, y)
            carried = self._gate(PredTag.AND, carry, either)
            carry = self._gate(PredTag.OR, both, carried)
        return tuple(out)

    def _mul(self, lhs, rhs):
        a = _bits(lhs)
        result = (self._false(),) * len(a)
        for position, bit in enumerate(a):
            row = self._sign_extend(len(a) - 1, (bit,))
            row = self._bitwise(PredTag.AND)(rhs, row)
            row = self._shift_left(row, position)
            result = self._add(result, row)
        return result

    def _neg(self, operand):
        a = _bits(operand)
        if not a:
            return a
        one = (self._true(),) + (self._false(),) * (len(a) - 1)
        return self._add(self._not(a), one)

    def _sub(self, lhs, rhs):
        return self._add(lhs, self._neg(rhs))

    def _udivrem(self, lhs, rhs, quotient: bool):
        a, b = _pair(lhs, rhs)
        if not a:
            raise ValueError("cannot divide empty bit-vectors")
        width = len(a)
        zero, one = self._false(), self._true()
        original = b

        divisor = b
        for _ in range(width):
            divisor = self._ite(b[-1], divisor, self._shift_left(b, 1))
            b = divisor

        result = (zero,) * width
        checker = zero
        dividend = a
        for step in range(1, width + 1):
            before = divisor
            do_divide = self._uge(dividend, divisor)
            reached = self._equal(before, original)
            dividend = self._ite(do_divide, self._sub(dividend, divisor), dividend)
            divisor = self._ite(reached, divisor, self._shift_right(divisor, 1, zero))
            do_divide = self._ite(checker, zero, do_divide)
            pos = width - step
            result = result[:pos] + (do_divide,) + result[pos + 1:]
            result = self._ite(checker, self._shift_right(result, 1, zero), result)
            checker = self._ite(reached, one, checker)

        return result if quotient else dividend

    def _sdivrem(self, lhs, rhs, quotient: bool):
        a, b = _pair(lhs, rhs)
        if not a:
            raise ValueError("cannot divide empty bit-vectors")
        a_abs = self._ite(a[-1], self._neg(a), a)
        b_abs = self._ite(b[-1], self._neg(b), b)
        result = self._udivrem(a_abs, b_abs, quotient)
        signs_differ = self._gate(PredTag.XOR, a[-1], b[-1])
        return self._ite(signs_differ, self._neg(result), result)

    # ------------------------------------------------------------------
    # width changes

    def _zero_extend(self, count, operand):
        return _bits(operand) + (self._false(),) * count

    def _sign_extend(self, count, operand):
        a = _bits(operand)
        if not a:
            raise ValueError("cannot sign-extend an empty bit-vector")
        return a + (a[-1],) * count

    def _extract(self, upper, lower, operand):
        bits = _bits(operand)
        if not 0 <= lower <= upper < len(bits):
            raise ValueError(
                f"cannot extract bits {upper}..{lower} of a {len(bits)}-bit vector"
            )
        return bits[lower: upper + 1]

    # ------------------------------------------------------------------
    # constants

    def _from_int(self, value: int, width: int) -> tuple:
        one, zero = self._true(), self._false()
        return tuple(one if (value >> i) & 1 else zero for i in range(width))

    def _uint(self, value, width):
        return self._from_int(value & _UINT64_MASK, width)

    def _sint(self, value, width):
        return self._from_int(value, width)

    def _bin(self, text):
        one, zero = self._true(), self._false()
        return tuple(one if c == "1" else zero for c in reversed(text))

    def _hex(self, text):
        one, zero = self._true(), self._false()
        bits: list = []
        for c in reversed(text):
            digit = _HEX_DIGITS.find(c.lower())
            if digit < 0:
                continue
            bits.extend(one if (digit >> k) & 1 else zero for k in range(4))
        bits.extend([zero] * (4 * len(text) - len(bits)))
        return tuple(bits)

    # ------------------------------------------------------------------
    # shifts by a bit-vector amount

    def _shift_by(self, operand, amount, initial, shift):
        a = _bits(operand)
        result = initial
        for i in range(len(a)):
            index = self._uint(i, len(a))
            result = self._ite(self._equal(amount, index), shift(a, i), result)
        return result

    def _shl(self, operand, amount):
        a = _bits(operand)
        return self._shift_by(a, amount, (self._false(),) * len(a), self._shift_left)

    def _shr(self, operand, amount):
        a = _bits(operand)
        zero = self._false()
        return self._shift_by(
            a, amount, (zero,) * len(a), lambda bits, i: self._shift_right(bits, i, zero)
        )

    def _ashr(self, operand, amount):
        a = _bits(operand)
        if not a:
            raise ValueError("cannot shift an empty bit-vector")
        sign = a[-1]
        return self._shift_by(
            a, amount, (sign,) * len(a), lambda bits, i: self._shift_right(bits, i, sign)
        )

    # ------------------------------------------------------------------
    # polymorphic operations

    def _equal(self, lhs, rhs):
        if isinstance(lhs, tuple) and isinstance(rhs, tuple):
            a, b = _pair(lhs, rhs)
            result = self._true()
            for x, y in zip(a, b):
                result = self._gate(PredTag.AND, self._gate(PredTag.EQUAL, x, y), result)
            return result
        return self._gate(PredTag.EQUAL, _base(lhs), _base(rhs))

    def _nequal(self, lhs, rhs):
        if isinstance(lhs, tuple) and isinstance(rhs, tuple):
            a, b = _pair(lhs, rhs)
            result = self._false()
            for x, y in zip(a, b):
                result = self._gate(PredTag.OR, self._gate(PredTag.NEQUAL, x, y), result)
            return result
        return self._gate(PredTag.NEQUAL, _base(lhs), _base(rhs))

    def _ite(self, cond, then, otherwise):
        c = _base(cond)
        if isinstance(then, tuple) and isinstance(otherwise, tuple):
            a, b = _pair(then, otherwise)
            return tuple(self._gate(PredTag.ITE, c, x, y) for x, y in zip(a, b))
        return self._gate(PredTag.ITE, c, _base(then), _base(otherwise))