"""Expression trees for the Boolean, bit-vector and array logics.

Expressions are immutable trees of :class:`Expr` nodes. Every node carries
an operation tag and its operands; variables also carry a unique id and
their widths. Operands need not be expressions themselves: any value a
context knows how to evaluate may appear as an operand.
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass
from typing import Any, Optional

from .tags import ArrayTag, BVTag, PredTag

_UINT64_MASK = (1 << 64) - 1

_id_counter = itertools.count(1)
_id_lock = threading.Lock()


def new_var_id() -> int:
    """Return a fresh, process-wide unique variable id (never 0)."""
    with _id_lock:
        return next(_id_counter)


@dataclass(frozen=True)
class Expr:
    """A node of an expression tree.

    Two variables are equal when their ids and widths match; other
    expressions are equal when their tags and operands are.
    """

    tag: Any
    args: tuple = ()
    id: Optional[int] = None
    width: Optional[int] = None
    elem_width: Optional[int] = None
    index_width: Optional[int] = None

    @property
    def is_variable(self) -> bool:
        """True for Boolean, bit-vector and array variables."""
        return self.id is not None

    def __str__(self) -> str:
        if self.tag is BVTag.VAR:
            return f"{self.tag}[{self.id},{self.width}]"
        if self.tag is ArrayTag.ARRAY_VAR:
            return f"{self.tag}[{self.id},{self.elem_width},{self.index_width}]"
        if self.is_variable:
            return f"{self.tag}[{self.id}]"
        if not self.args:
            return str(self.tag)
        return f"{self.tag}({', '.join(str(a) for a in self.args)})"


TRUE = Expr(PredTag.TRUE)
FALSE = Expr(PredTag.FALSE)
BIT0 = Expr(BVTag.BIT0)
BIT1 = Expr(BVTag.BIT1)


def _check_width(name: str, value, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}")
    return value


# ----------------------------------------------------------------------
# variables

def new_variable() -> Expr:
    """Create a fresh Boolean variable."""
    return Expr(PredTag.VAR, id=new_var_id())


def new_bitvector(width=1) -> Expr:
    """Create a fresh bit-vector variable of ``width`` bits."""
    _check_width("width", width, 1)
    return Expr(BVTag.VAR, id=new_var_id(), width=width)


def new_array(elem_width=1, index_width=1) -> Expr:
    """Create a fresh array from ``index_width`` to ``elem_width`` bits."""
    _check_width("elem_width", elem_width, 1)
    _check_width("index_width", index_width, 1)
    return Expr(
        ArrayTag.ARRAY_VAR,
        id=new_var_id(),
        elem_width=elem_width,
        index_width=index_width,
    )


# ----------------------------------------------------------------------
# core logic

def equal(lhs, rhs) -> Expr:
    """Equality of two Booleans or bit-vectors."""
    return Expr(PredTag.EQUAL, (lhs, rhs))


def nequal(lhs, rhs) -> Expr:
    """Inequality of two operands."""
    return Expr(PredTag.NEQUAL, (lhs, rhs))


def distinct(lhs, rhs) -> Expr:
    """Distinctness of two operands."""
    return Expr(PredTag.DISTINCT, (lhs, rhs))


def implies(lhs, rhs) -> Expr:
    """Logical implication."""
    return Expr(PredTag.IMPLIES, (lhs, rhs))


def and_(lhs, rhs) -> Expr:
    """Logical conjunction."""
    return Expr(PredTag.AND, (lhs, rhs))


def nand(lhs, rhs) -> Expr:
    """Negated conjunction."""
    return Expr(PredTag.NAND, (lhs, rhs))


def or_(lhs, rhs) -> Expr:
    """Logical disjunction."""
    return Expr(PredTag.OR, (lhs, rhs))


def nor(lhs, rhs) -> Expr:
    """Negated disjunction."""
    return Expr(PredTag.NOR, (lhs, rhs))


def xor(lhs, rhs) -> Expr:
    """Exclusive or."""
    return Expr(PredTag.XOR, (lhs, rhs))


def xnor(lhs, rhs) -> Expr:
    """Negated exclusive or."""
    return Expr(PredTag.XNOR, (lhs, rhs))


def not_(operand) -> Expr:
    """Logical negation."""
    return Expr(PredTag.NOT, (operand,))


def ite(cond, then, otherwise) -> Expr:
    """If-then-else over Booleans or bit-vectors."""
    return Expr(PredTag.ITE, (cond, then, otherwise))


# ----------------------------------------------------------------------
# bit-vector logic

def bvnot(operand) -> Expr:
    """Bitwise negation."""
    return Expr(BVTag.BVNOT, (operand,))


def bvneg(operand) -> Expr:
    """Two's complement negation."""
    return Expr(BVTag.BVNEG, (operand,))


def bvand(lhs, rhs) -> Expr:
    """Bitwise and."""
    return Expr(BVTag.BVAND, (lhs, rhs))


def bvnand(lhs, rhs) -> Expr:
    """Bitwise nand."""
    return Expr(BVTag.BVNAND, (lhs, rhs))


def bvor(lhs, rhs) -> Expr:
    """Bitwise or."""
    return Expr(BVTag.BVOR, (lhs, rhs))


def bvnor(lhs, rhs) -> Expr:
    """Bitwise nor."""
    return Expr(BVTag.BVNOR, (lhs, rhs))


def bvxor(lhs, rhs) -> Expr:
    """Bitwise exclusive or."""
    return Expr(BVTag.BVXOR, (lhs, rhs))


def bvxnor(lhs, rhs) -> Expr:
    """Bitwise exclusive nor."""
    return Expr(BVTag.BVXNOR, (lhs, rhs))


def bvcomp(lhs, rhs) -> Expr:
    """One-bit vector that is 1 when equal."""
    return Expr(BVTag.BVCOMP, (lhs, rhs))


def bvadd(lhs, rhs) -> Expr:
    """Modular addition."""
    return Expr(BVTag.BVADD, (lhs, rhs))


def bvmul(lhs, rhs) -> Expr:
    """Modular multiplication."""
    return Expr(BVTag.BVMUL, (lhs, rhs))


def bvsub(lhs, rhs) -> Expr:
    """Modular subtraction."""
    return Expr(BVTag.BVSUB, (lhs, rhs))


def bvudiv(lhs, rhs) -> Expr:
    """Unsigned division."""
    return Expr(BVTag.BVUDIV, (lhs, rhs))


def bvurem(lhs, rhs) -> Expr:
    """Unsigned remainder."""
    return Expr(BVTag.BVUREM, (lhs, rhs))


def bvsdiv(lhs, rhs) -> Expr:
    """Signed division."""
    return Expr(BVTag.BVSDIV, (lhs, rhs))


def bvsrem(lhs, rhs) -> Expr:
    """Signed remainder."""
    return Expr(BVTag.BVSREM, (lhs, rhs))


def bvslt(lhs, rhs) -> Expr:
    """Signed less than."""
    return Expr(BVTag.BVSLT, (lhs, rhs))


def bvsgt(lhs, rhs) -> Expr:
    """Signed greater than."""
    return Expr(BVTag.BVSGT, (lhs, rhs))


def bvsle(lhs, rhs) -> Expr:
    """Signed less or equal."""
    return Expr(BVTag.BVSLE, (lhs, rhs))


def bvsge(lhs, rhs) -> Expr:
    """Signed greater or equal."""
    return Expr(BVTag.BVSGE, (lhs, rhs))


def bvult(lhs, rhs) -> Expr:
    """Unsigned less than."""
    return Expr(BVTag.BVULT, (lhs, rhs))


def bvugt(lhs, rhs) -> Expr:
    """Unsigned greater than."""
    return Expr(BVTag.BVUGT, (lhs, rhs))


def bvule(lhs, rhs) -> Expr:
    """Unsigned less or equal."""
    return Expr(BVTag.BVULE, (lhs, rhs))


def bvuge(lhs, rhs) -> Expr:
    """Unsigned greater or equal."""
    return Expr(BVTag.BVUGE, (lhs, rhs))


def bvshl(lhs, rhs) -> Expr:
    """Shift left by a bit-vector amount."""
    return Expr(BVTag.BVSHL, (lhs, rhs))


def bvshr(lhs, rhs) -> Expr:
    """Logical shift right."""
    return Expr(BVTag.BVSHR, (lhs, rhs))


def bvashr(lhs, rhs) -> Expr:
    """Arithmetic shift right."""
    return Expr(BVTag.BVASHR, (lhs, rhs))


def concat(lhs, rhs) -> Expr:
    """Concatenation; ``lhs`` becomes the high part."""
    return Expr(BVTag.CONCAT, (lhs, rhs))


def extract(upper, lower, operand) -> Expr:
    """Bits ``upper`` down to ``lower`` (inclusive) of ``operand``."""
    _check_width("lower", lower, 0)
    _check_width("upper", upper, 0)
    if upper < lower:
        raise ValueError("upper bit index must not be below the lower one")
    return Expr(BVTag.EXTRACT, (upper, lower, operand))


def zero_extend(count, operand) -> Expr:
    """Widen ``operand`` by ``count`` zero bits."""
    _check_width("count", count, 0)
    return Expr(BVTag.ZERO_EXTEND, (count, operand))


def sign_extend(count, operand) -> Expr:
    """Widen ``operand`` by ``count`` copies of its sign bit."""
    _check_width("count", count, 0)
    return Expr(BVTag.SIGN_EXTEND, (count, operand))


def bvuint(value, width) -> Expr:
    """Unsigned constant; the value is taken modulo 2**64."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("value must be an integer")
    _check_width("width", width, 1)
    return Expr(BVTag.BVUINT, (value & _UINT64_MASK, width))


def bvsint(value, width) -> Expr:
    """Signed constant in two's complement."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("value must be an integer")
    _check_width("width", width, 1)
    return Expr(BVTag.BVSINT, (value, width))


def bvint(value, width) -> Expr:
    """Signed constant for negative values, unsigned otherwise."""
    if isinstance(value, int) and not isinstance(value, bool) and value < 0:
        return bvsint(value, width)
    return bvuint(value, width)


def bvbin(value) -> Expr:
    """Constant from a binary string, most significant bit first."""
    if not isinstance(value, str):
        raise TypeError("a binary constant must be a string")
    return Expr(BVTag.BVBIN, (value,))


def bvhex(value) -> Expr:
    """Constant from a hexadecimal string, most significant digit first."""
    if not isinstance(value, str):
        raise TypeError("a hexadecimal constant must be a string")
    return Expr(BVTag.BVHEX, (value,))


# ----------------------------------------------------------------------
# array logic

def select(array, index) -> Expr:
    """Read the element of ``array`` at ``index``."""
    return Expr(ArrayTag.SELECT, (array, index))


def store(array, index, value) -> Expr:
    """An array equal to ``array`` except that ``index`` maps to ``value``."""
    return Expr(ArrayTag.STORE, (array, index, value))