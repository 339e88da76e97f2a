"""Operation tags of the supported logics."""

from __future__ import annotations

from enum import Enum


class Attribute(Enum):
    """How an operation takes its operands."""

    IGNORE = "ignore"
    CONSTANT = "constant"
    UNARY = "unary"
    BINARY = "binary"
    TERNARY = "ternary"


class _Tag(Enum):
    """Base of all tag enumerations: a printable name and an attribute."""

    def __init__(self, label, attribute):
        self.label = label
        self.attribute = attribute

    def __str__(self) -> str:
        return self.label


_A = Attribute


class PredTag(_Tag):
    """Tags of the core Boolean logic."""

    VAR = ("var", _A.IGNORE)
    TRUE = ("true", _A.CONSTANT)
    FALSE = ("false", _A.CONSTANT)
    NOT = ("not", _A.UNARY)
    EQUAL = ("equal", _A.BINARY)
    NEQUAL = ("nequal", _A.BINARY)
    DISTINCT = ("distinct", _A.BINARY)
    IMPLIES = ("implies", _A.BINARY)
    AND = ("and", _A.BINARY)
    NAND = ("nand", _A.BINARY)
    OR = ("or", _A.BINARY)
    NOR = ("nor", _A.BINARY)
    XOR = ("xor", _A.BINARY)
    XNOR = ("xnor", _A.BINARY)
    ITE = ("ite", _A.TERNARY)


class BVTag(_Tag):
    """Tags of the quantifier-free bit-vector logic."""

    BIT0 = ("bit0", _A.CONSTANT)
    BIT1 = ("bit1", _A.CONSTANT)
    BVNOT = ("bvnot", _A.UNARY)
    BVNEG = ("bvneg", _A.UNARY)
    BVAND = ("bvand", _A.BINARY)
    BVNAND = ("bvnand", _A.BINARY)
    BVOR = ("bvor", _A.BINARY)
    BVNOR = ("bvnor", _A.BINARY)
    BVXOR = ("bvxor", _A.BINARY)
    BVXNOR = ("bvxnor", _A.BINARY)
    BVCOMP = ("bvcomp", _A.BINARY)
    BVADD = ("bvadd", _A.BINARY)
    BVMUL = ("bvmul", _A.BINARY)
    BVSUB = ("bvsub", _A.BINARY)
    BVSDIV = ("bvsdiv", _A.BINARY)
    BVSREM = ("bvsrem", _A.BINARY)
    BVUDIV = ("bvudiv", _A.BINARY)
    BVUREM = ("bvurem", _A.BINARY)
    BVUINT = ("bvuint", _A.CONSTANT)
    BVSINT = ("bvsint", _A.CONSTANT)
    BVBIN = ("bvbin", _A.CONSTANT)
    BVHEX = ("bvhex", _A.CONSTANT)
    CONCAT = ("concat", _A.BINARY)
    EXTRACT = ("extract", _A.UNARY)
    REPEAT = ("repeat", _A.IGNORE)
    ZERO_EXTEND = ("zero_extend", _A.UNARY)
    SIGN_EXTEND = ("sign_extend", _A.UNARY)
    BVSHL = ("bvshl", _A.BINARY)
    BVSHR = ("bvshr", _A.BINARY)
    BVASHR = ("bvashr", _A.BINARY)
    BVSLT = ("bvslt", _A.BINARY)
    BVSGT = ("bvsgt", _A.BINARY)
    BVSLE = ("bvsle", _A.BINARY)
    BVSGE = ("bvsge", _A.BINARY)
    BVULT = ("bvult", _A.BINARY)
    BVUGT = ("bvugt", _A.BINARY)
    BVULE = ("bvule", _A.BINARY)
    BVUGE = ("bvuge", _A.BINARY)
    VAR = ("bv_var", _A.IGNORE)


class ArrayTag(_Tag):
    """Tags of the array-over-bit-vectors logic."""

    ARRAY_VAR = ("array_var", _A.IGNORE)
    SELECT = ("select", _A.BINARY)
    STORE = ("store", _A.TERNARY)


class CardTag(_Tag):
    """Tags of cardinality constraints."""

    EQ = ("eq", _A.IGNORE)
    LT = ("lt", _A.IGNORE)
    LE = ("le", _A.IGNORE)
    GT = ("gt", _A.IGNORE)
    GE = ("ge", _A.IGNORE)


_BV_TAG_ORDER = (
    BVTag.BIT0,
    BVTag.BIT1,
    BVTag.BVNOT,
    BVTag.BVNEG,
    BVTag.BVAND,
    BVTag.BVNAND,
    BVTag.BVOR,
    BVTag.BVNOR,
    BVTag.BVXOR,
    BVTag.BVXNOR,
    BVTag.BVCOMP,
    BVTag.BVADD,
    BVTag.BVMUL,
    BVTag.BVSUB,
    BVTag.BVSREM,
    BVTag.BVSDIV,
    BVTag.BVUREM,
    BVTag.BVUDIV,
    BVTag.BVUINT,
    BVTag.BVSINT,
    BVTag.BVBIN,
    BVTag.BVHEX,
    BVTag.BVSLT,
    BVTag.BVSGT,
    BVTag.BVSLE,
    BVTag.BVSGE,
    BVTag.BVULT,
    BVTag.BVUGT,
    BVTag.BVULE,
    BVTag.BVUGE,
    BVTag.CONCAT,
    BVTag.EXTRACT,
    BVTag.ZERO_EXTEND,
    BVTag.SIGN_EXTEND,
    BVTag.BVSHL,
    BVTag.BVSHR,
    BVTag.BVASHR,
    BVTag.VAR,
)

_ALL_TAGS = (*PredTag, *_BV_TAG_ORDER, *ArrayTag, *CardTag)


def attribute_of(tag) -> Attribute:
    """Return how the operation named by ``tag`` takes its operands."""
    if not isinstance(tag, _Tag):
        raise TypeError(f"not an operation tag: {tag!r}")
    return tag.attribute


def all_tags() -> tuple:
    """Every tag an expression may carry, logic by logic."""
    return _ALL_TAGS