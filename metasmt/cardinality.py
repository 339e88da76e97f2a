"""Cardinality constraints over Boolean inputs.

A cardinality constraint compares the number of true inputs with a
constant. The inputs are summed with a tree of full and half adders
whose sum bits are tied to a fresh bit-vector, which is then compared
with the constant. :class:`Cardinality` objects can be passed straight
to :meth:`Context.evaluate`.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from .context import register_evaluator
from .expr import (
    BIT0,
    BIT1,
    FALSE,
    TRUE,
    and_,
    bvuge,
    bvugt,
    bvuint,
    bvule,
    bvult,
    equal,
    extract,
    ite,
    new_bitvector,
    not_,
    or_,
    xor,
)
from .tags import CardTag

_ENCODINGS = frozenset({"", "adder"})

_COMPARISONS = {
    CardTag.EQ: equal,
    CardTag.LE: bvule,
    CardTag.LT: bvult,
    CardTag.GT: bvugt,
    CardTag.GE: bvuge,
}

_DESCRIPTIONS = {
    CardTag.EQ: "Equal",
    CardTag.LE: "Lower equal",
    CardTag.LT: "Lower than",
    CardTag.GT: "Greater than",
    CardTag.GE: "Greater equal",
}


@dataclass(frozen=True)
class Cardinality:
    """The constraint "number of true ``ps`` <tag> ``count``"."""

    tag: CardTag
    ps: tuple
    count: int
    encoding: str = ""


def cardinality(tag, ps, count, encoding="") -> Cardinality:
    """Build a cardinality constraint of kind ``tag`` over ``ps``."""
    if not isinstance(tag, CardTag):
        raise TypeError(f"not a cardinality tag: {tag!r}")
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError("count must be an integer")
    if count < 0:
        raise ValueError("count must not be negative")
    return Cardinality(tag, tuple(ps), count, encoding)


def cardinality_any(ctx, ps):
    """Return a bit-vector holding the number of true values among ``ps``."""
    if not ps:
        raise ValueError("counting requires at least one input variable")
    current = deque(ctx.evaluate(p) for p in ps)
    carries: deque = deque()
    sums = []

    while current:
        while len(current) >= 3:
            x, y, z = current.popleft(), current.popleft(), current.popleft()
            current.append(ctx.evaluate(xor(xor(x, y), z)))
            carries.append(ctx.evaluate(ite(x, or_(y, z), and_(y, z))))
        if len(current) == 2:
            x, y = current.popleft(), current.popleft()
            current.append(ctx.evaluate(xor(x, y)))
            carries.append(ctx.evaluate(and_(x, y)))
        sums.append(current.popleft())
        current, carries = carries, current

    total = new_bitvector(len(sums))
    for position, bit in enumerate(sums):
        ctx.assertion(
            equal(extract(position, position, total), ite(bit, BIT1, BIT0))
        )
    return ctx.evaluate(total)


def encode(ctx, constraint):
    """Evaluate a :class:`Cardinality` constraint with the adder encoding."""
    if not isinstance(constraint, Cardinality):
        raise TypeError("expected a cardinality constraint")
    if constraint.encoding not in _ENCODINGS:
        raise ValueError(f"unknown cardinality encoding: {constraint.encoding!r}")
    comparison = _COMPARISONS.get(constraint.tag)
    if comparison is None:
        raise ValueError(f"unknown cardinality tag: {constraint.tag!r}")
    if not constraint.ps:
        raise ValueError(
            f"{_DESCRIPTIONS[constraint.tag]} cardinality constraint requires "
            "at least one input variable"
        )
    width = len(constraint.ps).bit_length()
    total = cardinality_any(ctx, constraint.ps)
    return ctx.evaluate(comparison(total, bvuint(constraint.count, width)))


register_evaluator(Cardinality, encode)


def one_hot(ctx, ps):
    """True exactly when one of ``ps`` is true."""
    ps = list(ps)
    if not ps:
        raise ValueError("One hot encoding requires at least one input variable")
    if len(ps) == 1:
        return ctx.evaluate(equal(ps[0], TRUE))

    zero_rail = ctx.evaluate(ps[0])
    one_rail = ctx.evaluate(not_(ps[0]))
    for p in ps[1:-1]:
        zero_rail = ctx.evaluate(ite(p, one_rail, zero_rail))
        one_rail = ctx.evaluate(ite(p, FALSE, one_rail))
    return ctx.evaluate(ite(ps[-1], one_rail, zero_rail))


def cardinality_eq(ctx, ps, count):
    """Exactly ``count`` of ``ps`` are true."""
    return ctx.evaluate(cardinality(CardTag.EQ, ps, count))


def cardinality_geq(ctx, ps, count):
    """At least ``count`` of ``ps`` are true."""
    return ctx.evaluate(cardinality(CardTag.GE, ps, count))


def cardinality_leq(ctx, ps, count):
    """At most ``count`` of ``ps`` are true."""
    return ctx.evaluate(cardinality(CardTag.LE, ps, count))


def cardinality_gt(ctx, ps, count):
    """More than ``count`` of ``ps`` are true."""
    return ctx.evaluate(cardinality(CardTag.GT, ps, count))


def cardinality_lt(ctx, ps, count):
    """Fewer than ``count`` of ``ps`` are true."""
    return ctx.evaluate(cardinality(CardTag.LT, ps, count))