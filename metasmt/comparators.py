"""Ripple comparators of bit-vectors built from single-bit gates.

Every function takes ``gates``, an object whose ``apply(tag, *args)``
builds one Boolean operation (such as a clause encoder), and two
equally wide bit sequences, least significant bit first. It returns
the handle ``gates`` gives back for the result of the comparison.

The comparison walks from the most significant bit down. It keeps a
running "all higher bits equal" signal and ORs in, bit by bit, the
case that decides the comparison at that position. Signed comparisons
treat the top bit the other way round from the rest.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .tags import PredTag

_Gate = Callable[[Any, Any, Any], Any]


def _less_bit(gates, x, y):
    """x is 0 and y is 1."""
    return gates.apply(PredTag.AND, gates.apply(PredTag.NOT, x), y)


def _greater_bit(gates, x, y):
    """x is 1 and y is 0."""
    return gates.apply(PredTag.AND, x, gates.apply(PredTag.NOT, y))


def _compare(
    gates,
    a: Sequence,
    b: Sequence,
    head: _Gate,
    body: _Gate,
    inclusive: bool,
):
    a = list(a)
    b = list(b)
    if len(a) != len(b):
        raise ValueError(
            f"bit-vectors differ in width: {len(a)} and {len(b)}"
        )
    if not a:
        raise ValueError("cannot compare empty bit-vectors")

    top_a, top_b = a[-1], b[-1]
    result = head(gates, top_a, top_b)
    equal = gates.apply(PredTag.XNOR, top_a, top_b)

    for x, y in zip(reversed(a[:-1]), reversed(b[:-1])):
        decides = body(gates, x, y)
        now = gates.apply(PredTag.AND, equal, decides)
        bit_equal = gates.apply(PredTag.XNOR, x, y)
        equal = gates.apply(PredTag.AND, bit_equal, equal)
        result = gates.apply(PredTag.OR, result, now)

    if inclusive:
        result = gates.apply(PredTag.OR, result, equal)
    return result


def unsigned_less(gates, a, b):
    """``a < b`` as unsigned numbers."""
    return _compare(gates, a, b, _less_bit, _less_bit, False)


def unsigned_greater(gates, a, b):
    """``a > b`` as unsigned numbers."""
    return _compare(gates, a, b, _greater_bit, _greater_bit, False)


def signed_less(gates, a, b):
    """``a < b`` as two's complement numbers."""
    return _compare(gates, a, b, _greater_bit, _less_bit, False)


def signed_greater(gates, a, b):
    """``a > b`` as two's complement numbers."""
    return _compare(gates, a, b, _less_bit, _greater_bit, False)


def unsigned_less_equal(gates, a, b):
    """``a <= b`` as unsigned numbers."""
    return _compare(gates, a, b, _less_bit, _less_bit, True)


def unsigned_greater_equal(gates, a, b):
    """``a >= b`` as unsigned numbers."""
    return _compare(gates, a, b, _greater_bit, _greater_bit, True)


def signed_less_equal(gates, a, b):
    """``a <= b`` as two's complement numbers."""
    return _compare(gates, a, b, _greater_bit, _less_bit, True)


def signed_greater_equal(gates, a, b):
    """``a >= b`` as two's complement numbers."""
    return _compare(gates, a, b, _less_bit, _greater_bit, True)