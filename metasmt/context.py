"""A solving context that evaluates expression trees on a backend.

Expressions built with :mod:`metasmt.expr` are turned into backend
results. Other values are handled by evaluators registered per type
with :func:`register_evaluator`; ``bool`` is registered by default.
Values of any other type are taken to be backend results already and
are returned unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .bitblast import BitBlast
from .expr import FALSE, TRUE, Expr
from .result import ResultWrapper
from .tags import ArrayTag, BVTag

Evaluator = Callable[["Context", Any], Any]

_evaluators: dict[type, Evaluator] = {}

_CONSTANT_TAGS = frozenset({BVTag.BVUINT, BVTag.BVSINT, BVTag.BVBIN, BVTag.BVHEX})
_PARAMETER_TAGS = frozenset({BVTag.EXTRACT, BVTag.ZERO_EXTEND, BVTag.SIGN_EXTEND})


def register_evaluator(kind, func) -> Optional[Evaluator]:
    """Evaluate values of type ``kind`` with ``func(ctx, value)``.

    Passing ``None`` as ``func`` removes the evaluator. Returns the
    evaluator that was registered before.
    """
    if func is None:
        return _evaluators.pop(kind, None)
    previous = _evaluators.get(kind)
    _evaluators[kind] = func
    return previous


def _evaluate_bool(ctx: "Context", value: bool):
    return ctx.evaluate(TRUE if value else FALSE)


register_evaluator(bool, _evaluate_bool)


def _find_evaluator(value) -> Optional[Evaluator]:
    for kind in type(value).__mro__:
        func = _evaluators.get(kind)
        if func is not None:
            return func
    return None


class Context:
    """Evaluates expressions on a backend and solves them.

    Each variable is created on the backend once; later uses of the
    same variable yield the same result.
    """

    def __init__(self, backend=None):
        self.backend = backend if backend is not None else BitBlast()
        self._variables: dict[Expr, Any] = {}

    def evaluate(self, expr):
        """Return the backend result for ``expr``."""
        if isinstance(expr, Expr):
            return self._evaluate_expr(expr)
        func = _find_evaluator(expr)
        if func is not None:
            return func(self, expr)
        return expr

    def assertion(self, expr) -> None:
        """Require ``expr`` in every later solve."""
        self.backend.assertion(self.evaluate(expr))

    def assumption(self, expr) -> None:
        """Require ``expr`` for the next solve only."""
        self.backend.assumption(self.evaluate(expr))

    def solve(self) -> bool:
        """Decide whether the constraints are satisfiable."""
        return self.backend.solve()

    def read_value(self, expr) -> ResultWrapper:
        """Value of ``expr`` in the model of the last solve."""
        return self.backend.read_value(self.evaluate(expr))

    def _evaluate_expr(self, expr: Expr):
        if expr.is_variable:
            if expr not in self._variables:
                self._variables[expr] = self._new_variable(expr)
            return self._variables[expr]
        tag = expr.tag
        if tag in _CONSTANT_TAGS:
            return self.backend.apply(tag, *expr.args)
        if tag in _PARAMETER_TAGS:
            *params, operand = expr.args
            return self.backend.apply(tag, *params, self.evaluate(operand))
        return self.backend.apply(tag, *(self.evaluate(arg) for arg in expr.args))

    def _new_variable(self, expr: Expr):
        if expr.tag is BVTag.VAR:
            return self.backend.apply(expr.tag, expr.width)
        if expr.tag is ArrayTag.ARRAY_VAR:
            return self.backend.apply(expr.tag, expr.elem_width, expr.index_width)
        return self.backend.apply(expr.tag)