"""Tseitin encoding of Boolean operations into clauses of a SAT solver."""

from __future__ import annotations

from typing import Callable

from .expr import new_var_id
from .result import ResultWrapper
from .sat import SatSolver
from .tags import PredTag


class ClauseEncoder:
    """Turns Boolean operations into literals constrained by clauses.

    Each gate gets a fresh output literal tied to its inputs. Constants
    map onto a literal asserted true at construction. Operations this
    encoder does not know yield the true literal.
    """

    def __init__(self, solver=None):
        self._solver = solver if solver is not None else SatSolver()
        self._true = new_var_id()
        self._solver.assertion(self._true)
        self._handlers: dict[PredTag, tuple[int, Callable[..., int]]] = {
            PredTag.AND: (2, self._and),
            PredTag.OR: (2, self._or),
            PredTag.NOR: (2, self._nor),
            PredTag.NAND: (2, self._nand),
            PredTag.XNOR: (2, self._xnor),
            PredTag.XOR: (2, self._xor),
            PredTag.EQUAL: (2, self._xnor),
            PredTag.NEQUAL: (2, self._xor),
            PredTag.DISTINCT: (2, self._xor),
            PredTag.IMPLIES: (2, self._implies),
            PredTag.NOT: (1, lambda lit: -lit),
            PredTag.ITE: (3, self._ite),
        }

    @property
    def true_lit(self) -> int:
        """The literal that is always true."""
        return self._true

    @property
    def solver(self):
        """The underlying SAT solver."""
        return self._solver

    def apply(self, tag, *args) -> int:
        """Return the literal for operation ``tag`` applied to ``args``."""
        if tag is PredTag.VAR:
            return new_var_id()
        if tag is PredTag.TRUE:
            return self._true
        if tag is PredTag.FALSE:
            return -self._true
        handler = self._handlers.get(tag)
        if handler is None or handler[0] != len(args):
            return self._true
        return handler[1](*args)

    def assertion(self, lit) -> None:
        """Require ``lit`` permanently."""
        self._solver.assertion(lit)

    def assumption(self, lit) -> None:
        """Require ``lit`` for the next solve only."""
        self._solver.assumption(lit)

    def solve(self) -> bool:
        """Solve the collected clauses."""
        return self._solver.solve()

    def read_value(self, lit) -> ResultWrapper:
        """Value of ``lit`` in the last model."""
        return self._solver.read_value(lit)

    # ------------------------------------------------------------------
    # gates

    def _clauses(self, *clauses) -> None:
        for cls in clauses:
            self._solver.clause(list(cls))

    def _and(self, lhs: int, rhs: int) -> int:
        out = new_var_id()
        self._clauses((-lhs, -rhs, out), (rhs, -out), (lhs, -out))
        return out

    def _or(self, lhs: int, rhs: int) -> int:
        out = new_var_id()
        self._clauses((lhs, rhs, -out), (-rhs, out), (-lhs, out))
        return out

    def _nor(self, lhs: int, rhs: int) -> int:
        out = new_var_id()
        self._clauses((lhs, rhs, out), (-rhs, -out), (-lhs, -out))
        return out

    def _nand(self, lhs: int, rhs: int) -> int:
        out = new_var_id()
        self._clauses((-lhs, -rhs, -out), (rhs, out), (lhs, out))
        return out

    def _xnor(self, lhs: int, rhs: int) -> int:
        out = new_var_id()
        self._clauses(
            (lhs, rhs, out), (lhs, -rhs, -out), (-lhs, rhs, -out), (-lhs, -rhs, out)
        )
        return out

    def _xor(self, lhs: int, rhs: int) -> int:
        out = new_var_id()
        self._clauses(
            (lhs, rhs, -out), (lhs, -rhs, out), (-lhs, rhs, out), (-lhs, -rhs, -out)
        )
        return out

    def _implies(self, lhs: int, rhs: int) -> int:
        return self._ite(lhs, rhs, self._true)

    def _ite(self, cond: int, then: int, otherwise: int) -> int:
        out = new_var_id()
        self._clauses(
            (cond, otherwise, -out),
            (cond, -otherwise, out),
            (-cond, then, -out),
            (-cond, -then, out),
        )
        return out