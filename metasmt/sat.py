"""A self-contained CDCL SAT solver working on integer literals.

Literals are non-zero integers: ``v`` stands for variable ``v`` and ``-v``
for its negation, as in the DIMACS format. Clauses and unit assertions
are permanent. Assumptions hold for the next :meth:`SatSolver.solve` call
only.
"""

from __future__ import annotations

import heapq
from itertools import islice
from typing import Optional

from .result import ResultWrapper

_VAR_DECAY = 0.95
_RESCALE_LIMIT = 1e100
_FIRST_RESTART = 100
_RESTART_GROWTH = 1.5


def _check_literal(lit) -> int:
    if isinstance(lit, bool) or not isinstance(lit, int):
        raise TypeError(f"a literal must be an integer, not {type(lit).__name__}")
    if lit == 0:
        raise ValueError("0 is not a literal")
    return lit


class SatSolver:
    """Incremental SAT solver with clause learning and assumptions."""

    def __init__(self):
        self._clauses: list[list[int]] = []
        self._watches: dict[int, list[int]] = {}
        self._assign: dict[int, bool] = {}
        self._level: dict[int, int] = {}
        self._reason: dict[int, Optional[int]] = {}
        self._trail: list[int] = []
        self._trail_lim: list[int] = []
        self._qhead = 0
        self._activity: dict[int, float] = {}
        self._phase: dict[int, bool] = {}
        self._heap: list[tuple[float, int]] = []
        self._var_inc = 1.0
        self._ok = True
        self._assumptions: list[int] = []
        self._model: Optional[dict[int, bool]] = None

    # ------------------------------------------------------------------
    # public interface

    def clause(self, literals) -> None:
        """Add a clause: the disjunction of ``literals``."""
        lits = [self._register(lit) for lit in literals]
        if not self._ok:
            return
        self._cancel_until(0)
        kept: list[int] = []
        present: set[int] = set()
        for lit in lits:
            if -lit in present:
                return  # tautology
            if lit in present:
                continue
            value = self._value(lit)
            if value is True:
                return  # already satisfied for good
            if value is False:
                continue
            present.add(lit)
            kept.append(lit)
        if not kept:
            self._ok = False
        elif len(kept) == 1:
            self._enqueue(kept[0], None)
            if self._propagate() is not None:
                self._ok = False
        else:
            self._attach(kept)

    def assertion(self, lit) -> None:
        """Require ``lit`` to hold in every later solve."""
        self.clause([lit])

    def assumption(self, lit) -> None:
        """Require ``lit`` to hold for the next solve only."""
        self._assumptions.append(self._register(lit))

    def solve(self) -> bool:
        """Decide satisfiability under the current assumptions, then drop them."""
        assumptions, self._assumptions = self._assumptions, []
        self._model = None
        if not self._ok:
            return False
        self._cancel_until(0)
        if self._propagate() is not None:
            self._ok = False
            return False

        conflicts = 0
        limit = _FIRST_RESTART
        while True:
            confl = self._propagate()
            if confl is not None:
                if not self._trail_lim:
                    self._ok = False
                    return False
                learnt, back_level = self._analyze(confl)
                self._cancel_until(back_level)
                if len(learnt) == 1:
                    self._enqueue(learnt[0], None)
                else:
                    self._enqueue(learnt[0], self._attach(learnt))
                self._var_inc /= _VAR_DECAY
                conflicts += 1
                continue

            if conflicts >= limit:
                conflicts = 0
                limit = int(limit * _RESTART_GROWTH)
                self._cancel_until(0)
                continue

            next_lit = None
            while len(self._trail_lim) < len(assumptions):
                wanted = assumptions[len(self._trail_lim)]
                value = self._value(wanted)
                if value is True:
                    self._trail_lim.append(len(self._trail))
                elif value is False:
                    self._cancel_until(0)
                    return False
                else:
                    next_lit = wanted
                    break
            if next_lit is None:
                next_lit = self._pick_branch()
                if next_lit is None:
                    self._model = dict(self._assign)
                    self._cancel_until(0)
                    return True
            self._trail_lim.append(len(self._trail))
            self._enqueue(next_lit, None)

    def read_value(self, lit) -> ResultWrapper:
        """Value of ``lit`` in the last model: '1', '0', or 'X' if unconstrained."""
        _check_literal(lit)
        if self._model is None:
            raise RuntimeError("no model: the last solve was not satisfiable")
        value = self._model.get(abs(lit))
        if value is None:
            return ResultWrapper("X")
        return ResultWrapper(value if lit > 0 else not value)

    # ------------------------------------------------------------------
    # internals

    def _register(self, lit) -> int:
        _check_literal(lit)
        var = abs(lit)
        if var not in self._activity:
            self._activity[var] = 0.0
            self._watches[var] = []
            self._watches[-var] = []
            heapq.heappush(self._heap, (0.0, var))
        return lit

    def _value(self, lit: int) -> Optional[bool]:
        value = self._assign.get(abs(lit))
        if value is None:
            return None
        return value if lit > 0 else not value

    def _enqueue(self, lit: int, reason: Optional[int]) -> None:
        var = abs(lit)
        self._assign[var] = lit > 0
        self._level[var] = len(self._trail_lim)
        self._reason[var] = reason
        self._trail.append(lit)

    def _attach(self, lits: list[int]) -> int:
        index = len(self._clauses)
        self._clauses.append(lits)
        self._watches[lits[0]].append(index)
        self._watches[lits[1]].append(index)
        return index

    def _cancel_until(self, level: int) -> None:
        if len(self._trail_lim) <= level:
            return
        start = self._trail_lim[level]
        for lit in reversed(self._trail[start:]):
            var = abs(lit)
            self._phase[var] = self._assign.pop(var)
            heapq.heappush(self._heap, (-self._activity[var], var))
        del self._trail[start:]
        del self._trail_lim[level:]
        self._qhead = len(self._trail)

    def _propagate(self) -> Optional[int]:
        trail = self._trail
        while self._qhead < len(trail):
            false_lit = -trail[self._qhead]
            self._qhead += 1
            watchers = self._watches[false_lit]
            kept: list[int] = []
            conflict = None
            for pos, ci in enumerate(watchers):
                c = self._clauses[ci]
                if c[0] == false_lit:
                    c[0], c[1] = c[1], c[0]
                first = c[0]
                if self._value(first) is True:
                    kept.append(ci)
                    continue
                for k, lit in enumerate(islice(c, 2, None), 2):
                    if self._value(lit) is not False:
                        c[1], c[k] = lit, c[1]
                        self._watches[lit].append(ci)
                        break
                else:
                    kept.append(ci)
                    if self._value(first) is False:
                        conflict = ci
                        kept.extend(watchers[pos + 1:])
                        break
                    self._enqueue(first, ci)
            self._watches[false_lit] = kept
            if conflict is not None:
                return conflict
        return None

    def _analyze(self, confl: int) -> tuple[list[int], int]:
        current = len(self._trail_lim)
        seen: set[int] = set()
        learnt = [0]
        pending = 0
        index = len(self._trail) - 1
        lits = self._clauses[confl]
        implied = None
        while True:
            for q in (lits if implied is None else lits[1:]):
                var = abs(q)
                if var in seen or self._level[var] == 0:
                    continue
                seen.add(var)
                self._bump(var)
                if self._level[var] >= current:
                    pending += 1
                else:
                    learnt.append(q)
            while abs(self._trail[index]) not in seen:
                index -= 1
            implied = self._trail[index]
            index -= 1
            seen.discard(abs(implied))
            pending -= 1
            if pending == 0:
                break
            lits = self._clauses[self._reason[abs(implied)]]
        learnt[0] = -implied

        if len(learnt) == 1:
            return learnt, 0
        best = max(range(1, len(learnt)), key=lambda i: self._level[abs(learnt[i])])
        learnt[1], learnt[best] = learnt[best], learnt[1]
        return learnt, self._level[abs(learnt[1])]

    def _bump(self, var: int) -> None:
        self._activity[var] += self._var_inc
        if self._activity[var] > _RESCALE_LIMIT:
            for v in self._activity:
                self._activity[v] *= 1.0 / _RESCALE_LIMIT
            self._var_inc *= 1.0 / _RESCALE_LIMIT
            self._heap = [
                (-act, v) for v, act in self._activity.items() if v not in self._assign
            ]
            heapq.heapify(self._heap)
        elif var not in self._assign:
            heapq.heappush(self._heap, (-self._activity[var], var))

    def _pick_branch(self) -> Optional[int]:
        while self._heap:
            neg_activity, var = heapq.heappop(self._heap)
            if var in self._assign or -neg_activity != self._activity[var]:
                continue
            return var if self._phase.get(var, False) else -var
        return None