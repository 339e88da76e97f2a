"""Finding which constraints of a set contradict each other."""

from __future__ import annotations

from .cardinality import cardinality_eq
from .expr import TRUE, and_, implies, new_variable


def contradiction_analysis(ctx, constraints) -> list[list[int]]:
    """Return the conflicts among ``constraints``.

    Each constraint is guarded by a fresh switch variable. If all
    constraints hold together, the result is empty. Otherwise every
    conflict is reported as the sorted list of the indices of the
    constraints involved.
    """
    enable: dict[int, object] = {}
    combined = ctx.evaluate(TRUE)
    for index, constraint in enumerate(constraints):
        switch = new_variable()
        combined = ctx.evaluate(and_(combined, implies(switch, constraint)))
        enable[index] = switch
    return _analyze_conflicts(ctx, enable, combined)


def _analyze_conflicts(ctx, enable, combined) -> list[list[int]]:
    ctx.assumption(combined)
    for switch in enable.values():
        ctx.assumption(switch)
    if ctx.solve():
        return []

    if len(enable) == 1:
        # the only constraint is the reason for the conflict
        return [[0]]

    results: list[list[int]] = []
    _analyze_multiple(ctx, combined, enable, {}, results)
    return results


def _analyze_multiple(ctx, combined, enable_vars, conflict_vars, results) -> None:
    switches = [enable_vars[key] for key in sorted(enable_vars)]

    guarded = combined
    for key in sorted(conflict_vars):
        guarded = ctx.evaluate(and_(guarded, conflict_vars[key]))

    ctx.assumption(guarded)
    if not ctx.solve():
        # the switched-on constraints already form a complete conflict
        results.append(sorted(conflict_vars))
        return

    size = len(enable_vars)
    for off in range(1, size + 1):
        ctx.assumption(and_(cardinality_eq(ctx, switches, size - off), guarded))
        if not ctx.solve():
            continue

        remaining = dict(enable_vars)
        conflicting = {}
        for key in sorted(enable_vars):
            switch = enable_vars[key]
            if not bool(ctx.read_value(switch)):
                conflicting[key] = switch
                del remaining[key]

        current = dict(conflict_vars)
        for key, switch in conflicting.items():
            current[key] = switch
            _analyze_multiple(ctx, combined, remaining, current, results)
            del current[key]
        # found at least one conflict
        break