from metasmt.context import Context
from metasmt.contradiction import contradiction_analysis
from metasmt.expr import and_, new_variable, not_, or_


def _unsatisfiable(constraints, indices):
    ctx = Context()
    for i in indices:
        ctx.assertion(constraints[i])
    return not ctx.solve()


def test_consistent_constraints_have_no_conflict():
    x, y = new_variable(), new_variable()
    assert contradiction_analysis(Context(), [x, y, or_(x, y)]) == []


def test_no_constraints_have_no_conflict():
    assert contradiction_analysis(Context(), []) == []


def test_single_contradictory_constraint():
    x = new_variable()
    assert contradiction_analysis(Context(), [and_(x, not_(x))]) == [[0]]


def test_two_contradicting_constraints_are_reported_together():
    x = new_variable()
    constraints = [x, not_(x)]
    result = contradiction_analysis(Context(), constraints)
    assert result == [list(range(len(constraints)))]


def test_unrelated_constraint_is_left_out():
    x, y = new_variable(), new_variable()
    constraints = (x, y, not_(x))
    result = contradiction_analysis(Context(), constraints)
    assert result
    for conflict in result:
        assert 1 not in conflict
        assert _unsatisfiable(constraints, conflict)


def test_independent_conflicts_are_all_found():
    x, y = new_variable(), new_variable()
    constraints = [x, not_(x), y, not_(y)]
    result = contradiction_analysis(Context(), constraints)
    assert {tuple(c) for c in result} == {(0, 1), (2, 3)}
    for conflict in result:
        assert _unsatisfiable(constraints, conflict)


def test_reported_conflicts_are_minimal():
    x, y = new_variable(), new_variable()
    constraints = [x, or_(not_(x), y), not_(y)]
    result = contradiction_analysis(Context(), constraints)
    assert result
    for conflict in result:
        assert conflict == sorted(conflict)
        assert _unsatisfiable(constraints, conflict)
        for dropped in conflict:
            rest = [i for i in conflict if i != dropped]
            assert not _unsatisfiable(constraints, rest)


def test_accepts_evaluated_constraints():
    ctx = Context()
    x = new_variable()
    constraints = [ctx.evaluate(x), ctx.evaluate(not_(x))]
    result = contradiction_analysis(ctx, iter(constraints))
    assert len(result) == 1
    assert sorted(result[0]) == [0, 1]