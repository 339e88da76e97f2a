# metasmt

Build Boolean and bit-vector formulas in Python, bit-blast them into clauses
and solve them with a built-in SAT solver. The package has no dependencies
beyond the standard library.

## Install

    pip install .

## Quick look

```python
from metasmt.sat import SatSolver
from metasmt.clause import ClauseEncoder
from metasmt.bitblast import BitBlast
from metasmt.context import Context
from metasmt.expr import new_bitvector, new_variable, bvult, bvuint, and_

ctx = Context(BitBlast(ClauseEncoder(SatSolver())))  # same as Context()

a = new_bitvector(8)
ctx.assertion(bvult(a, bvuint(16, 8)))

x = new_variable()
y = new_variable()
ctx.assertion(and_(x, y))

if ctx.solve():
    print(int(ctx.read_value(a)))   # some value below 16
    print(bool(ctx.read_value(x)))  # True
```

## Modules

- `metasmt.expr`: immutable expression trees (`Expr`). Variables:
  `new_variable`, `new_bitvector`, `new_array`. Logic: `equal`, `nequal`,
  `distinct`, `implies`, `and_`, `nand`, `or_`, `nor`, `xor`, `xnor`, `not_`,
  `ite`. Bit-vectors: `bvnot`, `bvneg`, `bvand`, `bvor`, `bvxor` and their
  negated forms, `bvcomp`, `bvadd`, `bvsub`, `bvmul`, `bvudiv`, `bvurem`,
  `bvsdiv`, `bvsrem`, the comparisons `bvult`/`bvule`/`bvugt`/`bvuge` and
  `bvslt`/`bvsle`/`bvsgt`/`bvsge`, the shifts `bvshl`, `bvshr`, `bvashr`, and
  `concat`, `extract`, `zero_extend`, `sign_extend`. Constants: `bvuint`,
  `bvsint`, `bvint`, `bvbin`, `bvhex`, and `TRUE`, `FALSE`, `BIT0`, `BIT1`.
  Arrays: `select`, `store`.
- `metasmt.context`: `Context` evaluates expressions on a backend (by default
  `BitBlast()`) and offers `assertion`, `assumption` (valid for the next
  `solve` only), `solve` and `read_value`. Each variable is created on the
  backend once. `register_evaluator(kind, func)` teaches every context to
  evaluate values of a further Python type; `bool` is registered already.
- `metasmt.bitblast`: `BitBlast` lowers bit-vector operations to single-bit
  gates; a bit-vector is a tuple of bit results, least significant first.
  `bv_width` gives a result's width (0 for a Boolean).
- `metasmt.comparators`: the ripple comparators used by `BitBlast`
  (`unsigned_less`, `signed_greater_equal`, ...), usable with any object
  offering `apply(tag, *args)` for Boolean gates.
- `metasmt.clause`: `ClauseEncoder` Tseitin-encodes Boolean gates into
  clauses over a `SatSolver`; unknown operations yield its always-true literal.
- `metasmt.sat`: `SatSolver`, an incremental CDCL SAT solver on DIMACS-style
  integer literals, with `clause`, `assertion`, `assumption`, `solve` and
  `read_value`.
- `metasmt.result`: `ResultWrapper`, a value as a bit string (most
  significant first, `X` for don't-care). It converts with `str`, `bool`,
  `int`, `to_bits`, `to_tribools`, `tribool` and `to_int(bits, signed)`;
  `rand_x(rng)` sets a generator for don't-care bits and `throw_if_x` raises
  `ValueError` if any bit is unknown.
- `metasmt.cardinality`: `cardinality(tag, ps, count)` builds a `Cardinality`
  constraint that a `Context` can evaluate; `cardinality_eq`,
  `cardinality_leq`, `cardinality_geq`, `cardinality_lt`, `cardinality_gt`
  evaluate one directly, `cardinality_any` returns the count as a bit-vector
  and `one_hot` holds when exactly one input is true.
- `metasmt.contradiction`: `contradiction_analysis(ctx, constraints)` returns
  the conflicting groups among a list of constraints as sorted lists of
  indices, or an empty list if they hold together.
- `metasmt.tags`: the operation tags (`PredTag`, `BVTag`, `ArrayTag`,
  `CardTag`), `attribute_of` and `all_tags`.
- `metasmt.types`: the sorts `Boolean` and `ArrayType`.

## What it does not do

- The only solving path is bit-blasting onto the built-in SAT solver; there
  are no bindings to external SMT or SAT solvers.
- Array expressions (`new_array`, `select`, `store`) can be built, but
  `BitBlast` does not reason about them, so they cannot be solved.
- There are no uninterpreted functions, no SMT-LIB input or output and no
  command-line program.

## Tests

    pip install .[test]
    pytest