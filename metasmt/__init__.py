"""Boolean and bit-vector formulas, bit-blasting to clauses and a built-in SAT solver."""

__version__ = "0.1.0"

__all__ = [
    "bitblast",
    "cardinality",
    "clause",
    "comparators",
    "context",
    "contradiction",
    "expr",
    "result",
    "sat",
    "tags",
    "types",
]