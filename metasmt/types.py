"""Sorts used to declare functions and arrays."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Boolean:
    """The Boolean sort; all instances are equal."""

    def __str__(self) -> str:
        return "Boolean"


@dataclass(frozen=True)
class ArrayType:
    """An array sort from bit-vectors of ``index_width`` to ``elem_width``."""

    elem_width: int
    index_width: int

    def __str__(self) -> str:
        return f"Array [{self.elem_width},{self.index_width}]"