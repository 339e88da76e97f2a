"""Values read back from a solver and their conversions to Python types."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Optional

Tribool = Optional[bool]
"""A three-valued truth value: True, False or None for "unknown"."""


class ResultWrapper:
    """A solver result held as a bit string, most significant bit first.

    Characters other than ``0`` and ``1`` (normally ``X``) mark don't-care
    bits. The wrapper converts to booleans, three-valued booleans, bit
    lists, strings and integers of any width.
    """

    __slots__ = ("_bits", "_rng")

    def __init__(self, value=None, width=None):
        self._rng: Optional[Callable[[], bool]] = None
        self._bits = self._normalise(value, width)

    @staticmethod
    def _normalise(value, width) -> str:
        if isinstance(value, ResultWrapper):
            return value._bits
        if value is None:
            return "X"
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, int):
            if width is None:
                raise TypeError("an integer result needs a bit width")
            if width < 0:
                raise ValueError("bit width must not be negative")
            return "".join(
                "1" if (value >> i) & 1 else "0" for i in reversed(range(width))
            )
        if isinstance(value, str):
            return value.upper()
        if isinstance(value, Iterable):
            return "".join(
                "X" if bit is None else ("1" if bit else "0")
                for bit in reversed(list(value))
            )
        raise TypeError(f"cannot build a result from {type(value).__name__}")

    def to_bits(self) -> list[bool]:
        """Bits, least significant first; don't-care bits read as False."""
        return [c == "1" for c in reversed(self._bits)]

    def to_tribools(self) -> list[Tribool]:
        """Bits, least significant first; don't-care bits read as None."""
        return [
            True if c == "1" else (False if c == "0" else None)
            for c in reversed(self._bits)
        ]

    def tribool(self) -> Tribool:
        """True if any bit is set, None if unknown bits remain, else False."""
        result: Tribool = False
        for c in self._bits:
            if c == "1":
                return True
            if c != "0":
                result = None
        return result

    def _random_bit(self) -> int:
        return 1 if self._rng is not None and self._rng() else 0

    def to_int(self, bits=None, signed=False) -> int:
        """Convert to an integer of ``bits`` bits (unbounded when None).

        For a signed target narrower than the value, the sign is kept and
        the remaining high bits are dropped. Don't-care bits are filled
        from the generator set with :meth:`rand_x`, or with 0.
        """
        if bits is not None and bits <= 0:
            raise ValueError("bit count must be positive")
        val = self._bits
        if bits is None:
            digits = len(val)
        else:
            digits = bits - 1 if signed else bits
        result = -1 if signed and val[:1] == "1" else 0
        for c in val[max(0, len(val) - digits):]:
            result <<= 1
            if c == "1":
                result |= 1
            elif c != "0":
                result |= self._random_bit()
        return result

    def throw_if_x(self) -> ResultWrapper:
        """Raise ValueError if any bit is a don't-care; return self otherwise."""
        if "X" in self._bits:
            raise ValueError("contains X")
        return self

    def rand_x(self, rng=None) -> ResultWrapper:
        """Set the generator used to resolve don't-care bits; return self."""
        self._rng = rng
        return self

    def __str__(self) -> str:
        return self._bits

    def __repr__(self) -> str:
        return f"ResultWrapper({self._bits!r})"

    def __bool__(self) -> bool:
        value = self.tribool()
        if value is None:
            return bool(self._random_bit())
        return value

    def __int__(self) -> int:
        return self.to_int()