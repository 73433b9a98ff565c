"""32-bit wrapping sequence numbers relative to an arbitrary zero point."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF
_SPAN = 1 << 32


@dataclass(frozen=True)
class Wrap32:
    """A 32-bit unsigned value that wraps back to zero after 2**32 - 1."""

    raw_value: int

    def __post_init__(self) -> None:
        if not 0 <= self.raw_value <= _MASK32:
            raise ValueError(f"raw value {self.raw_value} does not fit in 32 bits")

    @classmethod
    def wrap(cls, n: int, zero_point: Wrap32) -> Wrap32:
        """Wrap the absolute sequence number ``n`` relative to ``zero_point``."""
        return cls((n + zero_point.raw_value) & _MASK32)

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number closest to ``checkpoint`` that wraps to this value.

        When two candidates are equally close, the larger one wins.
        """
        offset = (self.raw_value - zero_point.raw_value) & _MASK32
        aligned = checkpoint - (checkpoint & _MASK32) + offset
        best = None
        best_distance = 0
        for candidate in (aligned - _SPAN, aligned, aligned + _SPAN):
            if candidate < 0:
                continue
            distance = abs(candidate - checkpoint)
            if best is None or distance <= best_distance:
                best, best_distance = candidate, distance
        return best

    def __add__(self, n: int) -> Wrap32:
        return Wrap32((self.raw_value + n) & _MASK32)

    def __str__(self) -> str:
        return f"Wrap32<{self.raw_value}>"