"""Sorted, merged storage for out-of-order stream segments."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass


@dataclass(frozen=True)
class Segment:
    """A run of bytes starting at ``first_index`` in the stream."""

    first_index: int
    data: bytes

    @property
    def end(self) -> int:
        return self.first_index + len(self.data)

    def last_index(self) -> int:
        return self.first_index + len(self.data) - 1


class ReassembleList:
    """Holds disjoint, non-adjacent segments in index order, merging on insert."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._segments: list[Segment] = []

    def insert(self, first_index: int, data: bytes, first_unpopped_index: int) -> bool:
        """Store ``data`` trimmed to the window; return False if nothing fits."""
        limit = first_unpopped_index + self._capacity
        if first_index + len(data) <= first_unpopped_index or first_index >= limit:
            return False
        if first_index < first_unpopped_index:
            data = data[first_unpopped_index - first_index :]
            first_index = first_unpopped_index
        if first_index + len(data) > limit:
            data = data[: limit - first_index]
        data = bytes(data)

        stop = first_index + len(data)
        lo = bisect_left(self._segments, first_index, key=lambda s: s.end)
        hi = bisect_right(self._segments, stop, key=lambda s: s.first_index)
        touched = self._segments[lo:hi]

        merged_start, merged = first_index, data
        if touched:
            head = touched[0]
            if head.first_index <= first_index:
                if head.end >= stop:
                    return True
                if head.first_index < first_index:
                    merged = head.data + data[head.end - first_index :]
                    merged_start = head.first_index
                    touched = touched[1:]
            for seg in touched:
                overlap = merged_start + len(merged) - seg.first_index
                if overlap < len(seg.data):
                    merged += seg.data[overlap:]

        self._segments[lo:hi] = [Segment(merged_start, merged)]
        return True

    def pop(self) -> Segment:
        """Remove and return the earliest segment."""
        if not self._segments:
            raise IndexError("pop from an empty ReassembleList")
        return self._segments.pop(0)

    def is_empty(self) -> bool:
        return not self._segments

    def first_index(self) -> int | None:
        """Index of the earliest stored byte, or None when empty."""
        return self._segments[0].first_index if self._segments else None

    def first_segment_size(self) -> int:
        if not self._segments:
            raise IndexError("ReassembleList is empty")
        return len(self._segments[0].data)

    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    def capacity(self) -> int:
        return self._capacity