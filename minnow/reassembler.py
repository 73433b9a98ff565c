"""Reassembly of indexed, possibly overlapping substrings into a byte stream."""

from __future__ import annotations

from minnow.byte_stream import ByteStream, Reader, Writer
from minnow.reassemble_list import ReassembleList


class Reassembler:
    """Writes out-of-order substrings into ``output`` in stream order."""

    def __init__(self, output: ByteStream) -> None:
        self._output = output
        self._pending = ReassembleList(output.capacity())
        self._first_unpopped = 0
        self._final_index: int | None = None

    def _flush(self, first_index: int, is_last_substring: bool, data: bytes) -> None:
        writer = self._output.writer()
        head = self._pending.first_index()
        if head is not None and self._first_unpopped >= head:
            segment = self._pending.pop()
            available = writer.available_capacity()
            if available == 0:
                return
            offset = self._first_unpopped - segment.first_index
            if offset >= len(segment.data):
                return
            chunk = segment.data[offset : offset + available]
            self._first_unpopped += len(chunk)
            writer.push(chunk)
        if is_last_substring:
            self._final_index = first_index + len(data)
        if self._first_unpopped == self._final_index:
            writer.close()

    def insert(self, first_index: int, data: bytes, is_last_substring: bool) -> None:
        """Insert ``data`` beginning at stream index ``first_index``."""
        if self._output.writer().is_closed():
            return
        data = bytes(data)
        self._flush(first_index, is_last_substring, data)
        self._pending.insert(first_index, data, self._first_unpopped)
        self._flush(first_index, False, data)

    def count_bytes_pending(self) -> int:
        """Number of bytes held internally, waiting for earlier gaps to fill."""
        return sum(len(seg.data) for seg in self._pending.segments())

    def reader(self) -> Reader:
        return self._output.reader()

    def writer(self) -> Writer:
        return self._output.writer()

    def first_unpopped_index(self) -> int:
        """Index of the next byte the output stream is waiting for."""
        return self._first_unpopped

    def capacity(self) -> int:
        return self._output.capacity()