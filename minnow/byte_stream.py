"""A bounded in-memory byte stream with separate reader and writer views."""

from __future__ import annotations


class ByteStream:
    """A flow-controlled byte stream holding at most ``capacity`` unread bytes."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._buffer = bytearray()
        self._closed = False
        self._error = False
        self._pushed = 0
        self._popped = 0
        self._reader = Reader(self)
        self._writer = Writer(self)

    def reader(self) -> Reader:
        return self._reader

    def writer(self) -> Writer:
        return self._writer

    def set_error(self) -> None:
        """Signal that the stream suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        return self._error

    def capacity(self) -> int:
        return self._capacity


class Writer:
    """The writing side of a :class:`ByteStream`."""

    def __init__(self, stream: ByteStream) -> None:
        self._stream = stream

    def push(self, data: bytes) -> None:
        """Append as much of ``data`` as the available capacity allows."""
        if isinstance(data, str):
            raise TypeError("ByteStream carries bytes, not str")
        count = min(len(data), self.available_capacity())
        if count == 0:
            return
        self._stream._buffer += bytes(data[:count])
        self._stream._pushed += count

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._stream._closed = True

    def is_closed(self) -> bool:
        return self._stream._closed

    def available_capacity(self) -> int:
        return self._stream._capacity - len(self._stream._buffer)

    def bytes_pushed(self) -> int:
        return self._stream._pushed

    def set_error(self) -> None:
        self._stream.set_error()

    def has_error(self) -> bool:
        return self._stream.has_error()


class Reader:
    """The reading side of a :class:`ByteStream`."""

    def __init__(self, stream: ByteStream) -> None:
        self._stream = stream

    def peek(self) -> bytes:
        """Return the bytes currently buffered, without removing them."""
        return bytes(self._stream._buffer)

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("cannot pop a negative number of bytes")
        length = min(length, len(self._stream._buffer))
        del self._stream._buffer[:length]
        self._stream._popped += length

    def is_finished(self) -> bool:
        """True once the stream is closed and fully drained."""
        return self._stream._closed and not self._stream._buffer

    def bytes_buffered(self) -> int:
        return len(self._stream._buffer)

    def bytes_popped(self) -> int:
        return self._stream._popped

    def set_error(self) -> None:
        self._stream.set_error()

    def has_error(self) -> bool:
        return self._stream.has_error()


def read(reader: Reader, max_len: int) -> bytes:
    """Peek and pop up to ``max_len`` bytes from ``reader``."""
    out = bytearray()
    while reader.bytes_buffered() and len(out) < max_len:
        view = reader.peek()
        if not view:
            raise RuntimeError("Reader.peek() returned no bytes")
        view = view[: max_len - len(out)]
        out += view
        reader.pop(len(view))
    return bytes(out)