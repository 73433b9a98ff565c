"""The receiving half of a TCP connection."""

from __future__ import annotations

from minnow.byte_stream import Reader, Writer
from minnow.messages import TCPReceiverMessage, TCPSenderMessage
from minnow.reassembler import Reassembler
from minnow.wrapping_integers import Wrap32

_MAX_WINDOW = 0xFFFF


class TCPReceiver:
    """Feeds incoming segments into a reassembler and produces acknowledgments."""

    def __init__(self, reassembler: Reassembler) -> None:
        self._reassembler = reassembler
        self._zero_point: Wrap32 | None = None
        self._ack_index = 0
        self._finished = False

    def _insert(self, index: int, payload: bytes, last: bool) -> None:
        if index >= 0:
            self._reassembler.insert(index, payload, last)

    def receive(self, message: TCPSenderMessage) -> None:
        """Insert the payload of ``message`` at its position in the stream."""
        if message.rst:
            self._reassembler.reader().set_error()
        if message.syn:
            self._zero_point = message.seqno
            self._ack_index = 1
            if message.payload:
                self._reassembler.insert(0, message.payload, False)
                self._ack_index = self._reassembler.first_unpopped_index() + 1
            if message.fin:
                self._reassembler.insert(0, message.payload, True)
                self._ack_index += 1
            return
        if self._zero_point is None:
            return
        if message.fin:
            self._finished = True
        absolute = message.seqno.unwrap(self._zero_point, self._ack_index)
        self._insert(absolute - 1, message.payload, message.fin)
        self._ack_index = self._reassembler.first_unpopped_index() + 1
        if self._finished and self._reassembler.count_bytes_pending() == 0:
            self._ack_index += 1

    def send(self) -> TCPReceiverMessage:
        """Build the acknowledgment to send back to the peer."""
        reader = self._reassembler.reader()
        window = min(self._reassembler.capacity() - reader.bytes_buffered(), _MAX_WINDOW)
        ackno = None
        if self._zero_point is not None:
            ackno = Wrap32.wrap(self._ack_index, self._zero_point)
        return TCPReceiverMessage(ackno, window, reader.has_error())

    def reassembler(self) -> Reassembler:
        return self._reassembler

    def reader(self) -> Reader:
        return self._reassembler.reader()

    def writer(self) -> Writer:
        return self._reassembler.writer()