"""The sending half of a TCP connection."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, ClassVar

from minnow.byte_stream import ByteStream, Reader, Writer
from minnow.messages import TCPReceiverMessage, TCPSenderMessage
from minnow.wrapping_integers import Wrap32

TransmitFunction = Callable[[TCPSenderMessage], None]


@dataclass
class TCPConfig:
    """Connection parameters and protocol limits."""

    DEFAULT_CAPACITY: ClassVar[int] = 64000
    MAX_PAYLOAD_SIZE: ClassVar[int] = 1000
    TIMEOUT_DFLT: ClassVar[int] = 1000
    MAX_RETX_ATTEMPTS: ClassVar[int] = 8

    rt_timeout: int = 1000
    send_capacity: int = 64000
    recv_capacity: int = 64000
    isn: Wrap32 = field(default_factory=lambda: Wrap32(137))


class TCPSender:
    """Segments an outbound byte stream, respecting the window and retransmitting on timeout."""

    def __init__(self, input_stream: ByteStream, isn: Wrap32, initial_rto_ms: int) -> None:
        self._input = input_stream
        self._isn = isn
        self._initial_rto = initial_rto_ms
        self._outstanding: deque[TCPSenderMessage] = deque()
        self._window = 1
        self._next_seq = 0
        self._syn_sent = False
        self._fin_sent = False
        self._timer = 0
        self._rto = initial_rto_ms
        self._retransmissions = 0
        self._in_flight = 0
        self._max_ackno = 0
        self._acked = 0

    def sequence_numbers_in_flight(self) -> int:
        return self._next_seq - self._acked

    def consecutive_retransmissions(self) -> int:
        return self._retransmissions

    def writer(self) -> Writer:
        return self._input.writer()

    def reader(self) -> Reader:
        return self._input.reader()

    def push(self, transmit: TransmitFunction) -> None:
        """Send as many segments as the window and the outbound stream allow."""
        reader = self.reader()
        while True:
            if self._syn_sent and not reader.bytes_buffered():
                if not reader.is_finished() or self._fin_sent:
                    return
            syn = not self._syn_sent
            self._syn_sent = True

            window = max(self._window, 1)
            view = reader.peek()
            room = window - self._in_flight
            limits = [len(view), TCPConfig.MAX_PAYLOAD_SIZE]
            if room >= 0:
                limits.append(room)
            length = min(limits)
            if length + syn > TCPConfig.MAX_PAYLOAD_SIZE or length + syn > window:
                length -= 1
            payload = view[:length]
            reader.pop(length)

            msg = TCPSenderMessage(
                Wrap32.wrap(self._next_seq, self._isn), syn, payload, False, reader.has_error()
            )
            if reader.is_finished():
                msg.fin = True
                self._fin_sent = True
                if self._in_flight + msg.sequence_length() > window:
                    msg.fin = False
                    self._fin_sent = False

            if not msg.sequence_length():
                return
            transmit(msg)
            self._next_seq += msg.sequence_length()
            self._in_flight += msg.sequence_length()
            self._outstanding.append(msg)
            if self._window <= self._in_flight:
                return

    def make_empty_message(self) -> TCPSenderMessage:
        """A segment occupying no sequence space, carrying the current seqno."""
        return TCPSenderMessage(
            Wrap32.wrap(self._next_seq, self._isn), False, b"", False, self.reader().has_error()
        )

    def receive(self, msg: TCPReceiverMessage) -> None:
        """Process an acknowledgment and window update from the peer."""
        self._window = msg.window_size
        self._retransmissions = 0
        if msg.rst:
            self.reader().set_error()
        if msg.ackno is None:
            return
        ack = msg.ackno.unwrap(self._isn, self._acked)
        if not self._outstanding or ack > self._acked + self._in_flight:
            return
        while self._outstanding:
            front = self._outstanding[0]
            end = front.seqno.unwrap(self._isn, self._acked) + front.sequence_length()
            if ack < end:
                break
            self._acked = end
            self._in_flight -= front.sequence_length()
            self._outstanding.popleft()
        if ack > self._max_ackno:
            self._rto = self._initial_rto
            if self._outstanding:
                self._timer = 0
            self._max_ackno = ack

    def tick(self, ms_since_last_tick: int, transmit: TransmitFunction) -> None:
        """Advance time, retransmitting the earliest outstanding segment on expiry."""
        if not self._outstanding:
            return
        self._timer += ms_since_last_tick
        if self._timer >= self._rto:
            transmit(self._outstanding[0])
            if self._window != 0:
                self._retransmissions += 1
                self._rto *= 2
            self._timer = 0