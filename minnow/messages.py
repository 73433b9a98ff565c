"""Messages exchanged between a TCP sender and a TCP receiver."""

from __future__ import annotations

from dataclasses import dataclass

from minnow.wrapping_integers import Wrap32


@dataclass
class TCPSenderMessage:
    """A segment as produced by the sender: sequence number, flags and payload."""

    seqno: Wrap32
    syn: bool = False
    payload: bytes = b""
    fin: bool = False
    rst: bool = False

    def sequence_length(self) -> int:
        """Sequence numbers occupied: SYN and FIN count one each, plus the payload."""
        return int(self.syn) + len(self.payload) + int(self.fin)

    def __str__(self) -> str:
        parts = [f"seqno={self.seqno}"]
        if self.syn:
            parts.append("+SYN")
        if self.payload:
            parts.append(f"payload_len={len(self.payload)}")
        if self.fin:
            parts.append("+FIN")
        if self.rst:
            parts.append("+RST")
        return "(" + " ".join(parts) + ")"


@dataclass
class TCPReceiverMessage:
    """The receiver's reply: acknowledgment number, window size and reset flag."""

    ackno: Wrap32 | None = None
    window_size: int = 0
    rst: bool = False