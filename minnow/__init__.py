"""Byte streams, reassembly, wrapping sequence numbers and a TCP sender and receiver."""

__version__ = "0.1.0"
__all__ = [
    "byte_stream",
    "messages",
    "reassemble_list",
    "reassembler",
    "tcp_receiver",
    "tcp_sender",
    "wrapping_integers",
]