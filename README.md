# minnow

The pieces of a TCP implementation as plain Python objects, driven by
method calls. Streams carry `bytes`; there are no dependencies outside the
standard library.

- `minnow.byte_stream`: `ByteStream`, a bounded in-memory stream with a
  `Writer` side (`push`, `close`, `is_closed`, `available_capacity`,
  `bytes_pushed`) and a `Reader` side (`peek`, `pop`, `is_finished`,
  `bytes_buffered`, `bytes_popped`), plus `read(reader, max_len)`, which peeks
  and pops up to `max_len` bytes and returns them. Both sides can `set_error()`
  and report `has_error()`. Pushing a `str` raises `TypeError`.
- `minnow.wrapping_integers`: `Wrap32`, a 32-bit sequence number.
  `Wrap32.wrap(n, zero_point)` turns an absolute sequence number into a
  `Wrap32`; `unwrap(zero_point, checkpoint)` returns the absolute sequence
  number closest to `checkpoint` (the larger one on a tie). `Wrap32(x) + n`
  wraps around at 2**32.
- `minnow.reassemble_list`: `ReassembleList`, an ordered store of
  non-overlapping `Segment`s that merges overlapping or adjacent pieces and
  trims what falls outside its capacity window.
- `minnow.reassembler`: `Reassembler`, which accepts indexed, possibly
  out-of-order and overlapping substrings and writes them in order into a
  `ByteStream`, closing it after the last byte.
- `minnow.messages`: `TCPSenderMessage` (`seqno`, `syn`, `payload`, `fin`,
  `rst`, `sequence_length()`) and `TCPReceiverMessage` (`ackno`,
  `window_size`, `rst`).
- `minnow.tcp_receiver`: `TCPReceiver`, which places incoming payloads in the
  stream and builds acknowledgments with a window size capped at 65535.
- `minnow.tcp_sender`: `TCPSender` and `TCPConfig`: segmentation up to
  `TCPConfig.MAX_PAYLOAD_SIZE` bytes, window handling (a zero window is
  treated as one byte), SYN and FIN, and retransmission of the earliest
  outstanding segment with exponential back-off.

## Installing

```
pip install .
```

## A byte stream

```python
from minnow.byte_stream import ByteStream, read

stream = ByteStream(8)
stream.writer().push(b"hello, world")        # only 8 bytes fit
print(stream.writer().available_capacity())  # 0
print(read(stream.reader(), 5))              # b'hello'
stream.writer().close()
print(read(stream.reader(), 100))            # b', w'
print(stream.reader().is_finished())         # True
```

## Wrapping sequence numbers

```python
from minnow.wrapping_integers import Wrap32

seqno = Wrap32.wrap(3 * 2**32 + 17, Wrap32(15))
print(seqno == Wrap32(32))                      # True
print(Wrap32(1).unwrap(Wrap32(0), 2**32 - 1))   # 4294967297
```

## Reassembling a stream

```python
from minnow.byte_stream import ByteStream, read
from minnow.reassembler import Reassembler

reassembler = Reassembler(ByteStream(64))
reassembler.insert(3, b"def", False)
print(reassembler.count_bytes_pending())   # 3
reassembler.insert(0, b"abc", False)
print(read(reassembler.reader(), 64))      # b'abcdef'
```

## Receiving

```python
from minnow.byte_stream import ByteStream, read
from minnow.messages import TCPSenderMessage
from minnow.reassembler import Reassembler
from minnow.tcp_receiver import TCPReceiver
from minnow.wrapping_integers import Wrap32

receiver = TCPReceiver(Reassembler(ByteStream(64)))
receiver.receive(TCPSenderMessage(Wrap32(100), syn=True))
receiver.receive(TCPSenderMessage(Wrap32(101), payload=b"hello"))
reply = receiver.send()
print(reply.ackno, reply.window_size)      # Wrap32<106> 59
print(read(receiver.reader(), 64))         # b'hello'
```

## Sending

`push` and `tick` take a function that is called with each
`TCPSenderMessage` to transmit.

```python
from minnow.byte_stream import ByteStream
from minnow.messages import TCPReceiverMessage
from minnow.tcp_sender import TCPConfig, TCPSender
from minnow.wrapping_integers import Wrap32

sent = []
isn = Wrap32(1000)
sender = TCPSender(ByteStream(TCPConfig.DEFAULT_CAPACITY), isn, TCPConfig.TIMEOUT_DFLT)
sender.push(sent.append)                           # sends the SYN
sender.receive(TCPReceiverMessage(isn + 1, 100))   # SYN acknowledged, window of 100
sender.writer().push(b"hi")
sender.push(sent.append)                           # sends b"hi"
print(sender.sequence_numbers_in_flight())         # 2
sender.tick(TCPConfig.TIMEOUT_DFLT, sent.append)   # retransmits b"hi"
print(sender.consecutive_retransmissions())        # 1
```

## What it does not do

Nothing here touches a real network. There are no sockets, no IP or Ethernet
framing, no routing and no command-line program: messages go wherever the
function you pass to `TCPSender.push` and `tick` sends them, and arrive only
when you call `TCPReceiver.receive` or `TCPSender.receive` yourself.

## Running the tests

```
pip install ".[test]"
pytest
```