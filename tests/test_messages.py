from minnow.messages import TCPReceiverMessage, TCPSenderMessage
from minnow.wrapping_integers import Wrap32


def test_empty_message_has_zero_length():
    assert TCPSenderMessage(Wrap32(7)).sequence_length() == 0


def test_syn_and_fin_each_count_one():
    msg = TCPSenderMessage(Wrap32(7), syn=True, fin=True)
    assert msg.sequence_length() == 2


def test_payload_counts_its_bytes():
    msg = TCPSenderMessage(Wrap32(7), syn=True, payload=b"hello")
    assert msg.sequence_length() == 1 + len(b"hello")


def test_rst_does_not_occupy_sequence_space():
    msg = TCPSenderMessage(Wrap32(7), rst=True, payload=b"ab")
    assert msg.sequence_length() == len(b"ab")


def test_receiver_message_defaults():
    msg = TCPReceiverMessage()
    assert msg.ackno is None
    assert msg.rst is False