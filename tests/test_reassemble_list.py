import pytest

from minnow.reassemble_list import ReassembleList, Segment


def test_adjacent_segments_merge():
    pending = ReassembleList(16)
    assert pending.insert(0, b"ab", 0)
    assert pending.insert(2, b"cd", 0)
    assert pending.segments() == (Segment(0, b"ab" + b"cd"),)


def test_disjoint_segments_sorted():
    pending = ReassembleList(16)
    pending.insert(6, b"gh", 0)
    pending.insert(1, b"bc", 0)
    assert [s.first_index for s in pending.segments()] == [1, 6]


def test_bridging_segment_merges_neighbours():
    pending = ReassembleList(16)
    pending.insert(0, b"ab", 0)
    pending.insert(4, b"ef", 0)
    pending.insert(1, b"bcde", 0)
    assert pending.segments() == (Segment(0, b"a" + b"bcde" + b"f"),)


def test_contained_segment_changes_nothing():
    pending = ReassembleList(16)
    pending.insert(0, b"abcdef", 0)
    assert pending.insert(2, b"cd", 0)
    assert pending.segments() == (Segment(0, b"abcdef"),)


def test_same_start_shorter_replaced():
    pending = ReassembleList(16)
    pending.insert(3, b"d", 0)
    pending.insert(3, b"def", 0)
    assert pending.segments() == (Segment(3, b"def"),)


def test_already_popped_rejected():
    pending = ReassembleList(16)
    assert not pending.insert(0, b"abc", 3)
    assert pending.is_empty()


def test_beyond_capacity_rejected():
    pending = ReassembleList(4)
    assert not pending.insert(4, b"x", 0)
    assert pending.is_empty()


def test_front_trimmed():
    pending = ReassembleList(16)
    data = b"abcdef"
    pending.insert(2, data, 4)
    assert pending.segments() == (Segment(4, data[2:]),)


def test_back_trimmed():
    pending = ReassembleList(4)
    data = b"abcdef"
    pending.insert(2, data, 0)
    assert pending.segments() == (Segment(2, data[:2]),)


def test_pop_and_first_index():
    pending = ReassembleList(16)
    pending.insert(5, b"fg", 0)
    pending.insert(1, b"bcd", 0)
    assert pending.first_index() == 1
    assert pending.first_segment_size() == len(b"bcd")
    assert pending.pop() == Segment(1, b"bcd")
    assert pending.first_index() == 5
    assert pending.pop().data == b"fg"
    assert pending.is_empty()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        ReassembleList(4).pop()


def test_segment_last_index():
    data = b"abc"
    seg = Segment(10, data)
    assert seg.last_index() == 10 + len(data) - 1


def test_capacity_reported():
    assert ReassembleList(9).capacity() == 9