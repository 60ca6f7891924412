import pytest

from tinychat.message import HEADER, MAX_BYTES, Message, clamp_body_length


def test_data_has_space_padded_header():
    assert Message("hello").data() == b"   5hello"


def test_body_round_trip_bytes():
    assert Message(b"hello").body() == b"hello"


def test_body_length_matches_body():
    message = Message(b"some text\n")
    assert message.body_length() == len(b"some text\n")
    assert len(message.data()) == HEADER + message.body_length()


def test_str_is_encoded_as_utf8():
    assert Message("h\u00e9").body() == "h\u00e9".encode("utf-8")


@pytest.mark.parametrize("length", [0, 1, 100, MAX_BYTES])
def test_clamp_keeps_small_lengths(length):
    assert clamp_body_length(length) == length


def test_clamp_limits_large_lengths():
    assert clamp_body_length(MAX_BYTES + 100) == MAX_BYTES


def test_long_body_is_truncated():
    message = Message(b"a" * (MAX_BYTES + 88))
    assert message.body_length() == MAX_BYTES
    assert message.body() == b"a" * MAX_BYTES
    assert message.data()[:HEADER] == b" 512"


def test_decode_header_round_trip():
    original = Message(b"hi there\n")
    received = Message.from_data(original.data())
    assert received.body_length() == 0
    assert received.decode_header() is True
    assert received.body() == b"hi there\n"
    assert received.data() == original.data()


def test_decode_header_rejects_too_large():
    received = Message.from_data(b" 600" + b"x" * 20)
    assert received.decode_header() is False
    assert received.body_length() == 0
    assert received.body() == b""


def test_decode_header_rejects_negative():
    received = Message.from_data(b"  -3abc")
    assert received.decode_header() is False
    assert received.body_length() == 0


def test_decode_non_numeric_header_gives_empty_body():
    received = Message.from_data(b"abcdhello")
    assert received.decode_header() is True
    assert received.body_length() == 0


def test_decode_header_stops_at_first_non_digit():
    received = Message.from_data(b"2xyzhello")
    assert received.decode_header() is True
    assert received.body() == b"he"


def test_encode_header_after_decode_restores_header():
    original = Message(b"abc")
    received = Message.from_data(b"0003abc")
    received.decode_header()
    received.encode_header()
    assert received.data() == original.data()


def test_from_data_limits_buffer_size():
    received = Message.from_data(b" 512" + b"z" * (MAX_BYTES * 2))
    assert received.decode_header() is True
    assert received.body() == b"z" * MAX_BYTES