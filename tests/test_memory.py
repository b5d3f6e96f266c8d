import pytest

from minirt.memory import (
    compare_bytes,
    copy_into,
    find_byte,
    fill,
    move_within,
    zero,
    zeroed,
)


def test_fill_prefix_only():
    buffer = bytearray(b"abcdef")
    result = fill(buffer, ord("x"), 3)
    assert result is buffer
    assert buffer[:3] == b"xxx"
    assert buffer[3:] == b"def"


def test_fill_uses_low_byte():
    buffer = bytearray(2)
    fill(buffer, 0x141, 2)
    assert buffer == bytearray([0x41, 0x41])


def test_fill_too_many():
    with pytest.raises(ValueError):
        fill(bytearray(2), 1, 3)


def test_zero_prefix():
    buffer = bytearray(b"hello")
    zero(buffer, 2)
    assert buffer[:2] == bytes(2)
    assert buffer[2:] == b"llo"


def test_copy_into():
    dest = bytearray(b"......")
    copy_into(dest, b"abcdef", 4)
    assert dest[:4] == b"abcd"
    assert dest[4:] == b".."


def test_copy_into_bounds():
    with pytest.raises(ValueError):
        copy_into(bytearray(2), b"abc", 3)


def test_move_forward_overlap():
    buffer = bytearray(b"abcdef")
    move_within(buffer, 2, 0, 4)
    assert buffer[:2] == b"ab"
    assert buffer[2:] == b"abcd"


def test_move_backward_overlap():
    buffer = bytearray(b"abcdef")
    move_within(buffer, 0, 2, 4)
    assert buffer[:4] == b"cdef"
    assert buffer[4:] == b"ef"


def test_move_out_of_range():
    with pytest.raises(ValueError):
        move_within(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        move_within(bytearray(4), -1, 0, 1)


def test_find_byte_found():
    data = b"hello"
    index = find_byte(data, ord("l"), len(data))
    assert index == data.index(b"l")


def test_find_byte_outside_bound():
    assert find_byte(b"hello", ord("o"), 3) is None


def test_find_byte_zero_count():
    assert find_byte(b"abc", ord("a"), 0) is None


def test_find_byte_low_byte_of_value():
    assert find_byte(b"\x00A", 0x100 + ord("A"), 2) == 1


def test_compare_bytes_equal():
    assert compare_bytes(b"abc", b"abc", 3) == 0


def test_compare_bytes_difference_sign():
    assert compare_bytes(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert compare_bytes(b"abd", b"abc", 3) > 0


def test_compare_bytes_beyond_bound_ignored():
    assert compare_bytes(b"abX", b"abY", 2) == 0


def test_compare_bytes_unsigned():
    assert compare_bytes(b"\xff", b"\x01", 1) == 0xFF - 0x01


def test_zeroed_size():
    buffer = zeroed(3, 4)
    assert len(buffer) == 3 * 4
    assert not any(buffer)


def test_zeroed_empty():
    assert zeroed(0, 8) == bytearray()


def test_zeroed_negative():
    with pytest.raises(ValueError):
        zeroed(-1, 4)