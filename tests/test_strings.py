import pytest

from minirt.strings import (
    duplicate,
    iter_indexed,
    join,
    map_indexed,
    split_fields,
    substring,
    trim,
)


def test_duplicate_copies_whole_text():
    assert duplicate("scene.rt") == "scene.rt"


def test_duplicate_stops_at_nul():
    assert duplicate("abc\0def") == "abc"


def test_duplicate_empty():
    assert duplicate("") == ""


def test_substring_inside():
    text = "sphere"
    part = substring(text, 1, 3)
    assert len(part) == 3
    assert text.startswith(part, 1)


def test_substring_clamped_to_end():
    assert substring("light", 2, 100) == "light"[2:]


def test_substring_start_past_end_is_empty():
    assert substring("abc", 3, 2) == ""
    assert substring("abc", 10, 2) == ""


def test_substring_zero_length_is_empty():
    assert substring("abc", 0, 0) == ""


def test_substring_negative_rejected():
    with pytest.raises(ValueError):
        substring("abc", -1, 2)
    with pytest.raises(ValueError):
        substring("abc", 0, -2)


def test_join_concatenates():
    s1, s2 = "mini", "RT"
    joined = join(s1, s2)
    assert joined.startswith(s1)
    assert joined.endswith(s2)
    assert len(joined) == len(s1) + len(s2)


def test_join_empty_parts():
    assert join("", "x") == "x"
    assert join("x", "") == "x"


def test_join_missing_argument():
    with pytest.raises(TypeError):
        join(None, "a")
    with pytest.raises(TypeError):
        join("a", None)


def test_trim_both_ends():
    assert trim("  xx hello xx  ", " x") == "hello"


def test_trim_keeps_inner_characters():
    assert trim("--a-b--", "-") == "a-b"


def test_trim_everything_removed():
    assert trim("aaaa", "a") == ""


def test_trim_empty_charset_keeps_text():
    assert trim("  hi  ", "") == "  hi  "


def test_trim_missing_argument():
    with pytest.raises(TypeError):
        trim(None, " ")
    with pytest.raises(TypeError):
        trim("a", None)


def test_split_skips_empty_fields():
    assert split_fields("  hello   world ", " ") == ["hello", "world"]


def test_split_no_separator_present():
    assert split_fields("sphere", ",") == ["sphere"]


def test_split_only_separators():
    assert split_fields(",,,", ",") == []
    assert split_fields("", ",") == []


def test_split_fields_rejoin_round_trip():
    text = "sp 0,0,20 12.6 10,0,255"
    fields = split_fields(text, " ")
    assert " ".join(fields) == text


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split_fields("a b", "ab")


def test_split_missing_text():
    with pytest.raises(TypeError):
        split_fields(None, " ")


def test_map_indexed_passes_indices():
    seen = []

    def record(index, ch):
        seen.append((index, ch))
        return ch

    assert map_indexed("abc", record) == "abc"
    assert seen == [(0, "a"), (1, "b"), (2, "c")]


def test_map_indexed_transforms():
    assert map_indexed("abc", lambda i, c: c.upper()) == "ABC"


def test_map_indexed_nul_result_ends_string():
    result = map_indexed("abcd", lambda i, c: "\0" if i == 2 else c)
    assert result == "ab"


def test_map_indexed_missing_text():
    with pytest.raises(TypeError):
        map_indexed(None, lambda i, c: c)


def test_iter_indexed_modifies_in_place():
    buffer = list("abc")
    iter_indexed(buffer, lambda i, c: c.upper())
    assert buffer == list("ABC")


def test_iter_indexed_stops_at_nul():
    buffer = ["a", "b", "\0", "c"]
    iter_indexed(buffer, lambda i, c: c.upper())
    assert buffer == ["A", "B", "\0", "c"]


def test_iter_indexed_none_keeps_values():
    buffer = bytearray(b"xyz")
    calls = []
    iter_indexed(buffer, lambda i, v: calls.append(i))
    assert buffer == bytearray(b"xyz")
    assert calls == [0, 1, 2]


def test_iter_indexed_bytearray_stops_at_zero():
    buffer = bytearray(b"ab\0c")
    iter_indexed(buffer, lambda i, v: v + 1)
    assert buffer[2:] == bytearray(b"\0c")
    assert buffer[0] == ord("a") + 1