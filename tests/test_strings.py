import pytest

from pushswap.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strchr_finds_first_occurrence():
    s = "hello world"
    idx = strchr(s, "o")
    assert s[idx] == "o"
    assert "o" not in s[:idx]


def test_strchr_accepts_code_point():
    assert strchr("abc", ord("b")) == strchr("abc", "b")


def test_strchr_missing_is_none():
    assert strchr("abc", "z") is None


def test_strchr_nul_finds_terminator():
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", 0) == len("abc")


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last_occurrence():
    s = "hello world"
    idx = strrchr(s, "o")
    assert s[idx] == "o"
    assert "o" not in s[idx + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("abc", "q") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strncmp_equal_prefix():
    assert strncmp("abcdef", "abcxyz", 3) == 0


def test_strncmp_sign_and_difference():
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")
    assert strncmp("abc", "abd", 3) < 0


def test_strncmp_shorter_string_compares_as_nul():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_zero_count():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_empty_needle():
    assert strnstr("haystack", "", 0) == 0


def test_strnstr_found_within_length():
    big = "foo bar baz"
    idx = strnstr(big, "bar", len(big))
    assert big[idx:idx + len("bar")] == "bar"


def test_strnstr_match_must_fit_in_length():
    big = "foo bar"
    assert strnstr(big, "bar", len(big) - 1) is None
    assert strnstr(big, "bar", len(big)) == big.index("bar")


def test_strnstr_missing():
    assert strnstr("abc", "zz", 3) is None


def test_strlen_and_strdup():
    s = "push swap"
    assert strlen(s) == len(s)
    assert strdup(s) == s
    assert strlen("") == 0


def test_strjoin():
    assert strjoin("push", "_swap") == "push_swap"
    assert strjoin("", "") == ""


def test_substr_inside():
    s = "abcdef"
    assert substr(s, 1, 3) == s[1:4]


def test_substr_past_end_is_empty():
    assert substr("abc", 10, 2) == ""


def test_substr_length_clamped():
    assert substr("abcdef", 2, 100) == "cdef"


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 1)


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_all_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_none_charset_keeps_text():
    assert strtrim("  a  ", None) == "  a  "


def test_strtrim_empty_charset_keeps_text():
    assert strtrim(" a ", "") == " a "


def test_split_drops_empty_pieces():
    assert split("  1 2   3 ", " ") == ["1", "2", "3"]


def test_split_only_separators():
    assert split("    ", " ") == []
    assert split("", " ") == []


def test_split_round_trip():
    words = ["4", "-2", "17"]
    assert split(" ".join(words), " ") == words


def test_strmapi_uses_index_and_char():
    assert strmapi("abc", lambda i, ch: ch.upper() if i % 2 == 0 else ch) == "AbC"


def test_strmapi_calls_from_the_end():
    seen = []

    def record(i, ch):
        seen.append(i)
        return ch

    assert strmapi("abcd", record) == "abcd"
    assert seen == [3, 2, 1, 0]


def test_striteri_modifies_in_place():
    chars = list("abc")
    striteri(chars, lambda i, ch: ch.upper())
    assert chars == ["A", "B", "C"]


def test_striteri_passes_indices():
    chars = list("xyz")
    seen = []

    def record(i, ch):
        seen.append(i)
        return ch

    striteri(chars, record)
    assert seen == list(range(len(chars)))
    assert chars == list("xyz")


def test_strlcpy_truncates_and_reports_source_length():
    src = "abcdef"
    text, length = strlcpy("", src, 4)
    assert text == src[:3]
    assert length == len(src)


def test_strlcpy_zero_size_keeps_destination():
    assert strlcpy("keep", "abc", 0) == ("keep", len("abc"))


def test_strlcpy_full_copy():
    src = "abc"
    assert strlcpy("", src, len(src) + 1) == (src, len(src))


def test_strlcat_appends_within_size():
    dst, src = "ab", "cdef"
    text, length = strlcat(dst, src, len(dst) + len(src) + 1)
    assert text == dst + src
    assert length == len(dst) + len(src)


def test_strlcat_truncates():
    dst, src = "ab", "cdef"
    text, length = strlcat(dst, src, 4)
    assert len(text) == 3
    assert text.startswith(dst)
    assert length == len(dst) + len(src)


def test_strlcat_size_not_larger_than_dst():
    dst, src = "abcd", "xyz"
    assert strlcat(dst, src, 2) == (dst, 2 + len(src))


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)