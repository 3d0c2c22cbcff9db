import pytest

from ftkit.build import (
    strarcat,
    strcat,
    strfill,
    striter,
    striteri,
    strjoin,
    strlcat,
    strlen,
    strmap,
    strmapi,
    strncat,
    strncpy,
    strnjoin,
)


def test_strlen_counts_until_nul():
    assert strlen("hello") == len("hello")
    assert strlen("ab\0cd") == len("ab")
    assert strlen(None) == 0
    assert strlen("") == 0


def test_strcat_concatenates():
    assert strcat("foo", "bar") == "foo" + "bar"
    assert strcat("foo\0x", "bar\0y") == "foo" + "bar"
    assert strcat("", "") == ""


def test_strncat_limits_appended_part():
    assert strncat("ab", "cdef", 2) == "ab" + "cd"
    assert strncat("ab", "cd", 10) == "ab" + "cd"
    assert strncat("ab", "cd", 0) == "ab"


def test_strncat_rejects_negative_count():
    with pytest.raises(ValueError):
        strncat("ab", "cd", -1)


def test_strncpy_pads_and_truncates():
    assert strncpy("abc", 5) == "abc\0\0"
    assert strncpy("abcdef", 3) == "abc"
    assert strncpy("ab\0cd", 4) == "ab\0\0"


@pytest.mark.parametrize("src,length", [("", 0), ("xyz", 2), ("xyz", 7)])
def test_strncpy_has_exact_length(src, length):
    assert len(strncpy(src, length)) == length


def test_strlcat_fits():
    assert strlcat("ab", "cd", 10) == ("ab" + "cd", len("abcd"))


def test_strlcat_truncates_to_size_minus_one():
    result, total = strlcat("ab", "cdef", 4)
    assert result == "abc"
    assert total == len("ab") + len("cdef")


def test_strlcat_dst_longer_than_size():
    assert strlcat("abcdef", "xy", 3) == ("abcdef", len("xy") + 3)


def test_strlcat_size_zero_with_empty_dst_copies_all():
    assert strlcat("", "xyz", 0) == ("xyz", len("xyz"))


def test_strlcat_dst_exactly_size_appends_nothing():
    assert strlcat("abc", "de", 3) == ("abc", len("abcde"))


def test_strjoin():
    assert strjoin("left", "right") == "left" + "right"
    assert strjoin(None, "x") is None
    assert strjoin("x", None) is None


def test_strnjoin_takes_prefixes():
    assert strnjoin("abc", "def", 2, 2) == "ab" + "de"


def test_strnjoin_pads_short_first_part():
    assert strnjoin("a", "xy", 3, 2) == "a\0\0" + "xy"


def test_strnjoin_length_invariant_and_none():
    assert len(strnjoin("abc", "d\0e", 1, 3)) == 1 + 3
    assert strnjoin(None, "x", 1, 1) is None


def test_strarcat_joins_with_delimiter():
    assert strarcat(["a", "b", "c"], ",") == ",".join(["a", "b", "c"])
    assert strarcat([], ",") == ""
    assert strarcat(["only"], " ") == "only"


def test_strarcat_nul_delimiter_and_none():
    assert strarcat(["a", "b"], "\0") == "ab"
    assert strarcat(None, ",") is None


def test_strfill():
    assert strfill(3, "x") == "xxx"
    assert strfill(0, "x") == ""
    assert strfill(2, ord("z")) == "zz"
    with pytest.raises(ValueError):
        strfill(-1, "x")


def test_strmap():
    assert strmap("abc", str.upper) == "ABC"
    assert strmap("abc", lambda ch: "\0" if ch == "b" else ch) == "a"
    assert strmap("abc", None) is None
    assert strmap(None, str.upper) is None


def test_strmapi_receives_indices():
    assert strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch) == "AbCd"
    assert strmapi(None, lambda i, ch: ch) is None


def test_striter_visits_each_character():
    seen = []
    assert striter("ab\0c", seen.append) is None
    assert seen == ["a", "b"]


def test_striteri_visits_with_indices():
    seen = []
    striteri("xyz", lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("xyz"))
    striteri(None, lambda i, ch: seen.append((i, ch)))
    assert len(seen) == len("xyz")