import pytest

from minishell.chars import to_upper
from minishell.search import atoi
from minishell.transform import (
    itoa,
    split,
    strjoin,
    striteri,
    strmapi,
    strtrim,
    substr,
)


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [1, -1, 9, 10, -10, 12345, 2147483647, -2147483647])
def test_itoa_round_trips_through_atoi(n):
    assert atoi(itoa(n)) == n


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_rejoins_to_original_without_separators():
    text = "a:bb::ccc:"
    assert ":".join(split(text, ":")) == text.replace("::", ":").strip(":")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_clamped_at_end():
    assert substr("hello", 3, 100) == "hello"[3:]


def test_substr_empty_cases():
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 0, 0) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin_concatenates():
    a, b = "PATH/", "cat"
    joined = strjoin(a, b)
    assert joined.startswith(a) and joined.endswith(b)
    assert len(joined) == len(a) + len(b)


def test_strtrim_both_sides():
    assert strtrim("xyhixyx", "xy") == "hi"


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  x  ", "") == "  x  "


def test_strmapi_upper():
    assert strmapi("abc1", lambda i, c: to_upper(c)) == "ABC1"


def test_strmapi_receives_indexes():
    seen = []
    strmapi("xyz", lambda i, c: seen.append(i) or c)
    assert seen == [0, 1, 2]


def test_striteri_modifies_in_place():
    chars = list("abc")
    assert striteri(chars, lambda i, c: to_upper(c) if i % 2 == 0 else None) is None
    assert chars == ["A", "b", "C"]


def test_striteri_visits_every_item():
    visited = []
    striteri(list("hello"), lambda i, c: visited.append((i, c)))
    assert visited == list(enumerate("hello"))