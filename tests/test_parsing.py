import pytest

from pushswap.parsing import parse_int, parse_stack, split_words


def test_split_words_drops_repeated_separators():
    assert split_words("  a  bb c ", " ") == ["a", "bb", "c"]


def test_split_words_leading_separators():
    assert split_words("                  olol", " ") == ["olol"]


@pytest.mark.parametrize("text", ["", "   "])
def test_split_words_without_words(text):
    assert split_words(text, " ") == []


def test_split_words_other_separator():
    assert split_words(",x,,y,", ",") == ["x", "y"]


def test_split_words_join_round_trip():
    words = ["3", "-1", "42"]
    assert split_words(" ".join(words), " ") == words


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -7", -7),
        ("+5", 5),
        ("\t\n12", 12),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("-", 0),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


def test_parse_int_wraps_to_32_bits():
    assert parse_int("2147483648") == -2147483648


def test_parse_stack_keeps_order():
    assert parse_stack("3 -1 2") == [3, -1, 2]


def test_parse_stack_empty():
    assert parse_stack("   ") == []


def test_parse_stack_round_trip():
    values = [0, -5, 17, 2147483647, -2147483648]
    assert parse_stack(" ".join(str(v) for v in values)) == values