import pytest

from mapo.strings import MAX_FORMAT_STRING_LENGTH, format_string
from mapo.uassert import AssertionFailure


def test_format_substitutes_arguments():
    assert format_string("%d-%s", 3, "a") == "3-a"


def test_format_without_arguments_returns_text():
    assert format_string("plain text") == "plain text"


@pytest.mark.parametrize("text", ["", "x", "hello world", "y" * 100])
def test_format_round_trip(text):
    assert format_string("%s", text) == text


def test_format_longest_allowed():
    text = "z" * (MAX_FORMAT_STRING_LENGTH - 1)
    assert format_string("%s", text) == text


def test_format_too_long_raises():
    with pytest.raises(AssertionFailure):
        format_string("%s", "z" * MAX_FORMAT_STRING_LENGTH)


def test_format_argument_mismatch_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)