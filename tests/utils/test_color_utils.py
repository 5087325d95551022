import pytest

from chromapick.utils.color_utils import is_valid_hex


@pytest.mark.parametrize("value", ["#abc", "#ABC", "#a1b2c3", "#FFFFFF", "abc", "abc123"])
def test_valid_hex(value):
    assert is_valid_hex(value)


@pytest.mark.parametrize(
    "value",
    ["#abcd", "#ab", "#abcde", "#abcdefa", "##abc", "#ggg", "", "#", "abcd", "#abc\n", " #abc"],
)
def test_invalid_hex(value):
    assert not is_valid_hex(value)
