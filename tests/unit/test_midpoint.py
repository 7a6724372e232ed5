"""Unit tests for the fractional midpoint."""

import pytest

from sortkey import BASE10, OrderingError, new_keyset
from sortkey.components.midpoint import midpoint


@pytest.fixture
def keyset():
    return new_keyset("", BASE10)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("", "", "5"),
        ("5", "", "8"),  # 7.5 rounds away from zero
        ("8", "", "9"),
        ("9", "", "95"),
        ("95", "", "98"),
        ("98", "", "99"),
        ("99", "", "995"),
        ("1", "2", "15"),
        ("001", "001002", "001001"),
        ("", "5", "3"),  # 2.5 rounds up
        ("", "3", "2"),
        ("", "2", "1"),
        ("", "1", "05"),
        ("05", "1", "08"),
        ("", "05", "03"),
        ("", "03", "02"),
        ("", "02", "01"),
        ("", "01", "005"),
        ("01", "0111", "011"),
        ("499", "5", "4995"),
    ],
)
def test_midpoint(keyset, a, b, expected):
    actual = midpoint(keyset, a, b)
    assert actual == expected
    assert a < actual
    if b:
        assert actual < b


@pytest.mark.parametrize(
    "a, b",
    [
        ("11", "1"),
        ("1", "1"),
        ("2", "1"),
        ("10", "1"),  # equal once padded
    ],
)
def test_midpoint_rejects_misordered(keyset, a, b):
    with pytest.raises(OrderingError, match="improperly ordered"):
        midpoint(keyset, a, b)


def test_midpoint_binary_digits():
    """Test the smallest alphabet, where only exhausted bounds leave room."""
    ks = new_keyset("", "01")
    assert midpoint(ks, "", "") == "1"
    assert midpoint(ks, "1", "") == "11"
    assert midpoint(ks, "", "1") == "01"
    assert midpoint(ks, "01", "1") == "011"


def test_midpoint_never_ends_in_zero(keyset):
    a = ""
    for _ in range(50):
        a = midpoint(keyset, a, "")
        assert not a.endswith("0")
    b = "5"
    for _ in range(50):
        b = midpoint(keyset, "", b)
        assert not b.endswith("0")
