"""Unit tests for key parsing."""

import pytest

from sortkey import InvalidValueError, ParsedKey, new_keyset


@pytest.fixture
def keyset():
    return new_keyset("#$%", "0123456789abcdef")


@pytest.mark.parametrize(
    "key, message",
    [
        ("", "sortkey too short"),
        ("#", "sortkey too short"),
        ("+012", "invalid sigil"),
        ("%aBC", "invalid integer part"),
        ("#1dE", "invalid fractional part"),
        ("%a", "sortkey too short"),  # % band holds two digits
        ("$f0", "trailing zero"),
        ("$1é", "invalid fractional part"),
    ],
)
def test_parse_rejects(keyset, key, message):
    with pytest.raises(InvalidValueError, match=message):
        keyset.parse(key)


@pytest.mark.parametrize(
    "key, expected",
    [
        ("%ab", ParsedKey("%", "ab", "")),
        ("$0", ParsedKey("$", "0", "")),
        ("#f", ParsedKey("#", "f", "")),
        ("%ab01", ParsedKey("%", "ab", "01")),
    ],
)
def test_parse_accepts(keyset, key, expected):
    parsed = keyset.parse(key)
    assert parsed == expected
    assert parsed.value() == key
    assert str(parsed) == key


def test_parse_without_sigils():
    ks = new_keyset("", "01")
    assert ks.parse("1") == ParsedKey("", "1", "")
    assert ks.parse("011") == ParsedKey("", "0", "11")
    with pytest.raises(InvalidValueError, match="trailing zero"):
        ks.parse("10")
    with pytest.raises(InvalidValueError, match="invalid integer part"):
        ks.parse("2")


def test_parsed_key_ordering(keyset):
    """Test that parsed comparison matches byte order of the keys."""
    keys = ["#0", "#01", "#f", "$0", "$0f", "%00", "%ab", "%ab1"]
    parsed = [keyset.parse(k) for k in keys]
    assert sorted(parsed) == parsed
    assert sorted(keys) == keys


def test_integer_only_copies(keyset):
    parsed = keyset.parse("%ab01")
    integer = parsed.integer_only()
    assert integer == ParsedKey("%", "ab", "")
    assert parsed.fraction == "01"
