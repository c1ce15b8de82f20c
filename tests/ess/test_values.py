"""
Tests for ess.commands.values - parameter values.
"""

from datetime import datetime, timezone

import pytest

from ess.commands import (
    EMPTY,
    MALFORMED_IDENTIFIER,
    MALFORMED_TIME,
    Identifier,
    String,
    StringValue,
    Time,
    TrimmedString,
    ValueParseError,
)
from ess.contracts import Value


@pytest.mark.parametrize(
    "value",
    [TrimmedString(), StringValue("x"), Identifier(), Time()],
)
def test_values_satisfy_protocol(value):
    assert isinstance(value, Value)


class TestString:
    def test_trimmed_string_strips_whitespace(self):
        value = TrimmedString()
        value.parse("  hello world \n")
        assert str(value) == "hello world"
        assert value.original == "  hello world \n"

    def test_string_value_renders_given_text(self):
        assert str(StringValue(" as is ")) == " as is "

    def test_plain_string_keeps_input(self):
        value = String()
        value.parse("  keep  ")
        assert str(value) == "  keep  "

    def test_copy_is_independent_and_keeps_sanitizer(self):
        prototype = TrimmedString()
        copy = prototype.copy()
        copy.parse("  x  ")
        assert str(copy) == "x"
        assert str(prototype) == ""


class TestIdentifier:
    @pytest.mark.parametrize("text", ["abc", "post-1", "  user-42  ", "0"])
    def test_accepts_identifiers(self, text):
        value = Identifier()
        value.parse(text)
        assert str(value) == text.strip()

    @pytest.mark.parametrize("text", ["", "   ", "Upper", "has space", "under_score", "é"])
    def test_rejects_malformed_identifiers(self, text):
        value = Identifier()
        with pytest.raises(ValueParseError, match=MALFORMED_IDENTIFIER):
            value.parse(text)
        assert str(value) == ""

    def test_parse_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            Identifier().parse("!")

    def test_copy_is_independent(self):
        original = Identifier("abc")
        copy = original.copy()
        copy.parse("xyz")
        assert str(original) == "abc"


class TestTime:
    def test_parses_rfc3339(self):
        value = Time()
        value.parse("2025-06-15T12:00:00Z")
        assert value.value == datetime(2025, 6, 15, 12, tzinfo=timezone.utc)

    def test_renders_rfc3339(self):
        value = Time(datetime(2025, 6, 15, 12, tzinfo=timezone.utc))
        assert str(value) == "2025-06-15T12:00:00+00:00"

    def test_empty_time_renders_empty(self):
        assert str(Time()) == ""

    def test_rejects_empty_text(self):
        with pytest.raises(ValueParseError, match=EMPTY):
            Time().parse("  ")

    def test_rejects_garbage(self):
        with pytest.raises(ValueParseError, match=MALFORMED_TIME):
            Time().parse("tomorrow")
