"""Tests for the human-name predicate."""

from __future__ import annotations

import pytest

from regcheck.domain.names import NAME_PATTERN, validate_name


class TestValidateName:
    @pytest.mark.parametrize(
        "name",
        [
            "Mary Jane",
            "O'Brien-Smith",
            "a",
            "Z",
            "Jean-Luc Picard",
            "d'Artagnan",
            "  padded  ",
            "'",
            "-",
            "tab\tseparated",
            "trailing newline\n",
        ],
    )
    def test_valid_names(self, name: str) -> None:
        assert validate_name(name) is True

    @pytest.mark.parametrize(
        "name",
        [
            "John123",  # digit
            "Jane_Doe",  # underscore
            "Smith.",  # period
            "Anne, Marie",  # comma
            "Zoë",  # non-ASCII letter
            "José",
            "O’Brien",  # typographic apostrophe
            "name@example",
        ],
    )
    def test_invalid_names(self, name: str) -> None:
        assert validate_name(name) is False

    def test_empty_string_is_invalid(self) -> None:
        assert validate_name("") is False

    def test_whitespace_only_is_valid(self) -> None:
        """Whitespace is a permitted character, so a blank name still matches."""
        assert validate_name("   ") is True

    @pytest.mark.parametrize("value", [None, 42, 3.5, b"Mary", ["Mary"]])
    def test_non_text_input_is_invalid(self, value: object) -> None:
        assert validate_name(value) is False  # type: ignore[arg-type]

    def test_whole_string_must_match(self) -> None:
        """A valid prefix does not rescue a bad suffix."""
        assert validate_name("Mary Jane 2") is False
        assert validate_name("1 Mary") is False


class TestMaxLength:
    def test_no_cap_by_default(self) -> None:
        assert validate_name("A" * 500) is True

    def test_at_limit(self) -> None:
        assert validate_name("A" * 100, max_length=100) is True

    def test_over_limit(self) -> None:
        assert validate_name("A" * 101, max_length=100) is False

    def test_cap_does_not_relax_characters(self) -> None:
        assert validate_name("Jane_Doe", max_length=100) is False


class TestNamePattern:
    def test_pattern_is_compiled(self) -> None:
        assert NAME_PATTERN.fullmatch("Mary Jane") is not None
        assert NAME_PATTERN.fullmatch("") is None
