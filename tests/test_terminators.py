"""Tests for terminal punctuation detection."""

import pytest

from ttlstream.terminators import (
    ends_with_terminator,
    has_object_list_terminator,
    has_part_terminator,
    has_predicate_list_terminator,
    has_statement_terminator,
    is_lone_terminator,
)


class TestTerminatorValidity:
    """Punctuation counts only when separated from the last token by a space."""

    def test_spaced_statement_terminator(self) -> None:
        assert has_statement_terminator("foo.bar .") is True

    def test_glued_statement_terminator_rejected(self) -> None:
        assert has_statement_terminator("foo.bar.") is False

    def test_predicate_list_terminator(self) -> None:
        assert has_predicate_list_terminator("rdfs:subClassOf cco:Certificate ;") is True
        assert has_predicate_list_terminator("rdfs:subClassOf cco:Certificate;") is False

    def test_object_list_terminator(self) -> None:
        assert has_object_list_terminator("obo:BFO_0000004 ,") is True
        assert has_object_list_terminator("obo:BFO_0000004,") is False

    def test_part_terminator_accepts_both_separators(self) -> None:
        assert has_part_terminator("ex:p ex:o ;") is True
        assert has_part_terminator("ex:o ,") is True
        assert has_part_terminator("ex:p ex:o .") is False

    @pytest.mark.parametrize("line", ["", ".", ";", ","])
    def test_short_lines_never_terminated(self, line: str) -> None:
        """Lines under two characters fail every terminator check."""
        assert has_statement_terminator(line) is False
        assert has_part_terminator(line) is False

    def test_custom_separators(self) -> None:
        """The separator rule can be relaxed to accept a tab."""
        assert has_statement_terminator("ex:a ex:b ex:c\t.") is False
        assert has_statement_terminator("ex:a ex:b ex:c\t.", separators=" \t") is True

    def test_ends_with_terminator_other_punctuation(self) -> None:
        assert ends_with_terminator("ex:a ex:b ex:c .", ";") is False


class TestLoneTerminator:
    """is_lone_terminator matches a line holding only `.`."""

    def test_lone_dot(self) -> None:
        assert is_lone_terminator(".") is True
        assert is_lone_terminator("   .  ") is True

    def test_statement_is_not_lone(self) -> None:
        assert is_lone_terminator("ex:a ex:b ex:c .") is False
