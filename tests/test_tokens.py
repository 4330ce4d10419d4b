"""Tests for term tokenizing and typing."""

import pytest

from ttlstream.tokens import (
    bracket_delta,
    is_iri_term,
    is_literal_term,
    make_collection,
    make_object,
    make_predicate,
    split_namespaced,
    tokenize,
)


class TestTokenize:
    """tokenize keeps literals, IRIs and brackets intact."""

    def test_literal_with_spaces_and_language(self) -> None:
        assert tokenize('rdfs:label "Armored Vehicle"@en .') == ["rdfs:label", '"Armored Vehicle"@en', "."]

    def test_literal_with_datatype(self) -> None:
        assert tokenize('ex:p "12"^^xsd:integer ,') == ["ex:p", '"12"^^xsd:integer', ","]

    def test_escaped_quote_in_literal(self) -> None:
        assert tokenize(r'ex:p "say \"hi\"" .') == ["ex:p", r'"say \"hi\""', "."]

    def test_literal_with_punctuation_inside(self) -> None:
        assert tokenize('ex:p "a ; b , c ." ;') == ["ex:p", '"a ; b , c ."', ";"]

    def test_iri_and_keyword(self) -> None:
        assert tokenize("<http://example.org/Foo> a owl:Class .") == [
            "<http://example.org/Foo>",
            "a",
            "owl:Class",
            ".",
        ]

    def test_brackets_split_from_terms(self) -> None:
        assert tokenize("owl:members (cco:A cco:B) ;") == ["owl:members", "(", "cco:A", "cco:B", ")", ";"]

    def test_long_literal_on_one_line(self) -> None:
        """Quotes inside a triple-quoted literal do not end it."""
        assert tokenize('ex:p """a "b" c"""@en .') == ["ex:p", '"""a "b" c"""@en', "."]
        assert tokenize("ex:p '''it's''' ,") == ["ex:p", "'''it's'''", ","]

    def test_empty_line(self) -> None:
        assert tokenize("") == []


class TestTermTypes:
    """Typing of single terms."""

    def test_iri_term(self) -> None:
        assert is_iri_term("<http://example.org/>") is True
        assert is_iri_term("ex:a") is False

    @pytest.mark.parametrize("token", ['"x"', "'x'", '"x"@en', "42", "-1.5e3", ".5", "true", "false"])
    def test_literal_terms(self, token: str) -> None:
        assert is_literal_term(token) is True

    @pytest.mark.parametrize("token", ["ex:a", "a", "<http://example.org/>", "True"])
    def test_non_literal_terms(self, token: str) -> None:
        assert is_literal_term(token) is False

    def test_split_namespaced(self) -> None:
        assert split_namespaced("cco:Agent") == ("cco", "Agent")
        assert split_namespaced(":Agent") == ("", "Agent")
        assert split_namespaced("obo:BFO:0000001") == ("obo", "BFO:0000001")
        assert split_namespaced("Agent") is None
        assert split_namespaced('"a:b"') is None

    def test_bracket_delta(self) -> None:
        assert bracket_delta("[") == 1
        assert bracket_delta("(") == 1
        assert bracket_delta("]") == -1
        assert bracket_delta(")") == -1
        assert bracket_delta("ex:a") == 0


class TestMakeTerms:
    """Predicates and objects built from terms."""

    def test_namespaced_predicate(self) -> None:
        p = make_predicate("rdfs:label")
        assert p is not None
        assert p.namespace == "rdfs"
        assert p.namespace_local_name == "label"
        assert p.is_iri is False

    def test_iri_predicate(self) -> None:
        p = make_predicate("<http://example.org/p>")
        assert p is not None
        assert p.is_iri is True
        assert p.iri_or_literal_text == "http://example.org/p"
        assert p.namespace is None

    def test_a_is_rdf_type(self) -> None:
        p = make_predicate("a")
        assert p is not None
        assert p.raw_text == "a"
        assert (p.namespace, p.namespace_local_name) == ("rdf", "type")

    def test_literal_is_not_a_predicate(self) -> None:
        assert make_predicate('"label"') is None
        assert make_predicate("label") is None

    def test_objects(self) -> None:
        iri = make_object("<http://example.org/o>")
        literal = make_object('"Foo"@en')
        name = make_object(":Foo")
        assert iri is not None and iri.is_iri and iri.iri_text == "http://example.org/o"
        assert literal is not None and literal.is_literal and literal.literal_text == '"Foo"@en'
        assert name is not None and name.namespace == "" and name.namespace_local_name == "Foo"

    def test_unknown_object(self) -> None:
        assert make_object("Foo") is None

    def test_collection(self) -> None:
        obj = make_collection(["[", "owl:onProperty", "cco:has_input", "]"])
        assert obj.is_collection is True
        assert obj.raw_text == "[ owl:onProperty cco:has_input ]"
