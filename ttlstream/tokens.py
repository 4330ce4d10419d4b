"""Term tokenizing and term typing.

The classifier decides the role of a line from its punctuation and a couple
of cheap lexical tests. Filling in predicates and objects needs the terms
themselves, so this module splits a line into Turtle terms (keeping quoted
literals, IRIs and brackets intact) and types each term as an IRI, a
namespaced name, or a literal.
"""

import re

from ttlschema.document import Object, Predicate

OPEN_BRACKETS = ("[", "(")
CLOSE_BRACKETS = ("]", ")")
PUNCTUATION = (".", ";", ",")

RDF_TYPE_KEYWORD = "a"

_TOKEN_RE = re.compile(
    r"""
      (?:"{3}(?:[^"\\]|\\.|"(?!""))*"{3}                   # long literal on one line
        |'''(?:[^'\\]|\\.|'(?!''))*'''
        |"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')              # quoted literal
      (?:@[A-Za-z][A-Za-z0-9-]*                            # language tag
        |\^\^(?:<[^>\s]*>|[^\s\[\]();,"'<>]+))?            # or datatype
    | <[^>\s]*>                                            # IRI
    | [\[\]();,]                                           # brackets, separators
    | [^\s\[\]();,"'<]+                                    # prefixed name, keyword, number, '.'
    | \S                                                   # anything else, one char at a time
    """,
    re.VERBOSE,
)

_NUMERIC_RE = re.compile(r"[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)")
_BOOLEANS = ("true", "false")


def tokenize(line: str) -> list[str]:
    """Split a line into Turtle terms and punctuation tokens."""
    return [m.group(0) for m in _TOKEN_RE.finditer(line)]


def is_iri_term(token: str) -> bool:
    return len(token) >= 2 and token.startswith("<") and token.endswith(">")


def is_literal_term(token: str) -> bool:
    if token[:1] in ('"', "'"):
        return True
    return token in _BOOLEANS or _NUMERIC_RE.fullmatch(token) is not None


def split_namespaced(token: str) -> tuple[str, str] | None:
    """Split `prefix:local` at the first colon; None if the token has none."""
    if token[:1] in ('"', "'", "<") or ":" not in token:
        return None
    namespace, _, local = token.partition(":")
    return namespace, local


def bracket_delta(token: str) -> int:
    """Return +1 for an opening bracket token, -1 for a closing one, else 0."""
    if token in OPEN_BRACKETS:
        return 1
    if token in CLOSE_BRACKETS:
        return -1
    return 0


def make_predicate(token: str) -> Predicate | None:
    """Build a predicate from a term, or None if the term cannot be a predicate."""
    if is_iri_term(token):
        return Predicate(raw_text=token, is_iri=True, iri_or_literal_text=token[1:-1])
    if token == RDF_TYPE_KEYWORD:
        return Predicate(raw_text=token, namespace="rdf", namespace_local_name="type")
    parts = split_namespaced(token)
    if parts is None:
        return None
    namespace, local = parts
    return Predicate(raw_text=token, namespace=namespace, namespace_local_name=local)


def make_object(token: str) -> Object | None:
    """Build an object from a term, or None if the term is not a valid object."""
    if is_iri_term(token):
        return Object(raw_text=token, is_iri=True, iri_text=token[1:-1])
    if is_literal_term(token):
        return Object(raw_text=token, is_literal=True, literal_text=token)
    parts = split_namespaced(token)
    if parts is None:
        return None
    namespace, local = parts
    return Object(raw_text=token, namespace=namespace, namespace_local_name=local)


def make_collection(tokens: list[str]) -> Object:
    """Build the opaque marker object for a bracketed fragment."""
    return Object(raw_text=" ".join(tokens), is_collection=True)
