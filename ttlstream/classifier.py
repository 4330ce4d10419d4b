"""Statement-kind classification of single Turtle lines.

Ontology serializers write one syntactic unit per physical line, so the
role of a line can be read off its first tokens and its terminal
punctuation without a grammar:

    @prefix cco: <http://www.ontologyrepository.com/CommonCoreOntologies/> .
    cco:process_precedes rdf:type owl:ObjectProperty ;
                         rdfs:subClassOf obo:BFO_0000015 ;
                         obo:IAO_0000112 "a literal"@en ,
                                         "another literal"@en ;
                         rdfs:label "process precedes"@en .

Classification is total: every input maps to exactly one `StatementKind`,
with `NOT_A_TURTLE` as the fallback, and nothing here raises on malformed
input. What to do with unrecognized lines is decided by the caller.

Decision order (first match wins):

    1. empty line                       -> WHITESPACE
    2. starts with '#'                  -> COMMENT
    3. lone '.'                         -> TERMINATOR
    4. starts with '@prefix'            -> NORM_PREFIX
    5. starts with '@base'              -> BASE_PREFIX
    6. ends with ' .'                   -> STATEMENT_WITH_TERMINATOR
    7. ends with ' ;' or ' ,':
         collection fragment            -> PART_OF_COLLECTION_LIST
       ' ;':
         quoted literal                 -> PART_OF_OBJECT_LIST_AS_LITERAL
         subject + predicate tokens     -> PART_OF_PREDICATE_LIST_WITH_SUBJECT
         otherwise                      -> PART_OF_PREDICATE_LIST
       ' ,':
         predicate token + value        -> PART_OF_OBJECT_LIST_WITH_PREDICATE
         quoted literal                 -> PART_OF_OBJECT_LIST_AS_LITERAL
         otherwise                      -> PART_OF_OBJECT_LIST
    8. bracket-delimited fragment       -> PART_OF_COLLECTION_LIST
    9. otherwise                        -> NOT_A_TURTLE
"""

import re

from ttlschema.kinds import Classification, StatementKind

from .comments import trim_tail_comment
from .terminators import (
    has_part_terminator,
    has_predicate_list_terminator,
    has_statement_terminator,
    is_lone_terminator,
)
from .tokens import CLOSE_BRACKETS, OPEN_BRACKETS, RDF_TYPE_KEYWORD

PREFIX_DIRECTIVE = "@prefix"
BASE_DIRECTIVE = "@base"
BYTE_ORDER_MARK = "\ufeff"

_PREFIX_LABEL_RE = re.compile(r"@prefix\s+(?P<namespace>[^\s:<>]*):")
_IRI_RE = re.compile(r"<(?P<iri>[^<>\s]*)>")


def normalize_line(line: str) -> str:
    """Strip a byte-order mark, surrounding whitespace and any tail comment."""
    return trim_tail_comment(line.lstrip(BYTE_ORDER_MARK).strip())


def _is_quoted(token: str) -> bool:
    return token[:1] in ('"', "'")


def _is_namespaced_predicate(token: str) -> bool:
    if token == RDF_TYPE_KEYWORD:
        return True
    return token.count(":") == 1 and not _is_quoted(token)


def has_subject_token(line: str) -> bool:
    """True if the line starts with a subject followed by a namespaced predicate.

    `cco:doctrinal_source rdf:type owl:AnnotationProperty ;` has one;
    `rdfs:subClassOf obo:BFO_0000015 ;` does not, since a bare
    `predicate object ;` line has at most three tokens. An inline object
    list (`rdfs:subClassOf cco:A , cco:B ;`) has no subject either.
    """
    tokens = line.split(" ")
    if len(tokens) <= 3 or tokens[2] == ",":
        return False
    return _is_namespaced_predicate(tokens[1])


def has_predicate_token(line: str) -> bool:
    """True if the first token is a namespaced predicate followed by a value."""
    tokens = line.split(" ")
    if len(tokens) < 2:
        return False
    return _is_namespaced_predicate(tokens[0]) and tokens[1] != ","


def is_literal(line: str) -> bool:
    """True for a continuation line whose first token is a literal value."""
    if not line.endswith((",", ";")):
        return False
    first = line.split(" ")[0]
    if _is_quoted(first):
        return True
    if first.startswith("<") or first == RDF_TYPE_KEYWORD or first[:1] in OPEN_BRACKETS:
        return False
    return ":" not in first


def has_tail_collection_ending(line: str) -> bool:
    """True for a line closing a bracketed fragment, e.g. `owl:someValuesFrom cco:Velocity ] ;`."""
    tokens = line.split()
    if len(tokens) < 2:
        return False
    return tokens[-1] in (";", ",") and tokens[-2] in CLOSE_BRACKETS


def is_collection_fragment(line: str) -> bool:
    if line[:1] in OPEN_BRACKETS:
        return True
    return has_tail_collection_ending(line)


def extract_base_declaration(line: str) -> str | None:
    """Return the IRI of an `@base <iri> .` line without its angle brackets.

    Returns None when the line is not a base declaration or the IRI is not
    angle-bracketed.
    """
    if not line.startswith(BASE_DIRECTIVE):
        return None
    rest = line[len(BASE_DIRECTIVE):].strip()
    if rest.endswith("."):
        rest = rest[:-1].strip()
    match = _IRI_RE.fullmatch(rest)
    return match.group("iri") if match else None


def extract_prefix_declaration(line: str) -> tuple[str | None, bool, str | None]:
    """Return (namespace, is_empty_namespace, iri) for an `@prefix` line.

    `@prefix cco: <http://example.org/cco#> .` gives `("cco", False,
    "http://example.org/cco#")`; the default prefix gives an empty
    namespace and `is_empty_namespace=True`. Parts that cannot be extracted
    are None.
    """
    if not line.startswith(PREFIX_DIRECTIVE):
        return None, False, None
    label = _PREFIX_LABEL_RE.match(line)
    namespace = label.group("namespace") if label else None
    rest = line[label.end():] if label else line[len(PREFIX_DIRECTIVE):]
    iri = _IRI_RE.search(rest)
    return namespace, namespace == "", iri.group("iri") if iri else None


def _classify_part(text: str) -> StatementKind:
    if is_collection_fragment(text):
        return StatementKind.PART_OF_COLLECTION_LIST
    if has_predicate_list_terminator(text):
        if is_literal(text):
            return StatementKind.PART_OF_OBJECT_LIST_AS_LITERAL
        if has_subject_token(text):
            return StatementKind.PART_OF_PREDICATE_LIST_WITH_SUBJECT
        return StatementKind.PART_OF_PREDICATE_LIST
    if has_predicate_token(text):
        return StatementKind.PART_OF_OBJECT_LIST_WITH_PREDICATE
    if is_literal(text):
        return StatementKind.PART_OF_OBJECT_LIST_AS_LITERAL
    return StatementKind.PART_OF_OBJECT_LIST


def classify_line(line: str) -> Classification:
    """Classify one raw line and extract declaration data where present."""
    text = normalize_line(line)

    if not text:
        return Classification(kind=StatementKind.WHITESPACE, line=text)
    if text.startswith("#"):
        return Classification(kind=StatementKind.COMMENT, line=text)
    if is_lone_terminator(text):
        return Classification(kind=StatementKind.TERMINATOR, line=text)
    if text.startswith(PREFIX_DIRECTIVE):
        namespace, is_empty, iri = extract_prefix_declaration(text)
        return Classification(
            kind=StatementKind.NORM_PREFIX,
            line=text,
            namespace=namespace,
            is_empty_namespace=is_empty,
            iri=iri,
        )
    if text.startswith(BASE_DIRECTIVE):
        return Classification(kind=StatementKind.BASE_PREFIX, line=text, iri=extract_base_declaration(text))
    if has_statement_terminator(text):
        return Classification(kind=StatementKind.STATEMENT_WITH_TERMINATOR, line=text)
    if has_part_terminator(text):
        return Classification(kind=_classify_part(text), line=text)
    if is_collection_fragment(text):
        return Classification(kind=StatementKind.PART_OF_COLLECTION_LIST, line=text)
    return Classification(kind=StatementKind.NOT_A_TURTLE, line=text)


def classify(line: str) -> StatementKind:
    """Return the statement kind of one raw line."""
    return classify_line(line).kind
