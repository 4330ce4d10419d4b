"""Terminal punctuation detection.

Serializers such as Protege and the OWL API separate terminal punctuation
from the preceding token with a single space:

    rdfs:label "Armored Fighting Vehicle"@en .
    rdfs:subClassOf cco:Certificate ;
    obo:BFO_0000004 ,

Only punctuation preceded by a separator counts as a terminator, which
distinguishes `foo.bar .` (terminated) from `foo.bar.` (punctuation glued to
a token). The classifier calls nothing but the predicates below, so the
separator rule can be relaxed here (tabs, several spaces) without touching
its decision order.
"""

STATEMENT_TERMINATOR = "."
PREDICATE_LIST_SEPARATOR = ";"
OBJECT_LIST_SEPARATOR = ","

DEFAULT_SEPARATORS = " "


def ends_with_terminator(line: str, punctuation: str, separators: str = DEFAULT_SEPARATORS) -> bool:
    """Return True if `line` ends in `punctuation` preceded by a separator.

    Lines shorter than two characters never carry a valid terminator.
    """
    if len(line) < 2:
        return False
    return line[-1] == punctuation and line[-2] in separators


def has_statement_terminator(line: str, separators: str = DEFAULT_SEPARATORS) -> bool:
    return ends_with_terminator(line, STATEMENT_TERMINATOR, separators)


def has_predicate_list_terminator(line: str, separators: str = DEFAULT_SEPARATORS) -> bool:
    return ends_with_terminator(line, PREDICATE_LIST_SEPARATOR, separators)


def has_object_list_terminator(line: str, separators: str = DEFAULT_SEPARATORS) -> bool:
    return ends_with_terminator(line, OBJECT_LIST_SEPARATOR, separators)


def has_part_terminator(line: str, separators: str = DEFAULT_SEPARATORS) -> bool:
    """Return True for a valid ` ;` or ` ,` ending."""
    return has_predicate_list_terminator(line, separators) or has_object_list_terminator(line, separators)


def is_lone_terminator(line: str) -> bool:
    """Return True when the line holds nothing but a `.`."""
    return line.strip() == STATEMENT_TERMINATOR
