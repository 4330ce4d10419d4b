"""Statement kinds produced by the line classifier.

Every physical line of a Turtle document is mapped to exactly one
`StatementKind`. The tag set is closed: a line that matches none of the
known shapes is tagged `NOT_A_TURTLE` rather than raising.

`Classification` pairs the tag with the data extracted while classifying,
so that a declaration line carries its namespace or IRI alongside the tag
instead of requiring a second, out-of-band extraction call:

    ```python
    c = classify_line("@prefix cco: <http://example.org/cco#> .")
    c.kind               # StatementKind.NORM_PREFIX
    c.namespace          # "cco"
    c.is_empty_namespace # False
    ```
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class StatementKind(str, Enum):
    """Syntactic role of a single Turtle line."""

    COMMENT = "comment"
    """Whole-line comment (starts with `#`)."""

    BASE_PREFIX = "base_prefix"
    """`@base <iri> .` declaration."""

    NORM_PREFIX = "norm_prefix"
    """`@prefix ns: <iri> .` declaration."""

    WHITESPACE = "whitespace"
    """Empty or whitespace-only line."""

    TERMINATOR = "terminator"
    """A lone `.`."""

    STATEMENT_WITH_TERMINATOR = "statement_with_terminator"
    """Line that ends a full statement with ` .`."""

    PART_OF_PREDICATE_LIST_WITH_SUBJECT = "part_of_predicate_list_with_subject"
    """New subject followed by its first predicate, ending in ` ;`."""

    PART_OF_PREDICATE_LIST = "part_of_predicate_list"
    """Continuation predicate, ending in ` ;`."""

    PART_OF_OBJECT_LIST_WITH_PREDICATE = "part_of_object_list_with_predicate"
    """New predicate plus its first object, ending in ` ,`."""

    PART_OF_OBJECT_LIST = "part_of_object_list"
    """Continuation object, ending in ` ,`."""

    PART_OF_OBJECT_LIST_AS_LITERAL = "part_of_object_list_as_literal"
    """Continuation object that is a quoted literal."""

    PART_OF_COLLECTION_LIST = "part_of_collection_list"
    """Fragment of a `[ ... ]` blank-node collection."""

    NOT_A_TURTLE = "not_a_turtle"
    """None of the known line shapes matched."""

    @property
    def is_declaration(self) -> bool:
        return self in (StatementKind.BASE_PREFIX, StatementKind.NORM_PREFIX)

    @property
    def is_ignorable(self) -> bool:
        """Kinds that never change accumulator state."""
        return self in (StatementKind.COMMENT, StatementKind.WHITESPACE, StatementKind.TERMINATOR)


class Classification(BaseModel):
    """A classified line: the tag plus the data extracted for it.

    Attributes:
        kind: The statement kind assigned to the line.
        line: The normalised line (comment-trimmed, stripped) that was classified.
        namespace: Prefix label for `NORM_PREFIX` lines; `None` when absent or
            not applicable.
        is_empty_namespace: True for the anonymous default prefix `:`.
        iri: Declared IRI (angle brackets stripped) for declaration lines.
    """

    model_config = {"frozen": True}

    kind: StatementKind = Field(description="Statement kind assigned to the line.")
    line: str = Field(default="", description="Normalised line text that was classified.")
    namespace: str | None = Field(default=None, description="Prefix label of an @prefix declaration.")
    is_empty_namespace: bool = Field(default=False, description="True for the default ':' prefix.")
    iri: str | None = Field(default=None, description="IRI of a declaration, without angle brackets.")

    @model_validator(mode="after")
    def declaration_data_only_on_declarations(self) -> "Classification":
        if not self.kind.is_declaration and (self.namespace is not None or self.iri is not None):
            raise ValueError(f"{self.kind.value} lines carry no declaration data")
        if self.kind is StatementKind.BASE_PREFIX and self.namespace is not None:
            raise ValueError("base declarations have no namespace")
        if self.is_empty_namespace and self.namespace != "":
            raise ValueError("is_empty_namespace requires an empty namespace")
        return self

    @property
    def is_malformed_declaration(self) -> bool:
        """True when a declaration line matched its tag but lacked an IRI or namespace."""
        if self.kind is StatementKind.BASE_PREFIX:
            return self.iri is None
        if self.kind is StatementKind.NORM_PREFIX:
            return self.iri is None or self.namespace is None
        return False
