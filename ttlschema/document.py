"""Document representation for streamed Turtle files.

This module defines the aggregate assembled from a Turtle document one line
at a time:

    - **HeaderItem**: one `@prefix` or `@base` declaration
    - **Statement**: one subject with its ordered predicate list
    - **Predicate**: one predicate with its ordered object list
    - **Object**: one object value (IRI, namespaced name, literal, or an
      opaque collection fragment)
    - **Document**: the ordered headers plus the ordered closed statements

Every relationship is expressed as ownership (`headers`, `body`,
`predicates`, `objects`), so a document has no cycles or back references
and dumps to JSON field by field with `model_dump_json()`.

A value is tagged as exactly one kind. Namespaced values carry their prefix
in `namespace`; the default prefix (`:Foo`) has `namespace == ""`, so
"namespaced" means `namespace is not None`.
"""

from typing import Iterator

from pydantic import BaseModel, Field, model_validator


class HeaderItem(BaseModel):
    """One `@prefix` or `@base` declaration.

    Header items are immutable and created once per declaration line. A
    declaration whose IRI or namespace could not be extracted is still
    recorded, with the missing fields left as `None`, so that declaration
    order is preserved for diagnostics.
    """

    model_config = {"frozen": True}

    is_base: bool = Field(description="True for an @base declaration.")
    is_empty_namespace: bool = Field(default=False, description="True for the default ':' prefix.")
    namespace: str | None = Field(default=None, description="Prefix label; absent for @base items.")
    iri: str | None = Field(default=None, description="Declared IRI without angle brackets.")
    raw_line: str | None = Field(default=None, description="Declaration line as read, kept for debugging.")

    @model_validator(mode="after")
    def base_has_no_namespace(self) -> "HeaderItem":
        if self.is_base and (self.namespace is not None or self.is_empty_namespace):
            raise ValueError("@base header items have no namespace")
        return self


class Object(BaseModel):
    """One object value of a predicate."""

    model_config = {"frozen": True}

    raw_text: str = Field(description="Object term as written.")
    is_iri: bool = Field(default=False, description="True for an angle-bracketed IRI.")
    iri_text: str | None = Field(default=None, description="IRI without angle brackets.")
    is_literal: bool = Field(default=False, description="True for a quoted, numeric or boolean literal.")
    literal_text: str | None = Field(default=None, description="Literal including quotes and language/datatype.")
    namespace: str | None = Field(default=None, description="Prefix of a namespaced name.")
    namespace_local_name: str | None = Field(default=None, description="Local part of a namespaced name.")
    is_collection: bool = Field(
        default=False,
        description="True for an unparsed '[ ... ]' or '( ... )' fragment kept in raw_text.",
    )

    @model_validator(mode="after")
    def exactly_one_kind(self) -> "Object":
        kinds = [self.is_iri, self.is_literal, self.is_collection, self.namespace is not None]
        if sum(kinds) != 1:
            raise ValueError(f"object {self.raw_text!r} must be exactly one of iri, literal, collection, namespaced")
        return self


class Predicate(BaseModel):
    """One predicate of a statement and the objects asserted for it."""

    raw_text: str = Field(description="Predicate term as written.")
    is_iri: bool = Field(default=False, description="True for an angle-bracketed IRI.")
    iri_or_literal_text: str | None = Field(default=None, description="IRI without angle brackets.")
    namespace: str | None = Field(default=None, description="Prefix of a namespaced name.")
    namespace_local_name: str | None = Field(default=None, description="Local part of a namespaced name.")
    objects: list[Object] = Field(default_factory=list, description="Objects in document order.")

    @model_validator(mode="after")
    def exactly_one_kind(self) -> "Predicate":
        if self.is_iri == (self.namespace is not None):
            raise ValueError(f"predicate {self.raw_text!r} must be either an iri or namespaced")
        return self


class Statement(BaseModel):
    """A subject and its predicate list.

    Statements are mutated only while open; once the accumulator closes a
    statement it is appended to `Document.body` and not touched again.
    """

    subject: str | None = Field(default=None, description="Subject term as written.")
    predicates: list[Predicate] = Field(default_factory=list, description="Predicates in document order.")

    @property
    def last_predicate(self) -> Predicate | None:
        return self.predicates[-1] if self.predicates else None


class Document(BaseModel):
    """Headers and closed statements of one Turtle document."""

    headers: list[HeaderItem] = Field(default_factory=list, description="Declarations in document order.")
    body: list[Statement] = Field(default_factory=list, description="Closed statements in document order.")

    @model_validator(mode="after")
    def at_most_one_base(self) -> "Document":
        if sum(1 for h in self.headers if h.is_base) > 1:
            raise ValueError("a document declares at most one @base")
        return self

    @property
    def base_iri(self) -> str | None:
        for header in self.headers:
            if header.is_base:
                return header.iri
        return None

    def prefixes(self) -> dict[str, str]:
        """Return declared namespace -> IRI; later declarations win."""
        return {
            h.namespace: h.iri
            for h in self.headers
            if not h.is_base and h.namespace is not None and h.iri is not None
        }

    def resolve(self, namespace: str, local_name: str) -> str | None:
        """Expand a namespaced name using this document's declarations."""
        iri = self.prefixes().get(namespace)
        if iri is None:
            return None
        return iri + local_name

    def iter_triples(self) -> Iterator[tuple[str | None, str, str]]:
        """Yield (subject, predicate, object) raw texts in document order."""
        for statement in self.body:
            for predicate in statement.predicates:
                for obj in predicate.objects:
                    yield statement.subject, predicate.raw_text, obj.raw_text
