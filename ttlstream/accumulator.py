"""Streaming assembly of a Document from classified lines.

The accumulator consumes one classified line at a time and folds it into
the document it owns. The only state carried between lines is the open
statement (with the position reached inside it and any bracketed fragment
still being collected); the classifier itself is stateless.

Typical usage:
    ```python
    accumulator = DocumentAccumulator()
    for line in lines:
        accumulator.feed(line)
    document = accumulator.finish()
    if accumulator.diagnostics.truncated:
        ...
    ```

Within a line, terms are folded left to right: `;` moves on to a new
predicate, `,` to a new object of the same predicate, `.` closes the
statement. The line's StatementKind only decides where folding starts
(subject, predicate or object). A `[` or `(` starts a fragment that is
collected verbatim, across lines if needed, until its brackets balance;
it is stored as one opaque collection Object (or as the subject of an
anonymous top-level node).
"""

import logging
from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from ttlschema.document import Document, HeaderItem, Statement
from ttlschema.kinds import Classification, StatementKind

from .classifier import classify_line
from .config import ParserConfig, UnrecognizedLinePolicy
from .diagnostics import DiagnosticKind, ParseDiagnostics
from .errors import NotATurtleError
from .tokens import (
    CLOSE_BRACKETS,
    OPEN_BRACKETS,
    PUNCTUATION,
    bracket_delta,
    make_collection,
    make_object,
    make_predicate,
    tokenize,
)

logger = logging.getLogger(__name__)


class _Position(Enum):
    SUBJECT = "subject"
    PREDICATE = "predicate"
    OBJECT = "object"


class _Fragment:
    """Tokens of a bracketed fragment collected until its brackets balance."""

    def __init__(self) -> None:
        self.tokens: list[str] = []
        self.depth = 0

    def feed(self, token: str) -> bool:
        """Add a token; return True once the fragment is closed."""
        self.tokens.append(token)
        self.depth += bracket_delta(token)
        return self.depth == 0


class _OpenStatement:
    """The statement being assembled and where the next term goes."""

    def __init__(self) -> None:
        self.statement = Statement()
        self.position = _Position.SUBJECT
        self.fragment: Optional[_Fragment] = None


def _leading_term_count(tokens: list[str]) -> int:
    """Count terms before the first top-level punctuation; a bracketed group counts once."""
    count = 0
    depth = 0
    for token in tokens:
        if depth == 0:
            if token in PUNCTUATION:
                break
            if token not in CLOSE_BRACKETS:
                count += 1
        depth = max(depth + bracket_delta(token), 0)
    return count


class DocumentAccumulator:
    """Fold classified Turtle lines into a Document.

    `accumulate` never raises on bad input: problems are recorded in
    `diagnostics` and the line is skipped. Call `finish()` once the input
    ends; an unterminated statement is then discarded and reported as
    truncated input rather than added to the body.

    Independent accumulators share no state, so several documents can be
    assembled side by side.
    """

    def __init__(
        self,
        document: Document | None = None,
        config: ParserConfig | None = None,
        diagnostics: ParseDiagnostics | None = None,
    ):
        self.document = document if document is not None else Document()
        self.config = config or ParserConfig()
        self.diagnostics = diagnostics if diagnostics is not None else ParseDiagnostics()
        self.line_number = 0
        self._open: Optional[_OpenStatement] = None

    @property
    def in_statement(self) -> bool:
        return self._open is not None

    def feed(self, line: str) -> Classification:
        """Classify a raw line, fold it in, and return its classification."""
        raw = line.rstrip("\r\n")
        classification = classify_line(raw)
        self.accumulate(classification, raw_line=raw)
        return classification

    def accumulate(self, classification: Classification, raw_line: str | None = None) -> None:
        """Fold one classified line into the document."""
        self.line_number += 1
        kind = classification.kind
        text = classification.line

        if kind.is_ignorable:
            return
        if self._open is not None and self._open.fragment is not None:
            self._fold(tokenize(text), None)
            return

        if kind is StatementKind.BASE_PREFIX:
            self._add_base(classification, raw_line)
        elif kind is StatementKind.NORM_PREFIX:
            self._add_prefix(classification, raw_line)
        elif kind is StatementKind.NOT_A_TURTLE:
            self._record(DiagnosticKind.UNRECOGNIZED_LINE, "not a turtle statement", text)
        else:
            self._accumulate_statement_line(kind, text)

    def finish(self) -> Document:
        """End the input and hand the document to the caller.

        An open statement is discarded and recorded as truncated input. The
        accumulator starts a fresh document afterwards, so feeding more lines
        never changes the one returned here.
        """
        if self._open is not None:
            subject = self._open.statement.subject
            self._open = None
            self._record(
                DiagnosticKind.TRUNCATED_INPUT,
                f"input ended inside the statement for subject {subject!r}; statement discarded",
                None,
            )
        document, self.document = self.document, Document()
        return document

    # --- declarations ---

    def _keep(self, classification: Classification, raw_line: str | None) -> str | None:
        if not self.config.keep_raw_lines:
            return None
        return raw_line if raw_line is not None else classification.line

    def _add_base(self, classification: Classification, raw_line: str | None) -> None:
        if any(h.is_base for h in self.document.headers):
            self._record(DiagnosticKind.DUPLICATE_BASE, "second @base declaration ignored", classification.line)
            return
        if classification.is_malformed_declaration:
            self._record(DiagnosticKind.MALFORMED_DECLARATION, "@base without an <iri>", classification.line)
        self.document.headers.append(
            HeaderItem(is_base=True, iri=classification.iri, raw_line=self._keep(classification, raw_line))
        )

    def _add_prefix(self, classification: Classification, raw_line: str | None) -> None:
        if classification.is_malformed_declaration:
            self._record(
                DiagnosticKind.MALFORMED_DECLARATION,
                "@prefix without a namespace label or <iri>",
                classification.line,
            )
        self.document.headers.append(
            HeaderItem(
                is_base=False,
                is_empty_namespace=classification.is_empty_namespace,
                namespace=classification.namespace,
                iri=classification.iri,
                raw_line=self._keep(classification, raw_line),
            )
        )

    # --- statements ---

    def _accumulate_statement_line(self, kind: StatementKind, text: str) -> None:
        tokens = tokenize(text)
        if (
            kind is StatementKind.PART_OF_COLLECTION_LIST
            and self._open is not None
            and tokens
            and tokens[0] not in OPEN_BRACKETS
        ):
            # tail of a fragment whose opening line was never seen
            self._add_collection([t for t in tokens if t not in PUNCTUATION], text)
            return

        start = self._start_position(kind, tokens)
        if start is None:
            self._record(DiagnosticKind.ORPHAN_CONTINUATION, f"{kind.value} line with no open statement", text)
            return
        self._fold(tokens, start)

    def _start_position(self, kind: StatementKind, tokens: list[str]) -> Optional[_Position]:
        count = _leading_term_count(tokens)
        if kind is StatementKind.PART_OF_PREDICATE_LIST_WITH_SUBJECT:
            return _Position.SUBJECT
        if self._open is None:
            if (tokens and tokens[0] in OPEN_BRACKETS) or count >= 3:
                return _Position.SUBJECT
            return None
        if kind in (StatementKind.STATEMENT_WITH_TERMINATOR, StatementKind.PART_OF_OBJECT_LIST_WITH_PREDICATE):
            if count >= 3:
                return _Position.SUBJECT
            return _Position.PREDICATE if count == 2 else _Position.OBJECT
        if kind is StatementKind.PART_OF_PREDICATE_LIST:
            return _Position.OBJECT if count == 1 else _Position.PREDICATE
        return _Position.OBJECT

    def _fold(self, tokens: list[str], start: Optional[_Position]) -> None:
        if start is _Position.SUBJECT:
            if self._open is not None:
                self._close(unterminated=True)
            self._open = _OpenStatement()
        elif start is not None and self._open is not None:
            self._open.position = start

        for token in tokens:
            if self._open is None:
                self._open = _OpenStatement()
            current = self._open

            if current.fragment is not None:
                if current.fragment.feed(token):
                    self._end_fragment(current)
                continue

            if token in OPEN_BRACKETS:
                current.fragment = _Fragment()
                current.fragment.feed(token)
            elif token in CLOSE_BRACKETS:
                self._record(DiagnosticKind.UNRECOGNIZED_TERM, f"unbalanced {token!r}", None)
            elif token == ".":
                self._close()
            elif token == ";":
                current.position = _Position.PREDICATE
            elif token == ",":
                current.position = _Position.OBJECT
            elif current.position is _Position.SUBJECT:
                current.statement.subject = token
                current.position = _Position.PREDICATE
            elif current.position is _Position.PREDICATE:
                predicate = make_predicate(token)
                if predicate is None:
                    self._record(DiagnosticKind.UNRECOGNIZED_TERM, f"{token!r} is not a predicate", None)
                    continue
                current.statement.predicates.append(predicate)
                current.position = _Position.OBJECT
            else:
                self._add_object(token)

    def _add_object(self, token: str) -> None:
        predicate = self._open.statement.last_predicate if self._open else None
        if predicate is None:
            self._record(DiagnosticKind.ORPHAN_CONTINUATION, f"object {token!r} with no predicate", None)
            return
        obj = make_object(token)
        if obj is None:
            self._record(DiagnosticKind.UNRECOGNIZED_TERM, f"{token!r} is not an object", None)
            return
        predicate.objects.append(obj)

    def _add_collection(self, tokens: list[str], text: str | None) -> None:
        predicate = self._open.statement.last_predicate if self._open else None
        if predicate is None:
            self._record(DiagnosticKind.ORPHAN_CONTINUATION, "collection fragment with no predicate", text)
            return
        predicate.objects.append(make_collection(tokens))

    def _end_fragment(self, current: _OpenStatement) -> None:
        tokens = current.fragment.tokens
        current.fragment = None
        if current.position is _Position.SUBJECT:
            current.statement.subject = " ".join(tokens)
            current.position = _Position.PREDICATE
        else:
            self._add_collection(tokens, None)

    def _close(self, unterminated: bool = False) -> None:
        current = self._open
        self._open = None
        if current is None:
            return
        statement = current.statement
        if statement.subject is None:
            self._record(DiagnosticKind.ORPHAN_CONTINUATION, "statement without a subject discarded", None)
            return
        if unterminated:
            self._record(
                DiagnosticKind.UNTERMINATED_STATEMENT,
                f"statement for {statement.subject!r} closed by a new subject",
                None,
            )
        self.document.body.append(statement)

    def _record(self, kind: DiagnosticKind, message: str, raw_line: str | None) -> None:
        self.diagnostics.add(kind, line_number=self.line_number, message=message, raw_line=raw_line)


class ParseResult(BaseModel):
    """A finished document plus the diagnostics gathered while building it."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    document: Document
    diagnostics: ParseDiagnostics

    @property
    def truncated(self) -> bool:
        return self.diagnostics.truncated


def parse_lines(lines: Iterable[str], config: ParserConfig | None = None) -> ParseResult:
    """Assemble a document from an iterable of lines.

    Applies the unrecognized-line policy of `config`: with `abort`, the
    first NOT_A_TURTLE line raises NotATurtleError; with `skip`, lines are
    skipped unless `max_unrecognized_lines` is exceeded.

    Raises:
        NotATurtleError: When the policy rejects the input.
    """
    config = config or ParserConfig()
    accumulator = DocumentAccumulator(config=config)
    seen = 0
    for line in lines:
        accumulator.feed(line)
        unrecognized = accumulator.diagnostics.unrecognized_count
        if unrecognized == seen:
            continue
        seen = unrecognized
        if config.unrecognized_policy is UnrecognizedLinePolicy.ABORT:
            raise NotATurtleError(accumulator.line_number, line.rstrip("\r\n"))
        if config.max_unrecognized_lines is not None and unrecognized > config.max_unrecognized_lines:
            raise NotATurtleError(
                accumulator.line_number,
                line.rstrip("\r\n"),
                f"more than {config.max_unrecognized_lines} unrecognized lines (last at line {accumulator.line_number})",
            )
    document = accumulator.finish()
    logger.debug(
        "Assembled %d headers and %d statements from %d lines",
        len(document.headers),
        len(document.body),
        accumulator.line_number,
    )
    return ParseResult(document=document, diagnostics=accumulator.diagnostics)
