"""Diagnostics collected while assembling a document.

Nothing in the streaming core is fatal: a bad line degrades the document
instead of aborting the load. So that degraded input is never silently
lost, the accumulator records one `Diagnostic` per problem and the caller
inspects the collected rows (or just `truncated` and the counts) once the
stream ends.
"""

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class DiagnosticKind(str, Enum):
    """Kinds of recoverable problems found in the input."""

    UNRECOGNIZED_LINE = "unrecognized_line"
    """The classifier returned NOT_A_TURTLE; the line was skipped."""

    TRUNCATED_INPUT = "truncated_input"
    """The stream ended inside a statement; the open statement was discarded."""

    MALFORMED_DECLARATION = "malformed_declaration"
    """A declaration line lacked its IRI or namespace; recorded with absent fields."""

    DUPLICATE_BASE = "duplicate_base"
    """A second @base declaration; ignored."""

    UNTERMINATED_STATEMENT = "unterminated_statement"
    """A new subject started before the open statement was terminated."""

    ORPHAN_CONTINUATION = "orphan_continuation"
    """A continuation line arrived with no statement or predicate to extend."""

    UNRECOGNIZED_TERM = "unrecognized_term"
    """A term could not be typed as an IRI, namespaced name or literal."""


_WARNING_KINDS = {
    DiagnosticKind.TRUNCATED_INPUT,
    DiagnosticKind.MALFORMED_DECLARATION,
    DiagnosticKind.DUPLICATE_BASE,
    DiagnosticKind.UNTERMINATED_STATEMENT,
}


class Diagnostic(BaseModel):
    """One recorded problem, located by its 1-based line number."""

    model_config = {"frozen": True}

    kind: DiagnosticKind
    line_number: int = Field(..., ge=0, description="1-based line number; 0 when not tied to a line.")
    message: str
    raw_line: Optional[str] = None


class ParseDiagnostics:
    """In-memory collector for diagnostics of one parse.

    The accumulator calls `add` as it meets problems; callers read the
    rows, the per-kind counts, or the `truncated` flag after `finish()`.
    """

    def __init__(self) -> None:
        self._rows: list[Diagnostic] = []

    def add(
        self,
        kind: DiagnosticKind,
        *,
        line_number: int,
        message: str,
        raw_line: Optional[str] = None,
    ) -> Diagnostic:
        """Record one diagnostic and log it."""
        row = Diagnostic(kind=kind, line_number=line_number, message=message, raw_line=raw_line)
        self._rows.append(row)
        level = logging.WARNING if kind in _WARNING_KINDS else logging.DEBUG
        logger.log(level, "line %d: %s", line_number, message)
        return row

    @property
    def rows(self) -> list[Diagnostic]:
        return self._rows

    def count(self, kind: DiagnosticKind) -> int:
        return sum(1 for row in self._rows if row.kind is kind)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [row for row in self._rows if row.kind is kind]

    @property
    def unrecognized_count(self) -> int:
        return self.count(DiagnosticKind.UNRECOGNIZED_LINE)

    @property
    def truncated_count(self) -> int:
        return self.count(DiagnosticKind.TRUNCATED_INPUT)

    @property
    def truncated(self) -> bool:
        """True if the input ended inside a statement."""
        return self.truncated_count > 0

    def summary(self) -> dict[str, int]:
        """Return per-kind counts for kinds that occurred."""
        counts: dict[str, int] = {}
        for row in self._rows:
            counts[row.kind.value] = counts.get(row.kind.value, 0) + 1
        return counts

    def __len__(self) -> int:
        return len(self._rows)
