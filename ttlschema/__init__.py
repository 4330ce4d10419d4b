"""
Turtle Schema - Document Models

This package contains only Pydantic models with no parsing code. It defines:

- The closed set of statement kinds a Turtle line can be classified as
- The classification result carrying extracted declaration data
- The document aggregate: header items, statements, predicates, objects

These are produced by ttlstream (the streaming classifier and accumulator)
and consumed by whatever serializes or reasons over the result.
"""

from ttlschema.document import Document, HeaderItem, Object, Predicate, Statement
from ttlschema.kinds import Classification, StatementKind

__all__ = [
    "Classification",
    "Document",
    "HeaderItem",
    "Object",
    "Predicate",
    "Statement",
    "StatementKind",
]

__version__ = "0.1.0"
