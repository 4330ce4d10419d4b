"""
Streaming line-oriented Turtle reader.

Classifies each physical line of a serializer-formatted Turtle file by its
syntactic role and folds the lines into a `ttlschema.Document` (header
declarations plus subject/predicate/object statements) without building a
full grammar or holding the file in memory.

    from ttlstream import load_turtle_document

    result = load_turtle_document("ontology.ttl")
    for subject, predicate, obj in result.document.iter_triples():
        ...
"""

from ttlstream.accumulator import DocumentAccumulator, ParseResult, parse_lines
from ttlstream.classifier import classify, classify_line
from ttlstream.config import ParserConfig, UnrecognizedLinePolicy, load_parser_config
from ttlstream.diagnostics import Diagnostic, DiagnosticKind, ParseDiagnostics
from ttlstream.errors import NotATurtleError, TruncatedInputError, TurtleLoadError
from ttlstream.loader import load_turtle_document

__all__ = [
    "classify",
    "classify_line",
    "DocumentAccumulator",
    "ParseResult",
    "parse_lines",
    "load_turtle_document",
    "ParserConfig",
    "UnrecognizedLinePolicy",
    "load_parser_config",
    "Diagnostic",
    "DiagnosticKind",
    "ParseDiagnostics",
    "TurtleLoadError",
    "NotATurtleError",
    "TruncatedInputError",
]

__version__ = "0.1.0"
