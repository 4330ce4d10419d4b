"""Shared fixtures for the Turtle streaming tests.

Provides:
- Small serializer-formatted Turtle snippets (header block, a class with a
  multi-line object list, a restriction collection, an anonymous node)
- Fresh accumulators and diagnostics collectors
- A helper fixture that writes a snippet to a temporary .ttl file

The snippets follow the layout Protege and the OWL API write: one syntactic
unit per line, terminal punctuation separated by a single space.
"""

from pathlib import Path
from typing import Callable

import pytest

from ttlstream.accumulator import DocumentAccumulator
from ttlstream.diagnostics import ParseDiagnostics

HEADER_LINES = [
    "@base <http://www.ontologyrepository.com/CommonCoreOntologies/Mid/AgentOntology> .",
    "@prefix : <http://www.ontologyrepository.com/CommonCoreOntologies/Mid/AgentOntology#> .",
    "@prefix cco: <http://www.ontologyrepository.com/CommonCoreOntologies/> .",
    "@prefix obo: <http://purl.obolibrary.org/obo/> .",
    "@prefix owl: <http://www.w3.org/2002/07/owl#> .",
    "@prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .",
    "@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .",
]

OBJECT_PROPERTY_LINES = [
    "###  http://www.ontologyrepository.com/CommonCoreOntologies/process_precedes",
    "cco:process_precedes rdf:type owl:ObjectProperty ;",
    "                     rdfs:subPropertyOf obo:BFO_0000063 ;",
    '                     obo:IAO_0000112 "A process of hiring precedes a process of training."@en ,',
    '                                     "A process of training precedes a process of deployment."@en ;',
    '                     rdfs:label "process precedes"@en .',
]

RESTRICTION_LINES = [
    "cco:Acceleration rdf:type owl:Class ;",
    "                 rdfs:subClassOf obo:BFO_0000015 ,",
    "                                 [ rdf:type owl:Restriction ;",
    "                                   owl:onProperty cco:has_input ;",
    "                                   owl:someValuesFrom cco:Velocity",
    "                                 ] ;",
    '                 rdfs:label "Acceleration"@en .',
]

ANONYMOUS_LINES = [
    "[ rdf:type owl:AllDisjointClasses ;",
    "  owl:members ( cco:Agent",
    "                cco:Artifact",
    "              )",
    "] .",
]


@pytest.fixture
def header_lines() -> list[str]:
    """Base, default prefix and five namespaced prefix declarations."""
    return list(HEADER_LINES)


@pytest.fixture
def object_property_lines() -> list[str]:
    """One object property with a two-literal object list across lines."""
    return list(OBJECT_PROPERTY_LINES)


@pytest.fixture
def restriction_lines() -> list[str]:
    """A class whose second superclass is a multi-line `[ ... ]` restriction."""
    return list(RESTRICTION_LINES)


@pytest.fixture
def anonymous_lines() -> list[str]:
    """A top-level anonymous node with a nested RDF collection."""
    return list(ANONYMOUS_LINES)


@pytest.fixture
def ontology_lines() -> list[str]:
    """A complete small ontology: headers, blank lines, comments and statements."""
    return [
        *HEADER_LINES,
        "",
        "#################################################################",
        "#    Object Properties",
        "#################################################################",
        "",
        *OBJECT_PROPERTY_LINES,
        "",
        *RESTRICTION_LINES,
        "",
        *ANONYMOUS_LINES,
    ]


@pytest.fixture
def accumulator() -> DocumentAccumulator:
    """Provide a fresh accumulator with default config."""
    return DocumentAccumulator()


@pytest.fixture
def diagnostics() -> ParseDiagnostics:
    """Provide an empty diagnostics collector."""
    return ParseDiagnostics()


@pytest.fixture
def write_ttl(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes lines to a .ttl file under tmp_path."""

    def _write(lines: list[str], name: str = "ontology.ttl") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
