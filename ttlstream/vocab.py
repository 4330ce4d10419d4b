"""Well-known namespaces and namespaced-name expansion.

Ontology files almost always use the rdf, rdfs, xsd and owl vocabularies;
expansion falls back to these when a document uses one of the prefixes
without declaring it.
"""

from ttlschema.document import Document, Object, Predicate

RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS = "http://www.w3.org/2000/01/rdf-schema#"
XSD = "http://www.w3.org/2001/XMLSchema#"
OWL = "http://www.w3.org/2002/07/owl#"

WELL_KNOWN_PREFIXES: dict[str, str] = {
    "rdf": RDF,
    "rdfs": RDFS,
    "xsd": XSD,
    "owl": OWL,
}

# blank node labels (_:b0) look namespaced but have no IRI
BLANK_NODE_PREFIX = "_"


def resolve_namespace(document: Document, namespace: str) -> str | None:
    """Return the IRI bound to `namespace`, preferring the document's own declarations."""
    declared = document.prefixes()
    if namespace in declared:
        return declared[namespace]
    return WELL_KNOWN_PREFIXES.get(namespace)


def expand_term(document: Document, term: Predicate | Object) -> str | None:
    """Return the full IRI of an IRI or namespaced term, or None.

    Literals, collection fragments, blank nodes and names with an unknown
    prefix have no expansion.
    """
    if term.is_iri:
        return term.iri_or_literal_text if isinstance(term, Predicate) else term.iri_text
    if term.namespace is None or term.namespace == BLANK_NODE_PREFIX:
        return None
    base = resolve_namespace(document, term.namespace)
    if base is None:
        return None
    return base + (term.namespace_local_name or "")


def undeclared_namespaces(document: Document) -> set[str]:
    """Return prefixes used by predicates or objects that resolve to nothing."""
    missing: set[str] = set()
    for statement in document.body:
        for predicate in statement.predicates:
            terms: list[Predicate | Object] = [predicate, *predicate.objects]
            for term in terms:
                ns = term.namespace
                if ns is None or ns == BLANK_NODE_PREFIX:
                    continue
                if resolve_namespace(document, ns) is None:
                    missing.add(ns)
    return missing
