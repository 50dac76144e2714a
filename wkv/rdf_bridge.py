"""RDF Bridge: reads rdflib graphs into wkv triples and topics.

rdflib does the document parsing (N-Triples, Turtle, ...). This bridge only
translates terms:

  URIRef  → UrlNode
  Literal → SchemaString (lexical form + language tag)
  BNode   → rejected; blank nodes cannot name vocabulary terms

rdflib graphs are unordered sets, so a prebuilt Graph is visited in sorted
order. N-Triples text is read line by line and keeps its document order.
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Iterable

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.plugins.parsers.ntriples import W3CNTriplesParser
from rdflib.term import Node

from .topic import SubjectRecord, build_topics, summarize_topic
from .types import ObjectValue, PropertyValue, SchemaString, ShapeError, TypedTopic, UrlNode

logger = logging.getLogger(__name__)

_LINE_FORMATS = frozenset({"nt", "ntriples", "nt11", "application/n-triples"})


# ---------------------------------------------------------------------------
# Term translation
# ---------------------------------------------------------------------------

def term_to_url(term: Node) -> UrlNode:
    """Translate a subject or predicate term. Only IRIs are accepted."""
    if isinstance(term, URIRef):
        return UrlNode.parse(str(term))
    raise ShapeError(f"Expected an IRI, got {type(term).__name__} {term!r}")


def term_to_object(term: Node) -> ObjectValue:
    """Translate an object term into a UrlNode or SchemaString."""
    if isinstance(term, Literal):
        return SchemaString(value=str(term), language=term.language)
    if isinstance(term, BNode):
        raise ShapeError(f"Blank node objects are not supported: {term!r}")
    return term_to_url(term)


def to_property_values(
    triples: Iterable[tuple[Node, Node, Node]],
) -> Iterable[tuple[UrlNode, PropertyValue]]:
    """Translate rdflib triples into (subject, PropertyValue) pairs, lazily."""
    for s, p, o in triples:
        yield term_to_url(s), PropertyValue(predicate=term_to_url(p), object=term_to_object(o))


# ---------------------------------------------------------------------------
# Graph → topics
# ---------------------------------------------------------------------------

def graph_to_topics(graph: Graph, require_types: bool = False) -> list[TypedTopic]:
    """Group every triple of ``graph`` into one TypedTopic per subject."""
    topics = build_topics(to_property_values(sorted(graph)), require_types=require_types)
    logger.debug("Read %d triple(s) into %d topic(s)", len(graph), len(topics))
    return topics


class _OrderedSink:
    """N-Triples parser sink keeping triples in document order."""

    def __init__(self):
        self.triples: list[tuple[Node, Node, Node]] = []

    def triple(self, s: Node, p: Node, o: Node) -> None:
        self.triples.append((s, p, o))


def read_ntriples(data: str) -> list[tuple[Node, Node, Node]]:
    """Parse N-Triples text, returning its triples in document order."""
    sink = _OrderedSink()
    W3CNTriplesParser(sink=sink).parse(BytesIO(data.encode("utf-8")))
    return sink.triples


def load_topics(data: str, format: str = "nt", require_types: bool = False) -> list[TypedTopic]:
    """Parse serialized RDF text with rdflib and build its topics.

    N-Triples keeps document order, so each subject's types come out in
    declaration order. Other formats go through a Graph and are sorted.
    """
    if format in _LINE_FORMATS:
        triples = read_ntriples(data)
        topics = build_topics(to_property_values(triples), require_types=require_types)
        logger.debug("Read %d triple(s) into %d topic(s)", len(triples), len(topics))
        return topics

    graph = Graph()
    graph.parse(data=data, format=format)
    return graph_to_topics(graph, require_types=require_types)


def summarize_graph(graph: Graph, require_types: bool = False) -> list[SubjectRecord]:
    """Classify every subject in ``graph``."""
    return [summarize_topic(t) for t in graph_to_topics(graph, require_types=require_types)]
