"""Tests for the rdflib → wkv bridge."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from rdflib import BNode, Graph, Literal, RDF, RDFS, URIRef

from wkv.rdf_bridge import (
    graph_to_topics,
    load_topics,
    read_ntriples,
    summarize_graph,
    term_to_object,
    term_to_url,
    to_property_values,
)
from wkv.types import SchemaString, ShapeError, UrlNode


SCHEMA = "http://schema.org/"


class TestTermTranslation:
    def test_uriref(self):
        assert term_to_url(URIRef(SCHEMA + "Thing")) == UrlNode.parse(SCHEMA + "Thing")

    def test_literal(self):
        assert term_to_object(Literal("Thing")) == SchemaString("Thing")

    def test_literal_language(self):
        assert term_to_object(Literal("Ding", lang="de")) == SchemaString("Ding", language="de")

    def test_typed_literal_uses_lexical_form(self):
        assert term_to_object(Literal(3)) == SchemaString("3")

    def test_bnode_object_rejected(self):
        with pytest.raises(ShapeError, match="Blank node"):
            term_to_object(BNode())

    def test_literal_subject_rejected(self):
        with pytest.raises(ShapeError, match="Expected an IRI"):
            term_to_url(Literal("x"))

    def test_property_values(self):
        s = URIRef(SCHEMA + "Thing")
        pairs = list(to_property_values([(s, RDF.type, RDFS.Class)]))
        assert len(pairs) == 1
        subject, value = pairs[0]
        assert subject == UrlNode.parse(SCHEMA + "Thing")
        assert value.object == UrlNode.parse(str(RDFS.Class))


class TestGraphToTopics:
    def test_one_topic_per_subject(self):
        g = Graph()
        thing = URIRef(SCHEMA + "Thing")
        person = URIRef(SCHEMA + "Person")
        g.add((thing, RDF.type, RDFS.Class))
        g.add((person, RDF.type, RDFS.Class))
        g.add((person, RDFS.subClassOf, thing))

        topics = graph_to_topics(g)
        assert [str(t.subject) for t in topics] == [SCHEMA + "Person", SCHEMA + "Thing"]
        assert len(topics[0].values) == 1

    def test_graph_input_sorted(self):
        g = Graph()
        text = URIRef(SCHEMA + "Text")
        g.add((text, RDF.type, RDFS.Class))
        g.add((text, RDF.type, URIRef(SCHEMA + "DataType")))

        topic = graph_to_topics(g)[0]
        assert [str(t) for t in topic.types] == [SCHEMA + "DataType", str(RDFS.Class)]

    def test_require_types(self):
        g = Graph()
        g.add((URIRef(SCHEMA + "Thing"), RDFS.label, Literal("Thing")))
        with pytest.raises(ShapeError, match="No type found"):
            graph_to_topics(g, require_types=True)

    def test_load_ntriples_keeps_document_order(self):
        data = (
            f"<{SCHEMA}Text> <{RDF.type}> <{RDFS.Class}> .\n"
            f"<{SCHEMA}Text> <{RDFS.comment}> \"Data type: Text.\" .\n"
            f"<{SCHEMA}Text> <{RDF.type}> <{SCHEMA}DataType> .\n"
        )
        [topic] = load_topics(data)
        assert [str(t) for t in topic.types] == [str(RDFS.Class), SCHEMA + "DataType"]

    def test_load_ntriples_keeps_subject_order(self):
        data = (
            f"<{SCHEMA}Thing> <{RDF.type}> <{RDFS.Class}> .\n"
            f"<{SCHEMA}Person> <{RDF.type}> <{RDFS.Class}> .\n"
        )
        topics = load_topics(data)
        assert [str(t.subject) for t in topics] == [SCHEMA + "Thing", SCHEMA + "Person"]

    def test_read_ntriples(self):
        data = f"<{SCHEMA}True> <{RDF.type}> <{SCHEMA}Boolean> .\n"
        assert read_ntriples(data) == [
            (URIRef(SCHEMA + "True"), RDF.type, URIRef(SCHEMA + "Boolean")),
        ]

    def test_load_turtle(self):
        data = """
        @prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
        @prefix schema: <http://schema.org/> .
        schema:True a schema:Boolean ;
            rdfs:comment "The boolean value true." .
        """
        topics = load_topics(data, format="turtle")
        assert len(topics) == 1
        assert topics[0].types == (UrlNode.parse(SCHEMA + "Boolean"),)

    def test_summarize_graph(self):
        g = Graph()
        g.add((URIRef(SCHEMA + "True"), RDF.type, URIRef(SCHEMA + "Boolean")))
        g.add((URIRef(SCHEMA + "True"), RDFS.comment, Literal("yes")))
        [record] = summarize_graph(g)
        assert not record.directly_named
        assert record.comment == "yes"
