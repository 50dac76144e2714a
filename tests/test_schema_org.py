"""End-to-end tests for the schema.org case study."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from wkv.rdf_bridge import graph_to_topics, summarize_graph
from wkv.shacl_bridge import validate_vocabulary
from wkv.types import ShapeError, UrlNode
from wkv.well_known import is_directly_named_class

from case_studies.schema_org.vocabulary import MALFORMED_EXCERPT, build_graph


SCHEMA = "http://schema.org/"


@pytest.fixture
def records():
    return {str(r.subject): r for r in summarize_graph(build_graph())}


class TestExcerpt:
    def test_every_subject_classified(self, records):
        assert set(records) == {
            SCHEMA + name for name in (
                "Thing", "Person", "DataType", "Text", "Boolean",
                "True", "False", "ItsComplicated",
            )
        }

    def test_shapes_conform(self):
        assert validate_vocabulary(build_graph()).conforms

    def test_every_subject_typed(self):
        topics = graph_to_topics(build_graph(), require_types=True)
        assert len(topics) == 8


class TestClassification:
    def test_text_is_named_class(self, records):
        assert records[SCHEMA + "Text"].directly_named
        assert records[SCHEMA + "Text"].data_type

    def test_true_is_enum_value(self, records):
        assert not records[SCHEMA + "True"].directly_named
        assert records[SCHEMA + "True"].is_enum_value

    def test_its_complicated_is_class(self, records):
        assert records[SCHEMA + "ItsComplicated"].directly_named

    def test_data_type_is_class(self, records):
        record = records[SCHEMA + "DataType"]
        assert record.directly_named
        assert record.parents == [UrlNode.parse("http://www.w3.org/2000/01/rdf-schema#Class")]

    def test_https_parent_harvested(self, records):
        assert records[SCHEMA + "Person"].parents == [UrlNode.parse(SCHEMA + "Thing")]

    def test_comments(self, records):
        assert records[SCHEMA + "Thing"].comment == "The most generic type of item."
        assert records[SCHEMA + "ItsComplicated"].comment is None

    def test_topics_agree_with_records(self, records):
        for topic in graph_to_topics(build_graph()):
            assert is_directly_named_class(topic) == records[str(topic.subject)].directly_named


class TestMalformed:
    def test_classifier_fails_fast(self):
        with pytest.raises(ShapeError):
            summarize_graph(build_graph(MALFORMED_EXCERPT))

    def test_shacl_reports_every_subject(self):
        result = validate_vocabulary(build_graph(MALFORMED_EXCERPT))
        assert not result.conforms
        focus = {v.focus_node for v in result.violations}
        assert focus == {
            SCHEMA + "Broken",
            SCHEMA + "Rootless",
            SCHEMA + "Mislabeled",
            SCHEMA + "Untyped",
        }
