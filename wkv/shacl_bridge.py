"""SHACL Bridge: checks the well-known triple shapes over whole graphs.

The classifiers in wkv.well_known reject a malformed triple when it is read.
The same rules are expressed here as SHACL shapes so a complete vocabulary
graph can be checked up front with pySHACL, reporting every violation at
once instead of stopping at the first:

  rdfs:comment    → object sh:nodeKind sh:Literal, at most one per subject
  rdfs:subClassOf → object sh:nodeKind sh:IRI, named (sh:pattern)
  rdf:type        → object sh:nodeKind sh:IRI, named (sh:pattern)

RDFS predicates get one shape per accepted scheme spelling. Counts are taken
across all spellings together (sh:alternativePath).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rdflib import BNode, Graph, Literal, Namespace, RDF, RDFS, URIRef
from rdflib.collection import Collection
from rdflib.namespace import SH

from .well_known import COMMENT, SUB_CLASS_OF, TYPE, WellKnownPredicate

logger = logging.getLogger(__name__)


WKV = Namespace("http://wkv.example.org/shapes/")

# An IRI with a non-empty last segment or fragment; rejects bare roots such
# as https://schema.org and https://schema.org/
NAMED_IRI_PATTERN = r"^[^:/]+://[^/#]+[/#].*[^/#]$"

# key → (object node kind, object pattern, max values per subject)
_OBJECT_RULES: dict[str, tuple[URIRef, str | None, int | None]] = {
    COMMENT.key: (SH.Literal, None, 1),
    SUB_CLASS_OF.key: (SH.IRI, NAMED_IRI_PATTERN, None),
    TYPE.key: (SH.IRI, NAMED_IRI_PATTERN, None),
}


# ---------------------------------------------------------------------------
# Well-known predicates → SHACL shapes
# ---------------------------------------------------------------------------

def _add_predicate_shapes(sg: Graph, descriptor: WellKnownPredicate) -> None:
    node_kind, pattern, max_count = _OBJECT_RULES[descriptor.key]
    spellings = descriptor.term.spellings()

    for i, iri in enumerate(spellings):
        predicate = URIRef(iri)
        shape_uri = WKV[f"{descriptor.key}Shape{i}" if i else f"{descriptor.key}Shape"]

        sg.add((shape_uri, RDF.type, SH.NodeShape))
        sg.add((shape_uri, SH.targetSubjectsOf, predicate))
        sg.add((shape_uri, RDFS.label, Literal(f"Shape for {iri}")))

        prop_shape = WKV[f"{descriptor.key}Property{i}" if i else f"{descriptor.key}Property"]
        sg.add((shape_uri, SH.property, prop_shape))
        sg.add((prop_shape, SH.path, predicate))
        sg.add((prop_shape, SH.nodeKind, node_kind))
        if pattern is not None:
            sg.add((prop_shape, SH.pattern, Literal(pattern)))

    if max_count is not None:
        _add_count_shape(sg, descriptor.key, spellings, max_count)


def _add_count_shape(sg: Graph, key: str, spellings: tuple[str, ...], max_count: int) -> None:
    predicates = [URIRef(iri) for iri in spellings]
    shape_uri = WKV[f"{key}CountShape"]

    sg.add((shape_uri, RDF.type, SH.NodeShape))
    for predicate in predicates:
        sg.add((shape_uri, SH.targetSubjectsOf, predicate))

    prop_shape = WKV[f"{key}CountProperty"]
    sg.add((shape_uri, SH.property, prop_shape))
    if len(predicates) == 1:
        sg.add((prop_shape, SH.path, predicates[0]))
    else:
        path = BNode()
        alternatives = BNode()
        Collection(sg, alternatives, predicates)
        sg.add((path, SH.alternativePath, alternatives))
        sg.add((prop_shape, SH.path, path))
    sg.add((prop_shape, SH.maxCount, Literal(max_count)))


def vocabulary_shapes() -> Graph:
    """Build the SHACL shapes graph for the well-known predicates."""
    sg = Graph()
    sg.bind("sh", SH)
    sg.bind("wkv", WKV)

    for descriptor in (COMMENT, SUB_CLASS_OF, TYPE):
        _add_predicate_shapes(sg, descriptor)
    return sg


# ---------------------------------------------------------------------------
# SHACL Validation
# ---------------------------------------------------------------------------

def validate_vocabulary(data_graph: Graph) -> ShapeValidationResult:
    """Validate a vocabulary graph against the well-known predicate shapes."""
    from pyshacl import validate as pyshacl_validate

    shapes_graph = vocabulary_shapes()

    conforms, results_graph, results_text = pyshacl_validate(
        data_graph,
        shacl_graph=shapes_graph,
        inference="none",
        abort_on_first=False,
    )

    violations = []
    for result in results_graph.subjects(RDF.type, SH.ValidationResult):
        focus = results_graph.value(result, SH.focusNode)
        path = results_graph.value(result, SH.resultPath)
        value = results_graph.value(result, SH.value)
        message = results_graph.value(result, SH.resultMessage)

        violations.append(ShapeViolation(
            focus_node=str(focus) if focus else "",
            path=str(path) if path else "",
            value=str(value) if value is not None else "",
            message=str(message) if message else "",
        ))

    logger.debug("SHACL check: conforms=%s, %d violation(s)", conforms, len(violations))
    return ShapeValidationResult(
        conforms=conforms,
        violations=violations,
        results_text=results_text,
        shapes_graph=shapes_graph,
        data_graph=data_graph,
    )


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

def _local(iri: str) -> str:
    for sep in ("#", "/"):
        if sep in iri.rstrip(sep):
            return iri.rstrip(sep).rsplit(sep, 1)[-1]
    return iri


@dataclass
class ShapeViolation:
    """A single SHACL violation in a vocabulary graph."""
    focus_node: str
    path: str
    value: str
    message: str

    def __repr__(self) -> str:
        return f"ShapeViolation({_local(self.focus_node)}.{_local(self.path)}: {self.message})"


@dataclass
class ShapeValidationResult:
    """Result of checking a vocabulary graph with pySHACL."""
    conforms: bool
    violations: list[ShapeViolation] = field(default_factory=list)
    results_text: str = ""
    shapes_graph: Graph | None = None
    data_graph: Graph | None = None

    def violations_for(self, focus_node: str) -> list[ShapeViolation]:
        return [v for v in self.violations if v.focus_node == focus_node]

    def summary(self) -> str:
        lines = []
        status = "CONFORMS" if self.conforms else "DOES NOT CONFORM"
        lines.append(f"SHACL Validation: {status}")
        lines.append("-" * 50)
        if self.violations:
            lines.append(f"  Violations ({len(self.violations)}):")
            for v in self.violations:
                lines.append(f"    - {_local(v.focus_node)}.{_local(v.path)} = {v.value}: {v.message}")
        else:
            lines.append("  No violations found.")
        return "\n".join(lines)

    def shapes_as_turtle(self) -> str:
        if self.shapes_graph is None:
            return ""
        return self.shapes_graph.serialize(format="turtle")
