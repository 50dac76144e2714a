"""Well-known vocabulary table: the RDF, RDFS and schema.org terms wkv reads.

Each namespace is described by its canonical context, its canonical scheme
and a scheme policy:

  RDFS        www.w3.org/2000/01/rdf-schema          http, http or https
  RDF syntax  www.w3.org/1999/02/22-rdf-syntax-ns    http, exact
  schema.org  schema.org                             http, exact

RDFS terms show up under both schemes in published schema.org dumps, so only
that namespace tolerates the https spelling. This tolerance applies to term
matching here and nowhere else: UrlNode equality stays scheme-sensitive.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from rdflib import RDF, RDFS, Namespace

from .types import UrlNode


SCHEMA = Namespace("http://schema.org/")


class SchemePolicy(Enum):
    """How strictly a namespace's URL scheme must match."""
    EXACT = "exact"
    HTTP_OR_HTTPS = "http_or_https"


_WEB_SCHEMES = frozenset({"http", "https"})


# ---------------------------------------------------------------------------
# VocabularyContext: one namespace
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class VocabularyContext:
    """A namespace known to wkv, identified by its canonical IRI."""
    label: str
    namespace: Namespace
    policy: SchemePolicy = SchemePolicy.EXACT
    root: UrlNode = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", UrlNode.parse(str(self.namespace)))

    def contains(self, node: UrlNode) -> bool:
        """True if ``node`` lives in this namespace under an accepted scheme."""
        root = self.root
        if node.context != root.context:
            return False
        if node.scheme == root.scheme:
            return True
        return (
            self.policy == SchemePolicy.HTTP_OR_HTTPS
            and node.scheme in _WEB_SCHEMES
        )

    def term(self, name: str) -> WellKnownTerm:
        return WellKnownTerm(context=self, name=name)

    def __repr__(self) -> str:
        return f"Vocabulary({self.label}: {self.namespace}, {self.policy.value})"


RDFS_CONTEXT = VocabularyContext("rdfs", Namespace(str(RDFS)), SchemePolicy.HTTP_OR_HTTPS)
RDF_CONTEXT = VocabularyContext("rdf", Namespace(str(RDF)))
SCHEMA_CONTEXT = VocabularyContext("schema", SCHEMA)

WELL_KNOWN_CONTEXTS: tuple[VocabularyContext, ...] = (
    RDFS_CONTEXT,
    RDF_CONTEXT,
    SCHEMA_CONTEXT,
)


# ---------------------------------------------------------------------------
# WellKnownTerm: one named term in a namespace
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WellKnownTerm:
    """A canonical (context, name) pair, e.g. rdfs:comment."""
    context: VocabularyContext
    name: str

    @property
    def iri(self) -> str:
        return str(self.context.namespace[self.name])

    @property
    def node(self) -> UrlNode:
        return UrlNode.parse(self.iri)

    def matches(self, node: UrlNode) -> bool:
        return node.name == self.name and self.context.contains(node)

    def spellings(self) -> tuple[str, ...]:
        """Every IRI spelling of this term accepted by ``matches``."""
        if self.context.policy == SchemePolicy.HTTP_OR_HTTPS:
            rest = self.iri.split(":", 1)[1]
            return tuple(f"{scheme}:{rest}" for scheme in sorted(_WEB_SCHEMES))
        return (self.iri,)

    def __repr__(self) -> str:
        return f"{self.context.label}:{self.name}"


RDFS_COMMENT = RDFS_CONTEXT.term("comment")
RDFS_SUB_CLASS_OF = RDFS_CONTEXT.term("subClassOf")
RDFS_LABEL = RDFS_CONTEXT.term("label")
RDFS_CLASS = RDFS_CONTEXT.term("Class")
RDF_TYPE = RDF_CONTEXT.term("type")
SCHEMA_DATA_TYPE = SCHEMA_CONTEXT.term("DataType")


def context_of(node: UrlNode) -> VocabularyContext | None:
    """Return the well-known namespace ``node`` belongs to, if any."""
    for ctx in WELL_KNOWN_CONTEXTS:
        if ctx.contains(node):
            return ctx
    return None
