"""Well-known predicate classifiers.

Each recognized predicate is a WellKnownPredicate descriptor: a vocabulary
term plus a handler that validates the object and extracts a typed fact.
Descriptors are evaluated in table order.

Results are two-tiered:
  - None        the predicate is not the classifier's term (not applicable)
  - ShapeError  the predicate matched but the object has the wrong shape

Every function here is pure. Classifiers can be probed against any triple.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from .types import (
    ClassifiedComment,
    ClassifiedParent,
    PropertyValue,
    SchemaString,
    ShapeError,
    TypedTopic,
    UrlNode,
)
from .vocabulary import (
    RDF_CONTEXT,
    RDF_TYPE,
    RDFS_CLASS,
    RDFS_COMMENT,
    RDFS_CONTEXT,
    RDFS_SUB_CLASS_OF,
    SCHEMA_DATA_TYPE,
    WellKnownTerm,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Handlers: called only once the predicate has matched
# ---------------------------------------------------------------------------

def _comment_of(value: PropertyValue) -> ClassifiedComment:
    if isinstance(value.object, SchemaString):
        return ClassifiedComment(comment=value.object.value)
    raise ShapeError(
        f"Unexpected Comment predicate with non-string object: {value.object}."
    )


def _parent_of(value: PropertyValue) -> ClassifiedParent:
    obj = value.object
    if not isinstance(obj, UrlNode):
        raise ShapeError(f"Unexpected object for predicate 'subClassOf': {obj}.")
    if not obj.is_named:
        raise ShapeError(f'Unexpected "unnamed" URL used as a super-class: {obj}')
    return ClassifiedParent(sub_class_of=obj)


def _type_of(value: PropertyValue) -> UrlNode:
    if isinstance(value.object, UrlNode):
        return value.object
    raise ShapeError(f"Unexpected type {value.object}")


# ---------------------------------------------------------------------------
# Descriptor table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WellKnownPredicate:
    """A recognized predicate and the handler extracting its fact."""
    key: str
    term: WellKnownTerm
    handler: Callable[[PropertyValue], Any]

    def applies_to(self, value: PropertyValue) -> bool:
        return self.term.matches(value.predicate)

    def __repr__(self) -> str:
        return f"WellKnownPredicate({self.key}: {self.term!r})"


COMMENT = WellKnownPredicate("comment", RDFS_COMMENT, _comment_of)
SUB_CLASS_OF = WellKnownPredicate("subClassOf", RDFS_SUB_CLASS_OF, _parent_of)
TYPE = WellKnownPredicate("type", RDF_TYPE, _type_of)

WELL_KNOWN_PREDICATES: tuple[WellKnownPredicate, ...] = (COMMENT, SUB_CLASS_OF, TYPE)


@dataclass(frozen=True)
class Classification:
    """The fact extracted from a triple and the descriptor that produced it."""
    predicate: WellKnownPredicate
    fact: ClassifiedComment | ClassifiedParent | UrlNode


def _apply(descriptor: WellKnownPredicate, value: PropertyValue):
    if not descriptor.applies_to(value):
        return None
    try:
        return descriptor.handler(value)
    except ShapeError:
        logger.debug("Rejected %s triple: %r", descriptor.key, value)
        raise


def classify(value: PropertyValue) -> Classification | None:
    """Run ``value`` through the descriptor table.

    Returns the first matching classification, or None when no well-known
    predicate applies. Shape faults propagate.
    """
    for descriptor in WELL_KNOWN_PREDICATES:
        fact = _apply(descriptor, value)
        if fact is not None:
            return Classification(predicate=descriptor, fact=fact)
    return None


# ---------------------------------------------------------------------------
# Single-triple classifiers
# ---------------------------------------------------------------------------

def get_comment(value: PropertyValue) -> ClassifiedComment | None:
    """Extract an rdfs:comment literal.

    schema.org's own ``comment`` term is a different predicate and does not
    match.
    """
    return _apply(COMMENT, value)


def get_sub_class_of(value: PropertyValue) -> ClassifiedParent | None:
    """Extract an rdfs:subClassOf edge (http or https RDFS spelling)."""
    return _apply(SUB_CLASS_OF, value)


def get_type(value: PropertyValue) -> UrlNode | None:
    """Extract the target of an rdf:type triple, returned unchanged.

    The target may be an enumeration's class (schema:Boolean) or rdfs:Class
    itself; interpreting it is left to is_directly_named_class.
    """
    return _apply(TYPE, value)


def get_types(subject: UrlNode, values: Iterable[PropertyValue]) -> tuple[UrlNode, ...]:
    """Collect the rdf:type targets of ``values`` in input order.

    Duplicates are kept. ``subject`` is only used for diagnostics; callers
    pass values already filtered to that subject.
    """
    types = tuple(t for t in map(get_type, values) if t is not None)
    logger.debug("Subject %s declares %d type(s)", subject, len(types))
    return types


# ---------------------------------------------------------------------------
# Class membership
# ---------------------------------------------------------------------------

def is_class(node: UrlNode) -> bool:
    """True for the rdfs:Class meta-class (either RDFS scheme)."""
    return RDFS_CLASS.matches(node)


def is_data_type(node: UrlNode) -> bool:
    return SCHEMA_DATA_TYPE.matches(node)


def is_well_known(node: UrlNode) -> bool:
    """True for terms of the RDF or RDFS vocabularies themselves."""
    return RDFS_CONTEXT.contains(node) or RDF_CONTEXT.contains(node)


def is_directly_named_class(topic: TypedTopic) -> bool:
    """Decide whether ``topic.subject`` is emitted as its own named type.

    A subject typed rdfs:Class is a class, whatever else it is typed as; a
    concrete enumeration member that is also declared rdfs:Class therefore
    counts. A subject typed only with enumeration classes is a plain value.

    ``topic.values`` does not take part in the decision.
    """
    return any(is_class(t) for t in topic.types)


def class_is_data_type(topic: TypedTopic) -> bool:
    """True if the subject is declared a schema:DataType (Text, Number, ...)."""
    return any(is_data_type(t) for t in topic.types)
