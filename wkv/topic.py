"""Topic assembly: per-subject views over classified triples.

A TypedTopic gathers everything known about one subject. A SubjectRecord is
the harvested form handed to a type-model builder: documentation, parents,
declared types, and whether the subject becomes its own named type.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .types import PropertyValue, ShapeError, TypedTopic, UrlNode
from .well_known import (
    class_is_data_type,
    get_comment,
    get_sub_class_of,
    get_type,
    get_types,
    is_directly_named_class,
)

logger = logging.getLogger(__name__)


def build_topic(
    subject: UrlNode,
    values: Iterable[PropertyValue],
    require_types: bool = False,
) -> TypedTopic:
    """Build the TypedTopic for ``subject`` from its triples.

    rdf:type facts become ``types``; every other fact is kept in ``values``
    in input order.
    """
    values = list(values)
    types = get_types(subject, values)

    for t in types:
        if not t.is_named:
            raise ShapeError(f'Unexpected "unnamed" URL used as a type of {subject}: {t}')
    if require_types and not types:
        listing = "\n".join(f"  {v!r}" for v in values)
        raise ShapeError(f"No type found for Subject {subject}. Triples include:\n{listing}")

    rest = tuple(v for v in values if get_type(v) is None)
    return TypedTopic(subject=subject, types=types, values=rest)


def build_topics(
    triples: Iterable[tuple[UrlNode, PropertyValue]],
    require_types: bool = False,
) -> list[TypedTopic]:
    """Group (subject, value) pairs by subject, in first-seen order."""
    grouped: dict[UrlNode, list[PropertyValue]] = {}
    for subject, value in triples:
        grouped.setdefault(subject, []).append(value)

    topics = [build_topic(s, vs, require_types=require_types) for s, vs in grouped.items()]
    logger.debug("Built %d topic(s)", len(topics))
    return topics


# ---------------------------------------------------------------------------
# SubjectRecord: harvested facts for one subject
# ---------------------------------------------------------------------------

@dataclass
class SubjectRecord:
    """Classified facts about one subject."""
    subject: UrlNode
    types: tuple[UrlNode, ...] = ()
    comment: str | None = None
    parents: list[UrlNode] = field(default_factory=list)
    directly_named: bool = False
    data_type: bool = False

    @property
    def is_enum_value(self) -> bool:
        return not self.directly_named and bool(self.types)

    def summary(self) -> str:
        if self.directly_named:
            kind = "DataType" if self.data_type else "Class"
        elif self.types:
            kind = "EnumValue"
        else:
            kind = "Untyped"
        line = f"{self.subject} [{kind}]"
        if self.parents:
            line += " < " + ", ".join(str(p) for p in self.parents)
        if not self.directly_named and self.types:
            line += " : " + ", ".join(str(t) for t in self.types)
        return line


def summarize_topic(topic: TypedTopic) -> SubjectRecord:
    """Harvest comment, parents and the class decision for ``topic``.

    A subject may carry at most one comment.
    """
    record = SubjectRecord(
        subject=topic.subject,
        types=topic.types,
        directly_named=is_directly_named_class(topic),
        data_type=class_is_data_type(topic),
    )
    for value in topic.values:
        comment = get_comment(value)
        if comment is not None:
            if record.comment is not None:
                raise ShapeError(
                    f"Duplicate comment for {topic.subject}: "
                    f"{record.comment!r} and {comment.comment!r}"
                )
            record.comment = comment.comment
            continue

        parent = get_sub_class_of(value)
        if parent is not None:
            record.parents.append(parent.sub_class_of)
    return record
