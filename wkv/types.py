"""Core types for WKV: identifiers, literals and triple facts.

A vocabulary triple is (subject, predicate, object). The subject is implicit
here: callers group triples by subject and hand over PropertyValue pairs.

  UrlNode        = absolute URL naming a vocabulary term (named or unnamed)
  SchemaString   = literal text value
  PropertyValue  = (predicate, object) for one implicit subject
  TypedTopic     = everything known about one subject
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import SplitResult, urlsplit


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ParseError(ValueError):
    """Raised when a string is not a usable absolute URL."""


class ShapeError(ValueError):
    """A well-known predicate was matched but its object has the wrong shape.

    Indicates malformed vocabulary data. Never recovered inside wkv.
    """


_DEFAULT_PORTS = {"http": 80, "https": 443}


def _host_of(parts: SplitResult, scheme: str, text: str) -> str:
    """Lowercased host, with the port only when it is not the scheme default."""
    try:
        port = parts.port
    except ValueError:
        raise ParseError(f"Invalid port in {text!r}") from None
    host = parts.hostname or ""
    if not host:
        raise ParseError(f"Not an absolute URL: {text!r}")
    if ":" in host:
        host = f"[{host}]"
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        host = f"{host}:{port}"
    return host


# ---------------------------------------------------------------------------
# UrlNode: vocabulary term identifier
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UrlNode:
    """An absolute URL referencing a vocabulary term.

    The URL is split into a context (host + path of the namespace, with no
    trailing separator) and an optional name (the fragment, or the last path
    segment). Bare namespace roots like ``https://schema.org/`` carry no name.
    """
    scheme: str
    context: str
    name: str | None = None
    href: str = field(default="", compare=False)

    @staticmethod
    def parse(text: str) -> UrlNode:
        if not isinstance(text, str):
            raise ParseError(f"Expected URL string, got {type(text).__name__}")
        parts = urlsplit(text)
        if not parts.scheme or not parts.netloc:
            raise ParseError(f"Not an absolute URL: {text!r}")
        if parts.query:
            raise ParseError(f"Can't handle query string in {text!r}")

        scheme = parts.scheme.lower()
        host = _host_of(parts, scheme, text)

        if parts.fragment or text.endswith("#"):
            context = host + parts.path
            name = parts.fragment
        else:
            head, _, last = parts.path.rpartition("/")
            context = host + head
            name = last
        return UrlNode(
            scheme=scheme,
            context=context.rstrip("/#"),
            name=name or None,
            href=text,
        )

    @property
    def is_named(self) -> bool:
        return self.name is not None

    def __str__(self) -> str:
        if self.href:
            return self.href
        base = f"{self.scheme}://{self.context}"
        return f"{base}/{self.name}" if self.name else f"{base}/"

    def __repr__(self) -> str:
        return f"UrlNode({self})"


# ---------------------------------------------------------------------------
# SchemaString: literal value
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SchemaString:
    """A literal text value, distinct from UrlNode at the type level."""
    value: str
    language: str | None = None

    def __str__(self) -> str:
        if self.language:
            return f'"{self.value}"@{self.language}'
        return f'"{self.value}"'

    def __repr__(self) -> str:
        return f"SchemaString({self})"


ObjectValue = UrlNode | SchemaString


# ---------------------------------------------------------------------------
# PropertyValue: one triple about an implicit subject
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PropertyValue:
    predicate: UrlNode
    object: ObjectValue

    def __repr__(self) -> str:
        return f"PropertyValue({self.predicate} -> {self.object})"


# ---------------------------------------------------------------------------
# Classified facts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ClassifiedComment:
    """Documentation harvested from an rdfs:comment triple."""
    comment: str


@dataclass(frozen=True)
class ClassifiedParent:
    """Inheritance edge harvested from an rdfs:subClassOf triple.

    ``sub_class_of`` is always a named UrlNode.
    """
    sub_class_of: UrlNode


# ---------------------------------------------------------------------------
# TypedTopic: everything known about one subject
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TypedTopic:
    """A subject with its declared rdf:type targets and its other facts.

    ``types`` holds named UrlNodes in declaration order. ``values`` holds the
    remaining facts (subClassOf, comment, label, ...) in document order.
    """
    subject: UrlNode
    types: tuple[UrlNode, ...] = ()
    values: tuple[PropertyValue, ...] = ()

    def __repr__(self) -> str:
        types = ", ".join(str(t) for t in self.types)
        return f"TypedTopic({self.subject}: [{types}], {len(self.values)} values)"
