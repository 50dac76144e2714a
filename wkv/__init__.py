"""WKV: Well-Known Vocabulary interpreter for schema.org triples.

WKV sits between a parsed RDF triple stream describing the schema.org
vocabulary and a type-model builder. It recognizes a closed set of RDF/RDFS
predicates, checks the shape of each recognized triple, and extracts typed
facts from it:

- Types (wkv.types): UrlNode identifiers, SchemaString literals, triples
- Vocabulary (wkv.vocabulary): canonical namespaces and scheme policies
- Well-known classifiers (wkv.well_known): get_comment, get_sub_class_of,
  get_type, get_types, and the is_directly_named_class decision
- Topics (wkv.topic): per-subject TypedTopic and SubjectRecord assembly

Two optional bridges read real RDF documents:

- RDF bridge (wkv.rdf_bridge): rdflib graphs → topics
- SHACL bridge (wkv.shacl_bridge): the same shape rules as SHACL shapes,
  checked over a whole graph with pySHACL

The classifiers are pure. A predicate that does not match yields None; a
matched predicate with a malformed object raises ShapeError.
"""
