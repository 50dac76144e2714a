"""schema.org excerpt: a small slice of the published vocabulary.

Covers the three kinds of subject the interpreter has to tell apart:
- plain classes (Thing, Person)
- data types, typed both rdfs:Class and schema:DataType (Text, Boolean)
- enumeration values (True, False), and one value also declared a class

Person uses the https spelling of rdfs:subClassOf, as some dumps do.
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from rdflib import Graph

SCHEMA_ORG_EXCERPT = """\
<http://schema.org/Thing> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> <http://www.w3.org/2000/01/rdf-schema#Class> .
<http://schema.org/Thing> <http://www.w3.org/2000/01/rdf-schema#label> "Thing" .
<http://schema.org/Thing> <http://www.w3.org/2000/01/rdf-schema#comment> "The most generic type of item." .
<http://schema.org/Person> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> <http://www.w3.org/2000/01/rdf-schema#Class> .
<http://schema.org/Person> <https://www.w3.org/2000/01/rdf-schema#subClassOf> <http://schema.org/Thing> .
<http://schema.org/Person> <http://www.w3.org/2000/01/rdf-schema#comment> "A person (alive, dead, undead, or fictional)." .
<http://schema.org/DataType> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> <http://www.w3.org/2000/01/rdf-schema#Class> .
<http://schema.org/DataType> <http://www.w3.org/2000/01/rdf-schema#subClassOf> <http://www.w3.org/2000/01/rdf-schema#Class> .
<http://schema.org/DataType> <http://www.w3.org/2000/01/rdf-schema#comment> "The basic data types such as Integers, Strings, etc." .
<http://schema.org/Text> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> <http://schema.org/DataType> .
<http://schema.org/Text> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> <http://www.w3.org/2000/01/rdf-schema#Class> .
<http://schema.org/Text> <http://www.w3.org/2000/01/rdf-schema#comment> "Data type: Text." .
<http://schema.org/Boolean> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> <http://schema.org/DataType> .
<http://schema.org/Boolean> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> <http://www.w3.org/2000/01/rdf-schema#Class> .
<http://schema.org/Boolean> <http://www.w3.org/2000/01/rdf-schema#comment> "Boolean: True or False." .
<http://schema.org/True> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> <http://schema.org/Boolean> .
<http://schema.org/True> <http://www.w3.org/2000/01/rdf-schema#comment> "The boolean value true." .
<http://schema.org/False> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> <http://schema.org/Boolean> .
<http://schema.org/False> <http://www.w3.org/2000/01/rdf-schema#comment> "The boolean value false." .
<http://schema.org/ItsComplicated> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> <http://schema.org/Boolean> .
<http://schema.org/ItsComplicated> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> <http://www.w3.org/2000/01/rdf-schema#Class> .
"""

# Triples that break the well-known shapes, one fault per subject.
MALFORMED_EXCERPT = """\
<http://schema.org/Broken> <http://www.w3.org/2000/01/rdf-schema#subClassOf> "Thing" .
<http://schema.org/Rootless> <http://www.w3.org/2000/01/rdf-schema#subClassOf> <https://schema.org/> .
<http://schema.org/Mislabeled> <http://www.w3.org/2000/01/rdf-schema#comment> <http://schema.org/Amazing> .
<http://schema.org/Untyped> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> "Class" .
"""


def build_graph(data: str = SCHEMA_ORG_EXCERPT) -> Graph:
    """Parse an N-Triples excerpt into an rdflib Graph."""
    graph = Graph()
    graph.parse(data=data, format="nt")
    return graph
