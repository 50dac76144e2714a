"""schema.org Classification: End-to-end WKV demonstration.

Reads a schema.org excerpt and runs it through both checks:

  STEP 1: SHACL shape check over the whole graph (pySHACL)
  STEP 2: Per-subject classification
    Every subject becomes a TypedTopic; its comment, parents and types are
    harvested and it is decided whether it is a named class or only an
    enumeration value.

A malformed excerpt is then shown failing both: SHACL reports every bad
triple, while the classifier stops at the first ShapeError.
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from wkv.rdf_bridge import summarize_graph
from wkv.shacl_bridge import validate_vocabulary
from wkv.types import ShapeError

from .vocabulary import MALFORMED_EXCERPT, build_graph


def print_header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def run_shape_check(graph) -> None:
    print(f"\n  Step 1: SHACL shape check")
    print("  " + "-" * 46)
    result = validate_vocabulary(graph)
    for line in result.summary().split("\n"):
        print(f"  {line}")


def run_classification(graph) -> None:
    print(f"\n  Step 2: Classification")
    print("  " + "-" * 46)
    records = summarize_graph(graph)
    for record in records:
        print(f"    {record.summary()}")
        if record.comment:
            print(f"      \"{record.comment}\"")

    named = [r for r in records if r.directly_named]
    enums = [r for r in records if r.is_enum_value]
    print(f"\n  {len(named)} named class(es), {len(enums)} enumeration value(s)")


def run_malformed() -> None:
    print_header("Malformed excerpt")
    graph = build_graph(MALFORMED_EXCERPT)
    run_shape_check(graph)

    print(f"\n  Step 2: Classification")
    print("  " + "-" * 46)
    try:
        summarize_graph(graph)
    except ShapeError as e:
        print(f"    REJECTED: {e}")


def main():
    print_header("schema.org excerpt")
    graph = build_graph()
    run_shape_check(graph)
    run_classification(graph)
    run_malformed()


if __name__ == "__main__":
    main()
