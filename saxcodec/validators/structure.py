"""Tree structure validators."""

from collections import Counter

from ..graph.paths import path_of
from ..graph.project_graph import ProjectGraph
from .base import ValidationResult


def check_sibling_names(graph: ProjectGraph) -> ValidationResult:
    """Check for siblings that share a name.

    Paths are built from names, so only the first of several same-named
    siblings can be reached by path. Links to the others cannot survive an
    export and re-import.

    Args:
        graph: The project graph to check.

    Returns:
        ValidationResult with a warning per duplicated name.
    """
    result = ValidationResult()

    parents: list[int | None] = [None] + [c.handle for c in graph.components()]
    for parent in parents:
        children = graph.children_of(parent)
        counts = Counter(child.name for child in children)

        for name, count in counts.items():
            if count < 2:
                continue
            first = next(child for child in children if child.name == name)
            result.add_warning(
                code="DUPLICATE_SIBLING_NAME",
                message=f"{count} siblings are named '{name}'; only the first is reachable by path",
                component=path_of(graph, first),
                count=count,
            )

    return result
