"""Link cycle detection."""

from ..graph.node_types import Link
from ..graph.paths import endpoint_of
from ..graph.project_graph import ProjectGraph
from .base import ValidationResult


def creates_cycle(graph: ProjectGraph, link: Link) -> bool:
    """Check whether a link closes a cycle through the existing links.

    Walks forward from the link's target. The walk stops with True as soon
    as a component with a link back to the link's source is reached, and
    with False once every reachable component has been visited.

    The link itself does not have to be saved in the graph. An unsaved
    candidate ``A -> B`` reports a cycle when ``B -> A`` already exists,
    since adding it would close that loop. A lone saved ``A -> B`` does not.

    Args:
        graph: The project graph holding the links.
        link: The link to check, saved or not.

    Returns:
        True if the target can reach the source.
    """
    origin = link.from_handle
    visited: set[int] = set()
    pending = [link.to_handle]

    while pending:
        current = pending.pop()
        if current in visited:
            continue
        visited.add(current)

        if current == origin or graph.find_link(current, origin) is not None:
            return True

        for outgoing in graph.links_from(current):
            if outgoing.to_handle not in visited:
                pending.append(outgoing.to_handle)

    return False


def check_link_cycles(graph: ProjectGraph) -> ValidationResult:
    """Report every link that is part of a cycle.

    Args:
        graph: The project graph to check.

    Returns:
        ValidationResult with a warning per cyclic link.
    """
    result = ValidationResult()

    for link in graph.links():
        if creates_cycle(graph, link):
            source = graph.get(link.from_handle)
            target = graph.get(link.to_handle)
            from_endpoint = endpoint_of(graph, source, link.from_slot)
            to_endpoint = endpoint_of(graph, target, link.to_slot)
            result.add_warning(
                code="CYCLIC_LINK",
                message=f"Link {from_endpoint} -> {to_endpoint} closes a cycle",
                component=from_endpoint.rpartition(".")[0],
                slot=link.from_slot,
                link=f"{from_endpoint} -> {to_endpoint}",
            )

    return result
