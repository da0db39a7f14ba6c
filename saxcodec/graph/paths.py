"""Path resolution between slash-separated paths and tree components."""

from typing import TYPE_CHECKING

from ..schema.errors import MalformedEndpointError
from .node_types import Component

if TYPE_CHECKING:
    from .project_graph import ProjectGraph


def split_path(path: str) -> list[str]:
    """Split a path into its non-empty segments."""
    return [segment for segment in path.split("/") if segment]


def resolve(graph: "ProjectGraph", path: str) -> Component | None:
    """Find the component at a slash-separated path.

    A leading slash is optional. When siblings share a name the first one
    created wins.

    Args:
        graph: The project graph to search.
        path: A path such as ``/AHU_1/Tstat2``.

    Returns:
        The component, or None if any segment has no match.
    """
    segments = split_path(path)
    if not segments:
        return None

    current: Component | None = None
    for segment in segments:
        parent = current.handle if current is not None else None
        current = next(
            (child for child in graph.children_of(parent) if child.name == segment),
            None,
        )
        if current is None:
            return None

    return current


def path_of(graph: "ProjectGraph", component: Component) -> str:
    """Get the canonical path of a component, e.g. ``/AHU_1/Tstat2``."""
    names = [component.name]
    parent = graph.parent_of(component)

    while parent is not None:
        names.append(parent.name)
        parent = graph.parent_of(parent)

    return "/" + "/".join(reversed(names))


def split_endpoint(endpoint: str) -> tuple[str, str]:
    """Split an endpoint string into (path, slot) at the last '.'.

    Raises:
        MalformedEndpointError: If the endpoint contains no '.'.
    """
    path, sep, slot = endpoint.rpartition(".")
    if not sep:
        raise MalformedEndpointError(endpoint)
    return path, slot


def endpoint_of(graph: "ProjectGraph", component: Component, slot: str) -> str:
    """Get the endpoint string for a component slot, e.g. ``/AHU_1/Tstat2.out``."""
    return f"{path_of(graph, component)}.{slot}"
