"""Graph layer: component arena, links and path resolution."""

from .node_types import Component, EdgeType, Link
from .project_graph import ProjectGraph
from .project import Project
from .paths import endpoint_of, path_of, resolve, split_endpoint

__all__ = [
    "Component",
    "EdgeType",
    "Link",
    "ProjectGraph",
    "Project",
    "endpoint_of",
    "path_of",
    "resolve",
    "split_endpoint",
]
