"""ProjectGraph: component arena and link graph for one project."""

from typing import Any, Iterator

import networkx as nx

from ..schema.errors import DuplicateComponentError, DuplicateLinkError
from ..schema.models import ComponentType
from ..schema.scalars import Scalar
from .node_types import Component, EdgeType, Link
from .paths import endpoint_of, path_of


class ProjectGraph:
    """The component tree and link set of one project.

    Components live in an arena addressed by integer handles. Each
    component stores its parent handle, and a children index keeps sibling
    creation order. Containment and link edges are mirrored into a
    networkx MultiDiGraph for graph queries.
    """

    def __init__(self):
        """Initialize an empty project graph."""
        self._components: list[Component] = []
        self._children: dict[int | None, list[int]] = {None: []}
        self._by_component_id: dict[int, int] = {}
        self._links: list[Link] = []
        self._link_keys: set[tuple[int, str, int, str]] = set()
        self._graph = nx.MultiDiGraph()

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Component management
    # -------------------------------------------------------------------------

    def add_component(
        self,
        component_id: int,
        name: str,
        component_type: ComponentType,
        parent: int | None = None,
        properties: dict[str, Scalar] | None = None,
        meta: Scalar | None = None,
        position: tuple[int, int] = (0, 0),
    ) -> Component:
        """Add a component to the tree.

        Args:
            component_id: The document-scoped id.
            name: The component name (its path segment).
            component_type: The component's type.
            parent: Handle of the parent component, or None for a root.
            properties: Property values by name.
            meta: The optional meta value.
            position: Canvas position (x, y).

        Returns:
            The new component.

        Raises:
            DuplicateComponentError: If the document id is already in use.
            KeyError: If the parent handle is unknown.
        """
        if parent is not None and parent not in self._children:
            raise KeyError(f"Unknown parent handle {parent}")

        if component_id in self._by_component_id:
            existing = self._components[self._by_component_id[component_id]]
            raise DuplicateComponentError(component_id, path_of(self, existing))

        handle = len(self._components)
        component = Component(
            handle=handle,
            component_id=component_id,
            name=name,
            component_type=component_type,
            parent=parent,
            properties=dict(properties or {}),
            meta=meta,
            x=position[0],
            y=position[1],
        )

        self._components.append(component)
        self._children[handle] = []
        self._children[parent].append(handle)
        self._by_component_id[component_id] = handle

        self._graph.add_node(handle, name=name, component_id=component_id)
        if parent is not None:
            self._graph.add_edge(parent, handle, edge_type=EdgeType.CONTAINS)

        return component

    def get(self, handle: int) -> Component:
        """Get a component by handle."""
        return self._components[handle]

    def get_by_component_id(self, component_id: int) -> Component | None:
        """Get a component by its document id."""
        handle = self._by_component_id.get(component_id)
        if handle is None:
            return None
        return self._components[handle]

    def parent_of(self, component: Component) -> Component | None:
        """Get the parent of a component, or None for a root."""
        if component.parent is None:
            return None
        return self._components[component.parent]

    def children_of(self, handle: int | None) -> list[Component]:
        """Get the children of a component in creation order.

        Args:
            handle: The parent handle, or None for the root level.
        """
        return [self._components[h] for h in self._children.get(handle, [])]

    def sorted_children_of(self, handle: int | None) -> list[Component]:
        """Get the children of a component ordered by ascending document id."""
        return sorted(self.children_of(handle), key=lambda c: c.component_id)

    def child_count(self, handle: int | None) -> int:
        """Get the number of components directly under a parent."""
        return len(self._children.get(handle, []))

    def roots(self) -> list[Component]:
        """Get the top-level components in creation order."""
        return self.children_of(None)

    def components(self) -> list[Component]:
        """Get all components in creation order."""
        return list(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def walk(self, handle: int | None = None) -> Iterator[Component]:
        """Iterate depth-first over the tree, siblings by ascending id."""
        for child in self.sorted_children_of(handle):
            yield child
            yield from self.walk(child.handle)

    def kit_names(self) -> list[str]:
        """Get the sorted names of all kits used by components."""
        return sorted({component.kit for component in self._components})

    # -------------------------------------------------------------------------
    # Link management
    # -------------------------------------------------------------------------

    def add_link(
        self, from_handle: int, from_slot: str, to_handle: int, to_slot: str
    ) -> Link:
        """Add a link between two component slots.

        Raises:
            DuplicateLinkError: If the same link already exists.
            IndexError: If either handle is unknown.
        """
        source = self._components[from_handle]
        target = self._components[to_handle]

        key = (from_handle, from_slot, to_handle, to_slot)
        if key in self._link_keys:
            raise DuplicateLinkError(
                endpoint_of(self, source, from_slot),
                endpoint_of(self, target, to_slot),
            )

        link = Link(
            handle=len(self._links),
            from_handle=source.handle,
            from_slot=from_slot,
            to_handle=target.handle,
            to_slot=to_slot,
        )
        self._links.append(link)
        self._link_keys.add(key)

        self._graph.add_edge(
            from_handle,
            to_handle,
            key=("link", link.handle),
            edge_type=EdgeType.LINK,
            link=link,
        )

        return link

    def links(self) -> list[Link]:
        """Get all links in creation order."""
        return list(self._links)

    def links_from(self, handle: int) -> list[Link]:
        """Get the outgoing links of a component."""
        return [
            data["link"]
            for _, _, data in self._graph.out_edges(handle, data=True)
            if data.get("edge_type") == EdgeType.LINK
        ]

    def links_to(self, handle: int) -> list[Link]:
        """Get the incoming links of a component."""
        return [
            data["link"]
            for _, _, data in self._graph.in_edges(handle, data=True)
            if data.get("edge_type") == EdgeType.LINK
        ]

    def find_link(self, from_handle: int, to_handle: int) -> Link | None:
        """Get the first link from one component to another, if any."""
        for link in self.links_from(from_handle):
            if link.to_handle == to_handle:
                return link
        return None

    def has_link(
        self, from_handle: int, from_slot: str, to_handle: int, to_slot: str
    ) -> bool:
        """Check if an exact link exists."""
        return (from_handle, from_slot, to_handle, to_slot) in self._link_keys

    def link_graph(self) -> nx.DiGraph:
        """Get a simple directed graph containing only link edges."""
        view = nx.subgraph_view(
            self._graph,
            filter_edge=lambda u, v, k: self._graph.edges[u, v, k].get("edge_type")
            == EdgeType.LINK,
        )
        return nx.DiGraph(view)

    def link_cycles(self) -> list[list[int]]:
        """Get every elementary cycle formed by links, as handle lists."""
        return [list(cycle) for cycle in nx.simple_cycles(self.link_graph())]

    def summary(self) -> dict[str, Any]:
        """Get component, link and kit counts."""
        return {
            "components": len(self._components),
            "links": len(self._links),
            "kits": self.kit_names(),
        }
