"""Tests for ProjectGraph."""

import pytest

from saxcodec.graph.node_types import EdgeType
from saxcodec.graph.project_graph import ProjectGraph
from saxcodec.schema.errors import DuplicateComponentError, DuplicateLinkError
from saxcodec.schema.models import ComponentType

FOLDER = ComponentType(kit="sys", type_name="Folder", is_folder=True)
ADD2 = ComponentType(kit="control", type_name="Add2")


@pytest.fixture
def graph():
    graph = ProjectGraph()
    ahu = graph.add_component(1, "AHU_1", FOLDER)
    graph.add_component(7, "Tstat2", ADD2, parent=ahu.handle)
    graph.add_component(3, "Comp1EN", ADD2, parent=ahu.handle)
    return graph


class TestComponents:
    def test_add_component(self):
        graph = ProjectGraph()
        component = graph.add_component(
            4, "Clock", ADD2, properties={"in1": 1}, meta=9, position=(50, 250)
        )

        assert component.handle == 0
        assert component.is_root
        assert component.type_name == "control::Add2"
        assert component.properties == {"in1": 1}
        assert component.meta == 9
        assert (component.x, component.y) == (50, 250)
        assert len(graph) == 1

    def test_children_in_creation_order(self, graph):
        names = [c.name for c in graph.children_of(0)]
        assert names == ["Tstat2", "Comp1EN"]

    def test_sorted_children_by_component_id(self, graph):
        names = [c.name for c in graph.sorted_children_of(0)]
        assert names == ["Comp1EN", "Tstat2"]

    def test_parent_of(self, graph):
        child = graph.get_by_component_id(7)
        assert graph.parent_of(child).name == "AHU_1"
        assert graph.parent_of(graph.get(0)) is None

    def test_duplicate_component_id(self, graph):
        with pytest.raises(DuplicateComponentError) as exc_info:
            graph.add_component(7, "Other", ADD2)
        assert exc_info.value.component_id == 7
        assert exc_info.value.path == "/AHU_1/Tstat2"

    def test_unknown_parent(self, graph):
        with pytest.raises(KeyError):
            graph.add_component(99, "Orphan", ADD2, parent=42)

    def test_walk_orders_by_id(self, graph):
        graph.add_component(2, "Early", ADD2)
        names = [c.name for c in graph.walk()]
        assert names == ["AHU_1", "Comp1EN", "Tstat2", "Early"]

    def test_contains_edges(self, graph):
        edges = [
            (u, v)
            for u, v, data in graph.graph.edges(data=True)
            if data["edge_type"] == EdgeType.CONTAINS
        ]
        assert edges == [(0, 1), (0, 2)]

    def test_kit_names(self, graph):
        assert graph.kit_names() == ["control", "sys"]


class TestLinks:
    def test_add_link(self, graph):
        link = graph.add_link(1, "out", 2, "in1")

        assert graph.links() == [link]
        assert graph.links_from(1) == [link]
        assert graph.links_to(2) == [link]
        assert graph.find_link(1, 2) is link
        assert graph.find_link(2, 1) is None
        assert graph.has_link(1, "out", 2, "in1")

    def test_duplicate_link(self, graph):
        graph.add_link(1, "out", 2, "in1")
        with pytest.raises(DuplicateLinkError) as exc_info:
            graph.add_link(1, "out", 2, "in1")
        assert exc_info.value.from_endpoint == "/AHU_1/Tstat2.out"
        assert exc_info.value.to_endpoint == "/AHU_1/Comp1EN.in1"

    def test_parallel_links_between_same_components(self, graph):
        graph.add_link(1, "out", 2, "in1")
        graph.add_link(1, "out", 2, "in2")
        assert len(graph.links_from(1)) == 2

    def test_link_cycles(self, graph):
        graph.add_link(1, "out", 2, "in1")
        graph.add_link(2, "out", 1, "in1")

        cycles = graph.link_cycles()
        assert len(cycles) == 1
        assert sorted(cycles[0]) == [1, 2]

    def test_link_graph_excludes_containment(self, graph):
        assert graph.link_graph().number_of_edges() == 0

    def test_summary(self, graph):
        graph.add_link(1, "out", 2, "in1")
        assert graph.summary() == {
            "components": 3,
            "links": 1,
            "kits": ["control", "sys"],
        }
