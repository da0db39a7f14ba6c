"""Tests for the SAX importer."""

import pytest

from saxcodec.codec.importer import (
    import_document,
    parse_properties,
    parse_type_reference,
    parse_document,
)
from saxcodec.config import CodecSettings
from saxcodec.graph.paths import path_of, resolve
from saxcodec.schema.catalog import KitCatalog
from saxcodec.schema.errors import (
    DuplicateComponentError,
    DuplicateLinkError,
    MalformedDocumentError,
    MalformedTypeReferenceError,
)


def make_document(comps: str, links: str = "", schema: str = "") -> str:
    return f"""<?xml version="1.0"?>
<sedonaApp>
  <schema>{schema}</schema>
  <app>{comps}</app>
  <links>{links}</links>
</sedonaApp>"""


class TestParseHelpers:
    def test_parse_type_reference(self):
        assert parse_type_reference("control::Add2") == ("control", "Add2")

    @pytest.mark.parametrize("type_ref", ["Add2", "", "::Add2", "control::"])
    def test_parse_type_reference_malformed(self, type_ref):
        with pytest.raises(MalformedTypeReferenceError):
            parse_type_reference(type_ref)

    def test_parse_properties_separates_meta(self):
        element = parse_document(
            '<comp><prop name="meta" val="12"/><prop name="gain" val="2.5"/></comp>'
        )
        properties, meta = parse_properties(element)
        assert properties == {"gain": 2.5}
        assert meta == 12

    def test_parse_properties_missing_val(self):
        properties, meta = parse_properties(parse_document('<comp><prop name="x"/></comp>'))
        assert properties == {"x": ""}
        assert meta is None

    def test_parse_document_invalid(self):
        with pytest.raises(MalformedDocumentError):
            parse_document("<invalid-xml><unclosed-tag></invalid-xml>")


class TestImportProject:
    def test_project_shell(self, basic_project):
        assert basic_project.app_name == "Plant"
        assert basic_project.name.startswith("Plant - ")
        assert basic_project.owner == "alice"
        assert basic_project.schema == {"sys": "cafe01", "control": ""}
        assert basic_project.canvas_settings == {"zoom": 1, "offsetX": 0, "offsetY": 0}

    def test_default_app_name(self):
        project = import_document(make_document(""))
        assert project.app_name == "SedonaApp"

    def test_tree_shape(self, basic_project):
        graph = basic_project.graph
        assert len(graph) == 4
        assert [c.name for c in graph.roots()] == ["AHU_1", "Clock"]

        ahu = resolve(graph, "/AHU_1")
        assert [c.name for c in graph.children_of(ahu.handle)] == ["Tstat2", "Comp1EN"]

    def test_properties_and_meta(self, basic_project):
        tstat = resolve(basic_project.graph, "/AHU_1/Tstat2")
        assert tstat.meta == 7
        assert tstat.properties == {"in1": 3.14159, "in2": 3}

        clock = resolve(basic_project.graph, "/Clock")
        assert clock.properties == {"enabled": True, "label": "Night shift"}
        assert clock.meta is None

    def test_types_resolved_from_catalog(self, basic_project, catalog):
        tstat = resolve(basic_project.graph, "/AHU_1/Tstat2")
        assert tstat.component_type is catalog.get_type("control", "Add2")
        assert tstat.has_slot("out")

    def test_oversized_numbers_kept_as_text(self):
        digits = "9" * 5000
        doc = make_document(
            f'<comp name="A" id="1" type="k::T">'
            f'<prop name="huge" val="1e400"/><prop name="long" val="{digits}"/>'
            f"</comp>"
        )
        component = import_document(doc).graph.get(0)
        assert component.properties == {"huge": "1e400", "long": digits}

    def test_layout_grid(self):
        comps = "".join(
            f'<comp name="c{i}" id="{i}" type="k::T"/>' for i in range(1, 6)
        )
        graph = import_document(make_document(comps)).graph

        positions = [(c.x, c.y) for c in graph.roots()]
        assert positions == [(50, 50), (250, 50), (450, 50), (650, 50), (50, 250)]

    def test_layout_is_per_parent(self, basic_project):
        graph = basic_project.graph
        assert (resolve(graph, "/Clock").x, resolve(graph, "/Clock").y) == (250, 50)
        assert (resolve(graph, "/AHU_1/Tstat2").x, resolve(graph, "/AHU_1/Tstat2").y) == (50, 50)
        assert (resolve(graph, "/AHU_1/Comp1EN").x, resolve(graph, "/AHU_1/Comp1EN").y) == (250, 50)

    def test_layout_settings(self):
        settings = CodecSettings(layout_columns=2, layout_spacing=100, layout_margin=10)
        comps = "".join(f'<comp name="c{i}" id="{i}" type="k::T"/>' for i in range(1, 4))
        graph = import_document(make_document(comps), settings=settings).graph

        assert [(c.x, c.y) for c in graph.roots()] == [(10, 10), (110, 10), (10, 110)]


class TestImportLinks:
    def test_links_created(self, basic_project):
        graph = basic_project.graph
        links = graph.links()
        assert len(links) == 2
        assert path_of(graph, graph.get(links[0].from_handle)) == "/AHU_1/Tstat2"
        assert links[0].from_slot == "out"
        assert path_of(graph, graph.get(links[0].to_handle)) == "/AHU_1/Comp1EN"
        assert links[0].to_slot == "in1"

    def test_dangling_link_dropped(self):
        doc = make_document(
            '<comp name="A" id="1" type="k::T"/>',
            '<link from="/A.out" to="/Missing.in"/><link from="/A.out" to="/A.in"/>',
        )
        project = import_document(doc)
        assert len(project.graph.links()) == 1
        assert project.graph.links()[0].to_slot == "in"

    def test_endpoint_without_slot_dropped(self):
        doc = make_document(
            '<comp name="A" id="1" type="k::T"/>',
            '<link from="/A" to="/A.in"/>',
        )
        assert import_document(doc).graph.links() == []

    def test_links_resolve_regardless_of_document_order(self):
        doc = make_document(
            '<comp name="B" id="2" type="k::T"/><comp name="A" id="1" type="k::T"/>',
            '<link from="/A.out" to="/B.in"/>',
        )
        assert len(import_document(doc).graph.links()) == 1

    def test_duplicate_link_aborts(self):
        doc = make_document(
            '<comp name="A" id="1" type="k::T"/><comp name="B" id="2" type="k::T"/>',
            '<link from="/A.out" to="/B.in"/><link from="/A.out" to="/B.in"/>',
        )
        catalog = KitCatalog()
        with pytest.raises(DuplicateLinkError):
            import_document(doc, catalog=catalog)
        assert catalog.kit_names() == []


class TestImportErrors:
    def test_malformed_xml(self):
        with pytest.raises(MalformedDocumentError):
            import_document(b"<sedonaApp><app></sedonaApp>")

    def test_wrong_root_element(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            import_document("<project/>")
        assert "sedonaApp" in str(exc_info.value)

    def test_missing_id(self):
        with pytest.raises(MalformedDocumentError):
            import_document(make_document('<comp name="A" type="k::T"/>'))

    def test_non_integer_id(self):
        with pytest.raises(MalformedDocumentError):
            import_document(make_document('<comp name="A" id="x" type="k::T"/>'))

    def test_missing_name(self):
        with pytest.raises(MalformedDocumentError):
            import_document(make_document('<comp id="1" type="k::T"/>'))

    def test_duplicate_component_id(self):
        doc = make_document(
            '<comp name="A" id="1" type="k::T"><comp name="B" id="1" type="k::T"/></comp>'
        )
        with pytest.raises(DuplicateComponentError):
            import_document(doc)

    def test_malformed_type_rolls_back_catalog(self):
        comps = "".join(
            f'<comp name="c{i}" id="{i}" type="{"hvac::Timer" if i != 3 else "Timer"}"/>'
            for i in range(1, 6)
        )
        catalog = KitCatalog()
        with pytest.raises(MalformedTypeReferenceError):
            import_document(make_document(comps, schema='<kit name="hvac"/>'), catalog=catalog)

        assert "hvac" not in catalog
        assert catalog.type_count() == 0


class TestTypeUpsert:
    def test_two_imports_share_one_type(self):
        catalog = KitCatalog()
        doc = make_document('<comp name="T" id="1" type="hvac::Timer"/>')

        first = import_document(doc, catalog=catalog)
        second = import_document(doc, catalog=catalog)

        assert catalog.kit_names() == ["hvac"]
        assert catalog.type_count() == 1
        assert first.graph.get(0).component_type is second.graph.get(0).component_type

    def test_seeded_type_not_overwritten(self, catalog):
        import_document(make_document('<comp name="A" id="1" type="control::Add2"/>'), catalog=catalog)
        assert [s.name for s in catalog.get_type("control", "Add2").slots] == ["in1", "in2", "out"]

    def test_seeded_kit_checksum_kept(self, catalog):
        import_document(make_document("", schema='<kit name="sys" checksum="other"/>'), catalog=catalog)
        assert catalog.get_kit("sys").checksum == "cafe01"
