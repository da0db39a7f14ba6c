"""Export project graphs as SAX XML documents."""

import logging
import xml.etree.ElementTree as ET

from ..config import CodecSettings
from ..graph.paths import endpoint_of, path_of
from ..graph.project import Project
from ..graph.project_graph import ProjectGraph
from ..graph.node_types import Component
from ..schema.catalog import KitCatalog
from ..schema.scalars import encode
from .importer import META_PROPERTY

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0"?>'


class DocumentExporter:
    """Serializes a project into a SAX document."""

    def __init__(
        self,
        catalog: KitCatalog | None = None,
        settings: CodecSettings | None = None,
    ):
        self.catalog = catalog
        self.settings = settings or CodecSettings()

    def export_document(self, project: Project) -> bytes:
        """Export a project as pretty-printed UTF-8 XML."""
        root = self.build_tree(project)
        text = self._pretty_print(ET.tostring(root, encoding="unicode"))

        logger.info(
            "Exported project '%s': %d component(s), %d link(s)",
            project.app_name,
            len(project.graph),
            len(project.graph.links()),
        )
        return text.encode("utf-8")

    def build_tree(self, project: Project) -> ET.Element:
        """Build the unformatted document element tree."""
        graph = project.graph
        root = ET.Element(self.settings.root_element)

        self._add_schema(root, project)

        app = ET.SubElement(root, "app")
        ET.SubElement(
            app, "prop", name=self.settings.app_name_property, val=project.app_name
        )
        self._add_components(app, graph, None)

        self._add_links(root, graph)
        return root

    def _add_schema(self, root: ET.Element, project: Project) -> None:
        schema = ET.SubElement(root, "schema")

        for kit_name in project.graph.kit_names():
            kit = ET.SubElement(schema, "kit", name=kit_name)
            checksum = self._checksum_for(project, kit_name)
            if checksum:
                kit.set("checksum", checksum)

    def _checksum_for(self, project: Project, kit_name: str) -> str | None:
        checksum = project.schema.get(kit_name)
        if not checksum and self.catalog is not None:
            kit = self.catalog.get_kit(kit_name)
            checksum = kit.checksum if kit is not None else None
        return checksum or None

    def _add_components(
        self, parent: ET.Element, graph: ProjectGraph, handle: int | None
    ) -> None:
        for component in graph.sorted_children_of(handle):
            self._add_component(parent, graph, component)

    def _add_component(
        self, parent: ET.Element, graph: ProjectGraph, component: Component
    ) -> None:
        # "--" is not allowed inside an XML comment
        path = path_of(graph, component).replace("--", "- -")
        parent.append(ET.Comment(f" {path} "))

        element = ET.SubElement(
            parent,
            "comp",
            name=component.name,
            id=str(component.component_id),
            type=component.type_name,
        )

        if component.meta is not None:
            self._add_property(element, META_PROPERTY, component.meta)

        for name, value in component.properties.items():
            if name == META_PROPERTY:
                continue
            self._add_property(element, name, value)

        self._add_components(element, graph, component.handle)

    def _add_property(self, element: ET.Element, name: str, value) -> None:
        ET.SubElement(
            element,
            "prop",
            name=name,
            val=encode(value, self.settings.float_precision),
        )

    def _add_links(self, root: ET.Element, graph: ProjectGraph) -> None:
        links = ET.SubElement(root, "links")

        for link in graph.links():
            source = graph.get(link.from_handle)
            target = graph.get(link.to_handle)
            ET.SubElement(
                links,
                "link",
                {
                    "from": endpoint_of(graph, source, link.from_slot),
                    "to": endpoint_of(graph, target, link.to_slot),
                },
            )

    def _pretty_print(self, xml_text: str) -> str:
        """Re-parse the document and indent it, keeping comments."""
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        root = ET.fromstring(xml_text, parser=parser)
        ET.indent(root, space=self.settings.indent)
        return f"{XML_DECLARATION}\n{ET.tostring(root, encoding='unicode')}\n"


def export_document(
    project: Project,
    catalog: KitCatalog | None = None,
    settings: CodecSettings | None = None,
) -> bytes:
    """Export a project as a SAX document.

    See ``DocumentExporter.export_document``.
    """
    return DocumentExporter(catalog, settings).export_document(project)
