"""Import SAX XML documents into project graphs."""

import logging
import xml.etree.ElementTree as ET
from typing import Any

from ..config import CodecSettings
from ..graph.paths import resolve, split_endpoint
from ..graph.project import Project
from ..schema.catalog import CatalogStage, KitCatalog
from ..schema.errors import (
    MalformedDocumentError,
    MalformedEndpointError,
    MalformedTypeReferenceError,
)
from ..schema.scalars import Scalar, decode

logger = logging.getLogger(__name__)

TYPE_SEPARATOR = "::"
META_PROPERTY = "meta"


def parse_document(data: bytes | str) -> ET.Element:
    """Parse raw document bytes into an element tree.

    Raises:
        MalformedDocumentError: If the XML does not parse.
    """
    try:
        return ET.fromstring(data)
    except ET.ParseError as e:
        raise MalformedDocumentError(f"Invalid XML content: {e}") from e


def parse_type_reference(type_ref: str) -> tuple[str, str]:
    """Split a ``kit::Type`` reference into (kit, type).

    Raises:
        MalformedTypeReferenceError: If the separator or either side is missing.
    """
    kit_name, sep, type_name = type_ref.partition(TYPE_SEPARATOR)
    if not sep or not kit_name or not type_name:
        raise MalformedTypeReferenceError(type_ref)
    return kit_name, type_name


def parse_properties(element: ET.Element) -> tuple[dict[str, Scalar], Scalar | None]:
    """Decode the ``prop`` children of an element.

    Returns:
        A tuple of (properties, meta). The ``meta`` property is returned
        separately and left out of the property map.
    """
    properties: dict[str, Scalar] = {}
    meta: Scalar | None = None

    for prop in element.findall("prop"):
        name = prop.get("name")
        if not name:
            raise MalformedDocumentError("Property element without a name")

        value = decode(prop.get("val", ""))
        if name == META_PROPERTY:
            meta = value
        else:
            properties[name] = value

    return properties, meta


class DocumentImporter:
    """Builds a new project from a SAX document.

    The importer never touches shared state until the whole document has
    been read: components and links go into a fresh project, and new kits
    and types are staged and committed to the catalog at the very end. A
    failure anywhere leaves the catalog exactly as it was.
    """

    def __init__(
        self,
        catalog: KitCatalog | None = None,
        settings: CodecSettings | None = None,
    ):
        self.catalog = catalog if catalog is not None else KitCatalog()
        self.settings = settings or CodecSettings()

    def import_document(self, data: bytes | str, owner: Any = None) -> Project:
        """Import a document as a brand-new project.

        Args:
            data: The raw XML document.
            owner: Identity of the user the project belongs to.

        Returns:
            The imported project.

        Raises:
            MalformedDocumentError: If the XML is invalid.
            MalformedTypeReferenceError: If a type attribute lacks '::'.
            DuplicateComponentError: If a document id repeats.
            DuplicateLinkError: If the same link appears twice.
        """
        root = parse_document(data)
        if root.tag != self.settings.root_element:
            raise MalformedDocumentError(
                f"Expected root element '{self.settings.root_element}', got '{root.tag}'"
            )

        stage = self.catalog.stage()
        app = root.find("app")

        project = Project.create(self._read_app_name(app), owner)
        self._import_schema(root.find("schema"), project, stage)

        id_map: dict[int, int] = {}
        if app is not None:
            self._import_components(app, project, stage, None, id_map)

        link_count = self._import_links(root.find("links"), project)

        stage.commit()
        logger.info(
            "Imported project '%s': %d component(s), %d link(s)",
            project.app_name,
            len(id_map),
            link_count,
        )
        return project

    def _read_app_name(self, app: ET.Element | None) -> str:
        if app is not None:
            for prop in app.findall("prop"):
                if prop.get("name") == self.settings.app_name_property:
                    return prop.get("val", "")
        return self.settings.default_app_name

    def _import_schema(
        self, schema: ET.Element | None, project: Project, stage: CatalogStage
    ) -> None:
        if schema is None:
            return

        for kit in schema.findall("kit"):
            kit_name = kit.get("name")
            if not kit_name:
                raise MalformedDocumentError("Kit element without a name")

            checksum = kit.get("checksum", "")
            project.schema[kit_name] = checksum
            stage.ensure_kit(kit_name, checksum)

    def _import_components(
        self,
        parent_element: ET.Element,
        project: Project,
        stage: CatalogStage,
        parent: int | None,
        id_map: dict[int, int],
    ) -> None:
        graph = project.graph

        for element in parent_element.findall("comp"):
            name = element.get("name")
            if not name:
                raise MalformedDocumentError("Component element without a name")

            raw_id = element.get("id")
            try:
                component_id = int(raw_id)  # type: ignore[arg-type]
            except (TypeError, ValueError) as e:
                raise MalformedDocumentError(
                    f"Component '{name}' has invalid id {raw_id!r}"
                ) from e

            kit_name, type_name = parse_type_reference(element.get("type", ""))
            component_type = stage.ensure_type(kit_name, type_name)

            properties, meta = parse_properties(element)
            position = self.settings.position_for(graph.child_count(parent))

            component = graph.add_component(
                component_id,
                name,
                component_type,
                parent=parent,
                properties=properties,
                meta=meta,
                position=position,
            )
            id_map[component_id] = component.handle

            self._import_components(element, project, stage, component.handle, id_map)

    def _import_links(self, links: ET.Element | None, project: Project) -> int:
        if links is None:
            return 0

        graph = project.graph
        created = 0

        for element in links.findall("link"):
            source_ref = element.get("from", "")
            target_ref = element.get("to", "")

            try:
                source_path, source_slot = split_endpoint(source_ref)
                target_path, target_slot = split_endpoint(target_ref)
            except MalformedEndpointError as e:
                logger.debug("Skipping link %s -> %s: %s", source_ref, target_ref, e)
                continue

            source = resolve(graph, source_path)
            target = resolve(graph, target_path)
            if source is None or target is None:
                logger.debug(
                    "Skipping link %s -> %s: endpoint not found", source_ref, target_ref
                )
                continue

            graph.add_link(source.handle, source_slot, target.handle, target_slot)
            created += 1

        return created


def import_document(
    data: bytes | str,
    owner: Any = None,
    catalog: KitCatalog | None = None,
    settings: CodecSettings | None = None,
) -> Project:
    """Import a SAX document as a new project.

    See ``DocumentImporter.import_document``.
    """
    return DocumentImporter(catalog, settings).import_document(data, owner)
