"""In-memory project store binding the codec to a shared catalog."""

import logging
from typing import Any

from .codec.exporter import DocumentExporter
from .codec.importer import DocumentImporter
from .config import CodecSettings
from .graph.project import Project
from .schema.catalog import KitCatalog

logger = logging.getLogger(__name__)


class ProjectStore:
    """Holds imported projects and the kit catalog they share.

    A project is registered only after its import has fully succeeded, so
    a failed import leaves both the project list and the catalog unchanged.
    """

    def __init__(
        self,
        catalog: KitCatalog | None = None,
        settings: CodecSettings | None = None,
    ):
        self.catalog = catalog if catalog is not None else KitCatalog()
        self.settings = settings or CodecSettings()
        self._projects: dict[str, Project] = {}

    @property
    def projects(self) -> list[Project]:
        return list(self._projects.values())

    def get(self, name: str) -> Project | None:
        """Get a project by name."""
        return self._projects.get(name)

    def import_document(self, data: bytes | str, owner: Any = None) -> Project:
        """Import a document as a new project and register it."""
        importer = DocumentImporter(self.catalog, self.settings)
        project = importer.import_document(data, owner)

        # Project names carry a minute timestamp; keep them unique
        name = project.name
        suffix = 2
        while name in self._projects:
            name = f"{project.name} ({suffix})"
            suffix += 1
        project.name = name

        self._projects[name] = project
        logger.debug("Registered project '%s'", name)
        return project

    def export_document(self, name: str) -> bytes:
        """Export a registered project.

        Raises:
            KeyError: If no project has that name.
        """
        project = self._projects[name]
        return DocumentExporter(self.catalog, self.settings).export_document(project)

    def delete(self, name: str) -> None:
        """Remove a project together with its components and links."""
        del self._projects[name]
