"""saxcodec: translate SAX application documents to and from project graphs."""

from .codec import export_document, import_document
from .config import CodecSettings
from .graph import Project, ProjectGraph
from .schema import CodecError, KitCatalog
from .store import ProjectStore

__all__ = [
    "export_document",
    "import_document",
    "CodecSettings",
    "Project",
    "ProjectGraph",
    "CodecError",
    "KitCatalog",
    "ProjectStore",
]
