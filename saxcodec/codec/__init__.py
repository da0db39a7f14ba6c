"""SAX document import and export."""

from .importer import (
    DocumentImporter,
    import_document,
    parse_document,
    parse_properties,
    parse_type_reference,
)
from .exporter import DocumentExporter, export_document

__all__ = [
    "DocumentImporter",
    "DocumentExporter",
    "import_document",
    "export_document",
    "parse_document",
    "parse_properties",
    "parse_type_reference",
]
