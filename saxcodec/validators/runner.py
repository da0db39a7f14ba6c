"""Validation runner that orchestrates all validators."""

from pathlib import Path

from ..codec.importer import import_document
from ..config import CodecSettings
from ..graph.project import Project
from ..schema.catalog import KitCatalog
from ..schema.errors import MalformedDocumentError
from .base import ValidationResult
from .cycles import check_link_cycles
from .links import check_link_slots
from .structure import check_sibling_names


def run_validators(project: Project) -> ValidationResult:
    """Run all validators on a project.

    Args:
        project: The project to check.

    Returns:
        Combined ValidationResult from all validators.
    """
    graph = project.graph
    result = ValidationResult()

    result.merge(check_sibling_names(graph))
    result.merge(check_link_slots(graph))
    result.merge(check_link_cycles(graph))

    return result


def validate_document_file(
    path: str | Path,
    catalog: KitCatalog | None = None,
    settings: CodecSettings | None = None,
) -> ValidationResult:
    """Import a SAX file and validate the resulting project.

    Args:
        path: Path to the SAX document.
        catalog: Catalog supplying slot definitions for known types.
        settings: Codec settings.

    Returns:
        ValidationResult from all validators.

    Raises:
        MalformedDocumentError: If the file cannot be read or parsed.
        CodecError: If the document cannot be imported.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise MalformedDocumentError(f"Cannot read file: {e}", str(path)) from e

    project = import_document(data, catalog=catalog, settings=settings)
    return run_validators(project)
