"""Schema layer: kits, component types, scalars and codec errors."""

from .errors import (
    CatalogLoadError,
    CatalogValidationError,
    CodecError,
    DuplicateComponentError,
    DuplicateLinkError,
    MalformedDocumentError,
    MalformedEndpointError,
    MalformedTypeReferenceError,
)
from .models import (
    CatalogFile,
    ComponentType,
    Kit,
    PropertyDefinition,
    Slot,
    SlotDirection,
)
from .catalog import CatalogStage, KitCatalog
from .loader import load_catalog, load_catalog_from_string, load_yaml
from .scalars import decode, encode

__all__ = [
    "CatalogLoadError",
    "CatalogValidationError",
    "CodecError",
    "DuplicateComponentError",
    "DuplicateLinkError",
    "MalformedDocumentError",
    "MalformedEndpointError",
    "MalformedTypeReferenceError",
    "CatalogFile",
    "ComponentType",
    "Kit",
    "PropertyDefinition",
    "Slot",
    "SlotDirection",
    "CatalogStage",
    "KitCatalog",
    "load_catalog",
    "load_catalog_from_string",
    "load_yaml",
    "decode",
    "encode",
]
