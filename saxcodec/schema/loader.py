"""YAML loading for kit catalogs."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .catalog import KitCatalog
from .errors import CatalogLoadError, CatalogValidationError
from .models import CatalogFile


def load_yaml(path: str | Path) -> dict:
    """Load a YAML file and return the raw data.

    Args:
        path: Path to the YAML file.

    Returns:
        The parsed YAML data as a dictionary.

    Raises:
        CatalogLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise CatalogLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise CatalogLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise CatalogLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise CatalogLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def validation_errors(error: ValidationError) -> list[dict]:
    """Flatten a pydantic ValidationError into simple dicts."""
    return [
        {
            "loc": ".".join(str(x) for x in err["loc"]),
            "msg": err["msg"],
            "type": err["type"],
        }
        for err in error.errors()
    ]


def load_catalog(path: str | Path) -> KitCatalog:
    """Load a YAML kit catalog file.

    Raises:
        CatalogLoadError: If the file cannot be read or parsed.
        CatalogValidationError: If the data fails validation.
    """
    data = load_yaml(path)
    return _parse_catalog_data(data)


def load_catalog_from_string(yaml_string: str) -> KitCatalog:
    """Parse a YAML string into a KitCatalog.

    Raises:
        CatalogLoadError: If the YAML cannot be parsed.
        CatalogValidationError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise CatalogLoadError(f"Expected YAML mapping at root, got {type(data).__name__}")

    return _parse_catalog_data(data)


def _parse_catalog_data(data: dict) -> KitCatalog:
    try:
        catalog_file = CatalogFile.model_validate(data)
    except ValidationError as e:
        errors = validation_errors(e)
        raise CatalogValidationError(
            f"Catalog validation failed with {len(errors)} error(s)", errors
        ) from e

    return KitCatalog.from_catalog_file(catalog_file)
