"""Codec settings."""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .schema.errors import CatalogValidationError
from .schema.loader import load_yaml, validation_errors


class CodecSettings(BaseModel):
    """Tunable parameters for import and export."""

    root_element: str = "sedonaApp"
    default_app_name: str = "SedonaApp"
    app_name_property: str = "appName"

    # Placeholder grid used for imported components
    layout_columns: int = Field(default=4, ge=1)
    layout_spacing: int = 200
    layout_margin: int = 50

    float_precision: int = Field(default=1, ge=0)
    indent: str = "  "

    def position_for(self, sibling_count: int) -> tuple[int, int]:
        """Get the grid position for the next component under a parent."""
        column = sibling_count % self.layout_columns
        row = sibling_count // self.layout_columns
        return (
            column * self.layout_spacing + self.layout_margin,
            row * self.layout_spacing + self.layout_margin,
        )


def load_settings(path: str | Path | None = None) -> CodecSettings:
    """Load settings from a YAML file, or return the defaults.

    Raises:
        CatalogLoadError: If the file cannot be read or parsed.
        CatalogValidationError: If the data fails validation.
    """
    if path is None:
        return CodecSettings()

    data = load_yaml(path)
    try:
        return CodecSettings.model_validate(data)
    except ValidationError as e:
        errors = validation_errors(e)
        raise CatalogValidationError(
            f"Settings validation failed with {len(errors)} error(s)", errors
        ) from e
