"""Codec and catalog exceptions."""


class CodecError(Exception):
    """Base class for errors raised while importing or exporting a document."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class MalformedDocumentError(CodecError):
    """Raised when the XML cannot be parsed or lacks required structure."""


class MalformedTypeReferenceError(CodecError):
    """Raised when a component type attribute is not in ``kit::Type`` form."""

    def __init__(self, type_ref: str, path: str | None = None):
        self.type_ref = type_ref
        super().__init__(
            f"Malformed type reference '{type_ref}' (expected 'kit::Type')", path
        )


class MalformedEndpointError(CodecError):
    """Raised when a link endpoint has no '.' separating path and slot."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"Malformed link endpoint '{endpoint}' (expected 'path.slot')")


class DuplicateComponentError(CodecError):
    """Raised when a document id is used twice within one project."""

    def __init__(self, component_id: int, path: str | None = None):
        self.component_id = component_id
        super().__init__(f"Duplicate component id {component_id}", path)


class DuplicateLinkError(CodecError):
    """Raised when a (source, slot, target, slot) tuple already exists."""

    def __init__(self, from_endpoint: str, to_endpoint: str):
        self.from_endpoint = from_endpoint
        self.to_endpoint = to_endpoint
        super().__init__(f"Duplicate link {from_endpoint} -> {to_endpoint}")


class CatalogLoadError(Exception):
    """Raised when a YAML catalog or settings file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class CatalogValidationError(Exception):
    """Raised when catalog or settings data fails validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)
