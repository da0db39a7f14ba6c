"""In-memory kit and component type catalog with staged upserts."""

import logging

from .models import CatalogFile, ComponentType, Kit

logger = logging.getLogger(__name__)


class KitCatalog:
    """The shared catalog of kits and component types.

    The catalog is additive only: kits and types are created when missing
    and existing definitions are never overwritten. Imports never write to
    the catalog directly; they collect missing entries in a ``CatalogStage``
    and commit them in one batch once the whole document has been read.
    """

    def __init__(self, kits: list[Kit] | None = None):
        self._kits: dict[str, Kit] = {}
        for kit in kits or []:
            self.upsert_kit(kit)

    @classmethod
    def from_catalog_file(cls, catalog_file: CatalogFile) -> "KitCatalog":
        """Build a catalog from a parsed YAML catalog."""
        return cls(list(catalog_file.kits.values()))

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_kit(self, name: str) -> Kit | None:
        """Get a kit by name."""
        return self._kits.get(name)

    def get_type(self, kit_name: str, type_name: str) -> ComponentType | None:
        """Get a component type by kit and type name."""
        kit = self._kits.get(kit_name)
        if kit is None:
            return None
        return kit.types.get(type_name)

    def kit_names(self) -> list[str]:
        """Get all kit names in insertion order."""
        return list(self._kits)

    def type_count(self) -> int:
        """Get the total number of component types."""
        return sum(len(kit.types) for kit in self._kits.values())

    def __contains__(self, kit_name: object) -> bool:
        return kit_name in self._kits

    # -------------------------------------------------------------------------
    # Upserts
    # -------------------------------------------------------------------------

    def upsert_kit(self, kit: Kit) -> Kit:
        """Add a kit if missing, merging in any types it does not have yet.

        Returns:
            The kit stored in the catalog.
        """
        existing = self._kits.get(kit.name)
        if existing is None:
            self._kits[kit.name] = kit
            return kit

        for type_name, component_type in kit.types.items():
            existing.types.setdefault(type_name, component_type)
        return existing

    def upsert_type(self, component_type: ComponentType) -> ComponentType:
        """Add a component type if missing.

        Returns:
            The type stored in the catalog.
        """
        kit = self._kits.get(component_type.kit)
        if kit is None:
            kit = self.upsert_kit(Kit(name=component_type.kit))
        return kit.types.setdefault(component_type.type_name, component_type)

    def stage(self) -> "CatalogStage":
        """Start a staged set of upserts against this catalog."""
        return CatalogStage(self)


class CatalogStage:
    """Pending catalog additions collected during one import.

    Lookups consult the catalog first, then the pending additions. Nothing
    is visible in the catalog until ``commit`` is called.
    """

    def __init__(self, catalog: KitCatalog):
        self._catalog = catalog
        self._kits: dict[str, Kit] = {}
        self._types: dict[tuple[str, str], ComponentType] = {}

    @property
    def pending_kits(self) -> list[str]:
        return list(self._kits)

    @property
    def pending_types(self) -> list[str]:
        return [f"{kit}::{type_name}" for kit, type_name in self._types]

    def ensure_kit(self, name: str, checksum: str | None = None) -> Kit:
        """Look up a kit, staging a new one if the catalog lacks it."""
        kit = self._catalog.get_kit(name) or self._kits.get(name)
        if kit is None:
            kit = Kit(name=name, checksum=checksum or None)
            self._kits[name] = kit
        return kit

    def ensure_type(self, kit_name: str, type_name: str) -> ComponentType:
        """Look up a component type, staging a generic one if missing."""
        self.ensure_kit(kit_name)

        component_type = self._catalog.get_type(kit_name, type_name)
        if component_type is None:
            component_type = self._types.get((kit_name, type_name))
        if component_type is None:
            component_type = ComponentType(
                kit=kit_name,
                type_name=type_name,
                is_folder=type_name == "Folder",
            )
            self._types[(kit_name, type_name)] = component_type
        return component_type

    def commit(self) -> None:
        """Write all pending kits and types to the catalog."""
        for kit in self._kits.values():
            self._catalog.upsert_kit(kit)
        for component_type in self._types.values():
            self._catalog.upsert_type(component_type)

        if self._kits or self._types:
            logger.debug(
                "Committed %d kit(s) and %d type(s) to catalog",
                len(self._kits),
                len(self._types),
            )

        self._kits = {}
        self._types = {}
