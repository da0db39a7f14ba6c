"""Pydantic models for kits and component types."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class SlotDirection(str, Enum):
    """Direction of a component slot."""

    INPUT = "input"
    OUTPUT = "output"
    BOTH = "both"


class Slot(BaseModel):
    """A named connection point on a component type."""

    name: str
    direction: SlotDirection = SlotDirection.BOTH
    value_type: str | None = Field(default=None, alias="type")

    model_config = {"populate_by_name": True}

    @property
    def is_input(self) -> bool:
        return self.direction in (SlotDirection.INPUT, SlotDirection.BOTH)

    @property
    def is_output(self) -> bool:
        return self.direction in (SlotDirection.OUTPUT, SlotDirection.BOTH)


class PropertyDefinition(BaseModel):
    """A property declared by a component type."""

    name: str
    default: bool | int | float | str | None = None


class ComponentType(BaseModel):
    """A type within a kit."""

    kit: str = ""  # Will be set from the enclosing kit
    type_name: str = ""  # Will be set from the key
    description: str | None = None
    category: str | None = None
    slots: list[Slot] = Field(default_factory=list)
    properties: list[PropertyDefinition] = Field(default_factory=list)
    is_folder: bool = Field(default=False, alias="folder")

    model_config = {"populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def normalize_type(cls, data: Any) -> Any:
        """Normalize shorthand slot and property syntax."""
        if not isinstance(data, dict):
            return data

        # "out" -> {name: "out"}
        slots = data.get("slots", [])
        if slots:
            data["slots"] = [
                {"name": slot} if isinstance(slot, str) else slot for slot in slots
            ]

        properties = data.get("properties", [])
        if isinstance(properties, dict):
            # {enabled: true} -> [{name: enabled, default: true}]
            data["properties"] = [
                {"name": name, "default": default}
                for name, default in properties.items()
            ]
        elif properties:
            data["properties"] = [
                {"name": prop} if isinstance(prop, str) else prop
                for prop in properties
            ]

        return data

    @property
    def full_type_name(self) -> str:
        """Get the qualified type name, e.g. ``sys::Folder``."""
        return f"{self.kit}::{self.type_name}"

    def get_slot(self, name: str) -> Slot | None:
        """Get a slot by name."""
        for slot in self.slots:
            if slot.name == name:
                return slot
        return None

    def has_slot(self, name: str) -> bool:
        """Check if the type declares a slot."""
        return self.get_slot(name) is not None

    def input_slots(self) -> list[Slot]:
        """Get slots that accept incoming links."""
        return [slot for slot in self.slots if slot.is_input]

    def output_slots(self) -> list[Slot]:
        """Get slots that can be linked from."""
        return [slot for slot in self.slots if slot.is_output]

    def default_properties(self) -> dict[str, Any]:
        """Get a mapping of property name to default value."""
        return {prop.name: prop.default for prop in self.properties}

    def can_connect_to(
        self, target: "ComponentType", from_slot: str, to_slot: str
    ) -> bool:
        """Check if a link from this type to target is type-compatible.

        Both slots must exist. When both declare a value type, the types
        must match.
        """
        source = self.get_slot(from_slot)
        destination = target.get_slot(to_slot)

        if source is None or destination is None:
            return False

        if source.value_type is not None and destination.value_type is not None:
            return source.value_type == destination.value_type

        return True


class Kit(BaseModel):
    """A namespace of component type definitions."""

    name: str = ""  # Will be set from the key
    checksum: str | None = None
    version: str | None = None
    description: str | None = None
    manifest: dict[str, Any] | None = None
    types: dict[str, ComponentType] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_kit(cls, data: Any) -> Any:
        """Set type names and kit back-references from the mapping keys."""
        if not isinstance(data, dict):
            return data

        kit_name = data.get("name", "")
        types = data.get("types") or {}
        if isinstance(types, list):
            # [Add2, Sub2] -> {Add2: {}, Sub2: {}}
            types = {name: {} for name in types}

        normalized = {}
        for type_name, type_data in types.items():
            if isinstance(type_data, ComponentType):
                normalized[type_name] = type_data
                continue
            type_data = dict(type_data or {})
            type_data["type_name"] = type_name
            type_data["kit"] = kit_name
            normalized[type_name] = type_data
        data["types"] = normalized

        return data


class CatalogFile(BaseModel):
    """Root model for a YAML kit catalog."""

    kits: dict[str, Kit] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_catalog(cls, data: Any) -> Any:
        """Set kit names from keys."""
        if not isinstance(data, dict):
            return data

        kits = data.get("kits") or {}
        if isinstance(kits, dict):
            normalized = {}
            for name, kit_data in kits.items():
                if isinstance(kit_data, Kit):
                    normalized[name] = kit_data
                    continue
                kit_data = dict(kit_data or {})
                kit_data["name"] = name
                normalized[name] = kit_data
            data["kits"] = normalized

        return data
