"""Record and edge type definitions for the project graph."""

from dataclasses import dataclass, field
from enum import Enum

from ..schema.models import ComponentType
from ..schema.scalars import Scalar


class EdgeType(str, Enum):
    """Types of edges in the project graph."""

    CONTAINS = "contains"  # Parent -> Child
    LINK = "link"  # Source slot -> Target slot


@dataclass
class Component:
    """One component instance in a project tree."""

    handle: int
    component_id: int
    name: str
    component_type: ComponentType
    parent: int | None = None
    properties: dict[str, Scalar] = field(default_factory=dict)
    meta: Scalar | None = None
    x: int = 0
    y: int = 0

    @property
    def type_name(self) -> str:
        return self.component_type.full_type_name

    @property
    def kit(self) -> str:
        return self.component_type.kit

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def has_slot(self, slot: str) -> bool:
        """Check if this component's type declares a slot."""
        return self.component_type.has_slot(slot)


@dataclass(frozen=True)
class Link:
    """A directed connection between two component slots."""

    handle: int
    from_handle: int
    from_slot: str
    to_handle: int
    to_slot: str

    @property
    def key(self) -> tuple[int, str, int, str]:
        return (self.from_handle, self.from_slot, self.to_handle, self.to_slot)
