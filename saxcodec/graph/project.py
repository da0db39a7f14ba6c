"""Project record wrapping a project graph."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .project_graph import ProjectGraph


def default_canvas_settings() -> dict[str, Any]:
    return {"zoom": 1, "offsetX": 0, "offsetY": 0}


@dataclass
class Project:
    """An application project: metadata plus its component graph."""

    name: str
    app_name: str
    owner: Any = None
    schema: dict[str, str] = field(default_factory=dict)
    canvas_settings: dict[str, Any] = field(default_factory=default_canvas_settings)
    created_at: datetime = field(default_factory=datetime.now)
    graph: ProjectGraph = field(default_factory=ProjectGraph)

    @classmethod
    def create(cls, app_name: str, owner: Any = None) -> "Project":
        """Create a project named after the app and the current time."""
        created_at = datetime.now()
        return cls(
            name=f"{app_name} - {created_at:%Y-%m-%d %H:%M}",
            app_name=app_name,
            owner=owner,
            created_at=created_at,
        )
