"""Link slot integrity validators."""

from ..graph.node_types import Link
from ..graph.paths import endpoint_of, path_of
from ..graph.project_graph import ProjectGraph
from .base import ValidationResult


def is_valid_link(graph: ProjectGraph, link: Link) -> bool:
    """Check that both endpoint types declare the linked slots.

    Slot direction is not considered.
    """
    source = graph.get(link.from_handle)
    target = graph.get(link.to_handle)
    return source.has_slot(link.from_slot) and target.has_slot(link.to_slot)


def check_link_slots(graph: ProjectGraph) -> ValidationResult:
    """Check every link against its endpoint component types.

    This validator reports:
    - Source or target slots missing from the component type
    - Slots whose declared value types differ
    - Links that leave an input-only slot or enter an output-only slot

    Args:
        graph: The project graph to check.

    Returns:
        ValidationResult with warnings and infos; links are never rejected.
    """
    result = ValidationResult()

    for link in graph.links():
        source = graph.get(link.from_handle)
        target = graph.get(link.to_handle)
        source_path = path_of(graph, source)
        target_path = path_of(graph, target)
        link_text = (
            f"{endpoint_of(graph, source, link.from_slot)} -> "
            f"{endpoint_of(graph, target, link.to_slot)}"
        )

        source_slot = source.component_type.get_slot(link.from_slot)
        target_slot = target.component_type.get_slot(link.to_slot)

        if source_slot is None:
            result.add_warning(
                code="MISSING_SOURCE_SLOT",
                message=f"Type '{source.type_name}' has no slot '{link.from_slot}' (link {link_text})",
                component=source_path,
                slot=link.from_slot,
                link=link_text,
            )
        if target_slot is None:
            result.add_warning(
                code="MISSING_TARGET_SLOT",
                message=f"Type '{target.type_name}' has no slot '{link.to_slot}' (link {link_text})",
                component=target_path,
                slot=link.to_slot,
                link=link_text,
            )
        if source_slot is None or target_slot is None:
            continue

        if not source.component_type.can_connect_to(
            target.component_type, link.from_slot, link.to_slot
        ):
            result.add_warning(
                code="SLOT_TYPE_MISMATCH",
                message=(
                    f"Slot types differ: '{source_slot.value_type}' -> "
                    f"'{target_slot.value_type}' (link {link_text})"
                ),
                component=source_path,
                slot=link.from_slot,
                link=link_text,
            )

        if not source_slot.is_output or not target_slot.is_input:
            result.add_info(
                code="SLOT_DIRECTION_MISMATCH",
                message=(
                    f"Link runs from a {source_slot.direction.value} slot to a "
                    f"{target_slot.direction.value} slot (link {link_text})"
                ),
                component=source_path,
                slot=link.from_slot,
                link=link_text,
            )

    return result
