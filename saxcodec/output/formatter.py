"""Output formatting for validation results and project trees."""

import json
from typing import Literal

from ..graph.paths import endpoint_of, path_of
from ..graph.project import Project
from ..validators.base import Severity, ValidationIssue, ValidationResult

MARKS = {Severity.WARNING: "⚠", Severity.INFO: "ℹ"}

# Heading for issues that do not point at a component
PROJECT_LOCATION = "(project)"


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a validation result for output.

    Args:
        result: The validation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(result)
    return _format_text(result)


def group_by_location(
    issues: list[ValidationIssue],
) -> dict[str, list[ValidationIssue]]:
    """Group issues under the endpoint they point at, in reporting order."""
    groups: dict[str, list[ValidationIssue]] = {}
    for issue in issues:
        groups.setdefault(issue.location or PROJECT_LOCATION, []).append(issue)
    return groups


def summarize(result: ValidationResult) -> str:
    """One-line count of what was reported."""
    if result.is_clean:
        return "No issues found"
    return f"{len(result.warnings)} warning(s), {len(result.infos)} note(s)"


def _format_text(result: ValidationResult) -> str:
    """List issues under each endpoint, then the summary line.

    ::

        /Scheduler.out
          ⚠ SLOT_TYPE_MISMATCH: Slot types differ: 'bool' -> 'float' (...)

        1 warning(s), 0 note(s)
    """
    lines: list[str] = []

    for location, issues in group_by_location(result.issues).items():
        lines.append(location)
        for issue in issues:
            lines.append(f"  {MARKS[issue.severity]} {issue.code}: {issue.message}")
        lines.append("")

    lines.append(summarize(result))
    return "\n".join(lines)


def _format_json(result: ValidationResult) -> str:
    """Format result as JSON."""
    data = {
        "clean": result.is_clean,
        "warning_count": len(result.warnings),
        "info_count": len(result.infos),
        "issues": [
            {
                "location": issue.location,
                "severity": issue.severity.value,
                "code": issue.code,
                "message": issue.message,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
    return json.dumps(data, indent=2)


def format_project_tree(project: Project) -> str:
    """Format a project's components and links as an indented listing."""
    graph = project.graph
    lines = [f"{project.app_name} ({len(graph)} components, {len(graph.links())} links)"]

    for component in graph.walk():
        depth = path_of(graph, component).count("/")
        lines.append(
            f"{'  ' * depth}{component.name} [{component.type_name}] id={component.component_id}"
        )

    if graph.links():
        lines.append("")
        lines.append("Links:")
        for link in graph.links():
            source = endpoint_of(graph, graph.get(link.from_handle), link.from_slot)
            target = endpoint_of(graph, graph.get(link.to_handle), link.to_slot)
            lines.append(f"  {source} -> {target}")

    return "\n".join(lines)
