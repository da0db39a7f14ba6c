"""Base classes for validation results.

Validation never blocks an import, so there are two levels only:
warnings for links or names that will not behave as drawn, and infos for
things worth a look.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Severity level of a validation issue."""

    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    """A single validation issue."""

    code: str
    message: str
    severity: Severity
    component: str | None = None
    slot: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def location(self) -> str | None:
        """The endpoint the issue points at, e.g. ``/AHU_1/Tstat2.in1``."""
        if not self.component:
            return None
        if self.slot:
            return f"{self.component}.{self.slot}"
        return self.component

    def __str__(self) -> str:
        where = f" at {self.location}" if self.location else ""
        return f"{self.severity.value}{where}: {self.code} - {self.message}"


@dataclass
class ValidationResult:
    """Result of running validation on a project."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning-level issues."""
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def infos(self) -> list[ValidationIssue]:
        """Get all info-level issues."""
        return [i for i in self.issues if i.severity == Severity.INFO]

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def is_clean(self) -> bool:
        """Check if nothing at all was reported."""
        return not self.issues

    def add_issue(self, issue: ValidationIssue) -> None:
        """Add an issue to the result."""
        self.issues.append(issue)

    def _add(
        self,
        severity: Severity,
        code: str,
        message: str,
        component: str | None,
        slot: str | None,
        details: dict[str, Any],
    ) -> None:
        self.issues.append(
            ValidationIssue(
                code=code,
                message=message,
                severity=severity,
                component=component,
                slot=slot,
                details=details,
            )
        )

    def add_warning(
        self,
        code: str,
        message: str,
        component: str | None = None,
        slot: str | None = None,
        **details: Any,
    ) -> None:
        """Add a warning issue."""
        self._add(Severity.WARNING, code, message, component, slot, details)

    def add_info(
        self,
        code: str,
        message: str,
        component: str | None = None,
        slot: str | None = None,
        **details: Any,
    ) -> None:
        """Add an informational issue."""
        self._add(Severity.INFO, code, message, component, slot, details)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)
