"""Validators for links and tree structure of imported projects."""

from .base import Severity, ValidationIssue, ValidationResult
from .cycles import check_link_cycles, creates_cycle
from .links import check_link_slots, is_valid_link
from .structure import check_sibling_names
from .runner import run_validators, validate_document_file

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_link_cycles",
    "creates_cycle",
    "check_link_slots",
    "is_valid_link",
    "check_sibling_names",
    "run_validators",
    "validate_document_file",
]
