"""Setup module.

This module provides the administrator-run setup task: configuration
validation and service provider metadata generation.
"""

from realme_auth.setup.orchestrator import (
    ExecutionContext,
    SetupOrchestrator,
    detect_execution_context,
)
from realme_auth.setup.renderer import MetadataRenderer
from realme_auth.setup.validator import (
    ConfigValidator,
    ValidationErrorSet,
    ValidationIssue,
)

__all__ = [
    "ConfigValidator",
    "ValidationErrorSet",
    "ValidationIssue",
    "MetadataRenderer",
    "ExecutionContext",
    "SetupOrchestrator",
    "detect_execution_context",
]
