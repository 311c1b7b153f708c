"""
Exceptions raised by the template registry and resolver.
"""
from typing import Any, Dict, Optional

from .enums import ResolutionFailureKind

INVALID_SELECTION_MESSAGE = "Invalid Document template type or record type"


class ApprovalTemplatesError(Exception):
    """Base class for all approval template errors"""


class ResolutionError(ApprovalTemplatesError, ValueError):
    """
    A document/record token pair could not be resolved to a template.

    The message is always the canonical one; ``kind`` and ``details`` are
    kept for logs and must not be shown to callers.
    """

    def __init__(
        self,
        kind: ResolutionFailureKind,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(INVALID_SELECTION_MESSAGE)
        self.kind = kind
        self.details = details or {}

    @property
    def message(self) -> str:
        return INVALID_SELECTION_MESSAGE


class RegistryIntegrityError(ApprovalTemplatesError):
    """The fixed template table breaks a registry invariant"""
