"""
Approval Templates - document template resolution.

Resolves a (document category, record category) pair, both given as raw
string tokens, to exactly one template descriptor from a fixed registry.

Usage:
    from approval_templates import resolve_template

    descriptor = resolve_template("GLPP", "INDIVIDUAL_PROSPECT")
    descriptor.template_file  # "GLPP.ftl"
"""

__version__ = "0.1.0"

from .enums import (
    DocumentCategory,
    RecordCategory,
    ParseErrorKind,
    ResolutionFailureKind,
)
from .types import (
    Result,
    Success,
    Failure,
    ParseError,
    TemplateDescriptor,
)
from .errors import (
    INVALID_SELECTION_MESSAGE,
    ApprovalTemplatesError,
    ResolutionError,
    RegistryIntegrityError,
)
from .parsing import (
    parse_token,
    parse_document_category,
    parse_record_category,
)
from .registry import (
    TEMPLATE_ENTRIES,
    TemplateRegistry,
    get_template_registry,
)
from .resolver import find_template, resolve_template
from .report import (
    CombinationOutcome,
    combination_report,
    render_combination_report,
    compare_with_baseline,
)

__all__ = [
    # Enums
    "DocumentCategory",
    "RecordCategory",
    "ParseErrorKind",
    "ResolutionFailureKind",
    # Types
    "Result",
    "Success",
    "Failure",
    "ParseError",
    "TemplateDescriptor",
    # Errors
    "INVALID_SELECTION_MESSAGE",
    "ApprovalTemplatesError",
    "ResolutionError",
    "RegistryIntegrityError",
    # Parsing
    "parse_token",
    "parse_document_category",
    "parse_record_category",
    # Registry
    "TEMPLATE_ENTRIES",
    "TemplateRegistry",
    "get_template_registry",
    # Resolution
    "find_template",
    "resolve_template",
    # Report
    "CombinationOutcome",
    "combination_report",
    "render_combination_report",
    "compare_with_baseline",
]
