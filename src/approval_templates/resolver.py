"""
Template resolver.

Turns a raw (document token, record token) pair into exactly one
TemplateDescriptor. Both failure reasons collapse into the same canonical
message at the public boundary; the internal reason is only logged.
"""
from typing import Optional

import structlog

from .enums import ResolutionFailureKind
from .errors import INVALID_SELECTION_MESSAGE, ResolutionError
from .parsing import parse_document_category, parse_record_category
from .registry import TemplateRegistry, get_template_registry
from .types import Failure, Result, Success, TemplateDescriptor

logger = structlog.get_logger()


def _failure(kind: ResolutionFailureKind, **details) -> Failure:
    return Failure(error=INVALID_SELECTION_MESSAGE, code=kind.value, details=details)


def find_template(
    document_token: str,
    record_token: str,
    registry: Optional[TemplateRegistry] = None,
) -> Result[TemplateDescriptor]:
    """
    Resolve a token pair without raising.

    The record token is not parsed when the document token is invalid.

    Returns:
        Success with the descriptor, or Failure whose ``error`` is the
        canonical message and whose ``code`` is a ResolutionFailureKind value
    """
    if registry is None:
        registry = get_template_registry()

    document = parse_document_category(document_token)
    if document.is_failure:
        return _failure(
            ResolutionFailureKind.INVALID_SELECTOR,
            parse_error=document.details,
        )

    record = parse_record_category(record_token)
    if record.is_failure:
        return _failure(
            ResolutionFailureKind.INVALID_SELECTOR,
            parse_error=record.details,
        )

    descriptor = registry.get(document.value, record.value)
    if descriptor is None:
        return _failure(
            ResolutionFailureKind.NO_TEMPLATE_FOR_COMBINATION,
            document_category=document.value.value,
            record_category=record.value.value,
        )
    return Success(descriptor)


def resolve_template(
    document_token: str,
    record_token: str,
    registry: Optional[TemplateRegistry] = None,
) -> TemplateDescriptor:
    """
    Resolve a token pair to its template descriptor.

    Raises:
        ResolutionError: tokens are unknown or the pair has no template
    """
    result = find_template(document_token, record_token, registry)
    if result.is_failure:
        logger.warning(
            "Template resolution failed",
            reason=result.code,
            document_token=document_token,
            record_token=record_token,
            details=result.details,
        )
        raise ResolutionError(ResolutionFailureKind(result.code), result.details)

    logger.debug(
        "Template resolved",
        document_token=document_token,
        record_token=record_token,
        template_id=result.value.template_id,
    )
    return result.value
