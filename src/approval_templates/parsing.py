"""
Parsing of external string tokens into the closed template vocabularies.
"""
from enum import Enum
from typing import Type, TypeVar

from .enums import DocumentCategory, RecordCategory
from .types import Failure, ParseError, Result, Success

E = TypeVar("E", bound=Enum)


def parse_token(vocabulary: Type[E], token: str) -> Result[E]:
    """
    Parse a token into a member of ``vocabulary``.

    The token must spell a member name exactly: no trimming, no case
    folding, no aliases.

    Args:
        vocabulary: Enum class the token is checked against
        token: Raw token supplied by the caller

    Returns:
        Success with the member, or Failure describing the ParseError
    """
    member = vocabulary.__members__.get(token) if isinstance(token, str) else None
    if member is None:
        error = ParseError(token=token, vocabulary=vocabulary)
        return Failure(
            error=error.message,
            code=error.kind.value,
            details=error.to_dict(),
        )
    return Success(member)


def parse_document_category(token: str) -> Result[DocumentCategory]:
    return parse_token(DocumentCategory, token)


def parse_record_category(token: str) -> Result[RecordCategory]:
    return parse_token(RecordCategory, token)
