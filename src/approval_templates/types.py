"""
Core types for template resolution.

Provides Result types for consistent error handling, the parse error value
and the template descriptor returned by the resolver.
"""
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, Type, TypeVar, Union

from .enums import DocumentCategory, ParseErrorKind, RecordCategory

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Success result wrapper"""
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """Failure result wrapper"""
    error: str
    code: str = ""
    details: Optional[dict] = None

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True


Result = Union[Success[T], Failure]


@dataclass(frozen=True)
class ParseError:
    """A token that names no member of the vocabulary it was checked against"""
    token: str
    vocabulary: Type[Any]
    kind: ParseErrorKind = ParseErrorKind.UNKNOWN_TOKEN

    @property
    def message(self) -> str:
        return f"{self.token!r} is not a valid {self.vocabulary.__name__}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "token": self.token,
            "vocabulary": self.vocabulary.__name__,
        }


@dataclass(frozen=True)
class TemplateDescriptor:
    """Reference to the template artifact for a (document, record) pair"""
    document_category: DocumentCategory
    record_category: RecordCategory
    template_id: str
    template_file: str

    @property
    def key(self) -> tuple:
        return (self.document_category, self.record_category)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "document_category": self.document_category.value,
            "record_category": self.record_category.value,
            "template_id": self.template_id,
            "template_file": self.template_file,
        }

    def __str__(self) -> str:
        return (
            f"TemplateDescriptor(document_category={self.document_category.value}, "
            f"record_category={self.record_category.value}, "
            f"template_id={self.template_id}, "
            f"template_file={self.template_file})"
        )
