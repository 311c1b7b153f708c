"""
Enumerations for approval document templates.
"""
from enum import Enum


class DocumentCategory(str, Enum):
    """Kinds of documents that require a template"""
    GLPP = "GLPP"  # Guarantee letter, private person
    GLPM = "GLPM"  # Guarantee letter, legal entity
    KYC = "KYC"    # Know-your-customer form
    ID = "ID"      # Identity document sheet

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _DOCUMENT_LABELS[self]


class RecordCategory(str, Enum):
    """Kinds of records/parties a document applies to"""
    INDIVIDUAL_PROSPECT = "INDIVIDUAL_PROSPECT"
    LEGAL_PROSPECT = "LEGAL_PROSPECT"
    INDIVIDUAL_CLIENT = "INDIVIDUAL_CLIENT"
    LEGAL_CLIENT = "LEGAL_CLIENT"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").capitalize()


class ParseErrorKind(str, Enum):
    UNKNOWN_TOKEN = "unknown_token"


class ResolutionFailureKind(str, Enum):
    """Internal reasons a resolution can fail"""
    INVALID_SELECTOR = "invalid_selector"
    NO_TEMPLATE_FOR_COMBINATION = "no_template_for_combination"


_DOCUMENT_LABELS = {
    DocumentCategory.GLPP: "Guarantee letter (private person)",
    DocumentCategory.GLPM: "Guarantee letter (legal entity)",
    DocumentCategory.KYC: "Know your customer form",
    DocumentCategory.ID: "Identity document",
}
