"""
Template registry - the fixed table of supported (document, record) pairs.
"""
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional, Tuple

from .enums import DocumentCategory, RecordCategory
from .errors import RegistryIntegrityError
from .types import TemplateDescriptor

D = DocumentCategory
R = RecordCategory

# Pairs absent from this table are unsupported.
TEMPLATE_ENTRIES: Tuple[TemplateDescriptor, ...] = (
    TemplateDescriptor(D.GLPP, R.INDIVIDUAL_PROSPECT, "GUIDEPP", "GLPP.ftl"),
    TemplateDescriptor(D.GLPP, R.INDIVIDUAL_CLIENT, "GUIDEPC", "GLPC.ftl"),
    TemplateDescriptor(D.GLPM, R.LEGAL_PROSPECT, "GUIDEPM", "GLPM.ftl"),
    TemplateDescriptor(D.GLPM, R.LEGAL_CLIENT, "GUIDECM", "GLCM.ftl"),
    TemplateDescriptor(D.KYC, R.INDIVIDUAL_PROSPECT, "KYCPP", "KYC_PP.ftl"),
    TemplateDescriptor(D.KYC, R.LEGAL_PROSPECT, "KYCPM", "KYC_PM.ftl"),
    TemplateDescriptor(D.ID, R.INDIVIDUAL_PROSPECT, "IDPP", "ID.ftl"),
    TemplateDescriptor(D.ID, R.INDIVIDUAL_CLIENT, "IDPC", "ID.ftl"),
)


class TemplateRegistry:
    """
    Read-only registry of template descriptors.

    Built once from a literal table; construction checks that every
    (document, record) pair is unique and that every entry names a
    non-empty template id and file.
    """

    def __init__(self, entries: Iterable[TemplateDescriptor] = TEMPLATE_ENTRIES):
        self._entries = tuple(entries)
        index = {}
        for entry in self._entries:
            if not isinstance(entry.document_category, DocumentCategory):
                raise RegistryIntegrityError(
                    f"Unknown document category in registry: {entry.document_category!r}"
                )
            if not isinstance(entry.record_category, RecordCategory):
                raise RegistryIntegrityError(
                    f"Unknown record category in registry: {entry.record_category!r}"
                )
            if not entry.template_id or not entry.template_file:
                raise RegistryIntegrityError(
                    f"Empty template id or file for "
                    f"[{entry.document_category.value},{entry.record_category.value}]"
                )
            if entry.key in index:
                raise RegistryIntegrityError(
                    f"Duplicate registry entry for "
                    f"[{entry.document_category.value},{entry.record_category.value}]"
                )
            index[entry.key] = entry
        self._index = MappingProxyType(index)

    @property
    def entries(self) -> Tuple[TemplateDescriptor, ...]:
        return self._entries

    def get(
        self,
        document: DocumentCategory,
        record: RecordCategory,
    ) -> Optional[TemplateDescriptor]:
        """Get the descriptor for a pair, or None if the pair is unsupported"""
        return self._index.get((document, record))

    def supported_pairs(self) -> List[Tuple[DocumentCategory, RecordCategory]]:
        return [entry.key for entry in self._entries]

    def for_document(self, document: DocumentCategory) -> List[TemplateDescriptor]:
        """Get all descriptors for a document category, in table order"""
        return [e for e in self._entries if e.document_category == document]

    def __iter__(self) -> Iterator[TemplateDescriptor]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._index


# Built at import so table errors surface before the first resolution
_registry_instance = TemplateRegistry()


def get_template_registry() -> TemplateRegistry:
    """Get the process-wide template registry"""
    return _registry_instance
