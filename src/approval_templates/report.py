"""
Exhaustive combination report.

Resolves every DocumentCategory x RecordCategory pair and renders one line
per pair. The rendered text is committed as a golden file so that any change
in which combinations resolve shows up as a diff.
"""
import difflib
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .enums import DocumentCategory, RecordCategory
from .registry import TemplateRegistry
from .resolver import find_template
from .types import Result


@dataclass(frozen=True)
class CombinationOutcome:
    document_category: DocumentCategory
    record_category: RecordCategory
    result: Result

    @property
    def text(self) -> str:
        if self.result.is_success:
            return str(self.result.value)
        return self.result.error

    def to_line(self) -> str:
        return (
            f"[{self.document_category.value},{self.record_category.value}] "
            f"=> {self.text}"
        )


def combination_report(
    registry: Optional[TemplateRegistry] = None,
) -> Iterator[CombinationOutcome]:
    """Resolve every pair, documents outer and records inner, in declaration order"""
    for document in DocumentCategory:
        for record in RecordCategory:
            yield CombinationOutcome(
                document_category=document,
                record_category=record,
                result=find_template(document.value, record.value, registry),
            )


def render_combination_report(registry: Optional[TemplateRegistry] = None) -> str:
    return "".join(f"{o.to_line()}\n" for o in combination_report(registry))


def compare_with_baseline(
    baseline: Union[str, Path],
    registry: Optional[TemplateRegistry] = None,
) -> List[str]:
    """
    Diff the current report against a committed baseline file.

    Returns:
        Unified diff lines; an empty list means the report is unchanged
    """
    path = Path(baseline)
    expected = path.read_text(encoding="utf-8").splitlines(keepends=True)
    current = render_combination_report(registry).splitlines(keepends=True)
    return list(
        difflib.unified_diff(
            expected,
            current,
            fromfile=str(path),
            tofile="current",
        )
    )
