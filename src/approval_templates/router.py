"""
Template Resolution API Router

Thin HTTP adapter over ``resolve_template``: exposes the registry, single
resolution and the combination report.
"""
from typing import List

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from .enums import DocumentCategory, RecordCategory
from .errors import ResolutionError
from .registry import TemplateRegistry, get_template_registry
from .report import combination_report
from .resolver import resolve_template
from .types import TemplateDescriptor

logger = structlog.get_logger()
router = APIRouter(tags=["Templates"])


class TemplateDescriptorResponse(BaseModel):
    """Resolved template reference"""
    document_category: DocumentCategory
    record_category: RecordCategory
    template_id: str
    template_file: str

    @classmethod
    def from_descriptor(cls, descriptor: TemplateDescriptor) -> "TemplateDescriptorResponse":
        return cls(**descriptor.to_dict())


class TemplateListResponse(BaseModel):
    templates: List[TemplateDescriptorResponse]
    total: int
    document_categories: List[str] = Field(default_factory=list)
    record_categories: List[str] = Field(default_factory=list)


class CombinationReportResponse(BaseModel):
    lines: List[str]
    resolved: int
    total: int


def get_registry() -> TemplateRegistry:
    """Dependency to get the template registry"""
    return get_template_registry()


@router.get("", response_model=TemplateListResponse)
async def list_templates(registry: TemplateRegistry = Depends(get_registry)):
    """List every supported (document, record) pair with its template"""
    return TemplateListResponse(
        templates=[TemplateDescriptorResponse.from_descriptor(e) for e in registry],
        total=len(registry),
        document_categories=[d.value for d in DocumentCategory],
        record_categories=[r.value for r in RecordCategory],
    )


@router.get("/resolve", response_model=TemplateDescriptorResponse)
async def resolve(
    document_type: str = Query(..., description="Document category token, e.g. GLPP"),
    record_type: str = Query(..., description="Record category token, e.g. INDIVIDUAL_PROSPECT"),
    registry: TemplateRegistry = Depends(get_registry),
):
    """
    Resolve the template for a document type and record type.

    Tokens are matched exactly. Unknown tokens and unsupported combinations
    both return 400 with the same message.
    """
    try:
        descriptor = resolve_template(document_type, record_type, registry)
    except ResolutionError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return TemplateDescriptorResponse.from_descriptor(descriptor)


@router.get("/combinations", response_model=CombinationReportResponse)
async def get_combinations(registry: TemplateRegistry = Depends(get_registry)):
    """Resolution outcome for every document/record combination"""
    outcomes = list(combination_report(registry))
    return CombinationReportResponse(
        lines=[o.to_line() for o in outcomes],
        resolved=sum(1 for o in outcomes if o.result.is_success),
        total=len(outcomes),
    )
