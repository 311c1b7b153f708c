"""
Pytest configuration and shared fixtures.
"""
from pathlib import Path

import pytest
import structlog

from approval_templates import TemplateDescriptor, TemplateRegistry
from approval_templates.enums import DocumentCategory, RecordCategory

SNAPSHOT_DIR = Path(__file__).parent / "snapshots"


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logging configuration installed by API/CLI entry points."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def baseline_path() -> Path:
    return SNAPSHOT_DIR / "combination_report.txt"


@pytest.fixture
def small_registry() -> TemplateRegistry:
    """Two-entry registry for tests that need a controlled table."""
    return TemplateRegistry([
        TemplateDescriptor(
            DocumentCategory.GLPP, RecordCategory.LEGAL_PROSPECT, "ALT", "ALT.ftl"
        ),
        TemplateDescriptor(
            DocumentCategory.ID, RecordCategory.LEGAL_CLIENT, "IDLC", "ID_LC.ftl"
        ),
    ])
