"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from data_models import DataModel, TypeCategory


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def core_model_table() -> dict[DataModel, dict[TypeCategory, int]]:
    """
    Return the widths of the four widely adopted models, in bytes.

    Written out independently of the library's own table.
    """
    columns = (
        TypeCategory.CHAR,
        TypeCategory.SHORT,
        TypeCategory.INT,
        TypeCategory.LONG,
        TypeCategory.LONG_LONG,
        TypeCategory.POINTER,
    )
    rows = {
        DataModel.LP32: (1, 2, 2, 4, 8, 4),
        DataModel.ILP32: (1, 2, 4, 4, 8, 4),
        DataModel.LLP64: (1, 2, 4, 4, 8, 8),
        DataModel.LP64: (1, 2, 4, 8, 8, 8),
    }
    return {model: dict(zip(columns, row)) for model, row in rows.items()}
