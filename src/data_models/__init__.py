"""data_models - C integer type widths under named data models.

Example:
    >>> from data_models import DataModel, TypeCategory, size_of
    >>> size_of(DataModel.LP64, TypeCategory.POINTER)
    8
"""

from .domain.models import (
    CHAR_BIT,
    DataModel,
    SizeTable,
    TypeCategory,
    bits_of,
    size_of,
)

__version__ = "0.1.0"

__all__ = [
    "CHAR_BIT",
    "DataModel",
    "SizeTable",
    "TypeCategory",
    "bits_of",
    "size_of",
]
