#!/usr/bin/env python3

"""Data models and C type categories."""

from .data_model import DataModel
from .size_constants import CHAR_BIT, SIZE_TABLE, VALID_SIZES
from .size_registry import SizeTable, bits_of, size_of
from .type_category import TypeCategory

__all__ = [
    "CHAR_BIT",
    "SIZE_TABLE",
    "VALID_SIZES",
    "DataModel",
    "SizeTable",
    "TypeCategory",
    "bits_of",
    "size_of",
]
