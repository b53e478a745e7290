#!/usr/bin/env python3

"""Width tables for each data model.

The tables are fixed at import time and exposed read-only.
"""

from collections.abc import Mapping
from types import MappingProxyType

from .data_model import DataModel
from .type_category import TypeCategory

# Bits per byte
CHAR_BIT = 8

# Every width in the tables is one of these (bytes)
VALID_SIZES = frozenset({1, 2, 4, 8})

# Column order of the rows below
_COLUMNS = (
    TypeCategory.CHAR,
    TypeCategory.SHORT,
    TypeCategory.INT,
    TypeCategory.LONG,
    TypeCategory.LONG_LONG,
    TypeCategory.POINTER,
)

# Widths in bytes
_ROWS: dict[DataModel, tuple[int, ...]] = {
    #                  char, short, int, long, long long, pointer
    DataModel.LP32: (1, 2, 2, 4, 8, 4),
    DataModel.ILP32: (1, 2, 4, 4, 8, 4),
    DataModel.LLP64: (1, 2, 4, 4, 8, 8),
    DataModel.LP64: (1, 2, 4, 8, 8, 8),
    DataModel.ILP64: (1, 2, 8, 8, 8, 8),
    DataModel.SILP64: (1, 8, 8, 8, 8, 8),
}

SIZE_TABLE: Mapping[DataModel, Mapping[TypeCategory, int]] = MappingProxyType(
    {
        model: MappingProxyType(dict(zip(_COLUMNS, row, strict=True)))
        for model, row in _ROWS.items()
    }
)
