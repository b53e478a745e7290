#!/usr/bin/env python3

"""Lookup of C type widths by data model.

``SizeTable`` is the single entry point; the module-level ``size_of`` and
``bits_of`` functions are shorthands for it.

Example:
    >>> size_of(DataModel.LP64, TypeCategory.POINTER)
    8
    >>> bits_of("llp64", "long")
    32
"""

from __future__ import annotations

from collections.abc import Mapping

from .data_model import DataModel
from .size_constants import CHAR_BIT, SIZE_TABLE, VALID_SIZES
from .type_category import TypeCategory


class SizeTable:
    """Read-only mapping from (DataModel, TypeCategory) to a width in bytes."""

    WIDTHS: Mapping[DataModel, Mapping[TypeCategory, int]] = SIZE_TABLE

    @classmethod
    def size_of(cls, model: DataModel | str, category: TypeCategory | str) -> int:
        """Get the width of a type category under a data model.

        Args:
            model: DataModel or its name
            category: TypeCategory or its name

        Returns:
            Width in bytes (1, 2, 4 or 8)

        Raises:
            ValueError: If a name does not match any model or category
        """
        return cls.WIDTHS[DataModel.parse(model)][TypeCategory.parse(category)]

    @classmethod
    def bits_of(cls, model: DataModel | str, category: TypeCategory | str) -> int:
        """Get the width in bits of a type category under a data model."""
        return cls.size_of(model, category) * CHAR_BIT

    @classmethod
    def row(cls, model: DataModel | str) -> dict[TypeCategory, int]:
        """Get every width defined by a data model, in category order."""
        return dict(cls.WIDTHS[DataModel.parse(model)])

    @classmethod
    def signature(cls, model: DataModel | str) -> tuple[int, int, int]:
        """Get the (int, long, pointer) byte widths that name a model."""
        widths = cls.WIDTHS[DataModel.parse(model)]
        return (
            widths[TypeCategory.INT],
            widths[TypeCategory.LONG],
            widths[TypeCategory.POINTER],
        )

    @classmethod
    def models_where(cls, category: TypeCategory | str, size: int) -> tuple[DataModel, ...]:
        """Get the data models in which a category has the given byte width.

        Args:
            category: TypeCategory or its name
            size: Width in bytes

        Returns:
            Matching models in declaration order (empty if none)
        """
        category = TypeCategory.parse(category)
        return tuple(model for model in DataModel if cls.WIDTHS[model][category] == size)


def size_of(model: DataModel | str, category: TypeCategory | str) -> int:
    """Width in bytes of ``category`` under ``model``."""
    return SizeTable.size_of(model, category)


def bits_of(model: DataModel | str, category: TypeCategory | str) -> int:
    """Width in bits of ``category`` under ``model``."""
    return SizeTable.bits_of(model, category)


def _check_table() -> None:
    """Verify the table is total and consistent with C's width rules.

    Raises:
        RuntimeError: If any (model, category) pair is missing or invalid
    """
    for model in DataModel:
        widths = SIZE_TABLE.get(model)
        if widths is None:
            raise RuntimeError(f"No widths defined for data model {model}")

        for category in TypeCategory:
            size = widths.get(category)
            if size not in VALID_SIZES:
                raise RuntimeError(f"Invalid width for {category.c_name} under {model}: {size}")
            if size * CHAR_BIT < category.min_bits:
                raise RuntimeError(
                    f"Width of {category.c_name} under {model} is below the C minimum "
                    f"of {category.min_bits} bits: {size * CHAR_BIT}"
                )

        integer_widths = [widths[category] for category in TypeCategory.integer_types()]
        if integer_widths != sorted(integer_widths):
            raise RuntimeError(f"Integer widths of {model} are not non-decreasing: {integer_widths}")


_check_table()
