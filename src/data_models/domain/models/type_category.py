#!/usr/bin/env python3

"""C type categories whose width depends on the data model."""

from __future__ import annotations

from enum import Enum

from ...infrastructure.logging import get_logger

logger = get_logger(__name__)


class TypeCategory(Enum):
    """The five C integer base types plus pointers.

    Declaration order is the ordering the C standard guarantees for the
    integer types: char <= short <= int <= long <= long long.
    """

    CHAR = "char"  # smallest addressable unit, CHAR_BIT bits
    SHORT = "short"
    INT = "int"
    LONG = "long"
    LONG_LONG = "long_long"
    POINTER = "pointer"  # size_t

    def __str__(self) -> str:
        return self.c_name

    @property
    def c_name(self) -> str:
        """C spelling of the type."""
        return _C_NAMES[self]

    @property
    def min_bits(self) -> int:
        """Minimum width in bits required by the C standard."""
        return _MIN_BITS[self]

    @classmethod
    def integer_types(cls) -> tuple[TypeCategory, ...]:
        """Integer categories in increasing rank, pointer excluded."""
        return (cls.CHAR, cls.SHORT, cls.INT, cls.LONG, cls.LONG_LONG)

    @classmethod
    def parse(cls, name: str | TypeCategory) -> TypeCategory:
        """Look up a category by name.

        Accepts the member name, its value or the C spelling, ignoring case.
        Runs of whitespace count as one underscore, and the CamelCase form
        of a member name is also accepted: "long long", "LongLong",
        "LONG_LONG" and "size_t" are all valid, "lo_ng" is not.

        Args:
            name: Category name or a TypeCategory

        Returns:
            Matching TypeCategory

        Raises:
            TypeError: If name is neither a string nor a TypeCategory
            ValueError: If no category has that name
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise TypeError(f"Expected a type category name, got {type(name).__name__}")

        category = _ALIASES.get(_normalize(name))
        if category is None:
            raise ValueError(f"Unknown type category: {name!r}")

        logger.debug(f"Resolved type category {name!r} -> {category.name}")
        return category


def _normalize(name: str) -> str:
    return "_".join(name.split()).lower()


_C_NAMES: dict[TypeCategory, str] = {
    TypeCategory.CHAR: "char",
    TypeCategory.SHORT: "short",
    TypeCategory.INT: "int",
    TypeCategory.LONG: "long",
    TypeCategory.LONG_LONG: "long long",
    TypeCategory.POINTER: "size_t",
}

_MIN_BITS: dict[TypeCategory, int] = {
    TypeCategory.CHAR: 8,
    TypeCategory.SHORT: 16,
    TypeCategory.INT: 16,
    TypeCategory.LONG: 32,
    TypeCategory.LONG_LONG: 64,
    TypeCategory.POINTER: 16,
}

_ALIASES: dict[str, TypeCategory] = {}
for _category in TypeCategory:
    _ALIASES[_category.value] = _category
    _ALIASES[_category.value.replace("_", "")] = _category
    _ALIASES[_normalize(_category.c_name)] = _category
del _category
