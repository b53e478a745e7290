#!/usr/bin/env python3

"""Named data models.

A data model is the choice of bit widths for C's integer types made by a
platform or ABI. The names are conventions where a type is signified by a
letter and the model by its width; ILP32 means (I)nt, (L)ong and (P)ointer
are 32 bits. The scheme is not entirely consistent.

Four models found wide acceptance:

- LP32 or 2/4/4: m68k Mac and the Win16 API
- ILP32 or 4/4/4: Win32 API, Unix and Unix-like systems before the mid-1990s
- LLP64 or 4/4/8: Win64 API
- LP64 or 4/8/8: Unix and Unix-like systems (Linux, macOS)

References:
    J. R. Mashey. The long road to 64 bits. ACM Queue, 4(8):24-35, 2006.
    T. Lauer. Porting to Win32. Springer, 1996.
"""

from __future__ import annotations

from enum import Enum

from ...infrastructure.logging import get_logger

logger = get_logger(__name__)


class DataModel(Enum):
    """Supported data models."""

    LP32 = "lp32"  # 16-bit int, 32-bit long and pointer
    ILP32 = "ilp32"  # 32-bit int, long and pointer
    LLP64 = "llp64"  # 32-bit int and long, 64-bit pointer
    LP64 = "lp64"  # 32-bit int, 64-bit long and pointer
    ILP64 = "ilp64"  # 64-bit int, long and pointer
    SILP64 = "silp64"  # 64-bit short, int, long and pointer

    def __str__(self) -> str:
        """Return the canonical uppercase name."""
        return self.value.upper()

    @property
    def description(self) -> str:
        """Historical platforms that used this model."""
        return _DESCRIPTIONS[self]

    @property
    def notation(self) -> str:
        """Byte widths of int, long and pointer, e.g. ``"4/8/8"`` for LP64."""
        from .size_registry import SizeTable

        return "/".join(str(size) for size in SizeTable.signature(self))

    @classmethod
    def parse(cls, name: str | DataModel) -> DataModel:
        """Look up a data model by name.

        Args:
            name: Model name in any case (e.g. "lp64", "LLP64") or a DataModel

        Returns:
            Matching DataModel

        Raises:
            TypeError: If name is neither a string nor a DataModel
            ValueError: If no model has that name
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise TypeError(f"Expected a data model name, got {type(name).__name__}")

        try:
            model = cls(name.strip().lower())
        except ValueError as e:
            raise ValueError(f"Unknown data model: {name!r}") from e

        logger.debug(f"Resolved data model {name!r} -> {model}")
        return model

    @classmethod
    def from_sizes(cls, int_size: int, long_size: int, pointer_size: int) -> DataModel | None:
        """Guess the data model from the byte widths of int, long and pointer.

        SILP64 shares its triple with ILP64 and is never returned.

        Args:
            int_size: Size of ``int`` in bytes
            long_size: Size of ``long`` in bytes
            pointer_size: Size of a pointer in bytes

        Returns:
            The first model in declaration order with matching widths, or None
        """
        from .size_registry import SizeTable

        wanted = (int_size, long_size, pointer_size)
        for model in cls:
            if SizeTable.signature(model) == wanted:
                return model

        logger.warning(
            f"Unknown data model: int={int_size}, long={long_size}, pointer={pointer_size}"
        )
        return None


_DESCRIPTIONS: dict[DataModel, str] = {
    DataModel.LP32: "m68k Mac; Win16",
    DataModel.ILP32: "Unix before the mid-1990s; Win32",
    DataModel.LLP64: "Windows x64 (XP and later)",
    DataModel.LP64: "Unix/Linux after the 1990s; macOS",
    DataModel.ILP64: "HAL/Fujitsu SPARC64",
    DataModel.SILP64: "Cray UNICOS",
}
