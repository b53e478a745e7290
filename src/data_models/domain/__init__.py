#!/usr/bin/env python3

"""Domain layer containing the data model definitions."""

from . import models

__all__ = [
    "models",
]
