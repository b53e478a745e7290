#!/usr/bin/env python3

"""Infrastructure layer for technical concerns."""

from . import logging

__all__ = [
    "logging",
]
