#!/usr/bin/env python3

"""Logging infrastructure for the library."""

from .utils import get_logger

__all__ = [
    "get_logger",
]
