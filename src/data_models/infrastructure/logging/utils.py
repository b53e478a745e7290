#!/usr/bin/env python3

"""Logging utility functions."""

import logging

# Library loggers stay silent unless the application configures handlers
logging.getLogger("data_models").addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
