"""Logging infrastructure.

This module provides logging adapters and implementations.
"""

from .console_logger import ConsoleLogger, LogLevel
from .null_logger import NullLogger

__all__ = [
    "ConsoleLogger",
    "LogLevel",
    "NullLogger",
]
