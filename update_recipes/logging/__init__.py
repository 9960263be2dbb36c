"""
Logging configuration and utilities for recipe fetching.
"""
from .config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
