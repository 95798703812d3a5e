"""
Observability module for the Data Share CLI.

Provides loguru configuration.
"""

from .logger import configure_logger

__all__ = ["configure_logger"]
