"""Core functionality for waves trade client."""

from .config import DEFAULT_NODE, DEFAULT_TIMEOUT, Config

__all__ = ["Config", "DEFAULT_NODE", "DEFAULT_TIMEOUT"]
