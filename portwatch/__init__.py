"""Inspect which processes listen on TCP ports and optionally stop them."""

__version__ = "0.1.0"
__all__ = ["errors", "ports", "scanner", "cli"]