"""Hex-text conversion, chunked relic storage and a filtering host view."""

__version__ = "0.1.0"
__all__ = ["hexed", "baymax", "antink"]