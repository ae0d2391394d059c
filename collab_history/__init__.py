"""Collaborative revision history viewer."""

__version__ = "0.1.0"
