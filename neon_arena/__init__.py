"""Neon Arena: a top-down arena shooter built on pygame."""

__version__ = "1.0.0"
