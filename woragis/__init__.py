"""Woragis - scaffold Rust backend projects from local templates."""

__version__ = "1.0.0"
