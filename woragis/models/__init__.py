"""Data models for scaffold requests and results."""
from .scaffold import (
    MaterializationTask,
    Overlay,
    ResolvedSources,
    ScaffoldRequest,
    ScaffoldResult,
)

__all__ = [
    "MaterializationTask",
    "Overlay",
    "ResolvedSources",
    "ScaffoldRequest",
    "ScaffoldResult",
]
