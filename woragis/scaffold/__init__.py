"""Project scaffolding from templates and overlays."""

from .composer import build_tasks, effective_overlays
from .core import ScaffoldManager, ScaffoldState
from .materializer import materialize

__all__ = [
    "ScaffoldManager",
    "ScaffoldState",
    "build_tasks",
    "effective_overlays",
    "materialize",
]
