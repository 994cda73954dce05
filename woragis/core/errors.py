"""Error taxonomy for scaffolding operations."""
from pathlib import Path
from typing import Optional


class ScaffoldError(Exception):
    """Base class for every failure that aborts a scaffold."""
    pass


class AlreadyExistsError(ScaffoldError):
    """Raised when the destination project path is already present."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Directory '{path}' already exists!")


class TemplateNotFoundError(ScaffoldError):
    """Raised when a template identifier has no base directory."""

    def __init__(self, template_id: str, templates_dir: Optional[Path] = None):
        self.template_id = template_id
        self.templates_dir = templates_dir
        message = f"Template '{template_id}' not found"
        if templates_dir is not None:
            message += f" in {templates_dir}"
        super().__init__(message)


class SourceNotFoundError(ScaffoldError):
    """Raised when a source directory is missing or is not a directory."""

    def __init__(self, path: Path, label: str = "source"):
        self.path = Path(path)
        self.label = label
        super().__init__(f"{label.capitalize()} directory not found: {path}")


class IoFailureError(ScaffoldError):
    """Raised on any read or write failure while materializing a tree.

    The underlying OSError is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: OSError):
        self.cause = cause
        super().__init__(f"{message}: {cause}")
