"""Scaffold request, resolution and result models."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Overlay(str, Enum):
    """Optional feature trees layered on top of a base template."""

    CI = "ci"
    INFRA = "infra"

    @property
    def subdir(self) -> str:
        """Fixed subdirectory of the project the overlay is copied into."""
        return OVERLAY_SUBDIRS[self]


OVERLAY_SUBDIRS = {
    Overlay.CI: ".github",
    Overlay.INFRA: "terraform",
}


class ScaffoldRequest(BaseModel):
    """One scaffold invocation as supplied by the caller."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    project_name: str = Field(..., description="Destination directory name, relative to the output dir")
    template_id: str = Field("rest", description="Base template identifier")
    with_ci: bool = Field(False, description="Include the CI overlay (.github/)")
    with_infra: bool = Field(False, description="Include the infrastructure overlay (terraform/), implies CI")

    @field_validator('project_name')
    @classmethod
    def validate_project_name(cls, v: str) -> str:
        """Project name must be a single usable path component."""
        if not v or not v.strip():
            raise ValueError("Project name must not be empty")
        if v in ('.', '..'):
            raise ValueError(f"Project name '{v}' is not a valid directory name")
        if '/' in v or '\\' in v or '\x00' in v:
            raise ValueError(
                f"Project name '{v}' must be a single directory name without path separators"
            )
        return v

    @field_validator('template_id')
    @classmethod
    def validate_template_id(cls, v: str) -> str:
        if not v or '/' in v or '\\' in v or v in ('.', '..'):
            raise ValueError(f"Template id '{v}' is not a valid template name")
        return v


@dataclass(frozen=True)
class ResolvedSources:
    """Existing source directories a request resolved to."""

    base_path: Path
    ci_overlay_path: Optional[Path] = None
    infra_overlay_path: Optional[Path] = None


@dataclass(frozen=True)
class MaterializationTask:
    """A single (source, destination) copy to perform."""

    label: str
    source: Path
    destination: Path
    exclude: FrozenSet[str] = frozenset()
    overlay: Optional[Overlay] = None


@dataclass
class ScaffoldResult:
    """What a successful scaffold created."""

    project_root: Path
    template_id: str
    applied_overlays: FrozenSet[Overlay] = field(default_factory=frozenset)
    files_copied: int = 0

    @property
    def with_ci(self) -> bool:
        return Overlay.CI in self.applied_overlays

    @property
    def with_infra(self) -> bool:
        return Overlay.INFRA in self.applied_overlays
