"""Template registry: maps template ids and overlays to source directories."""
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from woragis.core.config import get_config
from woragis.core.errors import SourceNotFoundError, TemplateNotFoundError
from woragis.core.logger import get_logger
from woragis.models import Overlay, ResolvedSources, ScaffoldRequest

logger = get_logger(__name__)

MANIFEST_NAME = "templates.yml"


class TemplateRegistry:
    """Locates base templates and the shared overlay trees."""

    def __init__(self, templates_dir: Optional[Path] = None, extras_dir: Optional[Path] = None):
        """Initialize template registry.

        Args:
            templates_dir: Templates root. Defaults to the configured (or packaged) templates
            extras_dir: Overlay root holding .github/ and terraform/
        """
        config = get_config()
        self.templates_dir = Path(templates_dir) if templates_dir else config.templates_dir
        self.extras_dir = Path(extras_dir) if extras_dir else config.extras_dir

    def template_path(self, template_id: str) -> Path:
        return self.templates_dir / template_id

    def overlay_path(self, overlay: Overlay) -> Path:
        return self.extras_dir / overlay.subdir

    def resolve(self, request: ScaffoldRequest) -> ResolvedSources:
        """Resolve a request to existing source directories.

        Args:
            request: Validated scaffold request

        Returns:
            ResolvedSources with overlay paths set only for enabled overlays

        Raises:
            TemplateNotFoundError: If the base template directory is missing
            SourceNotFoundError: If an enabled overlay directory is missing
        """
        base_path = self.template_path(request.template_id)
        if not base_path.is_dir():
            raise TemplateNotFoundError(request.template_id, self.templates_dir)

        from woragis.scaffold.composer import effective_overlays

        with_ci, with_infra = effective_overlays(request.with_ci, request.with_infra)

        ci_path = None
        if with_ci:
            ci_path = self._require_overlay(Overlay.CI)

        infra_path = None
        if with_infra:
            infra_path = self._require_overlay(Overlay.INFRA)

        logger.debug(
            f"Resolved template '{request.template_id}' -> {base_path} "
            f"(ci={ci_path}, infra={infra_path})"
        )
        return ResolvedSources(
            base_path=base_path,
            ci_overlay_path=ci_path,
            infra_overlay_path=infra_path,
        )

    def _require_overlay(self, overlay: Overlay) -> Path:
        path = self.overlay_path(overlay)
        if not path.is_dir():
            raise SourceNotFoundError(path, label=f"{overlay.value} overlay")
        return path

    def list_templates(self) -> List[str]:
        """List all available template ids.

        Returns:
            Sorted names of the subdirectories of the templates root
        """
        if not self.templates_dir.is_dir():
            return []
        return sorted(
            p.name for p in self.templates_dir.iterdir()
            if p.is_dir() and not p.name.startswith('.')
        )

    def get_template_info(self, template_id: str) -> str:
        """Get template description from the templates.yml manifest.

        Args:
            template_id: Name of template

        Returns:
            Template description string
        """
        entry = self._load_manifest().get(template_id)
        if isinstance(entry, dict):
            return entry.get('description', 'No description')
        if isinstance(entry, str):
            return entry
        return "No description"

    def _load_manifest(self) -> Dict[str, object]:
        manifest_path = self.templates_dir / MANIFEST_NAME
        if not manifest_path.exists():
            return {}

        with open(manifest_path) as f:
            data = yaml.safe_load(f) or {}
        templates = data.get('templates', {}) if isinstance(data, dict) else {}
        return templates if isinstance(templates, dict) else {}
