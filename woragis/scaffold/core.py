"""Core scaffolding: resolve, guard, copy base and overlays, publish."""
import os
import shutil
import tempfile
from enum import Enum
from pathlib import Path
from typing import Optional, Set

from woragis.core.errors import IoFailureError
from woragis.core.logger import get_logger
from woragis.core.safety import SafetyGuard, get_safety_guard
from woragis.core.template_loader import TemplateRegistry
from woragis.models import Overlay, ScaffoldRequest, ScaffoldResult
from woragis.scaffold.composer import build_tasks
from woragis.scaffold.materializer import materialize

logger = get_logger(__name__)

# Independent of the project name; the final rename supplies the real name
STAGING_PREFIX = ".woragis-"


class ScaffoldState(str, Enum):
    """Lifecycle of a single scaffold run."""

    IDLE = "idle"
    RESOLVING = "resolving"
    GUARDING = "guarding"
    COPYING_BASE = "copying_base"
    COPYING_OVERLAYS = "copying_overlays"
    DONE = "done"
    FAILED = "failed"


class ScaffoldManager:
    """Creates new projects from a base template plus optional overlays.

    Everything is copied into a hidden staging directory next to the
    destination and moved into place with a single rename once every copy
    has succeeded, so a failed run never leaves a partial project behind.
    """

    def __init__(
        self,
        registry: Optional[TemplateRegistry] = None,
        guard: Optional[SafetyGuard] = None,
        output_dir: Optional[Path] = None,
    ):
        self.registry = registry or TemplateRegistry()
        self.guard = guard or get_safety_guard()
        self.output_dir = Path(output_dir) if output_dir else None
        self.state = ScaffoldState.IDLE

    def scaffold(self, request: ScaffoldRequest) -> ScaffoldResult:
        """Scaffold a new project directory.

        Args:
            request: Validated scaffold request

        Returns:
            ScaffoldResult describing the created project

        Raises:
            TemplateNotFoundError: Unknown template id (nothing is created)
            AlreadyExistsError: Destination already present (nothing is touched)
            SourceNotFoundError: A source tree is missing (nothing is left behind)
            IoFailureError: Any filesystem failure (nothing is left behind)
        """
        self.state = ScaffoldState.IDLE
        output_dir = self.output_dir or Path.cwd()
        project_root = output_dir / request.project_name
        staging_dir: Optional[Path] = None

        logger.debug(f"✨ Creating project: {request.project_name}")

        try:
            self._transition(ScaffoldState.RESOLVING)
            sources = self.registry.resolve(request)

            self._transition(ScaffoldState.GUARDING)
            self.guard.ensure_absent(project_root)

            staging_dir = self._create_staging_dir(project_root)
            build_root = staging_dir / request.project_name

            files_copied = 0
            applied: Set[Overlay] = set()
            for task in build_tasks(sources, build_root):
                if task.overlay is None:
                    self._transition(ScaffoldState.COPYING_BASE)
                else:
                    self._transition(ScaffoldState.COPYING_OVERLAYS)
                logger.debug(f"📁 Copying {task.label} from {task.source}")
                files_copied += materialize(task.source, task.destination, task.exclude)
                if task.overlay is not None:
                    applied.add(task.overlay)

            self.guard.ensure_absent(project_root)
            self._publish(build_root, project_root)
        except Exception:
            self._transition(ScaffoldState.FAILED)
            raise
        finally:
            if staging_dir is not None:
                shutil.rmtree(staging_dir, ignore_errors=True)

        self._transition(ScaffoldState.DONE)
        logger.info(f"✅ Created {project_root} ({files_copied} files)")

        return ScaffoldResult(
            project_root=project_root,
            template_id=request.template_id,
            applied_overlays=frozenset(applied),
            files_copied=files_copied,
        )

    def _transition(self, state: ScaffoldState) -> None:
        logger.debug(f"Scaffold state: {self.state.value} -> {state.value}")
        self.state = state

    def _create_staging_dir(self, project_root: Path) -> Path:
        # Same parent as the destination keeps the final rename on one filesystem
        try:
            return Path(tempfile.mkdtemp(
                prefix=STAGING_PREFIX,
                dir=project_root.parent,
            ))
        except OSError as e:
            raise IoFailureError(f"Failed to create staging directory in {project_root.parent}", e) from e

    def _publish(self, build_root: Path, project_root: Path) -> None:
        try:
            os.rename(build_root, project_root)
        except OSError as e:
            raise IoFailureError(f"Failed to move project into {project_root}", e) from e
        logger.debug(f"Published {build_root} -> {project_root}")
