"""Safety checks that keep scaffolding from touching existing data."""
from pathlib import Path

from woragis.core.errors import AlreadyExistsError
from woragis.core.logger import get_logger

logger = get_logger(__name__)


class SafetyGuard:
    """Refuses to scaffold over anything already on disk."""

    def ensure_absent(self, path: Path) -> None:
        """Verify the destination does not exist.

        Args:
            path: Destination project path

        Raises:
            AlreadyExistsError: If a file, directory or symlink is present
        """
        path = Path(path)
        # is_symlink catches dangling links
        if path.exists() or path.is_symlink():
            logger.debug(f"Safety check failed, destination present: {path}")
            raise AlreadyExistsError(path)

        logger.debug(f"Safety check passed for destination: {path}")


# Global safety guard instance
_safety_guard = None


def get_safety_guard() -> SafetyGuard:
    """Get or create the global safety guard instance."""
    global _safety_guard
    if _safety_guard is None:
        _safety_guard = SafetyGuard()
    return _safety_guard
