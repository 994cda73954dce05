"""Byte-exact directory tree copying."""
import os
import shutil
from collections import deque
from pathlib import Path
from typing import Deque, Iterable, Tuple

from woragis.core.errors import IoFailureError, SourceNotFoundError
from woragis.core.logger import get_logger

logger = get_logger(__name__)


def materialize(source_dir: Path, dest_dir: Path, exclude: Iterable[str] = ()) -> int:
    """Copy every entry of source_dir into dest_dir, preserving relative paths.

    Walks the tree with an explicit work-list, so template depth is not bounded
    by the interpreter's recursion limit. File contents are copied unchanged;
    permission bits and timestamps are not carried over. Symlinks are never
    descended into and are copied as regular files where the platform allows.

    Not transactional: entries copied before a failure stay on disk.

    Args:
        source_dir: Existing directory to copy from
        dest_dir: Destination directory (created with its ancestors if missing)
        exclude: Entry names to skip at the top level of source_dir

    Returns:
        Number of files copied

    Raises:
        SourceNotFoundError: If source_dir is missing or not a directory
        IoFailureError: On any read or write error
    """
    source_dir = Path(source_dir)
    dest_dir = Path(dest_dir)
    excluded = frozenset(exclude)

    if not source_dir.is_dir():
        raise SourceNotFoundError(source_dir)

    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoFailureError(f"Failed to create directory {dest_dir}", e) from e

    files_copied = 0
    pending: Deque[Tuple[Path, Path]] = deque([(source_dir, dest_dir)])

    while pending:
        src, dst = pending.popleft()

        try:
            with os.scandir(src) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            raise IoFailureError(f"Failed to read directory {src}", e) from e

        for entry in entries:
            if src == source_dir and entry.name in excluded:
                logger.warning(f"Skipping reserved path '{entry.name}' in {source_dir}")
                continue

            target = dst / entry.name
            try:
                if entry.is_dir(follow_symlinks=False):
                    target.mkdir(exist_ok=True)
                    pending.append((Path(entry.path), target))
                else:
                    target.parent.mkdir(parents=True, exist_ok=True)
                    shutil.copyfile(entry.path, target)
                    files_copied += 1
            except OSError as e:
                raise IoFailureError(f"Failed to copy {entry.path}", e) from e

    logger.debug(f"Copied {files_copied} files from {source_dir} to {dest_dir}")
    return files_copied
