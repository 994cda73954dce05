"""Tests for byte-exact directory materialization."""
import errno
import os
import shutil

import pytest

from conftest import BINARY_BLOB
from woragis.core.errors import IoFailureError, SourceNotFoundError
from woragis.scaffold.materializer import materialize


class TestMaterialize:
    """Test copying source trees into destinations."""

    def test_copies_tree_with_identical_bytes(self, template_roots, tmp_path, tree_snapshot):
        """Every file and directory lands at the same relative path, bytes unchanged."""
        templates_dir, _ = template_roots
        source = templates_dir / "rest"
        dest = tmp_path / "copy"

        count = materialize(source, dest)

        assert tree_snapshot(dest) == tree_snapshot(source)
        assert count == 5
        assert (dest / "assets" / "logo.bin").read_bytes() == BINARY_BLOB
        assert (dest / "src" / "routes" / "auth.rs").read_bytes() == b"pub fn login() {}\r\n"

    def test_preserves_empty_directories(self, template_roots, tmp_path):
        templates_dir, _ = template_roots
        dest = tmp_path / "copy"

        materialize(templates_dir / "rest", dest)

        assert (dest / "migrations").is_dir()
        assert list((dest / "migrations").iterdir()) == []

    def test_creates_missing_destination_ancestors(self, template_roots, tmp_path):
        templates_dir, _ = template_roots
        dest = tmp_path / "a" / "b" / "c"

        materialize(templates_dir / "grpc", dest)

        assert (dest / "proto" / "health.proto").exists()

    def test_empty_source_creates_destination(self, tmp_path):
        source = tmp_path / "empty"
        source.mkdir()
        dest = tmp_path / "out"

        assert materialize(source, dest) == 0
        assert dest.is_dir()

    def test_deeply_nested_tree(self, tmp_path):
        """Deep templates are walked without recursion."""
        source = tmp_path / "deep"
        source.mkdir()
        current = source
        for _ in range(200):
            current = current / "d"
            current.mkdir()
        (current / "leaf.txt").write_text("bottom")

        dest = tmp_path / "out"
        materialize(source, dest)

        leaf = dest.joinpath(*(["d"] * 200), "leaf.txt")
        assert leaf.read_text() == "bottom"

    def test_exclude_applies_to_top_level_only(self, tmp_path):
        source = tmp_path / "src"
        (source / ".github").mkdir(parents=True)
        (source / ".github" / "stray.yml").write_text("x")
        (source / "docs" / "terraform").mkdir(parents=True)
        (source / "docs" / "terraform" / "notes.md").write_text("kept")
        (source / "README.md").write_text("readme")

        dest = tmp_path / "out"
        materialize(source, dest, exclude={".github", "terraform"})

        assert not (dest / ".github").exists()
        assert (dest / "docs" / "terraform" / "notes.md").read_text() == "kept"
        assert (dest / "README.md").exists()

    def test_file_symlink_copied_as_regular_file(self, tmp_path):
        source = tmp_path / "src"
        source.mkdir()
        (source / "real.txt").write_text("content")
        os.symlink(source / "real.txt", source / "link.txt")

        dest = tmp_path / "out"
        materialize(source, dest)

        assert not (dest / "link.txt").is_symlink()
        assert (dest / "link.txt").read_text() == "content"


class TestMaterializeErrors:
    """Test failure modes of materialization."""

    def test_missing_source(self, tmp_path):
        with pytest.raises(SourceNotFoundError) as exc_info:
            materialize(tmp_path / "nope", tmp_path / "out")

        assert exc_info.value.path == tmp_path / "nope"
        assert not (tmp_path / "out").exists()

    def test_source_is_a_file(self, tmp_path):
        source = tmp_path / "file.txt"
        source.write_text("not a dir")

        with pytest.raises(SourceNotFoundError):
            materialize(source, tmp_path / "out")

    def test_destination_under_a_file(self, template_roots, tmp_path):
        templates_dir, _ = template_roots
        blocker = tmp_path / "blocker"
        blocker.write_text("file")

        with pytest.raises(IoFailureError) as exc_info:
            materialize(templates_dir / "rest", blocker / "out")

        assert isinstance(exc_info.value.cause, OSError)
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_write_failure_carries_cause(self, template_roots, tmp_path, monkeypatch):
        templates_dir, _ = template_roots

        def disk_full(src, dst, *args, **kwargs):
            raise OSError(errno.ENOSPC, "No space left on device", str(dst))

        monkeypatch.setattr(shutil, "copyfile", disk_full)

        with pytest.raises(IoFailureError) as exc_info:
            materialize(templates_dir / "rest", tmp_path / "out")

        assert exc_info.value.cause.errno == errno.ENOSPC
        assert "No space left on device" in str(exc_info.value)

    def test_partial_copy_is_left_in_place(self, template_roots, tmp_path, monkeypatch):
        """The materializer alone is not transactional."""
        templates_dir, _ = template_roots
        real_copyfile = shutil.copyfile
        calls = []

        def fail_second(src, dst, *args, **kwargs):
            calls.append(dst)
            if len(calls) == 2:
                raise OSError(errno.EIO, "I/O error")
            return real_copyfile(src, dst, *args, **kwargs)

        monkeypatch.setattr(shutil, "copyfile", fail_second)
        dest = tmp_path / "out"

        with pytest.raises(IoFailureError):
            materialize(templates_dir / "rest", dest)

        assert calls[0].exists()

    def test_directory_symlink_is_not_followed(self, tmp_path):
        source = tmp_path / "src"
        (source / "real").mkdir(parents=True)
        (source / "real" / "a.txt").write_text("a")
        os.symlink(source / "real", source / "alias", target_is_directory=True)

        with pytest.raises(IoFailureError):
            materialize(source, tmp_path / "out")
