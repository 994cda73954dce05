"""Shared test fixtures for Woragis tests."""
from pathlib import Path

import pytest

from woragis.core import config as config_module
from woragis.core.template_loader import TemplateRegistry

# Not valid UTF-8
BINARY_BLOB = bytes(range(256)) * 4


def snapshot(root: Path) -> dict:
    """Map every path under root (relative, posix) to its bytes, or None for dirs."""
    tree = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        tree[rel] = None if path.is_dir() else path.read_bytes()
    return tree


@pytest.fixture
def tree_snapshot():
    """Expose snapshot() to tests."""
    return snapshot


@pytest.fixture
def template_roots(tmp_path):
    """Create a templates root and an extras root with sample content.

    Returns:
        Tuple of (templates_dir, extras_dir)
    """
    templates_dir = tmp_path / "templates"
    extras_dir = tmp_path / "extras"

    rest = templates_dir / "rest"
    (rest / "src" / "routes").mkdir(parents=True)
    (rest / "Cargo.toml").write_text('[package]\nname = "app"\n')
    (rest / ".gitignore").write_text("/target\n")
    (rest / "src" / "main.rs").write_text("fn main() {}\n")
    (rest / "src" / "routes" / "auth.rs").write_text("pub fn login() {}\r\n")
    (rest / "assets").mkdir()
    (rest / "assets" / "logo.bin").write_bytes(BINARY_BLOB)
    (rest / "migrations").mkdir()  # empty directory

    grpc = templates_dir / "grpc"
    (grpc / "proto").mkdir(parents=True)
    (grpc / "Cargo.toml").write_text('[package]\nname = "grpc-app"\n')
    (grpc / "proto" / "health.proto").write_text('syntax = "proto3";\n')

    (templates_dir / "templates.yml").write_text(
        "templates:\n"
        "  rest:\n"
        "    description: REST starter\n"
        "  grpc: gRPC starter\n"
    )

    workflows = extras_dir / ".github" / "workflows"
    workflows.mkdir(parents=True)
    (workflows / "ci.yml").write_text("name: CI\n")

    terraform = extras_dir / "terraform"
    terraform.mkdir(parents=True)
    (terraform / "main.tf").write_text('provider "aws" {}\n')

    return templates_dir, extras_dir


@pytest.fixture
def registry(template_roots):
    """TemplateRegistry bound to the sample roots."""
    templates_dir, extras_dir = template_roots
    return TemplateRegistry(templates_dir=templates_dir, extras_dir=extras_dir)


@pytest.fixture
def output_dir(tmp_path):
    """Empty working directory projects are scaffolded into."""
    work = tmp_path / "work"
    work.mkdir()
    return work


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Make every test read configuration from its own environment."""
    for var in ("WORAGIS_TEMPLATES_DIR", "WORAGIS_EXTRAS_DIR", "WORAGIS_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()
