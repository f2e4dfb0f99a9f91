"""Test configuration and fixtures for ls-option."""

import pytest


@pytest.fixture
def sample_root(tmp_path):
    """root/x.rs, root/.y.rs and the empty directory root/sub."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "x.rs").write_text("fn main() {}\n")
    (root / ".y.rs").write_text("// hidden\n")
    (root / "sub").mkdir()
    return root


@pytest.fixture
def nested_root(tmp_path):
    """A small project tree with hidden and nested directories."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "a.rs").touch()
    (root / "Cargo.toml").touch()
    (root / "sub").mkdir()
    (root / "sub" / "b.rs").touch()
    (root / "sub" / "deeper").mkdir()
    (root / "sub" / "deeper" / "c.rs").touch()
    (root / ".git").mkdir()
    (root / ".git" / "config").touch()
    (root / ".git" / "hooks.rs").touch()
    return root
