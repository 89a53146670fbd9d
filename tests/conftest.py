import logging
import os
import pytest
from pathlib import Path
import structlog

import llmstxt.config.loader as config_loader

TEST1 = """---
sidebar_position: 1
---
# Test 1
Content 1"""

TEST2 = """---
sidebar_position: 2
draft: true
---
# Test 2
Content 2"""

TEST3 = """---
sidebar_position: 3
hidden: true
---
# Test 3
Content 3"""

running_as_root = hasattr(os, "geteuid") and os.geteuid() == 0
requires_permission_checks = pytest.mark.skipif(
    running_as_root, reason="file permission bits are not enforced for root"
)


def create_tree(base_dir: Path, structure: dict):
    """Writes a nested {name: content-or-dict} mapping under base_dir."""
    for name, content in structure.items():
        path = base_dir / name
        if isinstance(content, dict):
            path.mkdir(parents=True, exist_ok=True)
            create_tree(path, content)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory, monkeypatch):
    """Keeps the user's config file and mode variables out of every test."""
    fake_home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr(config_loader, "USER_CONFIG_FILE", fake_home / "config.toml")
    for var_name in config_loader.MODE_ENV_VARS:
        monkeypatch.delenv(var_name, raising=False)
    yield
    app_logger = logging.getLogger("llmstxt")
    app_logger.handlers.clear()
    app_logger.propagate = True
    structlog.reset_defaults()


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A site with docs/test1.md, a draft test2.md and a hidden test3.md."""
    site = tmp_path / "site"
    create_tree(site, {
        "docs": {"test1.md": TEST1, "test2.md": TEST2, "test3.md": TEST3},
        "static": {},
    })
    return site


@pytest.fixture
def docs_dir(site_dir: Path) -> Path:
    return site_dir / "docs"


@pytest.fixture
def output_file(site_dir: Path) -> Path:
    return site_dir / "static" / "llms.txt"
