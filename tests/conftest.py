"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
import yaml

RESOURCE_PACKAGE = "filejson_sample_resources"


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    """Create a directory of bundled JSON resources."""
    resources = tmp_path / "resources"
    resources.mkdir()
    (resources / "config.json").write_text(json.dumps({"name": "config", "debug": True}))
    (resources / "a.json").write_text(json.dumps({"name": "a"}))
    (resources / "a.b.json").write_text(json.dumps({"name": "a.b"}))
    (resources / "list.json").write_text("[1, 2, 3]")
    (resources / "broken.json").write_text("{not valid json}")
    (resources / "notes.txt").write_text("not json")
    return resources


@pytest.fixture
def resource_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    """Create an importable package carrying a JSON resource."""
    site = tmp_path / "site"
    package = site / RESOURCE_PACKAGE
    package.mkdir(parents=True)
    (package / "__init__.py").write_text("")
    (package / "settings.json").write_text(json.dumps({"source": "package"}))

    monkeypatch.syspath_prepend(str(site))
    yield RESOURCE_PACKAGE
    sys.modules.pop(RESOURCE_PACKAGE, None)


@pytest.fixture
def sample_config_dict() -> dict:
    """Return a sample configuration dictionary."""
    return {
        "reading": {"allow_fragments": False, "mapped_if_safe": False},
        "encoder": {"pretty_printed": True, "sorted_keys": True},
        "resource_root": "resources",
        "temp_prefix": "sample-",
    }


@pytest.fixture
def config_file(tmp_path: Path, sample_config_dict: dict) -> Path:
    """Write the sample configuration to a YAML file."""
    path = tmp_path / "filejson.yaml"
    with open(path, "w") as f:
        yaml.dump(sample_config_dict, f)
    return path
