"""Pytest configuration and fixtures for smithytool tests."""

import sys
import logging
from pathlib import Path
from typing import Dict

import pytest
import yaml

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from smithytool.config.build.models import BuildConfiguration

# Configure logging
logging.basicConfig(level=logging.INFO)


def write_files(root: Path, files: Dict[str, str]) -> Path:
    """Create files (relative path -> content) under root."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """A project with a smithy-build.json and one model file."""
    root = (tmp_path / "weather").resolve()
    write_files(root, {
        "smithy-build.json": '{"version": "1.0"}',
        "model/weather.smithy": "namespace example.weather\n",
    })
    return root


@pytest.fixture
def build_config(project_dir) -> BuildConfiguration:
    """BuildConfiguration pointing at the sample project."""
    return BuildConfiguration(
        output_dir=project_dir / "build" / "smithyprojections" / "weather",
        config_files=(project_dir / "smithy-build.json",),
        model_sources=(project_dir / "model",),
        working_dir=project_dir,
    )


@pytest.fixture
def project_yaml(project_dir):
    """Write a smithy-project.yaml into the project and return a writer for overrides."""
    def _write(data=None) -> Path:
        path = project_dir / "smithy-project.yaml"
        path.write_text(yaml.safe_dump(data or {}))
        return path
    return _write
