from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
import yaml


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.steps'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings():
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _adopter_data(**overrides):
    data = {
        "name": "Acme",
        "logoUrl": "https://acme.example/logo.png",
        "website": "https://acme.example",
        "usage": "Backend services",
        "adoptionStatus": "full",
        "category": "product company",
        "size": 500,
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_adopter():
    return _adopter_data


@pytest.fixture
def write_adopter(tmp_path):
    adopters_dir = tmp_path / "adopters"
    adopters_dir.mkdir()

    def _write(file_name: str, data=None, raw: str | None = None) -> Path:
        path = adopters_dir / file_name
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    _write.dir = adopters_dir
    return _write


