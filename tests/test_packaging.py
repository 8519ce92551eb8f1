"""Tests for the project metadata in pyproject.toml."""

from __future__ import annotations

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(scope="module")
def pyproject():
    with open(ROOT / "pyproject.toml", "rb") as fh:
        return tomllib.load(fh)


class TestPyproject:
    def test_readme_is_project_readme(self, pyproject):
        readme = pyproject["project"]["readme"]
        assert readme == "README.md"
        assert (ROOT / readme).is_file()

    def test_runtime_dependencies(self, pyproject):
        assert set(pyproject["project"]["dependencies"]) >= {"numpy", "pyyaml", "pytest"}

    def test_pytest_options(self, pyproject):
        assert pyproject["tool"]["pytest"]["ini_options"] == {"testpaths": ["tests"]}
