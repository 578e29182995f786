#!/usr/bin/env python3
"""Checks on the project metadata in pyproject.toml."""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PROJECT_ROOT = Path(__file__).parent


@pytest.fixture(scope="module")
def project():
    with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
        return tomllib.load(f)["project"]


def test_readme_is_the_user_readme(project):
    assert project["readme"] == "README.md"
    assert (PROJECT_ROOT / project["readme"]).is_file()


def test_no_cors_dependency(project):
    assert not any(dep.startswith("flask-cors") for dep in project["dependencies"])
