"""Pytest configuration and shared fixtures for the codelabmd test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path

import pytest

from codelabmd.ast import Code, Header, Infobox, ItemsList, List, Text, nodes_to_json

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=30)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by hypothesis")
    config.addinivalue_line("markers", "golden: Snapshot tests of complete rendered documents")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo CLI logging configuration so caplog sees package records."""
    yield
    package_logger = logging.getLogger("codelabmd")
    for handler in list(package_logger.handlers):
        handler.close()
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty directory with no discoverable config.

    The home directory is redirected as well, so a developer's own
    configuration file cannot leak into CLI tests.

    """
    work_dir = tmp_path / "work"
    home_dir = tmp_path / "home"
    work_dir.mkdir()
    home_dir.mkdir()
    monkeypatch.chdir(work_dir)
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    monkeypatch.delenv("CODELABMD_CONFIG", raising=False)
    return work_dir


@pytest.fixture
def sample_nodes() -> list:
    """A small lab exercising headers, lists, environments and boxes."""
    return [
        Header(level=1, content=[Text("Setup")]),
        List(children=[Text("Open the "), Text("console", bold=True), Text(".")]),
        ItemsList(
            ordered=True,
            items=[
                List(children=[Text("Create a project")]),
                List(children=[Text("Enable billing")]),
            ],
        ),
        Code(content="gcloud init", term=True, env=("web",)),
        Infobox(kind="negative", children=[Text("Costs apply")]),
    ]


@pytest.fixture
def sample_json_file(tmp_path: Path, sample_nodes) -> Path:
    """The sample lab serialized to a JSON file."""
    path = tmp_path / "lab.json"
    path.write_text(nodes_to_json(sample_nodes, indent=2), encoding="utf-8")
    return path
