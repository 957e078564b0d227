"""Shared fixtures for architecture tests."""

from pathlib import Path

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)

SRC_DIR = Path(__file__).resolve().parents[2] / "src"
LAYERS = ("domain", "application", "infrastructure")


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    """Import graph of src/rcflow."""
    return get_evaluable_architecture(str(SRC_DIR), str(SRC_DIR / "rcflow"))


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """domain, application and infrastructure as named layers.

    Module names are relative to the source root ('src.rcflow.domain').
    Top-level modules (cli, config, console) belong to no layer.
    """
    architecture = LayeredArchitecture()
    for name in LAYERS:
        architecture = architecture.layer(name).containing_modules(
            [f"src.rcflow.{name}"]
        )
    return architecture
