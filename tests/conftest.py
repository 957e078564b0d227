"""Shared pytest fixtures for rcflow tests."""

from collections.abc import Mapping
from typing import Any

import pytest

from rcflow.domain.exceptions import TransportError
from rcflow.domain.interfaces import NodeTransportInterface
from rcflow.domain.models import (
    Command,
    NodeConfig,
    NodeStatus,
    ProgressReport,
    Stage,
    Workflow,
)
from rcflow.infrastructure.notifications import InMemoryNotifier


class RecordingTransport(NodeTransportInterface):
    """Transport stub: records calls, fails on request, scripts getprogress."""

    def __init__(
        self,
        fail_on: set[str] | None = None,
        progress: Any = None,
    ):
        """
        Args:
            fail_on: Command names whose send() raises TransportError
            progress: getprogress response (dict), or a list consumed per call
        """
        self._fail_on = fail_on or set()
        self._progress = progress
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.closed = False

    def send(
        self,
        config: NodeConfig,
        command_name: str,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        self.calls.append((command_name, dict(params or {})))
        if command_name in self._fail_on:
            raise TransportError(f"{command_name} failed", status_code=500)
        if command_name == "getprogress":
            if isinstance(self._progress, list):
                return self._progress.pop(0) if self._progress else {}
            return self._progress if self._progress is not None else {}
        return {"success": True}

    def check_status(self, config: NodeConfig) -> NodeStatus:
        return NodeStatus(reachable=True, api_version="test")

    def close(self) -> None:
        self.closed = True

    @property
    def commands(self) -> list[str]:
        """Names of non-progress commands, in call order."""
        return [name for name, _ in self.calls if name != "getprogress"]


def make_workflow(*stages: tuple[str, list[Command]]) -> Workflow:
    """Build a Workflow from (stage name, commands) pairs."""
    return Workflow(
        id="wf-001",
        name="Test Workflow",
        stages=tuple(
            Stage(id=f"stage-{i}", name=name, commands=tuple(commands))
            for i, (name, commands) in enumerate(stages)
        ),
        created_at="2025-01-01T00:00:00",
        updated_at="2025-01-01T00:00:00",
    )


@pytest.fixture
def connected_config() -> NodeConfig:
    """NodeConfig for a node that passed its status check."""
    return NodeConfig(
        node_url="http://rc-node.local:8000/",
        auth_token="secret-token",
        is_connected=True,
    )


@pytest.fixture
def four_command_workflow() -> Workflow:
    """Two stages, four commands in total."""
    return make_workflow(
        (
            "Align",
            [Command("align", ("--high-detail",)), Command("selectMaximalComponent")],
        ),
        (
            "Export",
            [
                Command("calculateModel", ("--detail", "high")),
                Command("export", ("--format", "glb")),
            ],
        ),
    )


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def notifier() -> InMemoryNotifier:
    return InMemoryNotifier()


@pytest.fixture
def reports() -> list[ProgressReport]:
    """Collects every report passed to the observer."""
    return []


@pytest.fixture
def sample_definition() -> dict[str, Any]:
    """Parsed workflow definition document."""
    return {
        "workflow_name": "Basic Alignment",
        "metadata": {"description": "Align only", "tags": ["quick"], "version": 1.0},
        "stages": [
            {
                "name": "Initialize",
                "description": "Fresh scene",
                "commands": [{"command": "headless"}, {"command": "newScene"}],
            },
            {
                "name": "Align Images",
                "commands": [
                    {"command": "addFolder", "params": ["./images"]},
                    {"command": "align"},
                    {"command": "calculateTexture", "params": [4096]},
                ],
            },
        ],
    }


@pytest.fixture
def transport_factory() -> type[RecordingTransport]:
    """RecordingTransport class, for tests that need custom failures."""
    return RecordingTransport


@pytest.fixture
def workflow_builder():
    """make_workflow helper."""
    return make_workflow
