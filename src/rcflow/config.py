"""Configuration loading for rcflow."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema

from rcflow.domain.exceptions import ConfigurationError
from rcflow.domain.interfaces import NodeTransportInterface
from rcflow.domain.models import NodeConfig
from rcflow.infrastructure.transport import (
    HttpNodeTransport,
    HttpTransportConfig,
    SimulatedNodeTransport,
)
from rcflow.schemas import validate_node_config

NODE_URL_ENV = "RC_NODE_URL"
AUTH_TOKEN_ENV = "RC_NODE_AUTH_TOKEN"


@dataclass(frozen=True)
class RuntimeSettings:
    """
    Process-wide switches, passed explicitly to whatever needs them.

    simulation selects the canned SimulatedNodeTransport instead of HTTP.
    """

    simulation: bool = False
    workflow_dir: str = "./workflows"
    timeout: float = 30.0
    log_file: str | None = None
    verbose: bool = False


def load_node_config(
    path: Path | None = None, environ: Mapping[str, str] | None = None
) -> NodeConfig:
    """
    Load RC Node connection details.

    Values from the JSON file are overridden by RC_NODE_URL and
    RC_NODE_AUTH_TOKEN. The result is never marked connected; callers do
    that after a successful status check.

    Args:
        path: Optional JSON file with node_url/auth_token
        environ: Environment mapping (defaults to os.environ)

    Returns:
        NodeConfig with is_connected=False

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    env = os.environ if environ is None else environ
    data: dict[str, Any] = {}
    if path is not None:
        data = _read_json(path)

    node_url = env.get(NODE_URL_ENV) or data.get("node_url", "")
    auth_token = env.get(AUTH_TOKEN_ENV) or data.get("auth_token", "")
    return NodeConfig(
        node_url=node_url.rstrip("/"), auth_token=auth_token, is_connected=False
    )


def _read_json(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Node config file not found: {path}")

    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

    try:
        validate_node_config(data)
    except jsonschema.ValidationError as e:
        raise ConfigurationError(f"Invalid node config in {path}: {e.message}") from e

    result: dict[str, Any] = data
    return result


def build_transport(settings: RuntimeSettings) -> NodeTransportInterface:
    """Pick the transport the settings ask for."""
    if settings.simulation:
        return SimulatedNodeTransport()
    return HttpNodeTransport(HttpTransportConfig(timeout=settings.timeout))
