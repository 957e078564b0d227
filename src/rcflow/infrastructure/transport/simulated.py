"""
Simulated RC Node for running workflows without a node.

Returns canned responses and records every call.
"""

import logging
from collections.abc import Mapping
from typing import Any

from rcflow.domain.interfaces import NodeTransportInterface
from rcflow.domain.models import NodeConfig, NodeStatus

logger = logging.getLogger(__name__)

SIMULATED_API_VERSION = "simulated"


class SimulatedNodeTransport(NodeTransportInterface):
    """Echoes commands back as successes; getprogress climbs in fixed steps."""

    def __init__(self, progress_step: float = 25.0):
        """
        Args:
            progress_step: Amount getprogress advances per call, wrapping at 100
        """
        self._progress_step = progress_step
        self._progress = 0.0
        self.calls: list[tuple[str, dict[str, str]]] = []

    def send(
        self,
        config: NodeConfig,
        command_name: str,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        params = dict(params or {})
        self.calls.append((command_name, params))
        logger.debug("RC Node command (SIMULATED): %s %s", command_name, params)

        if command_name == "getprogress":
            self._progress = self._progress % 100 + self._progress_step
            return {
                "progress": min(self._progress, 100.0),
                "message": "Simulated progress",
            }
        return {"success": True, "command": command_name, "params": params}

    def check_status(self, config: NodeConfig) -> NodeStatus:
        return NodeStatus(
            reachable=True,
            api_version=SIMULATED_API_VERSION,
            detail={"mode": "Simulation"},
        )

    def close(self) -> None:
        logger.debug("Simulated RC Node closed after %d calls", len(self.calls))

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def reset(self) -> None:
        self.calls.clear()
        self._progress = 0.0
