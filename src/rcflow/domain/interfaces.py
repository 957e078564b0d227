"""
Domain interfaces (Ports) for RC Node workflow execution.

These abstract base classes define the contracts that adapters must satisfy.
They have no external dependencies.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rcflow.domain.models import (
        NodeConfig,
        NodeStatus,
        Notification,
        ProgressReport,
        Workflow,
        WorkflowFile,
    )

ProgressObserver = Callable[["ProgressReport"], None]


class NodeTransportInterface(ABC):
    """
    Port for talking to an RC Node.

    One send() performs exactly one outbound call. Failures surface as
    TransportError; implementations must not retry.
    """

    @abstractmethod
    def send(
        self,
        config: "NodeConfig",
        command_name: str,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Send a named command to the node.

        Args:
            config: Connection details (not re-validated here)
            command_name: RC command, e.g. 'align' or 'getprogress'
            params: Positional parameters keyed param1..paramN

        Returns:
            Parsed response payload

        Raises:
            TransportError: If the call fails at the transport level
        """
        pass

    @abstractmethod
    def check_status(self, config: "NodeConfig") -> "NodeStatus":
        """
        Probe the node for reachability.

        Never raises; failures are reported in the returned NodeStatus.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release any connections held by the transport."""
        pass

    def __enter__(self) -> "NodeTransportInterface":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class WorkflowSourceInterface(ABC):
    """Port for discovering and loading workflow definitions."""

    @abstractmethod
    def scan_directory(self, path: str) -> list["WorkflowFile"]:
        """
        List workflow definitions under a directory.

        Raises:
            WorkflowLoadError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def load_file(self, path: str) -> "Workflow":
        """
        Load and parse one workflow definition.

        Stage ids are generated freshly on every call.

        Raises:
            WorkflowLoadError: If the definition is unreadable or invalid
        """
        pass


class NotifierInterface(ABC):
    """Port for user-visible notifications."""

    @abstractmethod
    def notify(self, notification: "Notification") -> None:
        pass
