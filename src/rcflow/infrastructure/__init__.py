"""
Infrastructure layer for RC Node workflow execution.

Contains adapters for external concerns (HTTP, filesystem, notifications).
"""

from rcflow.infrastructure.notifications import InMemoryNotifier, LoggingNotifier
from rcflow.infrastructure.transport import (
    HttpNodeTransport,
    HttpTransportConfig,
    SimulatedNodeTransport,
)
from rcflow.infrastructure.workflows import (
    FilesystemWorkflowSource,
    InMemoryWorkflowSource,
)

__all__ = [
    # Transport
    "HttpNodeTransport",
    "HttpTransportConfig",
    "SimulatedNodeTransport",
    # Workflow sources
    "FilesystemWorkflowSource",
    "InMemoryWorkflowSource",
    # Notifications
    "LoggingNotifier",
    "InMemoryNotifier",
]
