"""
Domain layer for RC Node workflow execution.

Contains core models, ports and pure helpers with no external dependencies.
"""

from rcflow.domain.exceptions import (
    ConfigurationError,
    RCFlowError,
    TransportError,
    WorkflowLoadError,
    WorkflowNotFound,
)
from rcflow.domain.formatting import format_command, positional_params
from rcflow.domain.interfaces import (
    NodeTransportInterface,
    NotifierInterface,
    ProgressObserver,
    WorkflowSourceInterface,
)
from rcflow.domain.models import (
    IDLE_PROGRESS,
    Command,
    NodeConfig,
    NodeStatus,
    Notification,
    NotificationLevel,
    ProgressReport,
    ProgressStatus,
    Stage,
    Workflow,
    WorkflowFile,
    WorkflowMetadata,
)

__all__ = [
    # Models
    "Command",
    "Stage",
    "Workflow",
    "WorkflowFile",
    "WorkflowMetadata",
    "NodeConfig",
    "NodeStatus",
    "ProgressReport",
    "ProgressStatus",
    "IDLE_PROGRESS",
    "Notification",
    "NotificationLevel",
    # Formatting
    "format_command",
    "positional_params",
    # Interfaces
    "NodeTransportInterface",
    "WorkflowSourceInterface",
    "NotifierInterface",
    "ProgressObserver",
    # Exceptions
    "RCFlowError",
    "TransportError",
    "WorkflowLoadError",
    "WorkflowNotFound",
    "ConfigurationError",
]
