"""
rcflow: Workflow execution for Reality Capture Nodes.

Loads photogrammetry workflows (ordered stages of RC commands) and runs them
command by command against a remote RC Node, reporting unified progress.

Example:
    from rcflow import NodeConfig, WorkflowExecutor
    from rcflow.infrastructure import FilesystemWorkflowSource, HttpNodeTransport

    source = FilesystemWorkflowSource()
    workflow = source.load_file("workflows/basic_alignment.yaml")

    transport = HttpNodeTransport(timeout=60.0)
    config = NodeConfig(node_url="http://rc-node:8000", auth_token="...")
    config = config.with_connection(transport.check_status(config).reachable)

    executor = WorkflowExecutor(transport)
    executor.execute(workflow, config, on_progress=print)
"""

# Application layer (orchestration)
from rcflow.application import (
    CancellationToken,
    WorkflowExecutor,
    WorkflowService,
    photogrammetry_template,
    template_from_session,
)

# Domain exceptions
from rcflow.domain.exceptions import (
    ConfigurationError,
    RCFlowError,
    TransportError,
    WorkflowLoadError,
    WorkflowNotFound,
)
from rcflow.domain.formatting import format_command

# Domain interfaces (for type hints and custom adapters)
from rcflow.domain.interfaces import (
    NodeTransportInterface,
    NotifierInterface,
    WorkflowSourceInterface,
)

# Domain models (most commonly used)
from rcflow.domain.models import (
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

__version__ = "0.3.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "Command",
    "Stage",
    "Workflow",
    "WorkflowFile",
    "WorkflowMetadata",
    "NodeConfig",
    "NodeStatus",
    "ProgressReport",
    "ProgressStatus",
    "Notification",
    "NotificationLevel",
    "format_command",
    # Domain interfaces
    "NodeTransportInterface",
    "WorkflowSourceInterface",
    "NotifierInterface",
    # Domain exceptions
    "RCFlowError",
    "TransportError",
    "WorkflowLoadError",
    "WorkflowNotFound",
    "ConfigurationError",
    # Application layer
    "CancellationToken",
    "WorkflowExecutor",
    "WorkflowService",
    "photogrammetry_template",
    "template_from_session",
]
