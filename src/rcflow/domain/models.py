"""
Domain models for RC Node workflow execution.

Pure data structures describing workflows, the node connection and the
progress stream. All models are immutable (frozen dataclasses) so that a
ProgressReport handed to an observer can never be changed behind its back.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

# =============================================================================
# WORKFLOW DEFINITION
# =============================================================================


@dataclass(frozen=True)
class Command:
    """Single RC command with ordered positional parameters."""

    command: str
    params: tuple[str, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class Stage:
    """Named, ordered group of commands executed in sequence."""

    id: str  # Assigned at load time, not persisted
    name: str
    commands: tuple[Command, ...]
    description: str | None = None


@dataclass(frozen=True)
class WorkflowMetadata:
    """Optional descriptive block of a workflow definition."""

    description: str = ""
    author: str = ""
    version: str = ""
    tags: tuple[str, ...] = ()
    requires_markers: bool = False
    requires_masks: bool = False
    requires_textures: bool = False


@dataclass(frozen=True)
class Workflow:
    """
    Ordered stages of commands executed against the RC Node.

    Loaded once from a definition source and treated as read-only.
    """

    id: str
    name: str
    stages: tuple[Stage, ...]
    created_at: str  # ISO timestamp
    updated_at: str  # ISO timestamp
    metadata: WorkflowMetadata = field(default_factory=WorkflowMetadata)

    @property
    def total_commands(self) -> int:
        return sum(len(stage.commands) for stage in self.stages)


@dataclass(frozen=True)
class WorkflowFile:
    """Descriptor of a workflow definition found by a directory scan."""

    id: str
    name: str
    path: str


# =============================================================================
# NODE CONNECTION
# =============================================================================


@dataclass(frozen=True)
class NodeConfig:
    """
    Connection details for a remote RC Node.

    Owned by the caller. Executors and transports only read it; use
    with_connection() to derive an updated copy.
    """

    node_url: str = ""
    auth_token: str = ""
    is_connected: bool = False

    @property
    def base_url(self) -> str:
        """Node URL without a trailing slash."""
        return self.node_url[:-1] if self.node_url.endswith("/") else self.node_url

    def with_connection(self, is_connected: bool) -> "NodeConfig":
        return replace(self, is_connected=is_connected)


@dataclass(frozen=True)
class NodeStatus:
    """Outcome of a connection check against /node/status."""

    reachable: bool
    api_version: str | None = None
    detail: dict[str, Any] = field(default_factory=dict)


# =============================================================================
# PROGRESS
# =============================================================================


class ProgressStatus(Enum):
    """Lifecycle of a single execution run."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass(frozen=True)
class ProgressReport:
    """Unified status snapshot emitted during workflow execution."""

    current_stage: str
    current_command: str
    percent_complete: int  # 0-100
    status: ProgressStatus
    message: str | None = None


IDLE_PROGRESS = ProgressReport(
    current_stage="",
    current_command="",
    percent_complete=0,
    status=ProgressStatus.IDLE,
)


# =============================================================================
# NOTIFICATIONS
# =============================================================================


class NotificationLevel(Enum):
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """Human-readable message for whoever presents results to the user."""

    title: str
    description: str
    level: NotificationLevel = NotificationLevel.INFO
