"""
Domain exceptions for RC Node workflow execution.

Executors catch these at the run boundary; loaders and transports raise them.
"""


class RCFlowError(Exception):
    """Base class for all rcflow errors."""


class TransportError(RCFlowError):
    """
    Raised when a single call to the RC Node fails.

    Covers network failures, non-2xx responses and unparseable bodies.
    The transport never retries; retry policy belongs to the caller.
    """

    def __init__(self, message: str, status_code: int | None = None):
        """
        Args:
            message: Human-readable error message
            status_code: HTTP status returned by the node, if any
        """
        super().__init__(message)
        self.status_code = status_code


class WorkflowLoadError(RCFlowError):
    """Raised when a workflow definition cannot be read, parsed or validated."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class WorkflowNotFound(RCFlowError):
    """Raised when a workflow id is not part of the most recent scan."""

    def __init__(self, workflow_id: str):
        super().__init__(f"Workflow with ID {workflow_id} not found")
        self.workflow_id = workflow_id


class ConfigurationError(RCFlowError):
    """Raised when configuration files are invalid or missing."""
