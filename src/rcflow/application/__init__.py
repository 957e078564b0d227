"""
Application layer for RC Node workflow execution.

Contains orchestration logic that coordinates domain objects through ports.
"""

from rcflow.application.cancellation import CancellationToken
from rcflow.application.executor import WorkflowExecutor
from rcflow.application.templates import (
    photogrammetry_template,
    template_from_session,
)
from rcflow.application.workflow_service import WorkflowService

__all__ = [
    "CancellationToken",
    "WorkflowExecutor",
    "WorkflowService",
    "photogrammetry_template",
    "template_from_session",
]
