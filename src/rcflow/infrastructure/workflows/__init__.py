"""
Workflow definition sources.
"""

from rcflow.infrastructure.workflows.filesystem import FilesystemWorkflowSource
from rcflow.infrastructure.workflows.memory import InMemoryWorkflowSource

__all__ = [
    "FilesystemWorkflowSource",
    "InMemoryWorkflowSource",
]
