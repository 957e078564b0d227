"""
In-memory workflow source.

Useful for testing and for workflows built in code.
"""

import uuid
from datetime import datetime
from pathlib import PurePosixPath
from typing import Any

from rcflow.domain.exceptions import WorkflowLoadError
from rcflow.domain.interfaces import WorkflowSourceInterface
from rcflow.domain.models import Workflow, WorkflowFile
from rcflow.infrastructure.workflows.definition import (
    display_name,
    workflow_from_definition,
    workflow_to_definition,
)


class InMemoryWorkflowSource(WorkflowSourceInterface):
    """Definition documents keyed by virtual path."""

    def __init__(self, definitions: dict[str, Any] | None = None) -> None:
        self._definitions: dict[str, Any] = dict(definitions or {})

    def add(self, path: str, definition: Any) -> None:
        self._definitions[path] = definition

    def add_workflow(self, path: str, workflow: Workflow) -> None:
        self._definitions[path] = workflow_to_definition(workflow)

    def scan_directory(self, path: str) -> list[WorkflowFile]:
        directory = PurePosixPath(path)
        return [
            WorkflowFile(
                id=str(uuid.uuid4()),
                name=display_name(PurePosixPath(p).stem),
                path=p,
            )
            for p in sorted(self._definitions)
            if PurePosixPath(p).parent == directory
        ]

    def load_file(self, path: str) -> Workflow:
        if path not in self._definitions:
            raise WorkflowLoadError(f"Unknown workflow file: {path}", path)
        return workflow_from_definition(
            self._definitions[path],
            path,
            display_name(PurePosixPath(path).stem),
            datetime.now().isoformat(),
        )
