"""
Filesystem workflow source.

Discovers YAML/JSON workflow definitions in a directory and parses them
into Workflow models.
"""

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from rcflow.domain.exceptions import WorkflowLoadError
from rcflow.domain.interfaces import WorkflowSourceInterface
from rcflow.domain.models import Workflow, WorkflowFile
from rcflow.infrastructure.workflows.definition import (
    display_name,
    workflow_from_definition,
    workflow_to_definition,
)

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
WORKFLOW_SUFFIXES = (*YAML_SUFFIXES, ".json")


class FilesystemWorkflowSource(WorkflowSourceInterface):
    """Reads workflow definitions from disk."""

    def scan_directory(self, path: str) -> list[WorkflowFile]:
        directory = Path(path)
        logger.info("Scanning directory: %s for workflow files", directory)
        if not directory.is_dir():
            raise WorkflowLoadError(f"Workflow directory not found: {path}", path)

        candidates = sorted(
            p
            for p in directory.iterdir()
            if p.is_file() and p.suffix.lower() in WORKFLOW_SUFFIXES
        )
        return [
            WorkflowFile(id=str(uuid.uuid4()), name=display_name(p.stem), path=str(p))
            for p in candidates
        ]

    def load_file(self, path: str) -> Workflow:
        file_path = Path(path)
        logger.info("Loading workflow file: %s", file_path)
        try:
            text = file_path.read_text(encoding="utf-8")
            mtime = datetime.fromtimestamp(file_path.stat().st_mtime)
        except (OSError, UnicodeDecodeError) as e:
            raise WorkflowLoadError(f"Could not read {path}: {e}", path) from e

        data = self._parse(text, file_path)
        return workflow_from_definition(
            data, path, display_name(file_path.stem), mtime.isoformat()
        )

    def save_file(self, workflow: Workflow, path: str) -> Path:
        """
        Write a workflow in the definition format (YAML or JSON by suffix).

        Args:
            workflow: Workflow to persist; stage ids are not written
            path: Target file

        Returns:
            The written path
        """
        file_path = Path(path)
        data = workflow_to_definition(workflow)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        if file_path.suffix.lower() == ".json":
            text = json.dumps(data, indent=2) + "\n"
        else:
            text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
        file_path.write_text(text, encoding="utf-8")
        logger.info("Saved workflow '%s' to %s", workflow.name, file_path)
        return file_path

    def _parse(self, text: str, file_path: Path) -> Any:
        try:
            if file_path.suffix.lower() == ".json":
                return json.loads(text)
            return yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise WorkflowLoadError(
                f"Invalid workflow syntax in {file_path}: {e}", str(file_path)
            ) from e
