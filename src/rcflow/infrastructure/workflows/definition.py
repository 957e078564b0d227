"""
Conversion between workflow definition documents and domain models.

A definition is the parsed YAML/JSON document: a workflow_name, an optional
metadata block and ordered stages of commands. Ids are not part of the
format; every conversion assigns fresh ones.
"""

import uuid
from typing import Any

import jsonschema

from rcflow.domain.exceptions import WorkflowLoadError
from rcflow.domain.models import Command, Stage, Workflow, WorkflowMetadata
from rcflow.schemas import validate_workflow


def display_name(stem: str) -> str:
    """'full_photogrammetry' -> 'Full Photogrammetry'."""
    words = stem.replace("-", " ").replace("_", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words) or stem


def _param(value: Any) -> str:
    # YAML turns 4096 into an int; the node only ever sees strings
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _command(data: dict[str, Any]) -> Command:
    return Command(
        command=data["command"],
        params=tuple(_param(p) for p in data.get("params") or ()),
        description=data.get("description"),
    )


def _metadata(data: dict[str, Any] | None) -> WorkflowMetadata:
    if not data:
        return WorkflowMetadata()
    return WorkflowMetadata(
        description=data.get("description", ""),
        author=data.get("author", ""),
        version=str(data.get("version", "")),
        tags=tuple(data.get("tags", ())),
        requires_markers=data.get("requiredMarkers", False),
        requires_masks=data.get("requiresMasks", False),
        requires_textures=data.get("requiresTextures", False),
    )


def workflow_from_definition(
    data: Any, path: str, fallback_name: str, timestamp: str
) -> Workflow:
    """
    Validate a definition document and build a Workflow from it.

    Args:
        data: Parsed YAML/JSON document
        path: Source path, for error messages
        fallback_name: Name used when the document has none
        timestamp: ISO timestamp for created_at/updated_at

    Returns:
        Workflow with freshly generated workflow and stage ids

    Raises:
        WorkflowLoadError: If the document does not match the schema
    """
    try:
        validate_workflow(data)
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise WorkflowLoadError(
            f"Invalid workflow definition in {path} at {location}: {e.message}",
            path,
        ) from e

    stages = tuple(
        Stage(
            id=str(uuid.uuid4()),
            name=stage["name"],
            commands=tuple(_command(c) for c in stage["commands"]),
            description=stage.get("description"),
        )
        for stage in data["stages"]
    )
    return Workflow(
        id=str(uuid.uuid4()),
        name=data.get("workflow_name") or data.get("name") or fallback_name,
        stages=stages,
        created_at=timestamp,
        updated_at=timestamp,
        metadata=_metadata(data.get("metadata")),
    )


def workflow_to_definition(workflow: Workflow) -> dict[str, Any]:
    """Serialize a Workflow back into the definition format (ids dropped)."""
    stages: list[dict[str, Any]] = []
    for stage in workflow.stages:
        commands: list[dict[str, Any]] = []
        for command in stage.commands:
            entry: dict[str, Any] = {"command": command.command}
            if command.params:
                entry["params"] = list(command.params)
            if command.description:
                entry["description"] = command.description
            commands.append(entry)
        stage_data: dict[str, Any] = {"name": stage.name, "commands": commands}
        if stage.description:
            stage_data["description"] = stage.description
        stages.append(stage_data)

    data: dict[str, Any] = {"workflow_name": workflow.name}
    meta = workflow.metadata
    if meta != WorkflowMetadata():
        data["metadata"] = {
            "description": meta.description,
            "author": meta.author,
            "version": meta.version,
            "tags": list(meta.tags),
            "requiredMarkers": meta.requires_markers,
            "requiresMasks": meta.requires_masks,
            "requiresTextures": meta.requires_textures,
        }
    data["stages"] = stages
    return data
