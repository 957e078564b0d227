"""rcflow JSON Schema definitions and validation utilities.

Schemas:
    - workflow.schema.json: Workflow definition (stages, commands, metadata)
    - node_config.schema.json: RC Node connection file

Usage:
    from rcflow.schemas import validate_workflow

    with open("full_photogrammetry.json") as f:
        data = json.load(f)
    validate_workflow(data)  # Raises jsonschema.ValidationError if invalid
"""

from __future__ import annotations

import json
from functools import cache
from importlib.resources import files
from typing import Any

import jsonschema


@cache
def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema from the schemas package.

    Args:
        name: Schema filename (e.g., 'workflow.schema.json')

    Returns:
        Parsed JSON schema as a dictionary
    """
    schema_text = files("rcflow.schemas").joinpath(name).read_text()
    result: dict[str, Any] = json.loads(schema_text)
    return result


def get_workflow_schema() -> dict[str, Any]:
    """Get the workflow definition schema."""
    return _load_schema("workflow.schema.json")


def get_node_config_schema() -> dict[str, Any]:
    """Get the RC Node connection file schema."""
    return _load_schema("node_config.schema.json")


def validate_workflow(data: Any) -> None:
    """Validate a workflow definition against the schema.

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_workflow_schema())


def validate_node_config(data: Any) -> None:
    """Validate a connection file against the schema.

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_node_config_schema())


__all__ = [
    "get_workflow_schema",
    "get_node_config_schema",
    "validate_workflow",
    "validate_node_config",
]
