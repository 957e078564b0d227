"""Tests for bundled JSON schemas."""

import jsonschema
import pytest

from rcflow.schemas import (
    get_node_config_schema,
    get_workflow_schema,
    validate_node_config,
    validate_workflow,
)


class TestWorkflowSchema:
    def test_schema_is_cached(self) -> None:
        assert get_workflow_schema() is get_workflow_schema()

    def test_valid_definition(self, sample_definition) -> None:
        validate_workflow(sample_definition)

    def test_numeric_params_allowed(self) -> None:
        validate_workflow(
            {"stages": [{"name": "T", "commands": [{"command": "x", "params": [1]}]}]}
        )

    @pytest.mark.parametrize(
        "definition",
        [
            [],
            {},
            {"stages": [{"commands": []}]},
            {"stages": [{"name": "A"}]},
            {"stages": [{"name": "A", "commands": [{"params": ["x"]}]}]},
            {"stages": [{"name": "A", "commands": [{"command": ""}]}]},
            {"stages": [], "metadata": {"tags": "quick"}},
        ],
    )
    def test_invalid_definitions(self, definition) -> None:
        with pytest.raises(jsonschema.ValidationError):
            validate_workflow(definition)


class TestNodeConfigSchema:
    def test_valid(self) -> None:
        validate_node_config(
            {"node_url": "http://node", "auth_token": "t", "timeout": 10}
        )

    def test_rejects_unknown_fields(self) -> None:
        assert get_node_config_schema()["additionalProperties"] is False
        with pytest.raises(jsonschema.ValidationError):
            validate_node_config({"node_url": "http://node", "token": "t"})

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(jsonschema.ValidationError):
            validate_node_config({"timeout": 0})
