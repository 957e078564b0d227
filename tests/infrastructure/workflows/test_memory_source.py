"""Tests for InMemoryWorkflowSource."""

import pytest

from rcflow.application.templates import photogrammetry_template
from rcflow.domain.exceptions import WorkflowLoadError
from rcflow.infrastructure.workflows.memory import InMemoryWorkflowSource


class TestInMemoryWorkflowSource:
    def test_scan_filters_by_directory(self, sample_definition) -> None:
        source = InMemoryWorkflowSource(
            {
                "workflows/b.yaml": sample_definition,
                "workflows/a.json": sample_definition,
                "other/c.yaml": sample_definition,
            }
        )

        files = source.scan_directory("./workflows")

        assert [f.path for f in files] == ["workflows/a.json", "workflows/b.yaml"]

    def test_load(self, sample_definition) -> None:
        source = InMemoryWorkflowSource()
        source.add("workflows/basic.yaml", sample_definition)

        workflow = source.load_file("workflows/basic.yaml")

        assert workflow.name == "Basic Alignment"
        assert workflow.total_commands == 5

    def test_unknown_path(self) -> None:
        with pytest.raises(WorkflowLoadError, match="Unknown workflow file"):
            InMemoryWorkflowSource().load_file("workflows/missing.yaml")

    def test_invalid_definition(self) -> None:
        source = InMemoryWorkflowSource({"workflows/x.yaml": {"stages": [{}]}})

        with pytest.raises(WorkflowLoadError, match="stages/0"):
            source.load_file("workflows/x.yaml")

    def test_add_workflow(self) -> None:
        template = photogrammetry_template("Session", "Vase")
        source = InMemoryWorkflowSource()
        source.add_workflow("workflows/vase.yaml", template)

        loaded = source.load_file("workflows/vase.yaml")

        assert loaded.name == template.name
        assert loaded.total_commands == template.total_commands
        assert loaded.metadata == template.metadata
        assert loaded.id != template.id
