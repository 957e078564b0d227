"""
WorkflowService: stateful caller around source and executor.

Tracks the last directory scan, the selected workflow and the most recent
progress report, mirroring what a control panel needs to render.
"""

import logging

from rcflow.application.cancellation import CancellationToken
from rcflow.application.executor import WorkflowExecutor
from rcflow.domain.exceptions import RCFlowError, WorkflowNotFound
from rcflow.domain.interfaces import (
    NotifierInterface,
    ProgressObserver,
    WorkflowSourceInterface,
)
from rcflow.domain.models import (
    IDLE_PROGRESS,
    NodeConfig,
    Notification,
    NotificationLevel,
    ProgressReport,
    Workflow,
    WorkflowFile,
)

logger = logging.getLogger(__name__)

DEFAULT_WORKFLOW_DIR = "./workflows"


class WorkflowService:
    """Selection and execution of workflows found in one directory."""

    def __init__(
        self,
        source: WorkflowSourceInterface,
        executor: WorkflowExecutor,
        directory: str = DEFAULT_WORKFLOW_DIR,
        notifier: NotifierInterface | None = None,
    ):
        self._source = source
        self._executor = executor
        self._directory = directory
        self._notifier = notifier

        self.workflow_files: list[WorkflowFile] = []
        self.selected_workflow: Workflow | None = None
        self.selected_workflow_id: str | None = None
        self.progress: ProgressReport = IDLE_PROGRESS
        self.is_executing = False

    def refresh(self) -> list[WorkflowFile]:
        """Rescan the directory; a failed scan leaves an empty list."""
        try:
            self.workflow_files = self._source.scan_directory(self._directory)
        except RCFlowError as e:
            logger.error("Failed to load workflow files: %s", e)
            self.workflow_files = []
            self._notify(
                "Error Loading Workflows",
                "Could not load workflow files",
                NotificationLevel.ERROR,
            )
        return self.workflow_files

    def find_file(self, workflow_id: str) -> WorkflowFile:
        for workflow_file in self.workflow_files:
            if workflow_file.id == workflow_id:
                return workflow_file
        raise WorkflowNotFound(workflow_id)

    def select_workflow(self, workflow_id: str | None) -> Workflow | None:
        """
        Select a workflow from the last scan by id.

        Any lookup or load failure leaves nothing selected.

        Args:
            workflow_id: Id from workflow_files, or None to clear

        Returns:
            The loaded workflow, or None
        """
        self.selected_workflow = None
        self.selected_workflow_id = workflow_id
        if workflow_id is None:
            return None

        try:
            workflow_file = self.find_file(workflow_id)
            workflow = self._source.load_file(workflow_file.path)
        except RCFlowError as e:
            logger.error("Failed to select workflow: %s", e)
            self._notify(
                "Error Selecting Workflow",
                "Could not load the selected workflow",
                NotificationLevel.ERROR,
            )
            return None

        self.selected_workflow = workflow
        return workflow

    def execute(
        self,
        config: NodeConfig,
        on_progress: ProgressObserver | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> bool:
        """Run the selected workflow, tracking the latest report in progress."""

        def _track(report: ProgressReport) -> None:
            self.progress = report
            if on_progress is not None:
                on_progress(report)

        self.is_executing = True
        try:
            return self._executor.execute(
                self.selected_workflow, config, _track, cancel_token
            )
        finally:
            self.is_executing = False

    def reset(self) -> None:
        self.progress = IDLE_PROGRESS

    def _notify(self, title: str, description: str, level: NotificationLevel) -> None:
        if self._notifier is not None:
            self._notifier.notify(Notification(title, description, level))
