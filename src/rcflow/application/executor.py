"""
WorkflowExecutor: drives a loaded workflow through an RC Node transport.

Runs stages and commands strictly in order, emitting a fresh ProgressReport
after every change. Individual command failures are reported and skipped;
only precondition failures and unexpected errors end a run early.
"""

import logging

from rcflow.application.cancellation import CancellationToken
from rcflow.domain.exceptions import TransportError
from rcflow.domain.formatting import format_command, positional_params
from rcflow.domain.interfaces import (
    NodeTransportInterface,
    NotifierInterface,
    ProgressObserver,
)
from rcflow.domain.models import (
    Command,
    NodeConfig,
    Notification,
    NotificationLevel,
    ProgressReport,
    ProgressStatus,
    Stage,
    Workflow,
)
from rcflow.domain.progress import coarse_percent, refined_percent, remote_progress

logger = logging.getLogger(__name__)

PROGRESS_COMMAND = "getprogress"


class _Run:
    """Per-run bookkeeping. Keeps the emitted percent non-decreasing."""

    def __init__(self, total: int, on_progress: ProgressObserver) -> None:
        self.total = total
        self.completed = 0
        self.last_percent = 0
        self._on_progress = on_progress

    @property
    def coarse(self) -> int:
        return coarse_percent(self.completed, self.total)

    def emit(
        self,
        stage: str,
        command: str,
        percent: int,
        status: ProgressStatus,
        message: str | None = None,
    ) -> None:
        self.last_percent = max(self.last_percent, min(100, percent))
        self._on_progress(
            ProgressReport(
                current_stage=stage,
                current_command=command,
                percent_complete=self.last_percent,
                status=status,
                message=message,
            )
        )


class WorkflowExecutor:
    """
    Sequential, best-effort workflow runner.

    Stateless between runs: each execute() call owns its own bookkeeping and
    never retains a reference to a report after handing it to the observer.
    """

    def __init__(
        self,
        transport: NodeTransportInterface,
        notifier: NotifierInterface | None = None,
        query_progress: bool = True,
    ):
        """
        Args:
            transport: Adapter used to reach the RC Node
            notifier: Receives user-visible notifications (logged only if None)
            query_progress: Poll 'getprogress' after each successful command
        """
        self._transport = transport
        self._notifier = notifier
        self._query_progress = query_progress

    def execute(
        self,
        workflow: Workflow | None,
        config: NodeConfig,
        on_progress: ProgressObserver,
        cancel_token: CancellationToken | None = None,
    ) -> bool:
        """
        Run every command of the workflow against the node.

        Args:
            workflow: Workflow to run (None counts as "nothing selected")
            config: Connection details; must report is_connected
            on_progress: Called synchronously with every new report
            cancel_token: Checked before each command

        Returns:
            True if the run reached the end, False otherwise
        """
        if workflow is None:
            return self._reject(
                on_progress,
                "No Workflow Selected",
                "Please select a workflow to execute",
            )
        if not config.is_connected:
            return self._reject(
                on_progress,
                "Not Connected to RC Node",
                "Please configure and connect to RC Node first",
            )

        run: _Run | None = None
        try:
            run = _Run(workflow.total_commands, on_progress)
            logger.info(
                "Executing workflow '%s': %d stages, %d commands",
                workflow.name,
                len(workflow.stages),
                run.total,
            )

            for stage in workflow.stages:
                if run.total == 0:
                    break
                if not self._run_stage(stage, config, run, cancel_token):
                    return False

            run.emit("Completed", "", 100, ProgressStatus.COMPLETED)
            self._notify(
                "Workflow Completed",
                f"Workflow '{workflow.name}' has been executed",
            )
            return True

        except Exception as e:
            logger.exception("Workflow execution error")
            percent = run.last_percent if run is not None else 0
            on_progress(
                ProgressReport(
                    current_stage="Error",
                    current_command="",
                    percent_complete=percent,
                    status=ProgressStatus.ERROR,
                    message=str(e) or type(e).__name__,
                )
            )
            self._notify(
                "Workflow Execution Failed",
                "An error occurred during workflow execution",
                NotificationLevel.ERROR,
            )
            return False

    def _run_stage(
        self,
        stage: Stage,
        config: NodeConfig,
        run: _Run,
        cancel_token: CancellationToken | None,
    ) -> bool:
        """Run one stage; False means the run was cancelled."""
        logger.info("Starting stage: %s", stage.name)
        run.emit(stage.name, "", run.coarse, ProgressStatus.RUNNING)

        for command in stage.commands:
            if cancel_token is not None and cancel_token.cancelled:
                logger.warning("Workflow cancelled before '%s'", command.command)
                run.emit(
                    stage.name,
                    command.command,
                    run.coarse,
                    ProgressStatus.ERROR,
                    "Workflow cancelled",
                )
                self._notify(
                    "Workflow Cancelled",
                    f"Stopped before command: {command.command}",
                    NotificationLevel.ERROR,
                )
                return False

            self._run_command(stage, command, config, run)
            run.completed += 1

        return True

    def _run_command(
        self, stage: Stage, command: Command, config: NodeConfig, run: _Run
    ) -> None:
        logger.info("Executing command: %s", format_command(command))
        run.emit(stage.name, command.command, run.coarse, ProgressStatus.RUNNING)

        try:
            self._transport.send(config, command.command, positional_params(command))
            if self._query_progress:
                self._refine(stage, command, config, run)
        except TransportError as e:
            logger.error("Command execution error (%s): %s", command.command, e)
            run.emit(
                stage.name,
                command.command,
                run.coarse,
                ProgressStatus.ERROR,
                f"Error executing command: {command.command}",
            )
            self._notify(
                "Command Execution Error",
                f"Failed to execute command: {command.command}",
                NotificationLevel.ERROR,
            )

    def _refine(
        self, stage: Stage, command: Command, config: NodeConfig, run: _Run
    ) -> None:
        """Ask the node for sub-progress and emit a finer report if it has one."""
        payload = self._transport.send(config, PROGRESS_COMMAND)
        progress = remote_progress(payload)
        if progress is None:
            logger.debug("No progress update after '%s'", command.command)
            return

        message = payload.get("message") or ""
        run.emit(
            stage.name,
            command.command,
            refined_percent(run.completed, run.total, progress),
            ProgressStatus.RUNNING,
            str(message),
        )

    def _reject(self, on_progress: ProgressObserver, title: str, reason: str) -> bool:
        """Precondition failure: report once at 0% without touching the node."""
        logger.warning("%s: %s", title, reason)
        on_progress(
            ProgressReport(
                current_stage=title,
                current_command="",
                percent_complete=0,
                status=ProgressStatus.ERROR,
                message=reason,
            )
        )
        self._notify(title, reason, NotificationLevel.ERROR)
        return False

    def _notify(
        self,
        title: str,
        description: str,
        level: NotificationLevel = NotificationLevel.INFO,
    ) -> None:
        if self._notifier is None:
            logger.debug("Notification: %s - %s", title, description)
            return
        self._notifier.notify(Notification(title, description, level))
