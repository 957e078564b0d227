"""Rich console utilities for rcflow."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rcflow.domain.formatting import format_command
from rcflow.domain.interfaces import NotifierInterface
from rcflow.domain.models import (
    NodeStatus,
    Notification,
    NotificationLevel,
    ProgressReport,
    ProgressStatus,
    Workflow,
    WorkflowFile,
)

# Shared console instances
console = Console()
error_console = Console(stderr=True)

STATUS_STYLES = {
    ProgressStatus.IDLE: "dim",
    ProgressStatus.RUNNING: "cyan",
    ProgressStatus.COMPLETED: "bold green",
    ProgressStatus.ERROR: "bold red",
}


def print_header(title: str, subtitle: str | None = None) -> None:
    """Print a styled header panel."""
    content = Text(title, style="bold blue")
    if subtitle:
        content.append(f"\n{subtitle}", style="dim")
    console.print(Panel(content, expand=False))


def print_error(message: str, hint: str | None = None) -> None:
    """Print formatted error message to stderr."""
    content = Text(f"ERROR: {message}", style="bold red")
    if hint:
        content.append(f"\n\nHint: {hint}", style="yellow")
    error_console.print(Panel(content, title="Error", border_style="red"))


def print_success(message: str) -> None:
    console.print(Panel(message, title="Success", border_style="green"))


def print_failure(message: str, details: str | None = None) -> None:
    content = Text(message, style="bold red")
    if details:
        content.append(f"\n{details}", style="dim")
    console.print(Panel(content, title="Failed", border_style="red"))


def print_workflow_files(files: list[WorkflowFile]) -> None:
    """Print the result of a directory scan."""
    table = Table(show_header=True, box=None)
    table.add_column("#", style="cyan", width=4)
    table.add_column("Name", style="bold")
    table.add_column("Path", style="dim")
    for i, workflow_file in enumerate(files, 1):
        table.add_row(str(i), workflow_file.name, workflow_file.path)
    console.print(table)


def print_workflow(workflow: Workflow) -> None:
    """Print stages and formatted commands of a workflow."""
    print_header(workflow.name, workflow.metadata.description or None)
    for stage in workflow.stages:
        console.print(f"\n[bold]{stage.name}[/bold]")
        if stage.description:
            console.print(f"  [dim]{stage.description}[/dim]")
        for command in stage.commands:
            console.print(f"  {format_command(command)}")
    console.print(
        f"\n[dim]{len(workflow.stages)} stages, "
        f"{workflow.total_commands} commands[/dim]"
    )


def print_node_status(node_url: str, status: NodeStatus) -> None:
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("Node", node_url or "(not set)")
    table.add_row("Reachable", "yes" if status.reachable else "no")
    table.add_row("API version", status.api_version or "unknown")
    if "error" in status.detail:
        table.add_row("Error", str(status.detail["error"]))
    console.print(table)


def print_progress(report: ProgressReport) -> None:
    """Progress observer that prints one line per report."""
    style = STATUS_STYLES[report.status]
    line = Text(f"[{report.percent_complete:3d}%] ", style=style)
    line.append(report.current_stage, style="bold")
    if report.current_command:
        line.append(f" > {report.current_command}")
    if report.message:
        line.append(f"  {report.message}", style="dim")
    console.print(line)


class ConsoleNotifier(NotifierInterface):
    """Renders notifications as rich panels."""

    def notify(self, notification: Notification) -> None:
        if notification.level == NotificationLevel.ERROR:
            print_failure(notification.title, notification.description)
        else:
            console.print(
                Panel(
                    notification.description,
                    title=notification.title,
                    border_style="green",
                )
            )
