"""Click command-line entry point for rcflow."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar

import click

from rcflow.application import (
    WorkflowExecutor,
    WorkflowService,
    template_from_session,
)
from rcflow.config import RuntimeSettings, build_transport, load_node_config
from rcflow.console import (
    ConsoleNotifier,
    console,
    print_error,
    print_failure,
    print_header,
    print_node_status,
    print_progress,
    print_success,
    print_workflow,
    print_workflow_files,
)
from rcflow.domain.exceptions import RCFlowError
from rcflow.domain.models import WorkflowFile
from rcflow.infrastructure.workflows import FilesystemWorkflowSource
from rcflow.logging_setup import setup_logging

F = TypeVar("F", bound=Callable[..., Any])


def node_options(func: F) -> F:
    """
    Decorator adding connection CLI options to a click command.

    Options added:
        --node-config: JSON file with node_url/auth_token
        --simulate: Use the simulated node instead of HTTP
        --timeout: HTTP timeout in seconds
    """

    @click.option(
        "--node-config",
        default=None,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="JSON file with node_url and auth_token "
        "(RC_NODE_URL/RC_NODE_AUTH_TOKEN override it)",
    )
    @click.option(
        "--simulate",
        is_flag=True,
        help="Run against a simulated RC Node",
    )
    @click.option(
        "--timeout",
        default=30.0,
        type=float,
        help="HTTP timeout in seconds (default: 30)",
    )
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


@click.group()
@click.option(
    "--workflow-dir",
    default="./workflows",
    type=click.Path(file_okay=False),
    help="Directory containing workflow definitions (default: ./workflows)",
)
@click.option("--log-file", default=None, type=click.Path(), help="Path to log file")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose (DEBUG) logging")
@click.pass_context
def main(
    ctx: click.Context, workflow_dir: str, log_file: str | None, verbose: bool
) -> None:
    """Run Reality Capture workflows against an RC Node."""
    setup_logging("rcflow", log_file=log_file, verbose=verbose)
    ctx.obj = RuntimeSettings(
        workflow_dir=workflow_dir, log_file=log_file, verbose=verbose
    )


@main.command("list")
@click.pass_obj
def list_workflows(settings: RuntimeSettings) -> None:
    """List workflow definitions in the workflow directory."""
    source = FilesystemWorkflowSource()
    try:
        files = source.scan_directory(settings.workflow_dir)
    except RCFlowError as e:
        print_error(str(e), hint="Pass --workflow-dir to point at your workflows")
        raise SystemExit(1) from e
    if not files:
        console.print(f"No workflows found in {settings.workflow_dir}")
        return
    print_workflow_files(files)


@main.command("show")
@click.argument("workflow")
@click.pass_obj
def show_workflow(settings: RuntimeSettings, workflow: str) -> None:
    """Print the stages and commands of WORKFLOW (name or path)."""
    source = FilesystemWorkflowSource()
    try:
        path = _resolve_path(source, settings.workflow_dir, workflow)
        print_workflow(source.load_file(path))
    except RCFlowError as e:
        print_error(str(e))
        raise SystemExit(1) from e


@main.command("status")
@node_options
@click.pass_obj
def node_status(
    settings: RuntimeSettings,
    node_config: Path | None,
    simulate: bool,
    timeout: float,
) -> None:
    """Check that the RC Node is reachable."""
    try:
        config = load_node_config(node_config)
    except RCFlowError as e:
        print_error(str(e))
        raise SystemExit(1) from e

    with build_transport(_with_node(settings, simulate, timeout)) as transport:
        status = transport.check_status(config)
    print_node_status(config.node_url, status)
    if not status.reachable:
        raise SystemExit(1)


@main.command("run")
@click.argument("workflow")
@node_options
@click.option(
    "--no-progress-query",
    is_flag=True,
    help="Do not poll getprogress after each command",
)
@click.pass_obj
def run_workflow(
    settings: RuntimeSettings,
    workflow: str,
    node_config: Path | None,
    simulate: bool,
    timeout: float,
    no_progress_query: bool,
) -> None:
    """Execute WORKFLOW (name or path) on the RC Node."""
    settings = _with_node(settings, simulate, timeout)
    try:
        config = load_node_config(node_config)
    except RCFlowError as e:
        print_error(str(e))
        raise SystemExit(1) from e

    # An explicit file path is scanned from its own directory
    directory = settings.workflow_dir
    if Path(workflow).is_file():
        directory = str(Path(workflow).parent)

    with build_transport(settings) as transport:
        status = transport.check_status(config)
        if not status.reachable:
            print_node_status(config.node_url, status)
        config = config.with_connection(status.reachable)

        notifier = ConsoleNotifier()
        service = WorkflowService(
            FilesystemWorkflowSource(),
            WorkflowExecutor(
                transport, notifier, query_progress=not no_progress_query
            ),
            directory,
            notifier,
        )

        target = _match_scanned(service, workflow)
        if target is None:
            print_error(f"Workflow not found: {workflow}", hint="Try 'rcflow list'")
            raise SystemExit(1)

        selected = service.select_workflow(target.id)
        if selected is None:
            raise SystemExit(1)

        subtitle = "SIMULATION" if settings.simulation else config.node_url
        print_header(selected.name, subtitle)
        if not service.execute(config, print_progress):
            raise SystemExit(1)


@main.command("template")
@click.argument("session_name")
@click.option("--subject", default=None, help="Subject matter (default: Object)")
@click.option("--tag", "tags", multiple=True, help="Tag to attach (repeatable)")
@click.option(
    "--output",
    default=None,
    type=click.Path(dir_okay=False),
    help="Write the workflow to this .yaml/.json file instead of printing it",
)
def make_template(
    session_name: str, subject: str | None, tags: tuple[str, ...], output: str | None
) -> None:
    """Generate the photogrammetry pipeline for SESSION_NAME."""
    workflow = template_from_session(session_name, subject, tags)
    if output is None:
        print_workflow(workflow)
        return
    try:
        path = FilesystemWorkflowSource().save_file(workflow, output)
    except OSError as e:
        print_failure("Could not write workflow", str(e))
        raise SystemExit(1) from e
    print_success(f"Wrote {workflow.name} to {path}")


def _with_node(
    settings: RuntimeSettings, simulate: bool, timeout: float
) -> RuntimeSettings:
    return replace(settings, simulation=simulate, timeout=timeout)


def _resolve_path(
    source: FilesystemWorkflowSource, directory: str, workflow: str
) -> str:
    """Accept either a file path or a display name from the directory."""
    if Path(workflow).is_file():
        return workflow
    for workflow_file in source.scan_directory(directory):
        if _matches(workflow_file, workflow):
            return workflow_file.path
    raise RCFlowError(f"Workflow not found: {workflow}")


def _match_scanned(service: WorkflowService, workflow: str) -> WorkflowFile | None:
    """Find WORKFLOW in a fresh scan, by file path or by display name."""
    target = Path(workflow)
    by_path = target.is_file()
    for workflow_file in service.refresh():
        if by_path:
            if Path(workflow_file.path).resolve() == target.resolve():
                return workflow_file
        elif _matches(workflow_file, workflow):
            return workflow_file
    return None


def _matches(workflow_file: WorkflowFile, workflow: str) -> bool:
    needle = workflow.casefold()
    return needle in (
        workflow_file.name.casefold(),
        Path(workflow_file.path).stem.casefold(),
    )
