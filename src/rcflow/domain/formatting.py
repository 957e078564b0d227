"""Command formatting helpers."""

from rcflow.domain.models import Command


def format_command(command: Command) -> str:
    """
    Render a command as a single invocation string.

    Parameters are joined verbatim with single spaces; nothing is quoted or
    escaped, so callers are responsible for safety.
    """
    if not command.params:
        return command.command
    return " ".join((command.command, *command.params))


def positional_params(command: Command) -> dict[str, str]:
    """Re-key params as param1..paramN in original order."""
    return {f"param{i}": value for i, value in enumerate(command.params, start=1)}
