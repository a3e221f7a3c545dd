"""Rich-aware presenters for resolved formats and document configuration."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich import box
from rich.table import Table
import typer

from panformat.core.config import FormatConfig
from panformat.core.formats import FormatParts
from panformat.core.resolver import ResolvedFormat, has_fenced_code_blocks

from .state import CLIState


if TYPE_CHECKING:  # pragma: no cover - typing only
    from rich.console import Console


def _get_console(state: CLIState) -> Console | None:
    """Return the stdout console when it is attached to a terminal."""
    console = state.console
    if getattr(console, "is_terminal", False):
        return console
    return None


def resolved_format_payload(resolved: ResolvedFormat) -> dict[str, Any]:
    """Return a JSON-serialisable view of ``resolved``."""
    return {
        "mode": resolved.mode,
        "base_name": resolved.base_name,
        "full_name": resolved.full_name,
        "extensions": dict(resolved.extensions),
        "fenced_code_blocks": has_fenced_code_blocks(resolved.extensions),
        "warnings": {
            "invalid_format": resolved.warnings.invalid_format,
            "invalid_options": list(resolved.warnings.invalid_options),
        },
    }


def present_resolved_format(
    state: CLIState, resolved: ResolvedFormat, *, as_json: bool = False
) -> None:
    if as_json:
        typer.echo(json.dumps(resolved_format_payload(resolved), indent=2))
        return

    console = _get_console(state)
    if console is None:
        typer.echo(resolved.full_name)
        for name, enabled in sorted(resolved.extensions.items()):
            typer.echo(f"  {'+' if enabled else '-'}{name}")
        return

    table = Table(
        title=resolved.full_name,
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("Extension", style="magenta")
    table.add_column("Enabled")
    for name, enabled in sorted(resolved.extensions.items()):
        table.add_row(name, "[green]yes[/green]" if enabled else "[dim]no[/dim]")
    console.print(table)


def present_format_config(state: CLIState, config: FormatConfig, *, as_json: bool = False) -> None:
    payload = config.model_dump(exclude_none=True)
    if as_json:
        typer.echo(json.dumps(payload, indent=2))
        return

    console = _get_console(state)
    if console is None:
        if not payload:
            typer.echo("No format configuration declared.")
        for key, value in payload.items():
            typer.echo(f"{key}: {_format_value(value)}")
        return

    table = Table(
        title="Format Configuration",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("Key", style="magenta")
    table.add_column("Value", style="green")
    if not payload:
        table.add_row("-", "No format configuration declared")
    for key, value in payload.items():
        table.add_row(key, _format_value(value))
    console.print(table)


def present_format_parts(parts: FormatParts) -> None:
    typer.echo(f"base: {parts.base}")
    typer.echo(f"options: {parts.options}")


def _format_value(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(item) for item in value) if value else "-"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = [
    "present_format_config",
    "present_format_parts",
    "present_resolved_format",
    "resolved_format_payload",
]
