"""Implementation of the `panformat resolve` command."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer

from panformat.adapters.pandoc import PandocCli
from panformat.core.config import FormatConfig, FormatSpec
from panformat.core.exceptions import PandocEngineError, exception_hint
from panformat.core.metadata import format_config_from_markdown
from panformat.core.resolver import report_format_warnings, resolve_format

from .._options import (
    ExtensionsOption,
    InputArgument,
    JsonOption,
    MathInCodeOption,
    ModeOption,
    PandocOption,
    RmdOption,
    TimeoutOption,
)
from ..diagnostics import CliEmitter
from ..presenter import present_resolved_format
from ..state import debug_enabled, emit_error, get_cli_state


def read_document_config(path: Path | None, *, rmd: bool = False) -> FormatConfig:
    """Extract the format configuration declared by ``path``."""
    if path is None:
        return FormatConfig()
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Unable to read '{path}': {exc}") from exc
    is_rmd = rmd or path.suffix.lower() == ".rmd"
    return format_config_from_markdown(source, is_rmd=is_rmd)


def engine_failure_message(exc: BaseException) -> str:
    """Return the error line for an engine failure, with its root cause."""
    message = str(exc)
    hint = exception_hint(exc)
    if hint and hint != message:
        return f"{message} ({hint})"
    return message


def resolve(
    input: InputArgument = None,
    mode: ModeOption = None,
    extensions: ExtensionsOption = None,
    math_in_code: MathInCodeOption = False,
    rmd: RmdOption = False,
    pandoc: PandocOption = None,
    timeout: TimeoutOption = None,
    as_json: JsonOption = False,
) -> None:
    """Resolve the Pandoc format a document should be read with."""

    state = get_cli_state()
    config = read_document_config(input, rmd=rmd)
    spec = FormatSpec.from_config(
        config,
        mode=mode,
        extensions=extensions,
        math_in_code=True if math_in_code else None,
    )

    engine = PandocCli(pandoc, timeout=timeout)
    try:
        resolved = asyncio.run(resolve_format(engine, spec))
    except PandocEngineError as exc:
        if debug_enabled():
            raise
        emit_error(engine_failure_message(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    emitter = CliEmitter(state=state)
    report_format_warnings(resolved, emitter)
    if not as_json:
        emitter.event(
            "format_resolved",
            {
                "mode": resolved.mode,
                "base_name": resolved.base_name,
                "full_name": resolved.full_name,
            },
        )
    present_resolved_format(state, resolved, as_json=as_json)


__all__ = ["engine_failure_message", "read_document_config", "resolve"]
