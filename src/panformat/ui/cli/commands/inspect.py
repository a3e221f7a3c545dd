"""Commands inspecting document configuration and format strings."""

from __future__ import annotations

from typing import Annotated

import typer

from panformat.core.formats import format_with, split_format_string

from .._options import InputArgument, JsonOption, RmdOption
from ..presenter import present_format_config, present_format_parts
from ..state import get_cli_state
from .resolve import read_document_config


def config(
    input: InputArgument = None,
    rmd: RmdOption = False,
    as_json: JsonOption = False,
) -> None:
    """Print the format configuration a document declares."""
    if input is None:
        raise typer.BadParameter("Provide a Markdown document to inspect.")
    present_format_config(get_cli_state(), read_document_config(input, rmd=rmd), as_json=as_json)


def split(
    format: Annotated[
        str,
        typer.Argument(metavar="FORMAT", help="Pandoc format string, e.g. markdown+smart."),
    ],
    prepend: Annotated[
        str,
        typer.Option("--prepend", help="Tokens inserted right after the base format."),
    ] = "",
    append: Annotated[
        str,
        typer.Option("--append", help="Tokens added after the existing options."),
    ] = "",
) -> None:
    """Split a Pandoc format string into its base format and options."""
    if prepend or append:
        typer.echo(format_with(format, prepend, append))
        return
    present_format_parts(split_format_string(format))


__all__ = ["config", "split"]
