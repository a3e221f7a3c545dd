"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
FORMAT_PANEL = "Format"
ENGINE_PANEL = "Engine"
OUTPUT_PANEL = "Output"

InputArgument = Annotated[
    Path | None,
    typer.Argument(
        metavar="INPUT",
        help="Markdown or R Markdown document declaring its format options.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

RmdOption = Annotated[
    bool,
    typer.Option(
        "--rmd",
        help="Read the input as R Markdown (implied by the .Rmd suffix).",
        rich_help_panel=INPUTS_PANEL,
    ),
]

ModeOption = Annotated[
    str | None,
    typer.Option(
        "--mode",
        "-m",
        help="Base format (e.g. markdown, gfm, commonmark, goldmark, blackfriday).",
        rich_help_panel=FORMAT_PANEL,
    ),
]

ExtensionsOption = Annotated[
    str | None,
    typer.Option(
        "--extensions",
        "-x",
        help="Extension toggles appended to the document ones (e.g. '+smart-raw_html').",
        rich_help_panel=FORMAT_PANEL,
    ),
]

MathInCodeOption = Annotated[
    bool,
    typer.Option(
        "--math-in-code",
        help="Enable $ math for the goldmark and blackfriday variants.",
        rich_help_panel=FORMAT_PANEL,
    ),
]

PandocOption = Annotated[
    str | None,
    typer.Option(
        "--pandoc",
        help="Pandoc executable to query (path or command name).",
        rich_help_panel=ENGINE_PANEL,
    ),
]

TimeoutOption = Annotated[
    float | None,
    typer.Option(
        "--timeout",
        min=0.0,
        help="Seconds to wait for each Pandoc query.",
        rich_help_panel=ENGINE_PANEL,
    ),
]

JsonOption = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print a JSON document instead of tables.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]
