from __future__ import annotations

import asyncio
import os
from pathlib import Path
import sys

import pytest

from panformat.adapters import pandoc as pandoc_module
from panformat.adapters.pandoc import PandocCli, PandocEngine, locate_pandoc
from panformat.core.config import FormatSpec
from panformat.core.exceptions import (
    PandocEngineError,
    PandocExecutionError,
    PandocNotFoundError,
)
from panformat.core.resolver import resolve_format


posix_only = pytest.mark.skipif(sys.platform == "win32", reason="requires a POSIX shell")


def _stub_pandoc(tmp_path: Path, body: str) -> Path:
    binary = tmp_path / "pandoc"
    binary.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    binary.chmod(0o755)
    return binary


_LISTING_SCRIPT = """\
case "$1" in
  --list-extensions=markdown) printf '%s\\n' +smart -emoji +pipe_tables ;;
  --list-extensions=markdown_strict) printf '%s\\n' -smart -emoji +raw_html ;;
  --list-extensions=gfm) printf '%s\\n' +emoji +raw_html ;;
  *) echo "Unknown input format ${1#--list-extensions=}" >&2; exit 21 ;;
esac
"""


def test_pandoc_cli_satisfies_engine_protocol() -> None:
    assert isinstance(PandocCli(), PandocEngine)


def test_locate_pandoc_reports_missing_binary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(pandoc_module.shutil, "which", lambda _name: None)

    with pytest.raises(PandocNotFoundError, match="could not be located"):
        locate_pandoc()


@posix_only
def test_locate_pandoc_accepts_explicit_path(tmp_path: Path) -> None:
    binary = _stub_pandoc(tmp_path, "exit 0\n")

    assert locate_pandoc(binary) == binary


@posix_only
@pytest.mark.asyncio
async def test_list_extensions_returns_stdout(tmp_path: Path) -> None:
    engine = PandocCli(_stub_pandoc(tmp_path, _LISTING_SCRIPT))

    listing = await engine.list_extensions("markdown")

    assert listing.splitlines() == ["+smart", "-emoji", "+pipe_tables"]


@posix_only
@pytest.mark.asyncio
async def test_list_extensions_raises_on_failure(tmp_path: Path) -> None:
    engine = PandocCli(_stub_pandoc(tmp_path, _LISTING_SCRIPT))

    with pytest.raises(PandocExecutionError) as excinfo:
        await engine.list_extensions("asciidoc")

    assert excinfo.value.returncode == 21
    assert "Unknown input format asciidoc" in excinfo.value.stderr
    assert "asciidoc" in str(excinfo.value)


@posix_only
@pytest.mark.asyncio
async def test_list_extensions_honours_timeout(tmp_path: Path) -> None:
    engine = PandocCli(_stub_pandoc(tmp_path, "sleep 5\n"), timeout=0.2)

    with pytest.raises(PandocExecutionError, match="within"):
        await engine.list_extensions("markdown")


@posix_only
@pytest.mark.asyncio
async def test_list_extensions_wraps_launch_failures(tmp_path: Path) -> None:
    binary = _stub_pandoc(tmp_path, "")
    binary.write_text("#!/nonexistent/interpreter\n", encoding="utf-8")
    engine = PandocCli(binary)

    with pytest.raises(PandocExecutionError, match="could not be started") as excinfo:
        await engine.list_extensions("markdown")

    assert isinstance(excinfo.value.__cause__, OSError)


@posix_only
@pytest.mark.asyncio
async def test_cancelled_listing_kills_pandoc(tmp_path: Path) -> None:
    pid_file = tmp_path / "pandoc.pid"
    engine = PandocCli(_stub_pandoc(tmp_path, f"echo $$ > '{pid_file}'\nexec sleep 30\n"))

    task = asyncio.create_task(engine.list_extensions("markdown"))
    for _ in range(200):
        if pid_file.exists() and pid_file.read_text(encoding="utf-8").strip():
            break
        await asyncio.sleep(0.025)
    pid = int(pid_file.read_text(encoding="utf-8"))

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    with pytest.raises(ProcessLookupError):
        os.kill(pid, 0)


@pytest.mark.asyncio
async def test_missing_executable_fails_resolution(tmp_path: Path) -> None:
    engine = PandocCli(tmp_path / "missing-pandoc")

    with pytest.raises(PandocEngineError):
        await resolve_format(engine, FormatSpec())


@posix_only
@pytest.mark.asyncio
async def test_resolve_format_with_pandoc_cli(tmp_path: Path) -> None:
    engine = PandocCli(_stub_pandoc(tmp_path, _LISTING_SCRIPT))
    spec = FormatSpec(requested_mode="gfm", requested_options="-emoji+smart")

    resolved = await resolve_format(engine, spec)

    assert resolved.full_name == "markdown_strict+emoji+raw_html-emoji"
    assert resolved.warnings.invalid_options == (
        "all_symbols_escapable",
        "auto_identifiers",
        "autolink_bare_uris",
        "backtick_code_blocks",
        "fenced_code_blocks",
        "gfm_auto_identifiers",
        "intraword_underscores",
        "lists_without_preceding_blankline",
        "pipe_tables",
        "shortcut_reference_links",
        "space_in_atx_header",
        "strikeout",
        "task_lists",
        "smart",
    )
    assert resolved.extensions == {"smart": False, "emoji": False, "raw_html": True}
