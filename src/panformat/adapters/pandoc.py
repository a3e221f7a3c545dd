"""Access to the Pandoc executable."""

from __future__ import annotations

import asyncio
from pathlib import Path
import shutil
from typing import Protocol, runtime_checkable

from panformat.core.exceptions import PandocExecutionError, PandocNotFoundError


__all__ = ["PandocCli", "PandocEngine", "locate_pandoc"]


@runtime_checkable
class PandocEngine(Protocol):
    """Capability used by the resolver to query a conversion engine."""

    async def list_extensions(self, format: str) -> str:
        """Return the extension tokens ``format`` supports with their default state."""
        ...


def locate_pandoc(executable: str | Path | None = None) -> Path:
    """Return the Pandoc executable to run.

    ``executable`` may be a path or a command name looked up on ``PATH``.
    """
    candidate = str(executable) if executable is not None else "pandoc"
    resolved = shutil.which(candidate)
    if resolved is None:
        raise PandocNotFoundError(
            f"Pandoc executable '{candidate}' could not be located. "
            "Install Pandoc or point to it with --pandoc."
        )
    return Path(resolved)


class PandocCli:
    """Engine backed by ``pandoc --list-extensions``."""

    def __init__(
        self,
        executable: str | Path | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        self.executable = executable
        self.timeout = timeout

    async def list_extensions(self, format: str) -> str:
        binary = locate_pandoc(self.executable)
        try:
            process = await asyncio.create_subprocess_exec(
                str(binary),
                f"--list-extensions={format}",
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise PandocExecutionError(f"Pandoc could not be started from '{binary}'.") from exc

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            raise PandocExecutionError(
                f"Pandoc did not list the extensions of '{format}' within {self.timeout}s."
            ) from exc
        finally:
            # timed out or cancelled while Pandoc is still running
            if process.returncode is None:
                process.kill()
                await process.wait()

        if process.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()
            raise PandocExecutionError(
                f"Pandoc failed to list the extensions of '{format}'"
                + (f": {detail}" if detail else "."),
                returncode=process.returncode,
                stderr=detail,
            )
        return stdout.decode("utf-8", errors="replace")
