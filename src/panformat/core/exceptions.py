"""Exception hierarchy for format resolution and engine access."""

from __future__ import annotations


class PandocFormatError(RuntimeError):
    """Base exception for panformat failures."""


class PandocEngineError(PandocFormatError):
    """Raised when the conversion engine cannot answer a query."""


class PandocNotFoundError(PandocEngineError):
    """Raised when the Pandoc executable cannot be located."""


class PandocExecutionError(PandocEngineError):
    """Raised when Pandoc exits unsuccessfully or does not answer in time."""

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "PandocEngineError",
    "PandocExecutionError",
    "PandocFormatError",
    "PandocNotFoundError",
    "exception_hint",
    "exception_messages",
]
