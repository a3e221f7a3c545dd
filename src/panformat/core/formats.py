"""Pandoc format names and helpers to split and rebuild format strings."""

from __future__ import annotations

from typing import NamedTuple

from .variants import MARKDOWN_VARIANTS


__all__ = [
    "COMMONMARK_FORMAT",
    "GFM_FORMAT",
    "KNOWN_BASE_FORMATS",
    "MARKDOWN_FORMAT",
    "MARKDOWN_GITHUB_FORMAT",
    "MARKDOWN_MMD_FORMAT",
    "MARKDOWN_PHPEXTRA_FORMAT",
    "MARKDOWN_STRICT_FORMAT",
    "NATIVE_EXTENDED_FORMATS",
    "FormatParts",
    "compose_format_string",
    "format_with",
    "split_format_string",
]


MARKDOWN_FORMAT = "markdown"
MARKDOWN_PHPEXTRA_FORMAT = "markdown_phpextra"
MARKDOWN_GITHUB_FORMAT = "markdown_github"
MARKDOWN_MMD_FORMAT = "markdown_mmd"
MARKDOWN_STRICT_FORMAT = "markdown_strict"
GFM_FORMAT = "gfm"
COMMONMARK_FORMAT = "commonmark"

# Readers that only accept a subset of the Markdown extensions.
NATIVE_EXTENDED_FORMATS: frozenset[str] = frozenset({GFM_FORMAT, COMMONMARK_FORMAT})

KNOWN_BASE_FORMATS: frozenset[str] = frozenset(
    {
        MARKDOWN_FORMAT,
        MARKDOWN_PHPEXTRA_FORMAT,
        MARKDOWN_GITHUB_FORMAT,
        MARKDOWN_MMD_FORMAT,
        MARKDOWN_STRICT_FORMAT,
        GFM_FORMAT,
        COMMONMARK_FORMAT,
        *MARKDOWN_VARIANTS,
    }
)


class FormatParts(NamedTuple):
    """Base format name and the extension tokens that follow it."""

    base: str
    options: str


def split_format_string(format: str) -> FormatParts:
    """Split ``format`` into its base name and extension options.

    The options start at the first ``-``, or at the first ``+`` when the string
    holds no ``-`` at all. Base names are therefore expected to contain
    neither character.
    """
    position = format.find("-")
    if position == -1:
        position = format.find("+")
    if position == -1:
        return FormatParts(base=format, options="")
    return FormatParts(base=format[:position], options=format[position:])


def compose_format_string(base: str, prepend: str, options: str, append: str) -> str:
    return f"{base}{prepend}{options}{append}"


def format_with(format: str, prepend: str, append: str) -> str:
    """Insert ``prepend`` after the base name of ``format`` and ``append`` at the end."""
    parts = split_format_string(format)
    return compose_format_string(parts.base, prepend, parts.options, append)
