"""Configuration models consumed by the format resolver.

FormatConfig

`mode` (`str | None`)
: Requested Pandoc base format, e.g. `markdown`, `gfm`, or one of the emulated
  variants such as `goldmark`.

`extensions` (`str | None`)
: Raw extension token string, e.g. `+pipe_tables-raw_html`. It is only
  validated once resolved against a base format.

`rmd_extensions` (`str | None`)
: R Markdown specific tokens, e.g. `+blogdown_math_in_code`. They are never
  forwarded to Pandoc.

`wrap_column` (`int | None`)
: Column used when re-wrapping the canonical Markdown output.

`doctypes` (`list[str] | None`)
: Output document types declared for the source.

`references` (`str | None`)
: Placement of reference links (`block`, `section`, `document`).

`canonical` (`bool | None`)
: Whether the document is written back in canonical Markdown.

FormatSpec

The immutable request handed to :func:`panformat.core.resolver.resolve_format`.
Only `requested_mode`, `requested_options` and `math_in_code_enabled` drive
resolution; the remaining fields travel alongside for the caller.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
import re
from typing import Any

from pydantic import BaseModel, ConfigDict

from .extensions import extensions_to_map, parse_extensions
from .formats import MARKDOWN_FORMAT


__all__ = [
    "BLOGDOWN_MATH_IN_CODE",
    "FormatConfig",
    "FormatSpec",
    "coerce_boolean",
    "coerce_string",
    "read_format_config",
]


BLOGDOWN_MATH_IN_CODE = "blogdown_math_in_code"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class FormatConfig(BaseModel):
    """Format options declared by a document."""

    model_config = ConfigDict(extra="forbid")

    mode: str | None = None
    extensions: str | None = None
    rmd_extensions: str | None = None
    wrap_column: int | None = None
    doctypes: list[str] | None = None
    references: str | None = None
    canonical: bool | None = None

    @property
    def math_in_code(self) -> bool:
        """Return whether ``rmd_extensions`` enables blogdown math in code."""
        if not self.rmd_extensions:
            return False
        tokens = extensions_to_map(parse_extensions(self.rmd_extensions))
        return tokens.get(BLOGDOWN_MATH_IN_CODE, False)


@dataclass(frozen=True, slots=True)
class FormatSpec:
    """Request describing the format a document should be read with."""

    requested_mode: str = MARKDOWN_FORMAT
    requested_options: str = ""
    math_in_code_enabled: bool = False
    wrap_column: int | None = None
    doctypes: tuple[str, ...] = ()
    references: str | None = None
    canonical: bool = False

    @classmethod
    def from_config(
        cls,
        config: FormatConfig,
        *,
        mode: str | None = None,
        extensions: str | None = None,
        math_in_code: bool | None = None,
        default_mode: str = MARKDOWN_FORMAT,
    ) -> FormatSpec:
        """Build a spec from document configuration and explicit overrides.

        An explicit ``mode`` replaces the configured one. Explicit
        ``extensions`` are appended after the configured tokens so they win
        when both toggle the same extension.
        """
        requested_options = (config.extensions or "") + (extensions or "")
        if math_in_code is None:
            math_in_code = config.math_in_code
        return cls(
            requested_mode=mode or config.mode or default_mode,
            requested_options=requested_options,
            math_in_code_enabled=math_in_code,
            wrap_column=config.wrap_column,
            doctypes=tuple(config.doctypes or ()),
            references=config.references,
            canonical=bool(config.canonical),
        )


def coerce_string(value: Any) -> str:
    """Render a loosely typed metadata value as text.

    Strings are returned unchanged and other falsy values become ``""``.
    Booleans use their YAML spelling and sequences are joined with commas.
    """
    if isinstance(value, str):
        return value
    if not value:
        return ""
    if isinstance(value, bool):
        return "true"
    if isinstance(value, Sequence):
        return ",".join(coerce_string(item) for item in value)
    return str(value)


def coerce_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return coerce_string(value).lower() in {"true", "1"}


def _coerce_wrap_column(value: Any) -> int | None:
    match = _LEADING_INT.match(coerce_string(value))
    if match is None:
        return None
    try:
        column = int(match.group(1))
    except ValueError:
        # integers past the interpreter digit limit
        return None
    return column or None


def read_format_config(source: Mapping[str, Any]) -> FormatConfig:
    """Read the recognised format keys from a metadata mapping.

    Keys holding falsy values are treated as absent.
    """
    fields: dict[str, Any] = {}
    if source.get("mode"):
        fields["mode"] = coerce_string(source["mode"])
    if source.get("extensions"):
        fields["extensions"] = coerce_string(source["extensions"])
    if source.get("rmd_extensions"):
        fields["rmd_extensions"] = coerce_string(source["rmd_extensions"])
    wrap_column = source.get("wrap_column") or source.get("fill-column")
    if wrap_column:
        fields["wrap_column"] = _coerce_wrap_column(wrap_column)
    if source.get("doctype"):
        fields["doctypes"] = [
            entry.strip() for entry in coerce_string(source["doctype"]).split(",")
        ]
    if source.get("references"):
        fields["references"] = coerce_string(source["references"])
    if source.get("canonical"):
        fields["canonical"] = coerce_boolean(source["canonical"])
    return FormatConfig(**fields)
