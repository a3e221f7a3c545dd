"""Resolve a requested Markdown mode and extension toggles into a Pandoc format."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from .diagnostics import DiagnosticEmitter
from .extensions import ExtensionMap, extensions_to_map, parse_extensions
from .formats import (
    KNOWN_BASE_FORMATS,
    MARKDOWN_FORMAT,
    MARKDOWN_STRICT_FORMAT,
    NATIVE_EXTENDED_FORMATS,
)
from .variants import markdown_variants


if TYPE_CHECKING:
    from ..adapters.pandoc import PandocEngine
    from .config import FormatSpec


logger = logging.getLogger(__name__)

__all__ = [
    "FormatWarnings",
    "ResolvedFormat",
    "has_fenced_code_blocks",
    "report_format_warnings",
    "resolve_format",
]


@dataclass(frozen=True, slots=True)
class FormatWarnings:
    """Non-fatal problems found while resolving a format."""

    invalid_format: str = ""
    invalid_options: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.invalid_format or self.invalid_options)


@dataclass(frozen=True, slots=True)
class ResolvedFormat:
    """Pandoc format resolved from a :class:`FormatSpec`.

    ``mode`` keeps the requested format even when ``base_name`` fell back to
    another one, and ``full_name`` is ``base_name`` followed by every applied
    extension token.
    """

    mode: str
    base_name: str
    full_name: str
    extensions: ExtensionMap = field(default_factory=lambda: MappingProxyType({}))
    warnings: FormatWarnings = field(default_factory=FormatWarnings)


async def resolve_format(engine: PandocEngine, spec: FormatSpec) -> ResolvedFormat:
    """Resolve ``spec`` against the extensions ``engine`` reports.

    Unknown base formats fall back to ``markdown`` and unknown extensions are
    dropped; both are reported through :class:`FormatWarnings`. Errors raised
    by ``engine`` propagate unchanged.
    """
    variants = markdown_variants(math_in_code=spec.math_in_code_enabled)

    invalid_format = ""
    base_name = spec.requested_mode
    if base_name not in KNOWN_BASE_FORMATS:
        logger.debug("Unknown base format '%s', using '%s'.", base_name, MARKDOWN_FORMAT)
        invalid_format = base_name
        base_name = MARKDOWN_FORMAT

    # gfm and commonmark only accept their own extension subset
    valid_options = ""
    if base_name in NATIVE_EXTENDED_FORMATS:
        valid_options = await _list_extensions(engine, base_name)

    options = spec.requested_options
    variant = variants.get(base_name)
    if variant is not None:
        options = "".join(variant) + options
        base_name = MARKDOWN_STRICT_FORMAT

    format_options = await _list_extensions(engine, base_name)
    if not valid_options:
        valid_options = format_options

    extensions = extensions_to_map(parse_extensions(format_options))
    valid_names = {option.name for option in parse_extensions(valid_options)}

    full_name = base_name
    invalid_options: list[str] = []
    for option in parse_extensions(options):
        if option.name in valid_names:
            full_name += option.serialize()
            extensions[option.name] = option.enabled
        else:
            invalid_options.append(option.name)

    return ResolvedFormat(
        mode=spec.requested_mode,
        base_name=base_name,
        full_name=full_name,
        extensions=MappingProxyType(extensions),
        warnings=FormatWarnings(
            invalid_format=invalid_format,
            invalid_options=tuple(invalid_options),
        ),
    )


async def _list_extensions(engine: PandocEngine, format_name: str) -> str:
    logger.debug("Listing Pandoc extensions for '%s'.", format_name)
    return await engine.list_extensions(format_name)


def has_fenced_code_blocks(extensions: Mapping[str, bool]) -> bool:
    return bool(
        extensions.get("backtick_code_blocks", False) or extensions.get("fenced_code_blocks", False)
    )


def report_format_warnings(resolved: ResolvedFormat, emitter: DiagnosticEmitter) -> list[str]:
    """Send the warnings of ``resolved`` to ``emitter`` and return the messages."""
    messages: list[str] = []
    warnings = resolved.warnings
    if warnings.invalid_format:
        messages.append(
            f"Unrecognized Pandoc format '{warnings.invalid_format}', "
            f"using '{MARKDOWN_FORMAT}' instead."
        )
    if warnings.invalid_options:
        names = ", ".join(warnings.invalid_options)
        messages.append(
            f"Unrecognized extensions for '{resolved.base_name}' were ignored: {names}."
        )
    for message in messages:
        emitter.warning(message)
    return messages
