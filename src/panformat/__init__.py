"""Primary public API for panformat."""

from __future__ import annotations

from panformat.adapters.pandoc import PandocCli, PandocEngine
from panformat.core.config import (
    FormatConfig,
    FormatSpec,
    coerce_boolean,
    coerce_string,
    read_format_config,
)
from panformat.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from panformat.core.exceptions import (
    PandocEngineError,
    PandocExecutionError,
    PandocFormatError,
    PandocNotFoundError,
)
from panformat.core.extensions import (
    ExtensionMap,
    ExtensionToken,
    extensions_to_map,
    parse_extensions,
    serialize_extension,
    serialize_extensions,
)
from panformat.core.formats import (
    KNOWN_BASE_FORMATS,
    FormatParts,
    compose_format_string,
    format_with,
    split_format_string,
)
from panformat.core.metadata import (
    format_config_from_code,
    format_config_from_html,
    format_config_from_markdown,
)
from panformat.core.resolver import (
    FormatWarnings,
    ResolvedFormat,
    has_fenced_code_blocks,
    report_format_warnings,
    resolve_format,
)
from panformat.core.variants import MARKDOWN_VARIANTS, VariantBundle, variant_extensions
from panformat.version import get_version


__version__ = get_version()

__all__ = [
    "KNOWN_BASE_FORMATS",
    "MARKDOWN_VARIANTS",
    "DiagnosticEmitter",
    "ExtensionMap",
    "ExtensionToken",
    "FormatConfig",
    "FormatParts",
    "FormatSpec",
    "FormatWarnings",
    "LoggingEmitter",
    "NullEmitter",
    "PandocCli",
    "PandocEngine",
    "PandocEngineError",
    "PandocExecutionError",
    "PandocFormatError",
    "PandocNotFoundError",
    "ResolvedFormat",
    "VariantBundle",
    "__version__",
    "coerce_boolean",
    "coerce_string",
    "compose_format_string",
    "extensions_to_map",
    "format_config_from_code",
    "format_config_from_html",
    "format_config_from_markdown",
    "format_with",
    "get_version",
    "has_fenced_code_blocks",
    "parse_extensions",
    "read_format_config",
    "report_format_warnings",
    "resolve_format",
    "serialize_extension",
    "serialize_extensions",
    "split_format_string",
    "variant_extensions",
]
