"""Pandoc extension token grammar.

Pandoc describes the optional capabilities of a format with a sequence of
``+name`` / ``-name`` tokens, e.g. ``+pipe_tables-raw_html``. The output of
``pandoc --list-extensions`` uses the same tokens, one per line.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
import re


__all__ = [
    "ExtensionMap",
    "ExtensionToken",
    "extensions_to_map",
    "parse_extensions",
    "serialize_extension",
    "serialize_extensions",
]


ExtensionMap = Mapping[str, bool]

_TOKEN_PATTERN = re.compile(r"([+-])([a-z_]+)")


@dataclass(frozen=True, slots=True)
class ExtensionToken:
    """Single extension toggle parsed from a token string."""

    name: str
    enabled: bool

    def serialize(self) -> str:
        """Return the ``+name`` / ``-name`` form of the token."""
        return serialize_extension(self.name, self.enabled)


def parse_extensions(options: str) -> list[ExtensionToken]:
    """Parse a token string into ordered extension tokens.

    Line breaks are removed by joining the lines without a separator, so a
    token split across two lines is read back as a single name. Characters that
    do not form a token are ignored.
    """
    joined = "".join(options.split("\n"))
    return [
        ExtensionToken(name=match.group(2), enabled=match.group(1) == "+")
        for match in _TOKEN_PATTERN.finditer(joined)
    ]


def extensions_to_map(tokens: Iterable[ExtensionToken]) -> dict[str, bool]:
    """Fold tokens into a name to state mapping, later tokens winning."""
    extensions: dict[str, bool] = {}
    for token in tokens:
        extensions[token.name] = token.enabled
    return extensions


def serialize_extension(name: str, enabled: bool) -> str:
    return f"{'+' if enabled else '-'}{name}"


def serialize_extensions(extensions: ExtensionMap) -> str:
    """Concatenate the serialized entries of ``extensions`` in iteration order."""
    return "".join(serialize_extension(name, enabled) for name, enabled in extensions.items())
