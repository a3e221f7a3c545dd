"""Extract format configuration declared inside a document.

Two declarations are recognised, in order of precedence:

* YAML front matter holding an ``editor_options.markdown`` mapping (plus, for R
  Markdown sources, ``md_extensions`` declared by an output format);
* a marker comment such as ``<!-- -*- mode: gfm; extensions: +smart -*- -->``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import logging
import re
from typing import Any, NamedTuple

from bs4 import BeautifulSoup, Comment
from bs4.element import PageElement, Tag
import yaml

from .config import FormatConfig, coerce_string, read_format_config


logger = logging.getLogger(__name__)

__all__ = [
    "Lookup",
    "find_value",
    "first_yaml_block",
    "format_config_from_code",
    "format_config_from_comment",
    "format_config_from_html",
    "format_config_from_markdown",
    "format_config_from_yaml",
    "lookup_path",
    "match_format_comment",
    "split_front_matter",
]


_FORMAT_COMMENT = re.compile(r"^<!--\s+-\*-(.*?)-\*-\s+-->\s*$", re.MULTILINE | re.DOTALL)
_YAML_DELIMITERS = {"---", "..."}


class Lookup(NamedTuple):
    """Outcome of an optional lookup in loosely typed metadata."""

    found: bool
    value: Any = None


_MISSING = Lookup(found=False)


def lookup_path(source: Any, *keys: str) -> Lookup:
    """Follow ``keys`` through nested mappings."""
    current = source
    for key in keys:
        if not isinstance(current, Mapping) or key not in current:
            return _MISSING
        current = current[key]
    return Lookup(found=True, value=current)


def find_value(key: str, source: Any) -> Lookup:
    """Return the first value stored under ``key`` anywhere inside ``source``."""
    if isinstance(source, Mapping):
        if key in source:
            return Lookup(found=True, value=source[key])
        candidates: Sequence[Any] = list(source.values())
    elif isinstance(source, Sequence) and not isinstance(source, (str, bytes)):
        candidates = source
    else:
        return _MISSING

    for candidate in candidates:
        result = find_value(key, candidate)
        if result.found:
            return result
    return _MISSING


def first_yaml_block(code: str) -> dict[str, Any] | None:
    """Parse the first ``---`` delimited YAML block found in ``code``."""
    lines = code.lstrip("\ufeff").splitlines()
    for start, line in enumerate(lines):
        if line.rstrip() != "---":
            continue
        # a rule followed by a blank line is a horizontal rule, not metadata
        if start + 1 >= len(lines) or not lines[start + 1].strip():
            continue
        for end in range(start + 1, len(lines)):
            if lines[end].rstrip() in _YAML_DELIMITERS:
                return _load_yaml_mapping("\n".join(lines[start + 1 : end]))
        return None
    return None


def _load_yaml_mapping(raw_block: str) -> dict[str, Any] | None:
    try:
        payload = yaml.safe_load(raw_block)
    except (yaml.YAMLError, ValueError) as exc:
        logger.debug("Ignoring unparsable YAML block: %s", exc)
        return None
    if not isinstance(payload, dict):
        return None
    return payload


def split_front_matter(source: str) -> tuple[dict[str, Any], str]:
    """Split YAML front matter from Markdown content, returning metadata and body."""
    candidate = source.lstrip("\ufeff")
    lines = candidate.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, source

    closing_index: int | None = None
    for idx, line in enumerate(lines[1:], start=1):
        if line.strip() in _YAML_DELIMITERS:
            closing_index = idx
            break

    if closing_index is None:
        return {}, source

    metadata = _load_yaml_mapping("\n".join(lines[1:closing_index]))
    if metadata is None:
        return {}, source

    body = "\n".join(lines[closing_index + 1 :])
    if source.endswith("\n"):
        body += "\n"
    return metadata, body


def format_config_from_yaml(code: str, *, is_rmd: bool = False) -> FormatConfig | None:
    """Read the format configuration declared in the first YAML block of ``code``."""
    metadata = first_yaml_block(code)
    if metadata is None:
        return None

    md_extensions = ""
    if is_rmd:
        lookup = find_value("md_extensions", metadata.get("output"))
        if lookup.found:
            md_extensions = coerce_string(lookup.value)

    config: FormatConfig | None = None
    markdown_options = lookup_path(metadata, "editor_options", "markdown")
    if markdown_options.found and isinstance(markdown_options.value, Mapping):
        config = read_format_config(markdown_options.value)

    if not md_extensions and config is None:
        return None

    config = config or FormatConfig()
    if md_extensions:
        config = config.model_copy(
            update={"extensions": md_extensions + (config.extensions or "")}
        )
    return config


def match_format_comment(code: str) -> re.Match[str] | None:
    return _FORMAT_COMMENT.search(code)


def format_config_from_comment(code: str) -> FormatConfig | None:
    """Read the format configuration from a ``-*-`` marker comment in ``code``."""
    match = match_format_comment(code)
    if match is None:
        return None

    variables: dict[str, str] = {}
    for field in match.group(1).split(";"):
        key, separator, value = field.strip().partition(":")
        if separator and key:
            variables[key.strip()] = value.strip()
    return read_format_config(variables)


def format_config_from_code(code: str, *, is_rmd: bool = False) -> FormatConfig:
    """Return the configuration declared in raw document text.

    The YAML declaration takes precedence; the marker comment is only consulted
    when the YAML block yields nothing.
    """
    return (
        format_config_from_yaml(code, is_rmd=is_rmd)
        or format_config_from_comment(code)
        or FormatConfig()
    )


def _first_descendant(
    node: Tag, predicate: Callable[[PageElement], bool]
) -> PageElement | None:
    for child in node.children:
        if predicate(child):
            return child
        if isinstance(child, Tag):
            found = _first_descendant(child, predicate)
            if found is not None:
                return found
    return None


def format_config_from_html(document: str | Tag) -> FormatConfig | None:
    """Read the marker comment of an HTML document tree.

    Only the first HTML comment of the document is considered; when it is not
    a marker comment the document declares no configuration.
    """
    root = BeautifulSoup(document, "html.parser") if isinstance(document, str) else document
    comment = _first_descendant(root, lambda node: isinstance(node, Comment))
    if comment is None:
        return None
    return format_config_from_comment(f"<!--{comment}-->")


def format_config_from_markdown(source: str, *, is_rmd: bool = False) -> FormatConfig:
    """Return the configuration declared in a Markdown document.

    Marker comments are looked up in the rendered document, so a comment that
    only appears inside a code block is not picked up.
    """
    config = format_config_from_yaml(source, is_rmd=is_rmd)
    if config is not None:
        return config

    import markdown

    _, body = split_front_matter(source)
    html = markdown.Markdown(extensions=["fenced_code", "tables"]).convert(body)
    return format_config_from_html(html) or FormatConfig()
