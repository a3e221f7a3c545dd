"""Markdown variants emulated on top of ``markdown_strict``.

Pandoc has no native reader for the Hugo Markdown engines, and its ``gfm`` and
``commonmark`` readers only accept a narrow set of extensions. The variants
below describe the default extension state of each flavour so it can be
layered onto ``markdown_strict`` instead.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


__all__ = [
    "MARKDOWN_VARIANTS",
    "VariantBundle",
    "markdown_variants",
    "variant_extensions",
]


@dataclass(frozen=True, slots=True)
class VariantBundle:
    """Default extension tokens of an emulated Markdown flavour."""

    name: str
    tokens: tuple[str, ...]
    math_in_code_tokens: tuple[str, ...] = ()

    def resolve(self, *, math_in_code: bool = False) -> tuple[str, ...]:
        """Return the bundle tokens, with the math tokens when requested."""
        if math_in_code:
            return self.tokens + self.math_in_code_tokens
        return self.tokens


_COMMONMARK = VariantBundle(name="commonmark", tokens=("+raw_html",))

_GFM = VariantBundle(
    name="gfm",
    tokens=(
        "+all_symbols_escapable",
        "+auto_identifiers",
        "+autolink_bare_uris",
        "+backtick_code_blocks",
        "+emoji",
        "+fenced_code_blocks",
        "+gfm_auto_identifiers",
        "+intraword_underscores",
        "+lists_without_preceding_blankline",
        "+pipe_tables",
        "+raw_html",
        "+shortcut_reference_links",
        "+space_in_atx_header",
        "+strikeout",
        "+task_lists",
    ),
)

# https://gohugo.io/getting-started/configuration-markup/#goldmark
_GOLDMARK = VariantBundle(
    name="goldmark",
    tokens=(
        # raw HTML is off unless the site enables the unsafe renderer
        "-raw_html",
        "+pipe_tables",
        "+strikeout",
        "+autolink_bare_uris",
        "+task_lists",
        "+backtick_code_blocks",
        "+definition_lists",
        "+footnotes",
        "+smart",
        "+yaml_metadata_block",
    ),
    math_in_code_tokens=("+tex_math_dollars",),
)

# https://github.com/russross/blackfriday/tree/v2#extensions
_BLACKFRIDAY = VariantBundle(
    name="blackfriday",
    tokens=(
        "+intraword_underscores",
        "+pipe_tables",
        "+backtick_code_blocks",
        "+definition_lists",
        "+footnotes",
        "+autolink_bare_uris",
        "+strikeout",
        "+smart",
        "+yaml_metadata_block",
    ),
    math_in_code_tokens=("+tex_math_dollars",),
)


MARKDOWN_VARIANTS: Mapping[str, VariantBundle] = MappingProxyType(
    {bundle.name: bundle for bundle in (_COMMONMARK, _GFM, _GOLDMARK, _BLACKFRIDAY)}
)


def variant_extensions(name: str, *, math_in_code: bool = False) -> tuple[str, ...] | None:
    """Return the ordered default tokens of variant ``name`` or ``None``."""
    bundle = MARKDOWN_VARIANTS.get(name)
    if bundle is None:
        return None
    return bundle.resolve(math_in_code=math_in_code)


def markdown_variants(*, math_in_code: bool = False) -> dict[str, tuple[str, ...]]:
    """Return every variant resolved for the given ``math_in_code`` flag."""
    return {
        name: bundle.resolve(math_in_code=math_in_code)
        for name, bundle in MARKDOWN_VARIANTS.items()
    }
