from __future__ import annotations

from collections.abc import Callable, Mapping

import pytest


MARKDOWN_EXTENSION_NAMES = (
    "abbreviations",
    "all_symbols_escapable",
    "auto_identifiers",
    "autolink_bare_uris",
    "backtick_code_blocks",
    "citations",
    "definition_lists",
    "emoji",
    "fenced_code_attributes",
    "fenced_code_blocks",
    "footnotes",
    "gfm_auto_identifiers",
    "hard_line_breaks",
    "intraword_underscores",
    "lists_without_preceding_blankline",
    "pipe_tables",
    "raw_html",
    "raw_tex",
    "shortcut_reference_links",
    "smart",
    "space_in_atx_header",
    "strikeout",
    "task_lists",
    "tex_math_dollars",
    "yaml_metadata_block",
)

_MARKDOWN_DISABLED = {
    "abbreviations",
    "autolink_bare_uris",
    "emoji",
    "gfm_auto_identifiers",
    "hard_line_breaks",
    "lists_without_preceding_blankline",
    "shortcut_reference_links",
}
_STRICT_ENABLED = {"raw_html", "shortcut_reference_links"}

MARKDOWN_LISTING = "\n".join(
    f"{'-' if name in _MARKDOWN_DISABLED else '+'}{name}" for name in MARKDOWN_EXTENSION_NAMES
)
MARKDOWN_STRICT_LISTING = "\n".join(
    f"{'+' if name in _STRICT_ENABLED else '-'}{name}" for name in MARKDOWN_EXTENSION_NAMES
)
GFM_LISTING = "\n".join(
    [
        "+all_symbols_escapable",
        "+auto_identifiers",
        "+autolink_bare_uris",
        "+backtick_code_blocks",
        "+emoji",
        "+fenced_code_blocks",
        "+gfm_auto_identifiers",
        "-hard_line_breaks",
        "+intraword_underscores",
        "+lists_without_preceding_blankline",
        "+pipe_tables",
        "+raw_html",
        "+shortcut_reference_links",
        "-smart",
        "+space_in_atx_header",
        "+strikeout",
        "+task_lists",
    ]
)
COMMONMARK_LISTING = "\n".join(
    [
        "-autolink_bare_uris",
        "-emoji",
        "-footnotes",
        "-pipe_tables",
        "+raw_html",
        "-smart",
        "-strikeout",
        "-task_lists",
        "-yaml_metadata_block",
    ]
)

DEFAULT_LISTINGS = {
    "markdown": MARKDOWN_LISTING,
    "markdown_strict": MARKDOWN_STRICT_LISTING,
    "gfm": GFM_LISTING,
    "commonmark": COMMONMARK_LISTING,
}


class FakePandoc:
    """Engine answering ``list_extensions`` from canned listings."""

    def __init__(
        self,
        listings: Mapping[str, str] | None = None,
        *,
        error: BaseException | None = None,
    ) -> None:
        self.listings = dict(DEFAULT_LISTINGS if listings is None else listings)
        self.error = error
        self.calls: list[str] = []

    async def list_extensions(self, format: str) -> str:
        self.calls.append(format)
        if self.error is not None:
            raise self.error
        return self.listings.get(format, "")


@pytest.fixture
def fake_pandoc() -> FakePandoc:
    return FakePandoc()


@pytest.fixture
def make_pandoc() -> Callable[..., FakePandoc]:
    return FakePandoc
