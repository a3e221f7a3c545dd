from __future__ import annotations

from pydantic import ValidationError
import pytest

from panformat.core.config import (
    FormatConfig,
    FormatSpec,
    coerce_boolean,
    coerce_string,
    read_format_config,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("gfm", "gfm"),
        ("", ""),
        (None, ""),
        (0, ""),
        (72, "72"),
        (True, "true"),
        (["html", "pdf"], "html,pdf"),
    ],
)
def test_coerce_string(value: object, expected: str) -> None:
    assert coerce_string(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, True),
        (False, False),
        ("true", True),
        ("TRUE", True),
        ("1", True),
        (1, True),
        ("yes", False),
        ("0", False),
        (None, False),
    ],
)
def test_coerce_boolean(value: object, expected: bool) -> None:
    assert coerce_boolean(value) is expected


def test_read_format_config_reads_recognised_keys() -> None:
    config = read_format_config(
        {
            "mode": "gfm",
            "extensions": "+smart",
            "rmd_extensions": "+blogdown_math_in_code",
            "wrap_column": 72,
            "doctype": "html, pdf ,docx",
            "references": "block",
            "canonical": "True",
            "unrelated": "ignored",
        }
    )

    assert config == FormatConfig(
        mode="gfm",
        extensions="+smart",
        rmd_extensions="+blogdown_math_in_code",
        wrap_column=72,
        doctypes=["html", "pdf", "docx"],
        references="block",
        canonical=True,
    )


def test_read_format_config_accepts_fill_column_alias() -> None:
    assert read_format_config({"fill-column": "80"}).wrap_column == 80
    assert read_format_config({"wrap_column": 60, "fill-column": 80}).wrap_column == 60


@pytest.mark.parametrize(
    ("value", "expected"),
    [("72", 72), (" 100 chars", 100), ("sentence", None), ("0", None), (65.9, 65)],
)
def test_read_format_config_parses_leading_wrap_column(
    value: object, expected: int | None
) -> None:
    assert read_format_config({"wrap_column": value}).wrap_column == expected


def test_read_format_config_ignores_oversized_wrap_column() -> None:
    config = read_format_config({"mode": "gfm", "wrap_column": "9" * 5000})

    assert config == FormatConfig(mode="gfm")


def test_read_format_config_skips_falsy_values() -> None:
    config = read_format_config({"mode": "", "extensions": None, "canonical": False})

    assert config == FormatConfig()
    assert config.canonical is None


def test_read_format_config_canonical_string_false() -> None:
    assert read_format_config({"canonical": "false"}).canonical is False


def test_format_config_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        FormatConfig(wrap="72")  # type: ignore[call-arg]


def test_format_config_math_in_code_from_rmd_extensions() -> None:
    assert FormatConfig(rmd_extensions="+bookdown_cross_ref+blogdown_math_in_code").math_in_code
    toggled = FormatConfig(rmd_extensions="+blogdown_math_in_code-blogdown_math_in_code")
    assert not toggled.math_in_code
    assert not FormatConfig().math_in_code


def test_format_spec_from_config_uses_document_values() -> None:
    config = FormatConfig(
        mode="goldmark",
        extensions="+emoji",
        rmd_extensions="+blogdown_math_in_code",
        wrap_column=72,
        doctypes=["html"],
        references="section",
        canonical=True,
    )

    spec = FormatSpec.from_config(config)

    assert spec == FormatSpec(
        requested_mode="goldmark",
        requested_options="+emoji",
        math_in_code_enabled=True,
        wrap_column=72,
        doctypes=("html",),
        references="section",
        canonical=True,
    )


def test_format_spec_from_config_explicit_values_win() -> None:
    config = FormatConfig(mode="gfm", extensions="+emoji", rmd_extensions="+blogdown_math_in_code")

    spec = FormatSpec.from_config(config, mode="commonmark", extensions="-emoji", math_in_code=False)

    assert spec.requested_mode == "commonmark"
    assert spec.requested_options == "+emoji-emoji"
    assert spec.math_in_code_enabled is False


def test_format_spec_from_empty_config_defaults_to_markdown() -> None:
    spec = FormatSpec.from_config(FormatConfig())

    assert spec.requested_mode == "markdown"
    assert spec.requested_options == ""
    assert spec.canonical is False
