"""CLI command implementations exposed via `panformat.ui.cli`."""

from __future__ import annotations

from .inspect import config, split
from .resolve import resolve


__all__ = ["config", "resolve", "split"]
