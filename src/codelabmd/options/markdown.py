#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for tutorial markdown rendering."""
# src/codelabmd/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field

from codelabmd.constants import DEFAULT_DIALECT, DEFAULT_LINE_PREFIX, DialectType
from codelabmd.options.base import BaseRendererOptions
from codelabmd.utils.dialects import DIALECTS


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Options for rendering node trees to a markdown dialect.

    Parameters
    ----------
    dialect : {"markdown", "qwiklabs"}, default "markdown"
        Output dialect. See :mod:`codelabmd.utils.dialects`.
    line_prefix : str, default ""
        Written at the start of every output line, e.g. ``"> "`` to embed
        the rendered document in a quote.

    """

    dialect: DialectType = field(
        default=DEFAULT_DIALECT,
        metadata={"help": "Output dialect", "choices": sorted(DIALECTS)},
    )
    line_prefix: str = field(
        default=DEFAULT_LINE_PREFIX,
        metadata={"help": "Prefix written at the start of every output line"},
    )

    def __post_init__(self) -> None:
        """Validate the dialect identifier.

        Raises
        ------
        ValueError
            If the dialect is not registered.

        """
        super().__post_init__()
        if self.dialect not in DIALECTS:
            raise ValueError(f"dialect must be one of {sorted(DIALECTS)}, got {self.dialect!r}")
