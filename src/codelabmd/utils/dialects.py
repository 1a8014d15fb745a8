#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/utils/dialects.py
"""Output dialect definitions.

A dialect is the complete, enumerable description of how one markdown variant
differs from another: marker strings, escaping policy, the substrings in text
that force paragraph breaks, and the custom tag vocabulary. The rendering
engine has no dialect-specific branches; it only reads these values.

Supported Dialects
------------------
- markdown: Markdown with embedded ``ql-*`` tags. Text passes through
  unescaped so that authors can embed custom tags, paragraph boundaries are
  inferred from marker substrings, and imports are flattened in place.
- qwiklabs: Stricter variant for the lab publishing pipeline. Angle brackets
  in text are escaped, bold uses ``**`` and imports render as
  ``[[import ...]]`` references.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from codelabmd.constants import (
    BULLET_MARKER,
    BUTTON_TAGS,
    CONSOLE_BLOCK_CLOSE,
    CONSOLE_BLOCK_OPEN,
    CONSOLE_BLOCK_TAG_NAME,
    HINT_CLOSE_TAG,
    INFOBOX_NEGATIVE_TAGS,
    INFOBOX_POSITIVE_TAGS,
    PROBE_CLOSE_TAG,
    SOURCE_CODE_FENCE,
    YOUTUBE_TAG_TEMPLATE,
    ImportStyle,
    InfoboxKind,
)
from codelabmd.exceptions import DialectError

# Whitespace trimmed from text values; the markdown dialect keeps newlines
# in the core so they can trigger paragraph breaks.
_INLINE_WHITESPACE = " \t\r\f\v"
_ALL_WHITESPACE = " \t\n\r\f\v"


@dataclass(frozen=True)
class TextBreak:
    """Extra newlines emitted when a text core contains ``marker``.

    Parameters
    ----------
    marker : str
        Substring searched for in the trimmed, unescaped text
    newlines : str
        Newlines written when the marker is present

    """

    marker: str
    newlines: str = "\n\n"


@dataclass(frozen=True)
class Dialect:
    """Configuration of one output dialect.

    Parameters
    ----------
    name : str
        Dialect identifier used on the command line and in options
    bold : tuple of (str, str)
        Opening and closing bold markers
    italic : tuple of (str, str)
        Opening and closing italic markers
    inline_code : tuple of (str, str)
        Opening and closing inline-code markers
    text_whitespace : str
        Characters trimmed from both ends of a text value before styling
    escape_text_angle_brackets : bool
        Escape ``<`` and ``>`` in text content
    breaks_before : tuple of TextBreak
        Paragraph breaks written before a text node, in order
    breaks_after : tuple of TextBreak
        Paragraph breaks written after a text node, in order
    bullet : str
        Prefix of unordered list items
    console_block : tuple of (str, str)
        Wrapper tags for terminal code
    console_guards : tuple of str
        Substrings showing that terminal code is already wrapped
    source_fence : str
        Fence around labelled source code
    infobox_tags : mapping
        Opening and closing tags per infobox polarity
    button_tags : tuple of (str, str)
        Wrapper tags for links whose first child is a Button
    video_template : str
        Embed tag for YouTube nodes, formatted with ``video_id``
    youtube_extra_gap : bool
        Write one more newline before a video embed
    import_style : {"inline", "reference"}
        Flatten imported content, or emit a ``[[import title]]`` reference

    """

    name: str
    bold: tuple[str, str] = ("**", "**")
    italic: tuple[str, str] = ("*", "*")
    inline_code: tuple[str, str] = ("`", "`")
    text_whitespace: str = _ALL_WHITESPACE
    escape_text_angle_brackets: bool = True
    breaks_before: tuple[TextBreak, ...] = ()
    breaks_after: tuple[TextBreak, ...] = ()
    bullet: str = BULLET_MARKER
    console_block: tuple[str, str] = (CONSOLE_BLOCK_OPEN, CONSOLE_BLOCK_CLOSE)
    console_guards: tuple[str, ...] = (SOURCE_CODE_FENCE, CONSOLE_BLOCK_TAG_NAME)
    source_fence: str = SOURCE_CODE_FENCE
    infobox_tags: Mapping[InfoboxKind, tuple[str, str]] = field(
        default_factory=lambda: {"positive": INFOBOX_POSITIVE_TAGS, "negative": INFOBOX_NEGATIVE_TAGS}
    )
    button_tags: tuple[str, str] = BUTTON_TAGS
    video_template: str = YOUTUBE_TAG_TEMPLATE
    youtube_extra_gap: bool = False
    import_style: ImportStyle = "reference"

    def split_text(self, value: str) -> tuple[str, str, str]:
        """Split a text value into leading whitespace, core and trailing whitespace.

        Parameters
        ----------
        value : str

        Returns
        -------
        tuple of (str, str, str)

        Examples
        --------
        >>> QWIKLABS.split_text("  hi \\n")
        ('  ', 'hi', ' \\n')

        """
        stripped_left = value.lstrip(self.text_whitespace)
        left = value[: len(value) - len(stripped_left)]
        core = stripped_left.rstrip(self.text_whitespace)
        right = stripped_left[len(core) :]
        return left, core, right

    def breaks_for(self, core: str, rules: tuple[TextBreak, ...]) -> str:
        """Concatenate the newlines of every rule whose marker occurs in ``core``."""
        return "".join(rule.newlines for rule in rules if rule.marker in core)

    def infobox_tag_pair(self, kind: InfoboxKind) -> tuple[str, str]:
        """Opening and closing tags for an infobox polarity, always from the same entry."""
        return self.infobox_tags[kind]

    def console_block_present(self, source: str) -> bool:
        """Whether terminal code already carries its own wrapping markup."""
        return any(guard in source for guard in self.console_guards)


MARKDOWN = Dialect(
    name="markdown",
    bold=("<strong>", "</strong>"),
    text_whitespace=_INLINE_WHITESPACE,
    escape_text_angle_brackets=False,
    breaks_before=(
        TextBreak("\n\n"),
        TextBreak("[["),
        TextBreak("Last Updated"),
        TextBreak("Last Tested"),
        TextBreak("\n"),
    ),
    breaks_after=(
        TextBreak(HINT_CLOSE_TAG),
        TextBreak(PROBE_CLOSE_TAG, "\n"),
        TextBreak("]]"),
        TextBreak("Last Updated"),
        TextBreak("Last Tested"),
    ),
    youtube_extra_gap=True,
    import_style="inline",
)

QWIKLABS = Dialect(
    name="qwiklabs",
    breaks_after=(
        TextBreak(HINT_CLOSE_TAG),
        TextBreak(PROBE_CLOSE_TAG),
    ),
)

DIALECTS: dict[str, Dialect] = {dialect.name: dialect for dialect in (MARKDOWN, QWIKLABS)}


def get_dialect(name: str | Dialect) -> Dialect:
    """Look up a registered dialect by identifier.

    Parameters
    ----------
    name : str or Dialect
        Dialect identifier; a Dialect instance is returned unchanged

    Returns
    -------
    Dialect

    Raises
    ------
    DialectError
        If no dialect is registered under ``name``

    """
    if isinstance(name, Dialect):
        return name
    try:
        return DIALECTS[name]
    except KeyError:
        raise DialectError(name, list(DIALECTS)) from None


__all__ = ["DIALECTS", "Dialect", "MARKDOWN", "QWIKLABS", "TextBreak", "get_dialect"]
