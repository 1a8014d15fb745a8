#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/renderers/sink.py
"""Line-aware output sink used by the text renderers.

The sink wraps a binary stream and remembers how many newlines the output
written so far ends with. Renderers rely on that count to decide how many
newlines a block element needs in front of it, whether a space is needed
before inline content, and whether a line prefix has to be written.

"""

from __future__ import annotations

import logging
from typing import IO, Optional

from codelabmd.exceptions import OutputWriteError
from codelabmd.utils.escape import escape_html

logger = logging.getLogger(__name__)


class OutputSink:
    """Stateful writer tracking line starts over a binary stream.

    Parameters
    ----------
    stream : IO[bytes]
        Destination of the UTF-8 encoded output
    prefix : bytes, default = b""
        Written before any content that starts a new line
    at_line_start : bool, default = True
        Initial cursor state. Sinks used for content that continues an
        existing line (table cells) start with False.

    Notes
    -----
    The first ``OSError`` raised by the stream is latched. It is re-raised as
    :class:`OutputWriteError` on that write and on every later one, and the
    stream is not touched again.

    """

    def __init__(self, stream: IO[bytes], prefix: bytes = b"", at_line_start: bool = True):
        """Initialize the sink over ``stream``."""
        self._stream = stream
        self.prefix = prefix
        self.at_line_start = at_line_start
        # Newlines ending the output so far, capped at 2. A fresh sink counts
        # as preceded by a blank line so the first block gets no leading gap.
        self.trailing_newlines = 2 if at_line_start else 0
        self.error: Optional[OSError] = None

    def write_raw(self, data: bytes) -> None:
        """Write bytes, emitting the line prefix first when at line start.

        Parameters
        ----------
        data : bytes

        Raises
        ------
        OutputWriteError
            If the stream failed now or on any earlier write

        """
        if self.error is not None:
            raise OutputWriteError(original_error=self.error)
        if not data:
            return
        try:
            if self.at_line_start and self.prefix:
                self._stream.write(self.prefix)
            self._stream.write(data)
        except OSError as exc:
            self.error = exc
            logger.debug("Output stream failed, latching error: %s", exc)
            raise OutputWriteError(original_error=exc) from exc
        content = data.rstrip(b"\n")
        if content:
            self.trailing_newlines = min(2, len(data) - len(content))
        else:
            self.trailing_newlines = min(2, self.trailing_newlines + len(data))
        self.at_line_start = self.trailing_newlines > 0

    def write(self, text: str) -> None:
        """Encode ``text`` as UTF-8 and write it."""
        self.write_raw(text.encode("utf-8"))

    def write_escaped(self, text: str) -> None:
        """Write HTML-escaped text with templating braces neutralized."""
        self.write(escape_html(text))

    def space(self) -> None:
        """Write a single space unless at the start of a line."""
        if not self.at_line_start:
            self.write(" ")

    def new_block(self) -> None:
        """Make the output end with exactly one blank line.

        Nothing is written when the output already ends with a blank line or
        nothing has been written yet, so consecutive blocks are separated by
        one blank line no matter how the previous block ended.

        """
        if self.trailing_newlines < 2:
            self.write("\n" * (2 - self.trailing_newlines))

    def end_line(self) -> None:
        """Write a newline unless already at line start."""
        if not self.at_line_start:
            self.write("\n")


__all__ = ["OutputSink"]
