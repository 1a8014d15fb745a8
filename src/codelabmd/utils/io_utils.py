#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/utils/io_utils.py
"""I/O utilities for handling output destinations."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def is_binary_stream(output: object) -> bool:
    """Detect whether a file-like object expects bytes.

    Parameters
    ----------
    output : object
        A writable file-like object

    Returns
    -------
    bool
        True for binary streams, False for text streams or when undetermined

    """
    # Concrete types first, then io base classes, then the mode attribute
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: Union[str, bytes], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write already-rendered content to a path or file-like object.

    Parameters
    ----------
    content : str or bytes
        Rendered output
    output : str, Path, IO[bytes], or IO[str]
        Destination

    Raises
    ------
    TypeError
        If the output type is not supported

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        if isinstance(content, str):
            output_path.write_text(content, encoding="utf-8")
        else:
            output_path.write_bytes(content)
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if is_binary_stream(output):
        data = content.encode("utf-8") if isinstance(content, str) else content
        cast(IO[bytes], output).write(data)
    else:
        text = content.decode("utf-8") if isinstance(content, bytes) else content
        cast(IO[str], output).write(text)


__all__ = ["is_binary_stream", "write_content"]
