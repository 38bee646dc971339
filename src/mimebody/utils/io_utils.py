#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mimebody/utils/io_utils.py
"""I/O utilities for handling output destinations.

Rendered bodies use CRLF line endings, so text is always written without
newline translation.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a file path or file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Paths are written as UTF-8 bytes; binary streams
        receive UTF-8 bytes; text streams receive the string unchanged.

    Raises
    ------
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("a\\r\\nb", buffer)
        >>> buffer.getvalue()
        b'a\\r\\nb'

    """
    if isinstance(output, (str, Path)):
        # write_bytes avoids platform newline translation of the CRLFs
        Path(output).write_bytes(content.encode("utf-8"))
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO):
        is_binary_mode = False
    elif isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    elif hasattr(output, "mode"):
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode
    else:
        is_binary_mode = False

    if is_binary_mode:
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)


__all__ = ["write_content"]
