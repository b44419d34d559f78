"""
Text utilities for reading literals out of source code.
"""

from __future__ import annotations

import codecs

__all__ = ["SOURCE_ENCODING", "strip_quotes", "to_source_bytes"]

# tree-sitter reads source bytes as UTF-8; trees always hold UTF-8 source
SOURCE_ENCODING = "utf-8"


def strip_quotes(s: str) -> str:
    """
    Return ``s`` with its first and last characters removed.

    In practice this removes the quotes around a string literal, but the
    characters are removed unconditionally without checking what they are::

        >>> strip_quotes("'Hello!'")
        'Hello!'
        >>> strip_quotes("Hello!")
        'ello'

    Args:
        s: Literal text as it appears in the source

    Returns:
        The literal without its delimiters; empty for strings shorter than 2
    """
    return s[1:-1]


def to_source_bytes(data: bytes, encoding: str) -> bytes:
    """
    Re-encode source bytes written in ``encoding`` as UTF-8 for parsing.

    Args:
        data: Raw source bytes
        encoding: Encoding ``data`` is written in

    Returns:
        The same text encoded as UTF-8

    Raises:
        UnicodeDecodeError: If ``data`` is not valid in ``encoding``
    """
    text = data.decode(encoding)
    if codecs.lookup(encoding).name == SOURCE_ENCODING:
        return data
    return text.encode(SOURCE_ENCODING)
