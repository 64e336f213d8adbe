"""
Summary: Copy a bounded prefix of a binary stream to a text sink.
Why: Line and byte modes share lenient decoding and byte accounting.
"""

from __future__ import annotations

import codecs
from typing import BinaryIO, TextIO

from header.config.settings import DECODE_ERRORS, READ_CHUNK_SIZE, TEXT_ENCODING

from ..domain.errors import HeadReadError, describe_os_error


def _decode(chunk: bytes) -> str:
    return chunk.decode(TEXT_ENCODING, errors=DECODE_ERRORS)


def _read(source: BinaryIO, size: int, name: str) -> bytes:
    try:
        return source.read(size)
    except OSError as e:
        raise HeadReadError(name, describe_os_error(e)) from e


def _readline(source: BinaryIO, name: str) -> bytes:
    try:
        return source.readline()
    except OSError as e:
        raise HeadReadError(name, describe_os_error(e)) from e


def copy_lines(source: BinaryIO, sink: TextIO, count: int, *, name: str) -> int:
    """Write up to ``count`` lines from ``source`` and return the bytes consumed.

    Lines keep their terminator as found in the input (``\\n``, ``\\r\\n``,
    or nothing for an unterminated final line). Read failures raise
    ``HeadReadError`` naming ``name``; sink failures propagate unchanged.
    """

    consumed = 0
    remaining = count
    while remaining > 0:
        line = _readline(source, name)
        if not line:
            break
        remaining -= 1
        consumed += len(line)
        _ = sink.write(_decode(line))
    return consumed


def copy_bytes(source: BinaryIO, sink: TextIO, count: int, *, name: str) -> int:
    """Write up to ``count`` bytes from ``source`` and return the bytes consumed.

    Reads happen in chunks of at most ``READ_CHUNK_SIZE`` bytes, so any
    count is accepted. A multi-byte character cut by the bound is replaced
    with U+FFFD; one split between two chunks decodes intact.
    """

    decoder = codecs.getincrementaldecoder(TEXT_ENCODING)(errors=DECODE_ERRORS)
    consumed = 0
    while consumed < count:
        chunk = _read(source, min(count - consumed, READ_CHUNK_SIZE), name)
        if not chunk:
            break
        consumed += len(chunk)
        text = decoder.decode(chunk)
        if text:
            _ = sink.write(text)

    tail = decoder.decode(b"", final=True)
    if tail:
        _ = sink.write(tail)
    return consumed


def format_file_header(name: str, index: int) -> str:
    """Return the ``==> name <==`` banner, with a leading blank line after the first file."""

    banner = f"==> {name} <==\n"
    return banner if index == 0 else "\n" + banner


__all__ = ["copy_bytes", "copy_lines", "format_file_header"]
