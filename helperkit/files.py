"""Asynchronous file reading."""

import asyncio
import os
from typing import Union


def _read_bytes(path: Union[str, os.PathLike]) -> bytes:
    with open(path, "rb") as f:
        return f.read()


async def read_file_async(path: Union[str, os.PathLike]) -> str:
    """Read a file without blocking the event loop.

    Returns a binary string: each byte of the file becomes the
    character with the same code point (``latin-1`` decoding), so the
    result round-trips with ``str.encode("latin-1")``.

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    """
    data = await asyncio.to_thread(_read_bytes, path)
    return data.decode("latin-1")


__all__ = ["read_file_async"]
