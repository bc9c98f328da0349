"""Upload sources and lenient text decoding.

Content is never parsed by format: whatever bytes arrive are decoded as text,
with undecodable sequences replaced rather than rejected.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

LOGGER = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8-sig"


class UploadSource(Protocol):
    """A file-like input: a name, a byte length and a readable body."""

    @property
    def name(self) -> str: ...

    @property
    def size(self) -> Optional[int]: ...

    async def read(self) -> bytes: ...


@dataclass(slots=True)
class BytesUpload:
    """Upload whose body is already in memory."""

    name: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    async def read(self) -> bytes:
        return self.data


@dataclass(slots=True)
class PathUpload:
    """Upload backed by a file on disk, read in a worker thread."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    async def read(self) -> bytes:
        return await asyncio.to_thread(self.path.read_bytes)


def decode_text(data: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode bytes as text, replacing anything that does not decode."""
    text = data.decode(encoding, errors="replace")
    if "\ufffd" in text:
        LOGGER.debug("Replaced undecodable bytes while decoding as %s", encoding)
    return text


async def read_text(upload: UploadSource, encoding: str = DEFAULT_ENCODING) -> tuple[str, int]:
    """Read an upload and return its text with the source byte length."""
    data = await upload.read()
    size = upload.size
    return decode_text(data, encoding), size if size is not None else len(data)
