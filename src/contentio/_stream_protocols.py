# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Byte stream protocols consumed by sources and sinks.

Defines the ByteInput and ByteOutput protocols. They are structural:
binary file objects, ``io.BytesIO`` and socket files all satisfy them
without adaptation.
"""

from __future__ import annotations

from collections.abc import Buffer
from typing import Final, Protocol, runtime_checkable

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "SINK_ENCODING",
    "ByteInput",
    "ByteOutput",
]

#: Chunk size used when draining a byte input (64KB).
DEFAULT_CHUNK_SIZE: Final[int] = 65_536

#: Fixed single-byte encoding used by sinks. Every byte maps to the
#: character with the same code point, so it inverts the source decoding.
SINK_ENCODING: Final[str] = "latin-1"


@runtime_checkable
class ByteInput(Protocol):
    """Already-open readable byte stream.

    Example::

        with open("data.bin", "rb") as stream:
            source = StreamContentSource(stream)
    """

    def read(self, size: int = -1, /) -> bytes | None:
        """Read up to ``size`` bytes.

        Returns:
            Bytes read. An empty result signals end-of-stream. Non-blocking
            streams return ``None`` when no data is ready yet; sources treat
            that as a ``BlockingIOError``.

        Raises:
            OSError: If the underlying read fails.
        """
        ...

    def close(self) -> None:
        """Release the stream."""
        ...


@runtime_checkable
class ByteOutput(Protocol):
    """Already-open writable byte stream."""

    def write(self, data: Buffer, /) -> int | None:
        """Write bytes, returning how many were accepted.

        Raw streams may accept fewer bytes than offered. Non-blocking streams
        return ``None`` when nothing could be written; sinks raise
        ``BlockingIOError`` for it.
        """
        ...

    def flush(self) -> None:
        """Force buffered bytes to their destination."""
        ...

    def close(self) -> None:
        """Release the stream."""
        ...
