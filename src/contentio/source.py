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

"""Content sources: read a byte stream to its end as filtered text.

Decoding is one byte per character: byte ``b`` becomes ``chr(b)``.
Multi-byte encodings such as UTF-8 are not decoded; each of their bytes
surfaces as its own character.
"""

from __future__ import annotations

import errno
import threading
from dataclasses import dataclass, field
from typing import Protocol, Self, runtime_checkable

from ._release import StreamRelease
from ._stream_protocols import DEFAULT_CHUNK_SIZE, ByteInput
from .filters import NO_FILTER, CharacterFilter
from .logging import get_logger

__all__ = [
    "ContentSource",
    "StreamContentSource",
    "SynchronizedContentSource",
]

logger = get_logger(__name__)


@runtime_checkable
class ContentSource(Protocol):
    """Single-use reader producing the whole content as a string.

    Example::

        with StreamContentSource(stream, ASCII_ONLY) as source:
            text = source.retrieve()
    """

    @property
    def closed(self) -> bool:
        """True once the underlying stream has been released."""
        ...

    def retrieve(self) -> str:
        """Read the remaining content and return the accepted characters.

        Raises:
            OSError: If the underlying stream fails; no partial content
                is returned.
            ResourceReleasedError: If the source was already released.
        """
        ...

    def close(self) -> None:
        """Release the underlying stream."""
        ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None: ...


@dataclass(slots=True)
class StreamContentSource:
    """ContentSource reading from an already-open byte stream.

    The source owns ``stream``. ``retrieve()`` drains it without closing
    it; release happens through ``close()`` or the ``with`` block.
    """

    stream: ByteInput
    character_filter: CharacterFilter = NO_FILTER
    _release: StreamRelease = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._release = StreamRelease(type(self).__name__, self.stream)

    @property
    def closed(self) -> bool:
        return self._release.released

    def retrieve(self) -> str:
        self._release.ensure_open()
        accepts = self.character_filter.accepts
        kept: list[str] = []
        bytes_read = 0
        while True:
            chunk = self.stream.read(DEFAULT_CHUNK_SIZE)
            if chunk is None:
                msg = "Byte stream has no data available yet"
                raise BlockingIOError(errno.EAGAIN, msg)
            if not chunk:
                break
            bytes_read += len(chunk)
            for byte in chunk:
                character = chr(byte)
                if accepts(character):
                    kept.append(character)
        content = "".join(kept)
        logger.debug(
            "Content retrieved.",
            event="content_source.retrieved",
            context={
                "bytes_read": bytes_read,
                "characters": len(content),
                "filter": str(self.character_filter),
            },
        )
        return content

    def close(self) -> None:
        self._release.release()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()


@dataclass(slots=True)
class SynchronizedContentSource:
    """Thread-safe, single-use wrapper around another ContentSource.

    Each ``retrieve()`` holds the lock for the whole call and releases the
    inner source before returning, on success or failure. The wrapper takes
    ownership of ``inner``; nothing else should touch it afterwards.
    A second ``retrieve()`` raises ``ResourceReleasedError``.
    """

    inner: ContentSource
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def closed(self) -> bool:
        return self.inner.closed

    def retrieve(self) -> str:
        with self._lock, self.inner as source:
            return source.retrieve()

    def close(self) -> None:
        with self._lock:
            self.inner.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()
