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

"""Content sinks: encode a string and write it fully to a byte stream."""

from __future__ import annotations

import errno
import threading
from dataclasses import dataclass, field
from typing import Protocol, Self, runtime_checkable

from ._release import StreamRelease
from ._stream_protocols import SINK_ENCODING, ByteOutput
from .errors import ContentEncodeError
from .logging import get_logger

__all__ = [
    "ContentSink",
    "StreamContentSink",
    "SynchronizedContentSink",
]

logger = get_logger(__name__)


@runtime_checkable
class ContentSink(Protocol):
    """Single-use writer persisting a string.

    Example::

        with StreamContentSink(stream) as sink:
            sink.save("hello")
    """

    @property
    def closed(self) -> bool:
        """True once the underlying stream has been released."""
        ...

    def save(self, content: str) -> None:
        """Encode ``content``, write every byte and flush.

        Raises:
            ContentEncodeError: If ``content`` is not representable in
                ``SINK_ENCODING``. Nothing is written in that case.
            OSError: If the write or flush fails. Bytes already written
                are not rolled back.
            ResourceReleasedError: If the sink was already released.
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
class StreamContentSink:
    """ContentSink writing to an already-open byte stream it owns."""

    stream: ByteOutput
    _release: StreamRelease = field(init=False, repr=False)
    _bytes_written: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self._release = StreamRelease(type(self).__name__, self.stream)

    @property
    def closed(self) -> bool:
        return self._release.released

    @property
    def bytes_written(self) -> int:
        """Total bytes handed to the stream so far."""
        return self._bytes_written

    def save(self, content: str) -> None:
        self._release.ensure_open()
        try:
            data = content.encode(SINK_ENCODING)
        except UnicodeEncodeError as error:
            msg = f"Content is not representable in {SINK_ENCODING}: {error.reason}"
            raise ContentEncodeError(msg) from error

        view = memoryview(data)
        while view:
            count = self.stream.write(view)
            if count is None:
                msg = "Byte stream would block"
                raise BlockingIOError(errno.EAGAIN, msg)
            if count <= 0:
                msg = "Byte stream accepted no data"
                raise OSError(msg)
            self._bytes_written += count
            view = view[count:]
        self.stream.flush()
        logger.debug(
            "Content saved.",
            event="content_sink.saved",
            context={"characters": len(content), "bytes_written": len(data)},
        )

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
class SynchronizedContentSink:
    """Thread-safe, single-use wrapper around another ContentSink.

    ``save()`` holds the lock across encode, write, flush and release of the
    inner sink, so concurrent callers never interleave bytes. A second
    ``save()`` raises ``ResourceReleasedError``.
    """

    inner: ContentSink
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def closed(self) -> bool:
        return self.inner.closed

    def save(self, content: str) -> None:
        with self._lock, self.inner as sink:
            sink.save(content)

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
