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

"""In-memory byte streams.

Provides MemoryByteInput and MemoryByteOutput backed by io.BytesIO. The
output stream keeps its bytes readable after close, since sinks close
their stream as soon as a save completes.
"""

from __future__ import annotations

import io
from collections.abc import Buffer
from dataclasses import dataclass, field
from typing import Self

from .errors import ResourceReleasedError

__all__ = [
    "MemoryByteInput",
    "MemoryByteOutput",
]

_CLOSED_MESSAGE = "I/O operation on closed file"


@dataclass(slots=True)
class MemoryByteInput:
    """ByteInput implementation backed by an io.BytesIO buffer."""

    _buffer: io.BytesIO
    _closed: bool = field(default=False, init=False)

    @classmethod
    def from_bytes(cls, content: bytes) -> MemoryByteInput:
        """Create an input stream over ``content`` (copied)."""
        return cls(_buffer=io.BytesIO(content))

    @property
    def closed(self) -> bool:
        """True if the stream has been closed."""
        return self._closed

    def _check_closed(self) -> None:
        if self._closed:
            raise ResourceReleasedError(_CLOSED_MESSAGE)

    def read(self, size: int = -1, /) -> bytes:
        """Read up to size bytes."""
        self._check_closed()
        return self._buffer.read(size)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the stream."""
        if not self._closed:
            self._buffer.close()
            self._closed = True


@dataclass(slots=True)
class MemoryByteOutput:
    """ByteOutput implementation that collects bytes in memory.

    ``getvalue()`` stays available after ``close()``::

        output = MemoryByteOutput()
        with StreamContentSink(output) as sink:
            sink.save("hello")
        assert output.getvalue() == b"hello"
    """

    _buffer: io.BytesIO = field(default_factory=io.BytesIO)
    _captured: bytes | None = field(default=None, init=False)
    _closed: bool = field(default=False, init=False)

    @property
    def closed(self) -> bool:
        """True if the stream has been closed."""
        return self._closed

    def _check_closed(self) -> None:
        if self._closed:
            raise ResourceReleasedError(_CLOSED_MESSAGE)

    def write(self, data: Buffer, /) -> int:
        """Append bytes to the buffer."""
        self._check_closed()
        return self._buffer.write(data)

    def flush(self) -> None:
        """No-op for in-memory buffers, but rejects closed streams."""
        self._check_closed()

    def getvalue(self) -> bytes:
        """Return every byte written so far, before or after close."""
        if self._captured is not None:
            return self._captured
        return self._buffer.getvalue()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the stream, keeping the captured bytes."""
        if not self._closed:
            self._captured = self._buffer.getvalue()
            self._buffer.close()
            self._closed = True
