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

"""Recording byte streams for asserting read, write, flush and close calls."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RecordingByteInput:
    """Byte input that counts calls and can fail after a number of reads.

    ``chunk_limit`` caps how many bytes a single read returns, so tests can
    force the source to loop over several chunks. ``blocked_after_reads``
    makes later reads return ``None`` like a non-blocking stream with no
    data ready.
    """

    content: bytes
    fail_after_reads: int | None = None
    blocked_after_reads: int | None = None
    chunk_limit: int | None = None
    read_calls: int = 0
    close_count: int = 0
    _offset: int = field(default=0, repr=False)

    def read(self, size: int = -1, /) -> bytes | None:
        if self.close_count:
            raise ValueError("I/O operation on closed file")
        if self.fail_after_reads is not None and self.read_calls >= self.fail_after_reads:
            raise OSError("simulated read failure")
        self.read_calls += 1
        if (
            self.blocked_after_reads is not None
            and self.read_calls > self.blocked_after_reads
        ):
            return None
        remaining = len(self.content) - self._offset
        count = remaining if size < 0 else min(size, remaining)
        if self.chunk_limit is not None:
            count = min(count, self.chunk_limit)
        chunk = self.content[self._offset : self._offset + count]
        self._offset += count
        return chunk

    def close(self) -> None:
        self.close_count += 1


@dataclass
class RecordingByteOutput:
    """Byte output capturing writes and logging the order of every call.

    ``max_write`` simulates raw streams that accept only part of a buffer.
    ``blocked_after_writes`` makes later writes return ``None`` like a
    non-blocking stream that would block.
    """

    fail_on_write: bool = False
    fail_on_flush: bool = False
    fail_on_close: bool = False
    max_write: int | None = None
    blocked_after_writes: int | None = None
    chunks: list[bytes] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)
    flush_count: int = 0
    close_count: int = 0

    def write(self, data: bytes, /) -> int | None:
        self.calls.append("write")
        if self.fail_on_write:
            raise OSError("simulated write failure")
        if (
            self.blocked_after_writes is not None
            and len(self.chunks) >= self.blocked_after_writes
        ):
            return None
        accepted = bytes(data) if self.max_write is None else bytes(data[: self.max_write])
        self.chunks.append(accepted)
        return len(accepted)

    def flush(self) -> None:
        self.calls.append("flush")
        self.flush_count += 1
        if self.fail_on_flush:
            raise OSError("simulated flush failure")

    def close(self) -> None:
        self.calls.append("close")
        self.close_count += 1
        if self.fail_on_close:
            raise OSError("simulated close failure")

    @property
    def captured(self) -> bytes:
        return b"".join(self.chunks)


@dataclass
class ZeroWriteOutput:
    """Byte output whose write never accepts anything."""

    close_count: int = 0

    def write(self, data: bytes, /) -> int:
        return 0

    def flush(self) -> None:
        return None

    def close(self) -> None:
        self.close_count += 1


__all__ = [
    "RecordingByteInput",
    "RecordingByteOutput",
    "ZeroWriteOutput",
]
