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

"""Read filtered text from byte streams and write text back to them.

Sources and sinks wrap streams the caller has already opened::

    from contentio import (
        ASCII_ONLY,
        StreamContentSink,
        StreamContentSource,
        SynchronizedContentSource,
    )

    with open("in.bin", "rb") as raw:
        source = SynchronizedContentSource(StreamContentSource(raw, ASCII_ONLY))
        text = source.retrieve()  # releases the stream

Each byte decodes to exactly one character (``chr(byte)``); multi-byte
encodings are not decoded.
"""

from __future__ import annotations

from ._stream_memory import MemoryByteInput, MemoryByteOutput
from ._stream_protocols import DEFAULT_CHUNK_SIZE, SINK_ENCODING, ByteInput, ByteOutput
from ._transfer import transfer
from .errors import ContentEncodeError, ContentIOError, ResourceReleasedError
from .filters import ASCII_ONLY, NO_FILTER, AsciiOnlyFilter, CharacterFilter, NoFilter
from .logging import configure_logging, get_logger
from .sink import ContentSink, StreamContentSink, SynchronizedContentSink
from .source import ContentSource, StreamContentSource, SynchronizedContentSource

__all__ = [
    "ASCII_ONLY",
    "DEFAULT_CHUNK_SIZE",
    "NO_FILTER",
    "SINK_ENCODING",
    "AsciiOnlyFilter",
    "ByteInput",
    "ByteOutput",
    "CharacterFilter",
    "ContentEncodeError",
    "ContentIOError",
    "ContentSink",
    "ContentSource",
    "MemoryByteInput",
    "MemoryByteOutput",
    "NoFilter",
    "ResourceReleasedError",
    "StreamContentSink",
    "StreamContentSource",
    "SynchronizedContentSink",
    "SynchronizedContentSource",
    "configure_logging",
    "get_logger",
    "transfer",
]
