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

"""Base exception hierarchy for :mod:`contentio`."""

from __future__ import annotations


class ContentIOError(Exception):
    """Base class for all contentio exceptions.

    Errors raised by the underlying byte streams (``OSError`` and its
    subclasses) are never wrapped; they reach the caller unchanged. This
    hierarchy only covers failures that originate inside the library.

    Example:
        Catch any contentio-specific error::

            try:
                text = source.retrieve()
            except ContentIOError as e:
                logger.error("Content error: %s", e)

    Note:
        Subclasses also inherit from standard exception types (``ValueError``,
        ``OSError``) so existing handlers keep working.
    """


class ResourceReleasedError(ContentIOError, ValueError):
    """Raised when a source, sink or stream is used after it was released.

    Sources and sinks are single-use: the synchronizing decorators release
    the wrapped instance as part of the first ``retrieve``/``save`` call.
    Any later call fails fast with this error instead of touching a closed
    stream.

    Example:
        Reusing a decorated source::

            source = SynchronizedContentSource(StreamContentSource(stream))
            text = source.retrieve()
            source.retrieve()  # raises ResourceReleasedError

    Note:
        This exception also inherits from ``ValueError``, matching the
        ``"I/O operation on closed file"`` error raised by :mod:`io`.
    """


class ContentEncodeError(ContentIOError, OSError):
    """Raised when content cannot be represented in the sink encoding.

    Sinks encode with the fixed single-byte ``SINK_ENCODING``. Characters
    above ``U+00FF`` have no representation there. The original
    ``UnicodeEncodeError`` is available as ``__cause__``.
    """


__all__ = [
    "ContentEncodeError",
    "ContentIOError",
    "ResourceReleasedError",
]
