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

"""Close-once bookkeeping shared by stream-backed sources and sinks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .errors import ResourceReleasedError
from .logging import get_logger

__all__ = ["StreamRelease"]

logger = get_logger(__name__)


class _Closeable(Protocol):
    def close(self) -> None: ...


@dataclass(slots=True)
class StreamRelease:
    """Tracks whether an owned stream has been released.

    ``release()`` closes the stream the first time and does nothing
    afterwards. ``ensure_open()`` fails fast once the stream is gone.
    """

    owner: str
    stream: _Closeable
    _released: bool = field(default=False, init=False)

    @property
    def released(self) -> bool:
        return self._released

    def ensure_open(self) -> None:
        if self._released:
            msg = f"{self.owner} has already been released"
            raise ResourceReleasedError(msg)

    def release(self) -> None:
        if self._released:
            return
        # Flag first: a failing close must not be retried on a later call.
        self._released = True
        self.stream.close()
        logger.debug(
            "Content stream released.",
            event="content_stream.released",
            context={"owner": self.owner},
        )
