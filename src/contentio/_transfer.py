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

"""Move content from a source to a sink in one call."""

from __future__ import annotations

from .sink import ContentSink
from .source import ContentSource

__all__ = ["transfer"]


def transfer(source: ContentSource, sink: ContentSink) -> str:
    """Retrieve everything from ``source`` and save it to ``sink``.

    Both are released before this returns, whether or not it succeeds. If
    retrieval fails nothing reaches the sink.

    Example::

        with open("in.txt", "rb") as raw_in, open("out.txt", "wb") as raw_out:
            transfer(
                StreamContentSource(raw_in, ASCII_ONLY),
                SynchronizedContentSink(StreamContentSink(raw_out)),
            )

    Returns:
        The transferred content.
    """

    with sink, source:
        content = source.retrieve()
        sink.save(content)
    return content
