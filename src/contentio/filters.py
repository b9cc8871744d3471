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

"""Character filters applied while a source aggregates its content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Protocol, runtime_checkable

__all__ = [
    "ASCII_ONLY",
    "NO_FILTER",
    "AsciiOnlyFilter",
    "CharacterFilter",
    "NoFilter",
]

_ASCII_LIMIT: Final[int] = 0x80


@runtime_checkable
class CharacterFilter(Protocol):
    """Predicate deciding whether a single decoded character is kept."""

    def accepts(self, character: str) -> bool: ...


@dataclass(frozen=True, slots=True)
class NoFilter:
    """Accept every character."""

    def accepts(self, character: str) -> bool:
        return True

    def __str__(self) -> str:
        return "no-filter"


@dataclass(frozen=True, slots=True)
class AsciiOnlyFilter:
    """Accept only 7-bit characters (code point below ``0x80``)."""

    def accepts(self, character: str) -> bool:
        return ord(character) < _ASCII_LIMIT

    def __str__(self) -> str:
        return "ascii-only"


NO_FILTER: Final[CharacterFilter] = NoFilter()
ASCII_ONLY: Final[CharacterFilter] = AsciiOnlyFilter()
