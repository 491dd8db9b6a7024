"""Chapter and volume ordering used to move between chapters while reading."""

from __future__ import annotations

import functools
import math
import struct
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

NO_VOLUME = "none"
_U32_MAX = 2**32 - 1


def format_chapter_number(number: float) -> str:
    """Render a chapter number the way it appears as a key: ``1.0`` -> ``"1"``."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(float(number))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _parse_u32(text: str) -> Optional[int]:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value <= _U32_MAX else None


def _parse_f64(text: str) -> float:
    if not text or "_" in text or text != text.strip():
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


def _total_order_key(value: float) -> int:
    bits = struct.unpack("<q", struct.pack("<d", value))[0]
    if bits < 0:
        bits ^= 0x7FFFFFFFFFFFFFFF
    return bits


def _chapter_key(chapter: "Chapter") -> int:
    return _total_order_key(_parse_f64(chapter.number))


def _compare_volumes(a: "Volume", b: "Volume") -> int:
    a_num = _parse_u32(a.volume)
    b_num = _parse_u32(b.volume)
    if a.volume == NO_VOLUME and b_num is not None:
        return 1
    if a_num is not None and b.volume == NO_VOLUME:
        return -1
    left = a_num or 0
    right = b_num or 0
    return (left > right) - (left < right)


@dataclass
class Chapter:
    """A chapter entry of a manga's chapter list."""

    id: str = ""
    number: str = ""
    volume: str = ""


class SortedChapters:
    """Chapters kept in ascending order of their numeric chapter number."""

    def __init__(self, chapters: Iterable[Chapter] = ()) -> None:
        self._chapters: list[Chapter] = sorted(chapters, key=_chapter_key)

    def __iter__(self) -> Iterator[Chapter]:
        return iter(self._chapters)

    def __len__(self) -> int:
        return len(self._chapters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortedChapters):
            return NotImplemented
        return self._chapters == other._chapters

    def __repr__(self) -> str:
        return f"SortedChapters({self._chapters!r})"

    def search_next_chapter(self, current: str) -> Optional[Chapter]:
        """Return the chapter after ``current``, or the first one if ``current`` is absent."""
        for index, chapter in enumerate(self._chapters):
            if chapter.number == current:
                following = self._chapters[index + 1 : index + 2]
                return following[0] if following else None
        return self._chapters[0] if self._chapters else None


@dataclass
class Volume:
    """A volume and the chapters that belong to it."""

    volume: str = ""
    chapters: SortedChapters = field(default_factory=SortedChapters)


class SortedVolumes:
    """Volumes ordered "0", "1", "2", ... with "none" (no volume) last."""

    def __init__(self, volumes: Iterable[Volume] = ()) -> None:
        self._volumes: list[Volume] = sorted(volumes, key=functools.cmp_to_key(_compare_volumes))

    def __iter__(self) -> Iterator[Volume]:
        return iter(self._volumes)

    def __len__(self) -> int:
        return len(self._volumes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortedVolumes):
            return NotImplemented
        return self._volumes == other._volumes

    def __repr__(self) -> str:
        return f"SortedVolumes({self._volumes!r})"

    def _position(self, volume: str) -> Optional[int]:
        return next((i for i, vol in enumerate(self._volumes) if vol.volume == volume), None)

    def search_next_volume(self, volume: str) -> Optional[Volume]:
        """Return the volume after ``volume``, if any."""
        index = self._position(volume)
        if index is None or index + 1 >= len(self._volumes):
            return None
        return self._volumes[index + 1]

    def search_previous_volume(self, volume: str) -> Optional[Volume]:
        """Return the volume before ``volume``; the first volume returns itself."""
        index = self._position(volume)
        if index is None:
            return None
        return self._volumes[max(index - 1, 0)]


class ListOfChapters:
    """All chapters of a manga grouped by volume."""

    def __init__(self, volumes: Iterable[Volume] | SortedVolumes = ()) -> None:
        self.volumes = volumes if isinstance(volumes, SortedVolumes) else SortedVolumes(volumes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListOfChapters):
            return NotImplemented
        return self.volumes == other.volumes

    def __repr__(self) -> str:
        return f"ListOfChapters({self.volumes!r})"

    @classmethod
    def from_aggregate(cls, volumes: Mapping[str, Mapping[str, Any]]) -> "ListOfChapters":
        """Build from an aggregate mapping: volume key -> {"chapters": number -> {"id", "others"}}.

        A chapter's first alternative id in ``others`` is preferred over ``id``.
        """
        built = []
        for vol_key, vol in volumes.items():
            chapters = []
            for number, chap in vol.get("chapters", {}).items():
                others = chap.get("others") or []
                chapter_id = others[0] if others else chap.get("id", "")
                chapters.append(Chapter(id=chapter_id, number=number, volume=vol_key))
            built.append(Volume(volume=vol_key, chapters=SortedChapters(chapters)))
        return cls(SortedVolumes(built))

    def _find_volume(self, volume: str) -> Optional[Volume]:
        return next((vol for vol in self.volumes if vol.volume == volume), None)

    def get_next_chapter(self, volume: Optional[str], chapter_number: float) -> Optional[Chapter]:
        """Find the chapter following ``chapter_number``, moving to the next volume if needed."""
        volume_number = NO_VOLUME if volume is None else volume
        current = self._find_volume(volume_number)
        if current is None:
            return None
        number = format_chapter_number(chapter_number)
        found = current.chapters.search_next_chapter(number)
        if found is not None:
            return found
        next_volume = self.volumes.search_next_volume(volume_number)
        if next_volume is None:
            return None
        return next_volume.chapters.search_next_chapter(number)

    def _previous_in_previous_volume(self, volume: str, chapter_number: float) -> Optional[Chapter]:
        previous = self.volumes.search_previous_volume(volume)
        if previous is None or previous.volume == volume:
            return None
        chapters = list(previous.chapters)
        if not chapters:
            return None
        last = chapters[-1]
        return None if last.number == format_chapter_number(chapter_number) else last

    def get_previous_chapter(self, volume: Optional[str], chapter_number: float) -> Optional[Chapter]:
        """Find the chapter before ``chapter_number``, moving to the previous volume if needed."""
        volume_number = NO_VOLUME if volume is None else volume
        current = self._find_volume(volume_number)
        if current is None:
            return None
        number = format_chapter_number(chapter_number)
        chapters = list(current.chapters)
        index = next((i for i, chap in enumerate(chapters) if chap.number == number), None)
        if index is not None:
            candidate = chapters[max(index - 1, 0)]
            if candidate.number != number:
                return candidate
        return self._previous_in_previous_volume(volume_number, chapter_number)