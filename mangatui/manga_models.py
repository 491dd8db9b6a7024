"""State, actions and events of the manga page and its chapter list."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any, Optional


class ChapterOrder(Enum):
    """Order in which chapters are requested."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def default(cls) -> "ChapterOrder":
        return cls.DESCENDING

    def toggle(self) -> "ChapterOrder":
        """Return the opposite order."""
        if self is ChapterOrder.ASCENDING:
            return ChapterOrder.DESCENDING
        return ChapterOrder.ASCENDING

    def __str__(self) -> str:
        return self.value


class PageState(Enum):
    """What the manga page is currently doing."""

    DOWNLOADING_CHAPTERS = auto()
    SEARCHING_CHAPTERS = auto()
    SEARCHING_CHAPTER_DATA = auto()
    DISPLAYING_CHAPTERS = auto()
    CHAPTERS_NOT_FOUND = auto()


class BookmarkPhase(Enum):
    """Progress of looking up the bookmarked chapter."""

    SEARCHING_FROM_API = auto()
    FAILED_TO_FETCH = auto()
    NOT_FOUND_DATABASE = auto()
    FOUND = auto()
    NOT_SEARCHING = auto()

    @classmethod
    def default(cls) -> "BookmarkPhase":
        return cls.NOT_SEARCHING


class DownloadPhase(Enum):
    """Phases of downloading every chapter of a manga."""

    PROCESS_NOT_STARTED = auto()
    ASKING_FOR_CONFIRMATION = auto()
    FETCHING_CHAPTERS_DATA = auto()
    DOWNLOADING_CHAPTERS = auto()
    ASK_ABORT_PROCESS = auto()
    ERROR_CHAPTERS_DATA = auto()


@dataclass
class DownloadAllChaptersState:
    """Tracks the download-all-chapters process and its progress."""

    phase: DownloadPhase = DownloadPhase.PROCESS_NOT_STARTED
    total_chapters: float = 0.0
    downloaded_chapters: float = 0.0
    download_location: Optional[Path] = None

    def process_started(self) -> bool:
        """True once the user asked to download all chapters."""
        return self.phase is not DownloadPhase.PROCESS_NOT_STARTED

    def is_downloading(self) -> bool:
        """True while chapters are being downloaded, including while asking to abort."""
        return self.phase in (DownloadPhase.DOWNLOADING_CHAPTERS, DownloadPhase.ASK_ABORT_PROCESS)

    def ask_for_confirmation(self) -> None:
        self.phase = DownloadPhase.ASKING_FOR_CONFIRMATION

    def fetch_chapters_data(self) -> None:
        self.phase = DownloadPhase.FETCHING_CHAPTERS_DATA

    def start_download(self, total_chapters: float) -> None:
        """Begin downloading ``total_chapters`` chapters."""
        self.phase = DownloadPhase.DOWNLOADING_CHAPTERS
        self.total_chapters = total_chapters
        self.downloaded_chapters = 0.0

    def set_download_progress(self) -> None:
        """Count one more chapter as downloaded."""
        self.downloaded_chapters += 1

    @property
    def progress(self) -> float:
        """Fraction of chapters downloaded, between 0 and 1."""
        if self.total_chapters <= 0:
            return 0.0
        return min(self.downloaded_chapters / self.total_chapters, 1.0)

    def ask_abort_process(self) -> None:
        self.phase = DownloadPhase.ASK_ABORT_PROCESS

    def continue_download(self) -> None:
        self.phase = DownloadPhase.DOWNLOADING_CHAPTERS

    def abort_process(self) -> None:
        self.reset()

    def set_download_error(self) -> None:
        self.phase = DownloadPhase.ERROR_CHAPTERS_DATA

    def cancel(self) -> None:
        self.phase = DownloadPhase.PROCESS_NOT_STARTED

    def reset(self) -> None:
        """Return to the initial state, forgetting progress and location."""
        self.phase = DownloadPhase.PROCESS_NOT_STARTED
        self.total_chapters = 0.0
        self.downloaded_chapters = 0.0
        self.download_location = None


class MangaPageAction(Enum):
    """Actions the user triggers on the manga page."""

    GO_TO_READ_BOOKMARKED_CHAPTER = auto()
    DOWNLOAD_CHAPTER = auto()
    CONFIRM_DOWNLOAD_ALL = auto()
    CANCEL_DOWNLOAD_ALL = auto()
    ASK_DOWNLOAD_ALL_CHAPTERS = auto()
    ASK_ABORT_PROCESS = auto()
    ABORT_DOWNLOAD_ALL_CHAPTERS = auto()
    SCROLL_CHAPTER_DOWN = auto()
    SCROLL_CHAPTER_UP = auto()
    TOGGLE_ORDER = auto()
    READ_CHAPTER = auto()
    TOGGLE_AVAILABLE_LANGUAGES_LIST = auto()
    SCROLL_DOWN_AVAILABLE_LANGUAGES = auto()
    SCROLL_UP_AVAILABLE_LANGUAGES = auto()
    SEARCH_BY_LANGUAGE = auto()
    GO_MANGAS_AUTHOR = auto()
    GO_MANGAS_ARTIST = auto()
    SEARCH_NEXT_CHAPTER_PAGE = auto()
    SEARCH_PREVIOUS_CHAPTER_PAGE = auto()
    BOOKMARK_CHAPTER_SELECTED = auto()


@dataclass(frozen=True)
class MangaPageEvent:
    """A background event for the manga page, with an optional payload."""

    class Kind(Enum):
        READ_CHAPTER_BOOKMARKED = auto()
        FETCH_BOOKMARK_FAILED = auto()
        SEARCH_CHAPTERS = auto()
        SEARCH_COVER = auto()
        FETCH_CHAPTER_BOOKMARKED = auto()
        LOAD_COVER = auto()
        FETCH_STATISTICS = auto()
        CHECK_CHAPTER_STATUS = auto()
        CHAPTER_FINISHED_DOWNLOADING = auto()
        DOWNLOAD_ALL_CHAPTERS_ERROR = auto()
        SET_DOWNLOAD_PROGRESS = auto()
        START_DOWNLOAD_PROGRESS = auto()
        SET_DOWNLOAD_ALL_CHAPTERS_PROGRESS = auto()
        FINISHED_DOWNLOADING_ALL_CHAPTERS = auto()
        SAVE_CHAPTER_DOWNLOAD_STATUS = auto()
        DOWNLOAD_ERROR = auto()
        READ_ERROR = auto()
        READ_SUCCESSFUL = auto()
        LOAD_CHAPTERS = auto()
        LOAD_STATISTICS = auto()

    kind: "MangaPageEvent.Kind"
    payload: Any = None

    @classmethod
    def read_chapter_bookmarked(cls, chapter: Any, manga: Any) -> "MangaPageEvent":
        return cls(cls.Kind.READ_CHAPTER_BOOKMARKED, (chapter, manga))

    @classmethod
    def fetch_bookmark_failed(cls) -> "MangaPageEvent":
        return cls(cls.Kind.FETCH_BOOKMARK_FAILED)

    @classmethod
    def search_chapters(cls) -> "MangaPageEvent":
        return cls(cls.Kind.SEARCH_CHAPTERS)

    @classmethod
    def search_cover(cls) -> "MangaPageEvent":
        return cls(cls.Kind.SEARCH_COVER)

    @classmethod
    def fetch_chapter_bookmarked(cls, chapter: Any) -> "MangaPageEvent":
        return cls(cls.Kind.FETCH_CHAPTER_BOOKMARKED, chapter)

    @classmethod
    def load_cover(cls, image: Any) -> "MangaPageEvent":
        return cls(cls.Kind.LOAD_COVER, image)

    @classmethod
    def fetch_statistics(cls) -> "MangaPageEvent":
        return cls(cls.Kind.FETCH_STATISTICS)

    @classmethod
    def check_chapter_status(cls) -> "MangaPageEvent":
        return cls(cls.Kind.CHECK_CHAPTER_STATUS)

    @classmethod
    def chapter_finished_downloading(cls, chapter_id: str) -> "MangaPageEvent":
        return cls(cls.Kind.CHAPTER_FINISHED_DOWNLOADING, chapter_id)

    @classmethod
    def download_all_chapters_error(cls) -> "MangaPageEvent":
        return cls(cls.Kind.DOWNLOAD_ALL_CHAPTERS_ERROR)

    @classmethod
    def set_download_progress(cls, progress: float, chapter_id: str) -> "MangaPageEvent":
        return cls(cls.Kind.SET_DOWNLOAD_PROGRESS, (progress, chapter_id))

    @classmethod
    def start_download_progress(cls, total_chapters: float) -> "MangaPageEvent":
        return cls(cls.Kind.START_DOWNLOAD_PROGRESS, total_chapters)

    @classmethod
    def set_download_all_chapters_progress(cls) -> "MangaPageEvent":
        return cls(cls.Kind.SET_DOWNLOAD_ALL_CHAPTERS_PROGRESS)

    @classmethod
    def finished_downloading_all_chapters(cls) -> "MangaPageEvent":
        return cls(cls.Kind.FINISHED_DOWNLOADING_ALL_CHAPTERS)

    @classmethod
    def save_chapter_download_status(cls, chapter_id: str, chapter_title: str) -> "MangaPageEvent":
        return cls(cls.Kind.SAVE_CHAPTER_DOWNLOAD_STATUS, (chapter_id, chapter_title))

    @classmethod
    def download_error(cls, chapter_id: str) -> "MangaPageEvent":
        return cls(cls.Kind.DOWNLOAD_ERROR, chapter_id)

    @classmethod
    def read_error(cls, chapter_id: str) -> "MangaPageEvent":
        return cls(cls.Kind.READ_ERROR, chapter_id)

    @classmethod
    def read_successful(cls) -> "MangaPageEvent":
        return cls(cls.Kind.READ_SUCCESSFUL)

    @classmethod
    def load_chapters(cls, response: Any) -> "MangaPageEvent":
        return cls(cls.Kind.LOAD_CHAPTERS, response)

    @classmethod
    def load_statistics(cls, statistics: Any) -> "MangaPageEvent":
        return cls(cls.Kind.LOAD_STATISTICS, statistics)


@dataclass
class ChapterItem:
    """A chapter as listed on the manga page."""

    id: str = ""
    title: str = ""
    chapter_number: str = ""
    volume_number: Optional[str] = None
    scanlator: str = ""
    translated_language: str = "en"
    is_read: bool = False
    is_downloaded: bool = False
    is_bookmarked: bool = False
    download_loading_state: Optional[float] = None
    download_error: bool = False
    read_error: bool = False

    def set_normal_state(self) -> None:
        """Clear any download or read error."""
        self.download_error = False
        self.read_error = False

    def set_download_error(self) -> None:
        """Mark the download as failed and stop showing its progress."""
        self.download_error = True
        self.download_loading_state = None

    def set_read_error(self) -> None:
        self.read_error = True


@dataclass
class ChaptersData:
    """One page of chapters, with the selected row and pagination."""

    chapters: list[ChapterItem] = field(default_factory=list)
    selected: Optional[int] = None
    page: int = 1
    total_result: int = 0

    def next(self) -> None:
        """Select the next chapter, staying on the last one."""
        if not self.chapters:
            return
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = min(self.selected + 1, len(self.chapters) - 1)

    def previous(self) -> None:
        """Select the previous chapter, staying on the first one."""
        if not self.chapters:
            return
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = max(min(self.selected, len(self.chapters) - 1) - 1, 0)

    def selected_chapter(self) -> Optional[ChapterItem]:
        if self.selected is None or not 0 <= self.selected < len(self.chapters):
            return None
        return self.chapters[self.selected]

    def find(self, chapter_id: str) -> Optional[ChapterItem]:
        """Return the chapter with ``chapter_id``, if listed."""
        return next((chapter for chapter in self.chapters if chapter.id == chapter_id), None)