"""Key and mouse bindings of the manga page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mangatui.manga_models import (
    DownloadAllChaptersState,
    DownloadPhase,
    MangaPageAction,
    PageState,
)

_LANGUAGE_LIST_KEYS = {
    "j": MangaPageAction.SCROLL_DOWN_AVAILABLE_LANGUAGES,
    "down": MangaPageAction.SCROLL_DOWN_AVAILABLE_LANGUAGES,
    "k": MangaPageAction.SCROLL_UP_AVAILABLE_LANGUAGES,
    "up": MangaPageAction.SCROLL_UP_AVAILABLE_LANGUAGES,
    "enter": MangaPageAction.SEARCH_BY_LANGUAGE,
    "s": MangaPageAction.SEARCH_BY_LANGUAGE,
    "l": MangaPageAction.TOGGLE_AVAILABLE_LANGUAGES_LIST,
    "esc": MangaPageAction.TOGGLE_AVAILABLE_LANGUAGES_LIST,
}

_CHAPTER_LIST_KEYS = {
    "j": MangaPageAction.SCROLL_CHAPTER_DOWN,
    "down": MangaPageAction.SCROLL_CHAPTER_DOWN,
    "k": MangaPageAction.SCROLL_CHAPTER_UP,
    "up": MangaPageAction.SCROLL_CHAPTER_UP,
    "t": MangaPageAction.TOGGLE_ORDER,
    "r": MangaPageAction.READ_CHAPTER,
    "enter": MangaPageAction.READ_CHAPTER,
    "d": MangaPageAction.DOWNLOAD_CHAPTER,
    "a": MangaPageAction.ASK_DOWNLOAD_ALL_CHAPTERS,
    "c": MangaPageAction.GO_MANGAS_AUTHOR,
    "v": MangaPageAction.GO_MANGAS_ARTIST,
    "l": MangaPageAction.TOGGLE_AVAILABLE_LANGUAGES_LIST,
    "w": MangaPageAction.SEARCH_NEXT_CHAPTER_PAGE,
    "b": MangaPageAction.SEARCH_PREVIOUS_CHAPTER_PAGE,
    "m": MangaPageAction.BOOKMARK_CHAPTER_SELECTED,
    "tab": MangaPageAction.GO_TO_READ_BOOKMARKED_CHAPTER,
}


@dataclass
class InputContext:
    """The parts of the manga page's state that decide what a key does."""

    languages_open: bool = False
    page_state: PageState = PageState.SEARCHING_CHAPTERS
    download: DownloadAllChaptersState = field(default_factory=DownloadAllChaptersState)
    auto_bookmark: bool = False


def _normalize(key: str) -> str:
    return key.lower() if len(key) > 1 else key


def _download_key(key: str, download: DownloadAllChaptersState) -> Optional[MangaPageAction]:
    if key == "esc":
        if download.phase is DownloadPhase.DOWNLOADING_CHAPTERS:
            return MangaPageAction.ASK_ABORT_PROCESS
        if download.phase is DownloadPhase.ASK_ABORT_PROCESS:
            download.continue_download()
            return None
        return MangaPageAction.CANCEL_DOWNLOAD_ALL
    if key == "enter":
        if download.phase is DownloadPhase.ASK_ABORT_PROCESS:
            return MangaPageAction.ABORT_DOWNLOAD_ALL_CHAPTERS
        return MangaPageAction.CONFIRM_DOWNLOAD_ALL
    return None


def action_for_key(key: str, context: InputContext) -> Optional[MangaPageAction]:
    """Return the action bound to ``key`` in ``context``, or None.

    Pressing Esc while being asked whether to abort downloading all chapters
    resumes the download in ``context.download`` directly and returns None.
    """
    key = _normalize(key)
    if context.languages_open:
        return _LANGUAGE_LIST_KEYS.get(key)
    if context.page_state is PageState.SEARCHING_CHAPTER_DATA:
        return None
    if context.download.process_started():
        return _download_key(key, context.download)
    action = _CHAPTER_LIST_KEYS.get(key)
    if action is MangaPageAction.BOOKMARK_CHAPTER_SELECTED and context.auto_bookmark:
        return None
    return action


def action_for_scroll(up: bool, languages_open: bool) -> MangaPageAction:
    """Return the action for a mouse-wheel scroll."""
    if languages_open:
        if up:
            return MangaPageAction.SCROLL_UP_AVAILABLE_LANGUAGES
        return MangaPageAction.SCROLL_DOWN_AVAILABLE_LANGUAGES
    return MangaPageAction.SCROLL_CHAPTER_UP if up else MangaPageAction.SCROLL_CHAPTER_DOWN