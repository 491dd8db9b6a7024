from pathlib import Path

import pytest

from mangatui.manga_models import (
    BookmarkPhase,
    ChapterItem,
    ChapterOrder,
    ChaptersData,
    DownloadAllChaptersState,
    DownloadPhase,
    MangaPageEvent,
)


def test_chapter_order_default_is_descending():
    assert ChapterOrder.default() is ChapterOrder.DESCENDING


def test_chapter_order_toggles_both_ways():
    assert ChapterOrder.DESCENDING.toggle() is ChapterOrder.ASCENDING
    assert ChapterOrder.ASCENDING.toggle() is ChapterOrder.DESCENDING


@pytest.mark.parametrize(
    "order, text", [(ChapterOrder.ASCENDING, "asc"), (ChapterOrder.DESCENDING, "desc")]
)
def test_chapter_order_str(order, text):
    assert str(order) == text


def test_bookmark_phase_default():
    assert BookmarkPhase.default() is BookmarkPhase.NOT_SEARCHING


def test_download_state_starts_not_started():
    state = DownloadAllChaptersState()
    assert not state.process_started()
    assert not state.is_downloading()


def test_download_flow_ask_confirm_cancel():
    state = DownloadAllChaptersState()
    state.ask_for_confirmation()
    assert state.process_started()
    state.fetch_chapters_data()
    assert state.phase is DownloadPhase.FETCHING_CHAPTERS_DATA
    assert not state.is_downloading()
    state.cancel()
    assert not state.process_started()


def test_download_progress_and_abort_prompt():
    state = DownloadAllChaptersState()
    state.start_download(4.0)
    assert state.is_downloading()
    state.set_download_progress()
    assert state.downloaded_chapters == 1
    assert state.progress == pytest.approx(0.25)
    state.ask_abort_process()
    assert state.phase is DownloadPhase.ASK_ABORT_PROCESS
    assert state.is_downloading()
    state.continue_download()
    assert state.phase is DownloadPhase.DOWNLOADING_CHAPTERS


def test_abort_and_reset_clear_everything():
    state = DownloadAllChaptersState()
    state.start_download(10.0)
    state.download_location = Path("downloads")
    state.set_download_progress()
    state.abort_process()
    assert state.phase is DownloadPhase.PROCESS_NOT_STARTED
    assert state.downloaded_chapters == 0
    assert state.download_location is None


def test_download_error_phase():
    state = DownloadAllChaptersState()
    state.fetch_chapters_data()
    state.set_download_error()
    assert state.phase is DownloadPhase.ERROR_CHAPTERS_DATA
    assert state.process_started()


def test_progress_without_total_is_zero():
    assert DownloadAllChaptersState().progress == 0.0


def test_chapter_item_error_states():
    item = ChapterItem(id="c1", download_loading_state=0.5)
    item.set_download_error()
    assert item.download_error
    assert item.download_loading_state is None
    item.set_read_error()
    assert item.read_error
    item.set_normal_state()
    assert not item.download_error
    assert not item.read_error


def _data():
    return ChaptersData(chapters=[ChapterItem(id="a"), ChapterItem(id="b"), ChapterItem(id="c")], selected=0)


def test_chapters_data_scrolls_within_bounds():
    data = _data()
    data.next()
    assert data.selected == 1
    data.previous()
    assert data.selected == 0
    data.previous()
    assert data.selected == 0
    data.next()
    data.next()
    data.next()
    assert data.selected == 2


def test_chapters_data_selects_first_when_nothing_selected():
    data = ChaptersData(chapters=[ChapterItem(id="a")])
    assert data.selected_chapter() is None
    data.next()
    assert data.selected_chapter().id == "a"


def test_empty_chapters_data_stays_unselected():
    data = ChaptersData()
    data.next()
    assert data.selected is None


def test_chapters_data_find():
    data = _data()
    assert data.find("b").id == "b"
    assert data.find("missing") is None


def test_events_compare_by_kind_and_payload():
    assert MangaPageEvent.download_error("x") == MangaPageEvent.download_error("x")
    assert MangaPageEvent.download_error("x") != MangaPageEvent.read_error("x")
    event = MangaPageEvent.set_download_progress(0.3, "id")
    assert event.kind is MangaPageEvent.Kind.SET_DOWNLOAD_PROGRESS
    assert event.payload == (0.3, "id")