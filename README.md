# mangatui

Building blocks for a terminal manga reader: ordering chapters and volumes and
moving between them, the state of a manga's chapter list and of downloading all
its chapters, and the key bindings of the chapter-list screen.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Chapter navigation: `mangatui.chapters`

`SortedChapters` keeps `Chapter` records in ascending numeric order of their
`number` (a string; one that does not parse counts as 0). `SortedVolumes` keeps
`Volume` records ordered "0", "1", "2", ... with the `"none"` volume (chapters
without a volume) last. `ListOfChapters` finds the next or previous chapter,
moving into the neighbouring volume when the current one runs out.

```python
from mangatui.chapters import Chapter, ListOfChapters, SortedChapters, SortedVolumes, Volume

volume = Volume(
    volume="1",
    chapters=SortedChapters([
        Chapter(id="a", number="1", volume="1"),
        Chapter(id="b", number="2", volume="1"),
    ]),
)
chapters = ListOfChapters(SortedVolumes([volume]))

chapters.get_next_chapter("1", 1.0)      # Chapter(id="b", number="2", volume="1")
chapters.get_previous_chapter("1", 2.0)  # Chapter(id="a", number="1", volume="1")
chapters.get_next_chapter("1", 2.0)      # None
```

A volume of `None` is looked up as `"none"`. Chapter numbers are compared as
text after `format_chapter_number`, which writes `1.0` as `"1"` and `1.5` as
`"1.5"`.

`ListOfChapters.from_aggregate` builds the same structure from a mapping of
volume key to `{"chapters": {number: {"id": ..., "others": [...]}}}`; when
`others` is not empty its first id is used instead of `id`.

## Chapter list and downloads: `mangatui.manga_models`

- `ChapterOrder` — `ASCENDING` (`"asc"`) or `DESCENDING` (`"desc"`, the
  default); `toggle()` returns the other one, `str()` gives the value.
- `ChaptersData` — one page of `ChapterItem`s with the selected row, `page` and
  `total_result`. `next()` and `previous()` move the selection and stop at the
  ends; `selected_chapter()` and `find(chapter_id)` return an item or `None`.
- `ChapterItem` — a listed chapter with read, downloaded and bookmarked flags,
  download progress and error flags (`set_download_error`, `set_read_error`,
  `set_normal_state`).
- `DownloadAllChaptersState` — the download-all flow through `DownloadPhase`:
  `ask_for_confirmation`, `fetch_chapters_data`, `start_download(total)`,
  `set_download_progress` (one more chapter done; `progress` is the fraction),
  `ask_abort_process`, `continue_download`, `abort_process`,
  `set_download_error`, `cancel` and `reset`. `process_started()` and
  `is_downloading()` report where it stands.
- `PageState`, `BookmarkPhase`, `MangaPageAction` and `MangaPageEvent` (a kind
  plus payload, made with class methods such as
  `MangaPageEvent.set_download_progress(0.5, "chapter-id")`).

## Key bindings: `mangatui.manga_input`

`action_for_key(key, context)` returns the `MangaPageAction` bound to a key, or
`None`. Keys are single characters (`"j"`, `"d"`, ...) or names such as
`"Enter"`, `"Esc"`, `"Tab"`, `"Up"`, `"Down"` (names are case-insensitive).
The `InputContext` decides which bindings apply:

- with the language list open: `j`/`k`/arrows scroll it, `s`/Enter search by the
  language, `l`/Esc close it;
- while chapter data is being fetched for reading: nothing;
- once the download-all flow has started: Enter confirms (or aborts, when asked
  whether to abort) and Esc asks to abort, cancels, or — when already asked —
  resumes the download in `context.download` and returns `None`;
- otherwise the chapter-list keys: `j`/`k` scroll, `t` order, `r`/Enter read,
  `d` download, `a` download all, `c`/`v` author/artist, `l` languages,
  `w`/`b` next/previous page, `m` bookmark (not when `auto_bookmark` is set),
  Tab read the bookmarked chapter.

`action_for_scroll(up, languages_open)` maps the mouse wheel the same way.

```python
from mangatui.manga_input import InputContext, action_for_key

action_for_key("j", InputContext())  # MangaPageAction.SCROLL_CHAPTER_DOWN
```

## What this package does not do

It has no reader screen and no manga page object that ties these pieces
together: nothing here fetches chapters, pages or covers over the network,
decodes or draws images, renders a terminal interface, or stores bookmarks,
reading history or downloads on disk. It provides the ordering, state and
bindings; the caller supplies the rest.