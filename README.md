# tvpilot

tvpilot is a library for keeping track of TV shows and their episodes.
It holds show and episode records, reads and writes them in a plain
line-based text format, downloads show pages from epguides.com in the
background, and provides the sortable lists and the application logic
(button states, context menus, episode marking) of a show tracker.

## Modules

- `tvpilot.episode` – `Episode` (number, air date, title, `EpisodeFlags`),
  with `simple_date()` (`YYYY-Mon-DD`), `julian_day()` and `to_lines()`;
  `read_episode(lines)` reads the next four lines back into an `Episode`.
- `tvpilot.show` – `Show` with its title, `ShowFlags`, epguides, TVmaze,
  IMDB and TheTVDB URLs, episodes and `ShowState`. `Show.hash` is
  `url_hash(epguides_url)`, a 32-bit hash of the URL. `to_lines()` writes
  a show and its episodes; `read_show(lines)` reads one back, lower-casing
  the URLs so the hash stays stable, and marks it `ShowState.LOADED`.
- `tvpilot.datafile` – `DataFile(directory=None, confirm_create=None)`
  gives the path of the database file `tvpilot.dat`, in the per-user data
  folder from `default_data_directory()` unless a directory is given. If
  the file does not exist it creates an empty one (setting
  `new_data_file`), after calling `confirm_create()` if supplied; a refusal
  or a failure raises `DataFileError`.
- `tvpilot.fetch` – `PageFetcher(url, tries, retry_delay, timeout, opener)`
  retrieves a page. `fetch_url()` makes one attempt and returns the HTTP
  status; `download_show()` retries with a delay until a 200 reply or the
  tries run out and returns the last body. `FetchError` is raised when no
  HTTP response was received. Certificates are not verified.
- `tvpilot.download` – `DownloadManager(fetch, on_result, on_complete,
  workers)` queues URLs (`download_show`) for a pool of worker threads,
  calls `on_result(url, page, error)` after each one and `on_complete()`
  when the queue is empty and no worker is busy. `in_progress()` reports
  activity, `abort()` drops queued URLs, `close()` stops the workers; it is
  also a context manager.
- `tvpilot.sync` – `SlotsLock`, one lock shared by every instance and
  usable with `with`; `MultiEvents`, which waits on several
  `threading.Event` objects and returns the index of the one set
  (`WaitError` on timeout) and resets it (`ResetError` if not signalled).
- `tvpilot.sorting` – `alpha_compare`, `number_compare`, `episode_compare`
  and `SortContext`, which keeps the sort column and direction: clicking
  the current column again reverses the order, and each column sorts by a
  list of keys so ties fall back to secondary columns.
- `tvpilot.showlists` – `ShowList` (title, episode count, last and next
  air dates) and `ArchiveList` (title, episode count, last air date), fed
  with `ShowListEntry` rows.
- `tvpilot.schedule` – `ScheduleList` of `ScheduleEntry` rows, with
  per-row episode flags (`flags_at`, `set_flags`) and the text colour they
  give (`text_colour`, `colour_for_flags`: green for got, red for not got).
- `tvpilot.zoom` – `EpisodeZoomList(show)` lists every episode of a show,
  with dates written by `format_airdate` as `DD-Mon-YYYY`.
- `tvpilot.events` – `AppEvent`, `Tab`, `Button`; `ButtonStates.apply()`
  updates which buttons are enabled after an event; `DaysWindow` holds the
  days before and after today that the schedule covers (1 to 30, default 7).
- `tvpilot.app` – `normalise_show_url` validates an epguides.com show URL
  (raising `InvalidShowUrl`), `context_menu` builds the `MenuItem` list for
  a show, `apply_flag_command` applies Got It / Not Got It / Clear,
  `launch_url` picks the address a menu command opens and
  `open_in_browser` opens it.
- `tvpilot.dialogs` – `MessageLog` and `lowercase_input`.
- `tvpilot.resources` – the `DialogId`, `ControlId` and `MenuCommand`
  numbers.

## Example

```python
from datetime import date

from tvpilot.app import InvalidShowUrl, normalise_show_url
from tvpilot.episode import Episode
from tvpilot.show import Show, read_show

try:
    url = normalise_show_url("https://www.epguides.com/SomeShow")
except InvalidShowUrl:
    print("not an epguides.com show page")
else:
    show = Show(
        title="Some Show",
        epguides_url=url,
        episodes=[Episode("1-1", date(2024, 1, 5), "Pilot")],
    )
    copy = read_show(show.to_lines())
    print(copy.title, copy.hash == show.hash)
```

Marking an episode on the schedule:

```python
from tvpilot.app import apply_flag_command
from tvpilot.episode import EpisodeFlags
from tvpilot.resources import MenuCommand

flags = apply_flag_command(EpisodeFlags.NOT_GOT, MenuCommand.GOT_IT)
# flags == EpisodeFlags.GOT
```

## Record format

A show is written as its title, flags, epguides, TVmaze, IMDB and TheTVDB
URLs and the number of episodes, one per line, followed by its episodes.
Each episode is four lines: episode number, air date (`YYYY-Mon-DD`),
title and flags.

## What it does not do

tvpilot is a library only. It has no window or command-line program, does
not extract episodes from a downloaded epguides.com page, does not load or
save a whole database of shows (`DataFile` only locates or creates the
file; shows are read and written one at a time), and does not itself pick
the episodes that fall inside the schedule window.

## Requirements

Python 3.10 or later and `platformdirs`. Tests use `pytest`
(`pip install tvpilot[test]`).