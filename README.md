# triagekit

triagekit is a library of building blocks for triaging issues and pull
requests. It has no third-party dependencies. It provides:

- a filter description and the matchers behind it: durations, numeric ranges,
  negatable regular expressions, labels and tags
- a review-state calculation for pull requests
- title normalisation and a title-similarity index
- a tracker of the latest known update time of each item
- cache keys for repository listings
- a two-level cache: an expiring in-memory store, optionally mirrored to files
  on disk

## Installation

```
pip install triagekit
```

To install with the test dependencies:

```
pip install "triagekit[test]"
```

## Caching

`triagekit.memstore` defines `Blob`, the cached record. A `Blob` has a
`created` time and lists of `issues`, `pull_requests`,
`pull_request_comments`, `issue_comments`, `timeline` and `reviews`, plus an
`extras` dict. The module also defines `Config(program, backend, path)`.

`ExpiringStore` is a thread-safe map whose entries expire after seven days by
default. `set` stamps a blob with the current UTC time if it has no `created`
time. `get(key, newer_than)` returns `None` when the entry is:

- missing
- expired
- created before `newer_than`

`MemoryCache` wraps an `ExpiringStore`. `DiskCache`, in `triagekit.diskstore`,
adds one pickled file per key. When a key is not in memory, `DiskCache.get`
reads the file back and then keeps the blob in memory. If `Config.path` is
empty, `initialize()` uses `<user cache dir>/<program>`.

```python
from triagekit.memstore import Blob, Config
from triagekit.diskstore import DiskCache

cache = DiskCache(Config(program="my-tool", path="/tmp/triage-cache"))
cache.initialize()
cache.set("org-project-open-issues", Blob(issues=[]))
blob = cache.get("org-project-open-issues", None)
```

Both caches raise `RuntimeError` if used before `initialize()`. `DiskCache.set`
raises `ValueError` for an empty key or a blob that cannot be pickled.

`triagekit.keys` builds cache keys for repository listings:

```python
from datetime import timedelta
from triagekit.keys import issue_search_key, pr_search_key

issue_search_key("org", "project", "open")                      # "org-project-open-issues"
pr_search_key("org", "project", "closed", timedelta(hours=72))  # "org-project-closed-prs-within-72.0h"
```

`reactions(r)` reads reaction counts from a record and returns them by name.
The names are `thumbs_up`, `thumbs_down`, `laugh`, `confused`, `heart` and
`hooray`.

## Filtering

`triagekit.match.Filter` describes one set of conditions. Empty fields are
ignored. The fields are:

- `state`, `closed`, `updated`, `responded`, `created` and `prioritized`
- the count specs `reactions`, `reactions_per_month`, `commenters`,
  `commenters_per_month`, `comments`, `closed_commenters` and
  `closed_comments`
- `title_regex`, `label_regex`, `milestone_regex` and `tag_regex`, each with a
  matching `*_negate` flag

The matchers:

```python
from triagekit.match import parse_duration, match_duration, match_range

parse_duration("<3d")          # (timedelta(days=3), True, False)  -> within
parse_duration(">2w")          # (timedelta(days=14), False, True) -> over
match_range(12.0, ">=10")      # True
match_duration(updated, "+2w") # updated more than two weeks ago
```

- `parse_duration` accepts days (`d`) and weeks (`w`) as well as
  `h`, `m`, `s`, `ms`, `us` and `ns`. It returns `(timedelta(0), False, False)`
  for text it cannot parse.
- `match_duration(None, ...)` is always `False`.
- `match_negate_regex`, `match_label` and `match_tag` accept compiled patterns
  or strings. The match result is inverted when `negate` is true.

`triagekit.selection` has two helpers:

- `needs_closed(filters)` reports whether any filter requires closed items.
- `dedupe_items(items, debug)` keeps the first item for each URL. If `debug`
  names any item numbers, it keeps only those items.

## Review state

`triagekit.reviews.review_state(timeline, reviews)` returns one of:

- `UNREVIEWED`
- `NEW_COMMITS`
- `CHANGES_REQUESTED`
- `APPROVED`
- `PUSHED_AFTER_APPROVAL`
- `COMMENTED`
- `MERGED`
- `CLOSED`

Timeline events and reviews may be objects or dicts. Events use the fields
`event`, `created_at`, `commit_id` and `url`. Reviews use `commit_id`, `state`
and `submitted_at`.

## Similar titles and update times

`triagekit.similar` provides three pieces:

- `normalize_title` lower-cases a title, keeps only letters and drops filler
  words: `"Fix: crash on startup!"` becomes `"crash startup"`.
- `compare_strings` gives the Dice coefficient of character bigrams.
- `SimilarityIndex(min_similarity)` links titles whose score exceeds the
  threshold. `add(raw_title, url)` records a title, and
  `similar_urls(raw_title)` lists the URLs of resembling titles. A threshold of
  `0` disables the index.

`triagekit.tracker.UpdateTracker` records the latest update time seen for each
item key:

- `update(key, ts)` keeps only later times.
- `mtime_key(idea, key)` returns the later of `idea` and the recorded time.
- `update_key(url)` turns an item URL such as
  `https://github.com/org/project/pull/12` into `org/project#12`.
- `ref_key(org, project, num)` builds the same key from its parts.

`triagekit.timefmt.stime` formats a time as `MMDD HH:MM:SS` for log lines.
`triagekit.constants` holds state names, sort options, provider names and
hosts.

## What it does not do

triagekit does not:

- talk to any issue tracker or download data
- build conversation summaries or run searches
- choose a cache backend by name or from environment variables
- store data in a database: the caches are memory-only (`MemoryCache`) or
  memory plus files (`DiskCache`)
- provide a command-line program or a server