# patternkit

A collection of small, self-contained concurrency and I/O patterns built on
the Python standard library alone. Each module is usable as a library and
also has a command that runs a short demonstration.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it gives you |
| --- | --- |
| `patternkit.words` | `count_words(text)`: counts whitespace-separated words |
| `patternkit.pool` | `Pool(factory, size)`: keeps up to `size` idle resources, with `acquire`, `release` and `close`; `PoolClosedError` when acquiring from a closed pool; `DBConnection` and `connection_factory` as a sample resource |
| `patternkit.runner` | `Runner(timeout)`: runs tasks added with `add` in order, raising `RunnerTimeout` past the deadline or `RunnerInterrupted` after `interrupt()` or Ctrl-C; `create_task()` makes a sample sleeping task |
| `patternkit.metasearch` | `submit(query, *options)`: runs the searchers chosen by the options `google`, `bing`, `yahoo` concurrently and gathers `Result` values; `only_first` keeps just the first answer. The searchers are simulated and answer after a random delay |
| `patternkit.semaphore` | `Semaphore(capacity)` with `acquire(n)` / `release(n)`, and `ReaderWriter` (many readers, one writer); `start` and `shutdown` run and stop reader and writer threads |
| `patternkit.feeds` | `Feed`, `Result`, `retrieve_feeds(path)`, a matcher registry (`register`, `MatcherAlreadyRegistered`, `DefaultMatcher`), `match` and `run` to search every feed concurrently |
| `patternkit.rss` | `parse_rss(data)` into `RSSDocument` / `Channel` / `Item` / `Image`, and `RSSMatcher`, registered for feeds of type `rss` |
| `patternkit.handlers` | a WSGI app from `make_app()` with a `/sendjson` endpoint (`send_json`), and `serve(port)` |
| `patternkit.pipeline` | `copy_data(system, batch)`: copies `Data` records in batches from a `Puller` to a `Storer`; `Xenia` is a randomly failing source, `Pillar` a sink that prints |
| `patternkit.counting` | `race_increment`, `atomic_increment`, `locked_increment`, `AtomicCounter` and `work_until_shutdown` |
| `patternkit.contacts` | `parse_info(text)` into `Info` / `Contact`, and `info_to_json(info, prefix, indent)` |
| `patternkit.logsetup` | `configure_loggers(error_path)`: returns `Loggers` with trace, info, warning and error loggers; errors are appended to a file and standard error |
| `patternkit.fetch` | `fetch(url, *destinations)`: downloads a URL and writes its body to every destination |
| `patternkit.notify` | `User`, `Admin`, `send_notification` and `Duration` |

## Examples

Counting words:

```python
from patternkit.words import count_words

count_words("the quick  brown\nfox")  # 4
```

Sharing a small pool of resources:

```python
from patternkit.pool import Pool, connection_factory

with Pool(connection_factory, 2) as pool:
    conn = pool.acquire()
    pool.release(conn)
```

Searching several engines at once and keeping only the first reply:

```python
from patternkit.metasearch import submit, only_first, google, bing, yahoo

for result in submit("python", only_first, google, bing, yahoo):
    print(result)
```

Decoding a contact document:

```python
from patternkit.contacts import parse_info, info_to_json

info = parse_info('{"name": "Gopher", "title": "programmer"}')
print(info_to_json(info))
```

## Commands

```
patternkit-wordcount [FILENAME]      # default: gowords.txt
patternkit-pool
patternkit-runner
patternkit-metasearch
patternkit-semaphore
patternkit-rss [TERM] [--data PATH]  # default term "president", data/data.json
patternkit-serve [--port PORT]       # default port 4000
patternkit-pipeline [--batch N]
patternkit-counting [race|atomic|mutex|shutdown|all]
patternkit-contacts
patternkit-logs [--errors PATH]      # default: errors.txt
patternkit-fetch [URL] [OUTPUT]
patternkit-notify
```

`patternkit-serve` answers `GET /sendjson` with `{"Name":"Bill","Email":"[email]"}`
and every other path with 404. `patternkit-runner` runs five tasks that sleep
0 to 4 seconds under a three-second deadline, so it ends with a timeout and
exit status 1.

## What it does not do

The package has no pool of long-lived worker threads that takes submitted
tasks one by one; `Pool` manages reusable resources, not threads. Nor does
it include demonstrations of message passing between threads beyond those
listed above. The search engines in `patternkit.metasearch` are simulated
and never contact a real service.