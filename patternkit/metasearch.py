"""Query several simulated search engines at once and gather their results."""

from __future__ import annotations

import logging
import queue
import random
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Protocol

log = logging.getLogger(__name__)

DEFAULT_MAX_DELAY = 0.9


@dataclass(frozen=True)
class Result:
    """One hit returned by a search engine."""

    engine: str
    title: str
    description: str
    link: str


class Searcher(Protocol):
    """Anything that can answer a search term with a list of results."""

    def search(self, term: str) -> list[Result]: ...


def _simulate(name: str, term: str, result: Result, max_delay: float) -> list[Result]:
    log.info("%s : Search : Started : search term [%s]", name, term)
    time.sleep(random.uniform(0.0, max_delay))
    results = [result]
    log.info("%s : Search : Completed : Found[%d]", name, len(results))
    return results


@dataclass
class Google:
    """Simulated Google search that answers after a random delay."""

    max_delay: float = DEFAULT_MAX_DELAY

    def search(self, term: str) -> list[Result]:
        return _simulate(
            "Google",
            term,
            Result(
                engine="Google",
                title="The Programming Language",
                description="The Programming Language",
                link="https://lang.example.com/",
            ),
            self.max_delay,
        )


@dataclass
class Bing:
    """Simulated Bing search that answers after a random delay."""

    max_delay: float = DEFAULT_MAX_DELAY

    def search(self, term: str) -> list[Result]:
        return _simulate(
            "Bing",
            term,
            Result(
                engine="Bing",
                title="A Guided Tour",
                description="Welcome to a guided tour of the programming language.",
                link="https://tour.example.com/",
            ),
            self.max_delay,
        )


@dataclass
class Yahoo:
    """Simulated Yahoo search that answers after a random delay."""

    max_delay: float = DEFAULT_MAX_DELAY

    def search(self, term: str) -> list[Result]:
        return _simulate(
            "Yahoo",
            term,
            Result(
                engine="Yahoo",
                title="Playground",
                description="The Playground is a web service that runs code on remote servers",
                link="https://play.example.com/",
            ),
            self.max_delay,
        )


@dataclass
class SearchSession:
    """The searchers to query and whether only the first answer is wanted."""

    searchers: dict[str, Searcher] = field(default_factory=dict)
    first: bool = False


Option = Callable[[SearchSession], object]


def google(session: SearchSession) -> None:
    """Add Google to the session."""
    log.info("search : Submit : Info : Adding Google")
    session.searchers["google"] = Google()


def bing(session: SearchSession) -> None:
    """Add Bing to the session."""
    log.info("search : Submit : Info : Adding Bing")
    session.searchers["bing"] = Bing()


def yahoo(session: SearchSession) -> None:
    """Add Yahoo to the session."""
    log.info("search : Submit : Info : Adding Yahoo")
    session.searchers["yahoo"] = Yahoo()


def only_first(session: SearchSession) -> None:
    """Keep only the results of whichever searcher answers first."""
    session.first = True


def _run_search(searcher: Searcher, query: str, outcomes: queue.Queue) -> None:
    try:
        outcomes.put(searcher.search(query))
    except Exception as exc:
        outcomes.put(exc)


def _discard(outcomes: queue.Queue, count: int) -> None:
    for _ in range(count):
        outcome = outcomes.get()
        if isinstance(outcome, BaseException):
            log.info("search : Submit : Info : Search Failed : %s", outcome)
        else:
            log.info(
                "search : Submit : Info : Results Discarded : Results[%d]", len(outcome)
            )


def submit(query: str, *options: Option) -> list[Result]:
    """Run every configured searcher concurrently and collect their results.

    Results come in the order the searchers answer. A searcher's error is
    raised here if its answer is one that would have been used.
    """
    session = SearchSession()
    for option in options:
        option(session)

    outcomes: queue.Queue = queue.Queue()
    for searcher in session.searchers.values():
        threading.Thread(
            target=_run_search, args=(searcher, query, outcomes), daemon=True
        ).start()

    total = len(session.searchers)
    wanted = min(total, 1) if session.first else total

    results: list[Result] = []
    for _ in range(wanted):
        log.info("search : Submit : Info : Waiting For Results...")
        outcome = outcomes.get()
        if isinstance(outcome, BaseException):
            raise outcome
        log.info("search : Submit : Info : Results Used : Results[%d]", len(outcome))
        results.extend(outcome)

    if total > wanted:
        threading.Thread(
            target=_discard, args=(outcomes, total - wanted), daemon=True
        ).start()

    log.info("search : Submit : Completed : Found [%d] Results", len(results))
    return results


def main(argv: list[str] | None = None) -> int:
    """Search once keeping only the first answer, then once keeping all."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    for result in submit("gopher", only_first, google, bing, yahoo):
        log.info("main : Results : Info : %r", result)

    log.info("--------------------------------------------------")

    for result in submit("gopher", google, bing, yahoo):
        log.info("main : Results : Info : %r", result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())