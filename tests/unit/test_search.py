from functools import partial

import pytest

from backend.schemas import EstimateSummary
from frontend.api_client import EstimatePage, SubmitResult
from frontend.search import DebouncedSearch


class ManualTimer:
    """Collects scheduled callbacks so tests decide when (and in what order) they fire"""

    def __init__(self, scheduled, delay, function, args=()):
        self.scheduled = scheduled
        self.delay = delay
        self.function = function
        self.args = args
        self.cancelled = False
        self.started = False

    def start(self):
        self.started = True
        self.scheduled.append(self)

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function(*self.args)


def _page(*titles):
    items = [
        EstimateSummary(id=i, estimate_number=f"EST-{i:04d}", title=title, status="draft", total_amount=0)
        for i, title in enumerate(titles, start=1)
    ]
    return SubmitResult(ok=True, data=EstimatePage(items=items, total=len(items)))


@pytest.fixture
def scheduled():
    return []


def _search(scheduled, fetch, applied, errors=None):
    return DebouncedSearch(fetch, applied.append, timer_factory=partial(ManualTimer, scheduled),
                           on_error=errors.append if errors is not None else None)


def test_new_keystroke_cancels_pending_timer(scheduled):
    applied = []
    search = _search(scheduled, lambda q: _page(q), applied)

    search.submit("k")
    search.submit("ki")

    first, second = scheduled
    assert first.cancelled
    assert not second.cancelled
    assert second.delay == 0.3


def test_stale_response_is_discarded(scheduled):
    applied = []
    search = _search(scheduled, lambda q: _page(q), applied)

    search.submit("kit")
    search.submit("kitchen")
    older, newer = scheduled

    newer.fire()
    older.fire()  # a slow, late response for the superseded query

    assert len(applied) == 1
    assert applied[0][0].title == "kitchen"


def test_cancel_discards_in_flight_result(scheduled):
    applied = []
    search = _search(scheduled, lambda q: _page(q), applied)
    search.submit("deck")
    search.cancel()
    scheduled[0].fire()
    assert applied == []


def test_errors_are_reported_not_raised(scheduled):
    applied, errors = [], []
    search = _search(scheduled, lambda q: SubmitResult(ok=False, error="Failed to search estimates"), applied, errors)
    search.submit("x")
    scheduled[0].fire()
    assert applied == []
    assert errors == ["Failed to search estimates"]


def test_blank_query_lists_all_estimates(scheduled):
    queries, applied = [], []

    def fetch(query):
        queries.append(query)
        return _page("Deck", "Hall")

    search = _search(scheduled, fetch, applied)
    search.submit("   ")
    scheduled[0].fire()

    assert queries == [""]
    assert [e.title for e in applied[0]] == ["Deck", "Hall"]
