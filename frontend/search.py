import threading
from typing import Callable, List, Optional

from loguru import logger

from backend.schemas import EstimateSummary
from frontend.api_client import ApiClient, SubmitResult

DEFAULT_DELAY = 0.3


class DebouncedSearch:
    """Keystroke-driven estimate search.

    Each ``submit`` supersedes the pending one and bumps a generation
    counter. When a fetch finishes its result is applied only if no newer
    query was issued meanwhile, so a slow stale response can never
    overwrite a fresher one.
    """

    def __init__(
        self,
        fetch: Callable[[str], SubmitResult],
        on_results: Callable[[List[EstimateSummary]], None],
        delay: float = DEFAULT_DELAY,
        timer_factory=threading.Timer,
        on_error: Optional[Callable[[str], None]] = None,
    ):
        self.fetch = fetch
        self.on_results = on_results
        self.on_error = on_error
        self.delay = delay
        self.timer_factory = timer_factory
        self.generation = 0
        self._timer = None
        self._lock = threading.Lock()

    @classmethod
    def for_client(cls, client: ApiClient, on_results, **kwargs) -> "DebouncedSearch":
        return cls(lambda query: client.search_estimates(query), on_results, **kwargs)

    def submit(self, query: str) -> int:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self.generation += 1
            generation = self.generation
            timer = self.timer_factory(self.delay, self._run, args=(generation, query))
            self._timer = timer
        timer.start()
        return generation

    def cancel(self):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            # anything still in flight is now stale
            self.generation += 1

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self.generation

    def _run(self, generation: int, query: str):
        result = self.fetch(query.strip())
        if not self.is_current(generation):
            logger.debug(f"Dropping stale search result for {query!r} (generation {generation})")
            return
        if result.ok:
            self.on_results(list(result.data.items))
        elif self.on_error is not None:
            self.on_error(result.error)
