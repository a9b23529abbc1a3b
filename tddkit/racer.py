"""Race two URLs and report which answers first."""

import queue
import threading
import urllib.request

TEN_SECOND_TIMEOUT = 10.0

_opener = urllib.request.build_opener(urllib.request.ProxyHandler({}))


class RacerTimeoutError(TimeoutError):
    """Raised when neither URL answers within the timeout."""


def _ping(url: str, finished: "queue.Queue[str]") -> None:
    def fetch() -> None:
        try:
            with _opener.open(url) as response:
                response.read()
        except Exception:
            pass
        finished.put(url)

    threading.Thread(target=fetch, daemon=True).start()


def configurable_racer(a: str, b: str, timeout: float) -> str:
    finished: "queue.Queue[str]" = queue.Queue()
    _ping(a, finished)
    _ping(b, finished)
    try:
        return finished.get(timeout=timeout)
    except queue.Empty:
        raise RacerTimeoutError(f"timed out waiting for {a} and {b}") from None


def racer(a: str, b: str) -> str:
    return configurable_racer(a, b, TEN_SECOND_TIMEOUT)