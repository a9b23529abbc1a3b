import threading

from tddkit.counter import Counter


def test_increment_three_times():
    counter = Counter()
    counter.inc()
    counter.inc()
    counter.inc()
    assert counter.value == 3


def test_starts_at_zero():
    assert Counter().value == 0


def test_runs_safely_concurrently():
    wanted_count = 1000
    counter = Counter()
    start = threading.Barrier(10)

    def worker():
        start.wait()
        for _ in range(wanted_count // 10):
            counter.inc()

    threads = [threading.Thread(target=worker) for _ in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert counter.value == wanted_count