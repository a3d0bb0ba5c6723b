import threading

from osrandom.lazy import LazyBool, LazyUsize


class _Counter:
    def __init__(self, result):
        self.calls = 0
        self.result = result

    def __call__(self):
        self.calls += 1
        return self.result


def test_lazy_usize_caches_first_value():
    lazy = LazyUsize()
    first = _Counter(42)
    assert lazy.unsync_init(first) == 42
    second = _Counter(7)
    assert lazy.unsync_init(second) == 42
    assert first.calls == 1
    assert second.calls == 0


def test_lazy_usize_uninit_result_not_cached():
    lazy = LazyUsize()
    failing = _Counter(LazyUsize.UNINIT)
    assert lazy.unsync_init(failing) == LazyUsize.UNINIT
    assert lazy.unsync_init(failing) == LazyUsize.UNINIT
    assert failing.calls == 2
    assert lazy.unsync_init(_Counter(3)) == 3
    assert lazy.unsync_init(failing) == 3
    assert failing.calls == 2


def test_lazy_usize_zero_is_cached():
    lazy = LazyUsize()
    init = _Counter(0)
    assert lazy.unsync_init(init) == 0
    assert lazy.unsync_init(init) == 0
    assert init.calls == 1


def test_lazy_bool_true_cached():
    lazy = LazyBool()
    init = _Counter(True)
    assert lazy.unsync_init(init) is True
    assert lazy.unsync_init(_Counter(False)) is True
    assert init.calls == 1


def test_lazy_bool_false_cached():
    lazy = LazyBool()
    init = _Counter(False)
    assert lazy.unsync_init(init) is False
    assert lazy.unsync_init(_Counter(True)) is False
    assert init.calls == 1


def test_lazy_bool_concurrent_callers_agree():
    lazy = LazyBool()
    results = []
    lock = threading.Lock()

    def worker():
        value = lazy.unsync_init(lambda: True)
        with lock:
            results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == [True] * 8
    assert lazy.unsync_init(lambda: False) is True