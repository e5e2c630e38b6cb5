import threading

from src.timecheck.timecheck.common.locks import KeyedLocks


def test_same_key_is_serialized():
    locks = KeyedLocks()
    inside = []
    overlap = []

    def worker():
        with locks.hold(("MOJV040815", "2026-02-02")):
            inside.append(1)
            if len(inside) > 1:
                overlap.append(True)
            threading.Event().wait(0.01)
            inside.pop()

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert overlap == []
    assert len(locks) == 0


def test_different_keys_do_not_block_each_other():
    locks = KeyedLocks()
    with locks.hold("a"):
        acquired = threading.Event()

        def other():
            with locks.hold("b"):
                acquired.set()

        t = threading.Thread(target=other)
        t.start()
        assert acquired.wait(1.0)
        t.join()
