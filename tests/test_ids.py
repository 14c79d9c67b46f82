"""Tests for the request id generator."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from jsonrpc_frame.ids import RequestIdGenerator, default_generator


class TestRequestIdGenerator:
    def test_starts_at_one(self) -> None:
        gen = RequestIdGenerator()
        assert gen.next() == 1

    def test_custom_start(self) -> None:
        gen = RequestIdGenerator(start=100)
        assert gen.next() == 100
        assert gen.next() == 101

    def test_strictly_increasing(self) -> None:
        gen = RequestIdGenerator()
        ids = [gen.next() for _ in range(500)]
        assert all(a < b for a, b in zip(ids, ids[1:]))

    def test_instances_are_independent(self) -> None:
        first = RequestIdGenerator()
        second = RequestIdGenerator()
        first.next()
        first.next()
        assert second.next() == 1

    def test_iterator_protocol(self) -> None:
        gen = RequestIdGenerator(start=7)
        assert next(gen) == 7
        assert gen.next() == 8
        assert iter(gen) is gen

    def test_repr_shows_next_value(self) -> None:
        gen = RequestIdGenerator(start=3)
        gen.next()
        assert repr(gen) == "RequestIdGenerator(next=4)"


class TestConcurrency:
    def test_unique_across_threads(self) -> None:
        gen = RequestIdGenerator()
        per_thread = 2000
        threads = 8

        def allocate() -> list[int]:
            return [gen.next() for _ in range(per_thread)]

        with ThreadPoolExecutor(max_workers=threads) as pool:
            results = list(pool.map(lambda _: allocate(), range(threads)))

        ids = [i for chunk in results for i in chunk]
        assert len(ids) == per_thread * threads
        assert len(set(ids)) == len(ids)
        # No increment was lost
        assert set(ids) == set(range(1, per_thread * threads + 1))

    def test_each_thread_sees_increasing_ids(self) -> None:
        gen = RequestIdGenerator()
        barrier = threading.Barrier(4)
        seen: list[list[int]] = []
        lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            local = [gen.next() for _ in range(500)]
            with lock:
                seen.append(local)

        workers = [threading.Thread(target=worker) for _ in range(4)]
        for t in workers:
            t.start()
        for t in workers:
            t.join()

        for local in seen:
            assert local == sorted(local)


class TestDefaultGenerator:
    def test_is_shared(self) -> None:
        assert default_generator() is default_generator()

    def test_advances(self) -> None:
        gen = default_generator()
        first = gen.next()
        assert gen.next() > first
