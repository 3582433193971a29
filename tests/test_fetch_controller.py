import asyncio

import pytest

from logic.errors import ListLoadFailure

pytestmark = pytest.mark.asyncio


class TestLoad:
    async def test_success_matches_service_order(self, fetcher, backend, store, sample_cases):
        backend.cases = list(reversed(sample_cases))
        await fetcher.load()
        assert store.cases == list(reversed(sample_cases))
        assert len(store.cases) == 3
        assert store.loading is False
        assert store.error is None

    async def test_loading_flag_while_outstanding(self, fetcher, backend, store, sample_cases):
        backend.cases = sample_cases
        backend.gate = asyncio.Event()
        task = asyncio.create_task(fetcher.load())
        await asyncio.sleep(0)
        assert store.loading is True
        assert store.cases == []

        backend.gate.set()
        await task
        assert store.loading is False
        assert store.cases == sample_cases

    async def test_failure_without_prior_data(self, fetcher, backend, store):
        backend.list_error = ListLoadFailure("list_cases", "boom")
        await fetcher.load()
        assert store.error == "Failed to load cases. Please try again later."
        assert store.cases == []
        assert store.loading is False

    async def test_failure_keeps_previous_cases(self, fetcher, backend, store, sample_cases):
        store.replace_all(sample_cases)
        backend.list_error = ListLoadFailure("list_cases", "boom")
        await fetcher.load()
        assert store.cases == sample_cases
        assert store.error is not None

    async def test_success_clears_previous_error(self, fetcher, backend, store, sample_cases):
        store.fail("old error")
        backend.cases = sample_cases
        await fetcher.load()
        assert store.error is None

    async def test_listeners_notified(self, fetcher, backend, store, sample_cases):
        seen = []
        store.add_listener(lambda: seen.append((store.loading, len(store.cases))))
        backend.cases = sample_cases
        await fetcher.load()
        assert seen[0] == (True, 0)
        assert seen[-1] == (False, 3)

    async def test_response_after_close_is_dropped(self, fetcher, backend, store, sample_cases):
        backend.cases = sample_cases
        backend.gate = asyncio.Event()
        task = asyncio.create_task(fetcher.load())
        await asyncio.sleep(0)

        store.close()
        backend.gate.set()
        await task
        assert store.cases == []
        assert store.loading is True
