"""Tests for pagemap.pages.types — loader variants and entry normalisation."""

import asyncio

import anyio
import pytest

from pagemap.pages.types import Eager, Lazy, PagePath, as_loader


class TestAsLoader:
    def test_callable_is_lazy(self) -> None:
        def load() -> str:
            return "page"

        assert as_loader(load) == Lazy(load)

    def test_async_callable_is_lazy(self) -> None:
        async def load() -> str:
            return "page"

        assert isinstance(as_loader(load), Lazy)

    def test_plain_value_is_eager(self) -> None:
        assert as_loader("page") == Eager("page")

    async def test_coroutine_is_eager(self) -> None:
        async def load() -> str:
            return "page"

        coro = load()
        loader = as_loader(coro)
        assert isinstance(loader, Eager)
        assert await loader.load() == "page"

    def test_wrapped_entries_pass_through(self) -> None:
        eager = Eager("page")
        lazy = Lazy(lambda: "page")
        assert as_loader(eager) is eager
        assert as_loader(lazy) is lazy


class TestEager:
    async def test_plain_value(self) -> None:
        assert await Eager("page").load() == "page"

    async def test_future_awaited_each_time(self) -> None:
        future = asyncio.get_running_loop().create_future()
        future.set_result("page")
        loader = Eager(future)
        assert await loader.load() == "page"
        assert await loader.load() == "page"

    async def test_coroutine_awaited_once(self) -> None:
        calls: list[int] = []

        async def load() -> str:
            calls.append(1)
            await anyio.sleep(0.01)
            return "page"

        loader = Eager(load())
        results: list[str] = []

        async def collect() -> None:
            results.append(await loader.load())

        async with anyio.create_task_group() as tg:
            tg.start_soon(collect)
            tg.start_soon(collect)
            tg.start_soon(collect)
        assert results == ["page", "page", "page"]
        assert await loader.load() == "page"
        assert calls == [1]

    async def test_failure_propagates(self) -> None:
        async def load() -> str:
            raise ValueError("bad page")

        with pytest.raises(ValueError, match="bad page"):
            await Eager(load()).load()

    async def test_failure_shared_by_later_loads(self) -> None:
        async def load() -> str:
            raise ValueError("bad page")

        loader = Eager(load())
        with pytest.raises(ValueError, match="bad page"):
            await loader.load()
        with pytest.raises(ValueError, match="bad page"):
            await loader.load()

    async def test_cancelled_first_load(self) -> None:
        async def load() -> str:
            await anyio.sleep(10)
            return "page"

        loader = Eager(load())
        with anyio.move_on_after(0.01):
            await loader.load()
        with pytest.raises(RuntimeError, match="cancelled"):
            await loader.load()

    def test_equality_ignores_load_state(self) -> None:
        assert Eager("page") == Eager("page")
        assert repr(Eager("page")) == "Eager(value='page')"


class TestLazy:
    async def test_sync_producer(self) -> None:
        assert await Lazy(lambda: "page").load() == "page"

    async def test_async_producer(self) -> None:
        async def load() -> str:
            return "page"

        assert await Lazy(load).load() == "page"

    async def test_producer_returning_awaitable(self) -> None:
        future = asyncio.get_running_loop().create_future()
        future.set_result("page")
        assert await Lazy(lambda: future).load() == "page"

    def test_frozen(self) -> None:
        lazy = Lazy(lambda: "page")
        with pytest.raises(AttributeError):
            lazy.producer = lambda: "other"  # type: ignore[misc]


class TestPagePath:
    def test_frozen(self) -> None:
        path = PagePath(primary="../pages/a.tsx", domain="main", candidates=("../pages/a.tsx",))
        with pytest.raises(AttributeError):
            path.domain = "blog"  # type: ignore[misc]
