from __future__ import annotations

import asyncio

import aiohttp
import pytest

from pyawsconfig._transport import HttpClient


@pytest.mark.asyncio
async def test_owned_session_created_lazily_and_closed() -> None:
    client = HttpClient()
    assert not client.is_open
    assert not client.is_external

    session = await client.session()
    assert isinstance(session, aiohttp.ClientSession)
    assert client.is_open
    assert await client.session() is session

    await client.close()
    assert not client.is_open
    assert session.closed


@pytest.mark.asyncio
async def test_external_session_is_borrowed() -> None:
    async with aiohttp.ClientSession() as external:
        client = HttpClient(external)
        assert client.is_external
        assert await client.session() is external

        await client.close()
        assert not external.closed


def test_repr_reports_state() -> None:
    assert repr(HttpClient()) == "HttpClient(idle)"


def test_owned_session_recreated_on_new_event_loop() -> None:
    client = HttpClient()

    async def grab() -> tuple[aiohttp.ClientSession, asyncio.AbstractEventLoop]:
        return await client.session(), asyncio.get_running_loop()

    async def grab_and_close() -> tuple[aiohttp.ClientSession, asyncio.AbstractEventLoop]:
        session, loop = await grab()
        await client.close()
        return session, loop

    first, _ = asyncio.run(grab())
    second, second_loop = asyncio.run(grab_and_close())

    assert second is not first
    assert second._loop is second_loop  # noqa: SLF001
    assert first.closed
    assert second.closed
    assert not client.is_open


def test_close_after_loop_ended_releases_session() -> None:
    client = HttpClient()
    session = asyncio.run(client.session())

    asyncio.run(client.close())

    assert session.closed
    assert not client.is_open


@pytest.mark.asyncio
async def test_async_context_manager_closes_owned_session() -> None:
    async with HttpClient() as client:
        session = await client.session()
        assert client.is_open
    assert session.closed
