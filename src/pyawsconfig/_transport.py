"""Shared HTTP client handle.

:class:`AwsConfig` only stores and shares an :class:`HttpClient`; it never
sends anything through it.  The handle owns (or borrows) one
``aiohttp.ClientSession`` that the request layer reuses across clients.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

_logger = logging.getLogger(__name__)


class HttpClient:
    """Lazily created, optionally borrowed ``aiohttp`` session.

    Passing *session* makes the handle borrow it: :meth:`close` will then
    leave it open, matching how an externally supplied session is treated
    by the rest of the SDK.  Without one, a session is created on the first
    :meth:`session` call, which must happen inside a running event loop.

    An owned session is bound to the loop it was created on.  When a later
    call runs on a different loop (e.g. a second ``asyncio.run``), the stale
    session is dropped and a new one is created.  Owners of the handle
    should ``await client.close()`` (or use ``async with client:``) before
    their loop ends; this includes :data:`DEFAULT_HTTP_CLIENT`.
    """

    def __init__(self, session: aiohttp.ClientSession | None = None) -> None:
        self._external_session = session is not None
        self._session = session

    async def __aenter__(self) -> HttpClient:
        await self.session()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    @property
    def is_external(self) -> bool:
        return self._external_session

    @property
    def is_open(self) -> bool:
        return self._session is not None and not self._session.closed

    def _is_stale(self, session: aiohttp.ClientSession) -> bool:
        loop = session._loop  # noqa: SLF001
        return loop.is_closed() or loop is not asyncio.get_running_loop()

    def _drop_stale(self) -> None:
        # The owning loop is gone, so the session can no longer be closed
        # through it; detach the connector instead.
        assert self._session is not None  # noqa: S101
        _logger.debug("Dropping aiohttp session bound to a previous event loop")
        self._session.detach()
        self._session = None

    async def session(self) -> aiohttp.ClientSession:
        """Return the underlying session, creating it on first use."""
        if self._session is not None and not self._external_session:
            if self._session.closed:
                self._session = None
            elif self._is_stale(self._session):
                self._drop_stale()
        if self._session is None:
            _logger.debug("Creating shared aiohttp session")
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        """Close the session if this handle created it."""
        if self._external_session or self._session is None:
            return
        if self._is_stale(self._session):
            self._drop_stale()
            return
        await self._session.close()
        self._session = None

    def __repr__(self) -> str:
        state = "external" if self._external_session else ("open" if self.is_open else "idle")
        return f"{type(self).__name__}({state})"


#: Process default handle referenced by the default configuration.
DEFAULT_HTTP_CLIENT = HttpClient()
