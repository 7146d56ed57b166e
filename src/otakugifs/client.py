"""High-level OtakuGIFs client."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from otakugifs.api.gifs import GifsAPI
from otakugifs.builder import GifRequestBuilder
from otakugifs.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, HTTPClient
from otakugifs.models.enums import ImageFormat, Reaction
from otakugifs.models.gifs import GifResult, ReactionsResult


class Client:
    """Top-level SDK client.

    Usage::

        async with Client() as client:
            gif = await client.get_gif(Reaction.kiss)
            print(gif.url)

    Pass ``http_client`` to reuse an existing ``httpx.AsyncClient``; it is
    closed with this client only when ``owns_http_client`` is true.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        owns_http_client: bool = False,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.http = HTTPClient(
            base_url,
            timeout=timeout,
            client=http_client,
            owns_client=owns_http_client,
        )
        self.gifs = GifsAPI(self.http)

    async def get_gif(
        self,
        reaction: Reaction | str,
        format: ImageFormat | str = ImageFormat.gif,
        *,
        cancel: asyncio.Event | None = None,
    ) -> GifResult:
        """Fetch a random GIF URL for ``reaction`` in ``format``.

        Names that are not a :class:`Reaction` or :class:`ImageFormat` raise
        ``ValueError`` before any request is sent.
        """
        return await self.gifs.get(reaction, format, cancel=cancel)

    async def get_all_reactions(self, *, cancel: asyncio.Event | None = None) -> ReactionsResult:
        """Fetch the reaction names the service currently supports."""
        return await self.gifs.all_reactions(cancel=cancel)

    def request(self) -> GifRequestBuilder:
        """Start a new fluent GIF request."""
        return GifRequestBuilder(self)

    # --- Context manager ---

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
