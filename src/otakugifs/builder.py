"""Fluent builder for GIF requests."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from otakugifs.errors import OtakuGifsInvalidStateError
from otakugifs.models.enums import ImageFormat, Reaction
from otakugifs.models.gifs import GifResult

if TYPE_CHECKING:
    from otakugifs.client import Client


class GifRequestBuilder:
    """Accumulates GIF request parameters and runs them against a client.

    Usage::

        gif = await client.request().with_reaction(Reaction.hug).with_format(ImageFormat.webp).execute()
    """

    def __init__(self, client: Client) -> None:
        self._client = client
        self.reaction: Reaction | None = None
        self.format: ImageFormat = ImageFormat.gif

    def with_reaction(self, reaction: Reaction | str) -> GifRequestBuilder:
        """Set the reaction. Unknown names raise ``ValueError``."""
        self.reaction = Reaction(reaction)
        return self

    def with_format(self, format: ImageFormat | str) -> GifRequestBuilder:
        """Set the format. Unknown names raise ``ValueError``."""
        self.format = ImageFormat(format)
        return self

    async def execute(self, *, cancel: asyncio.Event | None = None) -> GifResult:
        if self.reaction is None:
            raise OtakuGifsInvalidStateError(
                "Reaction must be specified before executing the request"
            )
        return await self._client.get_gif(self.reaction, self.format, cancel=cancel)
