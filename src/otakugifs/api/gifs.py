"""GIF API methods."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from otakugifs.models.enums import ImageFormat, Reaction
from otakugifs.models.gifs import GifResult, ReactionsResult, decode_gif, decode_reactions

if TYPE_CHECKING:
    from otakugifs.http import HTTPClient


def gif_path(reaction: Reaction | str, format: ImageFormat | str = ImageFormat.gif) -> str:
    """Relative URL for a random GIF, e.g. ``/gif?reaction=kiss&format=gif``.

    Raises ``ValueError`` for names outside the enums.
    """
    return f"/gif?reaction={Reaction(reaction).value}&format={ImageFormat(format).value}"


def all_reactions_path() -> str:
    return "/gif/allreactions"


class GifsAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def get(
        self,
        reaction: Reaction | str,
        format: ImageFormat | str = ImageFormat.gif,
        *,
        cancel: asyncio.Event | None = None,
    ) -> GifResult:
        r = await self._http.get(gif_path(reaction, format), cancel=cancel, what="GIF")
        return decode_gif(r.content)

    async def all_reactions(self, *, cancel: asyncio.Event | None = None) -> ReactionsResult:
        r = await self._http.get(all_reactions_path(), cancel=cancel, what="reactions")
        return decode_reactions(r.content)
