"""OtakuGIFs SDK — async Python client for the OtakuGIFs reaction GIF API."""

from otakugifs.builder import GifRequestBuilder
from otakugifs.client import Client
from otakugifs.errors import (
    OtakuGifsClientError,
    OtakuGifsDecodeError,
    OtakuGifsError,
    OtakuGifsHTTPError,
    OtakuGifsInvalidStateError,
    OtakuGifsNetworkError,
    OtakuGifsServerError,
    OtakuGifsUnclassifiedError,
)
from otakugifs.models import GifResult, ImageFormat, Reaction, ReactionsResult

__all__ = [
    "Client",
    "GifRequestBuilder",
    "GifResult",
    "ImageFormat",
    "Reaction",
    "ReactionsResult",
    "OtakuGifsError",
    "OtakuGifsNetworkError",
    "OtakuGifsDecodeError",
    "OtakuGifsInvalidStateError",
    "OtakuGifsHTTPError",
    "OtakuGifsClientError",
    "OtakuGifsServerError",
    "OtakuGifsUnclassifiedError",
]
