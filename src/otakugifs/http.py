"""HTTP client wrapping httpx with transport ownership, cancellation, and status mapping."""

from __future__ import annotations

import asyncio
import logging

import httpx

from otakugifs.errors import OtakuGifsHTTPError, OtakuGifsNetworkError
from otakugifs.status import StatusClass, classify_status

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.otakugifs.xyz"
DEFAULT_TIMEOUT = 30.0

_TIMED_OUT = "Request timed out"


class HTTPClient:
    """Async HTTP client for the OtakuGIFs REST API.

    When ``client`` is omitted an ``httpx.AsyncClient`` is created and owned.
    A caller-supplied client is only closed if ``owns_client`` is true, and
    only gets ``base_url`` assigned when it has no host configured yet.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
        owns_client: bool = False,
    ) -> None:
        if client is None:
            self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout)
            self._owns_client = True
        else:
            if not client.base_url.host:
                client.base_url = base_url
            self._client = client
            self._owns_client = owns_client

    @property
    def base_url(self) -> httpx.URL:
        return self._client.base_url

    @property
    def owns_client(self) -> bool:
        return self._owns_client

    async def get(
        self,
        path: str,
        *,
        cancel: asyncio.Event | None = None,
        what: str = "request",
    ) -> httpx.Response:
        """GET ``path`` and return the response if its status is 2xx.

        ``what`` names the operation in network error messages. Setting
        ``cancel`` before or during the round trip aborts the request.
        """
        log.debug("GET %s", path)
        try:
            response = await self._send(path, cancel)
        except httpx.TimeoutException as exc:
            log.debug("GET %s timed out: %s", path, exc)
            raise OtakuGifsNetworkError(_TIMED_OUT) from exc
        except httpx.RequestError as exc:
            log.debug("GET %s failed: %s", path, exc)
            raise OtakuGifsNetworkError(f"Network error occurred while fetching {what}") from exc

        if classify_status(response.status_code) is not StatusClass.success:
            log.debug("GET %s -> %d %s", path, response.status_code, response.reason_phrase)
            raise OtakuGifsHTTPError.from_response(response)

        return response

    async def _send(self, path: str, cancel: asyncio.Event | None) -> httpx.Response:
        if cancel is None:
            return await self._client.get(path)
        if cancel.is_set():
            log.debug("GET %s cancelled before sending", path)
            raise OtakuGifsNetworkError(_TIMED_OUT)

        request = asyncio.ensure_future(self._client.get(path))
        cancelled = asyncio.ensure_future(cancel.wait())
        try:
            done, _ = await asyncio.wait({request, cancelled}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            request.cancel()
            cancelled.cancel()
            # Let the aborted request unwind before reporting
            await asyncio.gather(request, cancelled, return_exceptions=True)

        if request not in done:
            log.debug("GET %s cancelled in flight", path)
            raise OtakuGifsNetworkError(_TIMED_OUT)
        return request.result()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
