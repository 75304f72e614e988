"""Send one assembled request with httpx."""

import logging

import httpx

from api_console.config import Settings, get_settings
from api_console.console.models import AssembledRequest, RawResponse
from api_console.errors import TransportError

logger = logging.getLogger(__name__)


class TransportInvoker:
    """Sends assembled requests, one attempt each.

    Usage:
        async with TransportInvoker() as invoker:
            response = await invoker.invoke(request)

    A client passed in is borrowed and left open on close.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, settings: Settings | None = None):
        settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=settings.timeout,
            follow_redirects=settings.follow_redirects,
        )

    async def __aenter__(self) -> "TransportInvoker":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def invoke(self, request: AssembledRequest) -> RawResponse:
        """Send the request and return the response, whatever its status.

        Raises TransportError if no HTTP response was received.
        """
        try:
            response = await self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )
        except httpx.RequestError as e:
            logger.info("%s %s failed: %s", request.method, request.url, e)
            raise TransportError(str(e) or type(e).__name__) from e

        logger.info("%s %s -> %d", request.method, request.url, response.status_code)
        return RawResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            text=response.text,
            content_type=response.headers.get("content-type", ""),
        )
