from typing import Any

import httpx

from .config import settings
from .errors import DECODE, HTTP_STATUS, TRANSPORT, RemoteCallFailed

PROFILE_PATH = "/me"
PHOTO_PATH = "/me/photo/$value"


class GraphClient:
    """Thin Microsoft Graph GET client.

    The token is sent as the ``Authorization`` header exactly as given, so
    callers pass ``"Bearer <token>"`` when the endpoint expects it.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
    ) -> None:
        self._owns_client = client is None
        if client is None:
            options: dict[str, Any] = {"follow_redirects": True}
            if settings.http_timeout_seconds is not None:
                options["timeout"] = settings.http_timeout_seconds
            client = httpx.AsyncClient(**options)
        self._client = client
        self._base_url = (base_url or settings.graph_base_url).rstrip("/")

    def url_for(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def get_json(self, path: str, token: str) -> Any:
        response = await self._get(path, token, accept="application/json")
        if response.status_code == 204:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteCallFailed(
                DECODE, f"Invalid JSON from Graph: {exc}", status=response.status_code
            ) from exc

    async def get_bytes(self, path: str, token: str) -> bytes:
        response = await self._get(path, token, accept="*/*")
        return response.content

    async def _get(self, path: str, token: str, accept: str) -> httpx.Response:
        headers = {
            "Authorization": token,
            "Accept": accept,
        }
        # httpx ASCII-encodes header values while building the request.
        try:
            response = await self._client.get(self.url_for(path), headers=headers)
        except (httpx.HTTPError, UnicodeEncodeError) as exc:
            raise RemoteCallFailed(TRANSPORT, str(exc) or type(exc).__name__) from exc
        if not response.is_success:
            raise RemoteCallFailed(
                HTTP_STATUS,
                f"Graph error: {response.text}",
                status=response.status_code,
            )
        return response

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "GraphClient":
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:
        await self.close()
