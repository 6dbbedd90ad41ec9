import base64
from typing import Any, Awaitable, Callable, TypeVar

import structlog

from .errors import FetchResult, RemoteCallFailed
from .graph import PHOTO_PATH, PROFILE_PATH, GraphClient

logger = structlog.get_logger(__name__)

T = TypeVar("T")


async def _fetch(
    event: str,
    graph: GraphClient | None,
    call: Callable[[GraphClient], Awaitable[T]],
) -> FetchResult[T]:
    try:
        if graph is None:
            async with GraphClient() as owned:
                value = await call(owned)
        else:
            value = await call(graph)
    except RemoteCallFailed as err:
        logger.error(event, error=str(err), kind=err.kind, status=err.status)
        return FetchResult(error=err)
    return FetchResult(value=value)


async def fetch_user_profile(
    token: str, graph: GraphClient | None = None
) -> FetchResult[Any]:
    """Fetch the signed-in user's Graph profile, passed through unchanged."""
    return await _fetch(
        "user_profile_fetch_failed",
        graph,
        lambda client: client.get_json(PROFILE_PATH, token),
    )


async def fetch_user_photo(
    token: str, graph: GraphClient | None = None
) -> FetchResult[str]:
    """Fetch the signed-in user's photo as standard base64 text."""

    async def call(client: GraphClient) -> str:
        raw = await client.get_bytes(PHOTO_PATH, token)
        return base64.b64encode(raw).decode("ascii")

    return await _fetch("user_photo_fetch_failed", graph, call)
