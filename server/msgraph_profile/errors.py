from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

TRANSPORT = "transport"
HTTP_STATUS = "http_status"
DECODE = "decode"


@dataclass
class RemoteCallFailed(Exception):
    kind: str
    message: str
    status: int | None = None

    def __str__(self) -> str:
        if self.status is not None:
            return f"{self.kind} ({self.status}): {self.message}"
        return f"{self.kind}: {self.message}"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a Graph fetch: a value or the failure that prevented it."""

    value: T | None = None
    error: RemoteCallFailed | None = None

    def __post_init__(self) -> None:
        if self.value is not None and self.error is not None:
            raise ValueError("FetchResult cannot carry both a value and an error")

    @property
    def ok(self) -> bool:
        return self.error is None
