"""Transport and API result models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TransportResponse:
    """Outcome of a single HTTP GET: either a body or an error message."""

    body: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ApiError:
    """Error description returned in place of decoded API data."""

    message: str

    def __str__(self) -> str:
        return f"Error: {self.message}"


ApiResult = dict[str, object] | list[object] | ApiError | None
