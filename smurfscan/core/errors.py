"""Error taxonomy for a smurf scan.

Input and configuration errors are raised before any network call.
Per-match failures are recovered by the caller; only an empty sample
escalates to ``NoDataError``.
"""

from __future__ import annotations

_BODY_SNIPPET_LIMIT = 200


class SmurfScanError(Exception):
    """Base exception for every failure surfaced to the user."""


class InvalidIdentifierError(SmurfScanError):
    """Raised when the Riot ID (name or tag) is missing or malformed."""


class MissingConfigurationError(SmurfScanError):
    """Raised when the Riot API key is not configured."""


class NoDataError(SmurfScanError):
    """Raised when no fetched match contained the resolved player."""


class UpstreamError(SmurfScanError):
    """Raised when the Riot API answers with a non-2xx status or cannot be reached."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reason: str | None = None,
        body: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.body_snippet = snippet(body)
        self.url = url

    @classmethod
    def from_response(
        cls, status_code: int, reason: str | None, body: str, url: str
    ) -> UpstreamError:
        text = snippet(body)
        message = f"{status_code} {reason or ''}".strip() + f" for {url}"
        if text:
            message += f". Response: {text}"
        return cls(message, status_code=status_code, reason=reason, body=body, url=url)


def snippet(body: str | None, limit: int = _BODY_SNIPPET_LIMIT) -> str:
    if not body:
        return ""
    body = body.strip()
    if len(body) <= limit:
        return body
    return body[:limit] + "..."
