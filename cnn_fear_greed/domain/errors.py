# cnn_fear_greed/domain/errors.py

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from cnn_fear_greed.entities.fear_greed_result import FearGreedResult


class FearGreedError(RuntimeError):
    """Base class for every failure raised while scraping the Fear & Greed page."""


# -------------------------
# Page fetch
# -------------------------


class RequestBuildError(FearGreedError):
    """The outbound request could not be built (invalid URL or schema)."""


class TransportError(FearGreedError):
    """Network-level failure reaching the host (DNS, connection, TLS, timeout)."""


class HTTPStatusError(FearGreedError):
    def __init__(self, url: str, status_code: int, reason: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"http status code error: {status_code} {reason}".rstrip() + f" | url={url}")


class DocumentParseError(FearGreedError):
    """The response body could not be loaded as markup."""


# -------------------------
# Extraction
# -------------------------


class TextParseError(FearGreedError, ValueError):
    """A list item did not have the '<number> (<label>)' shape."""


class ItemCountError(TextParseError):
    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected} indicator items, found {found}")


class EmptyFieldError(FearGreedError):
    """
    Extraction finished but at least one required field is empty.

    The populated (but untrusted) result is kept on the error for inspection.
    """

    def __init__(
        self,
        missing_fields: Sequence[str],
        result: Optional["FearGreedResult"] = None,
    ) -> None:
        self.missing_fields = tuple(missing_fields)
        self.result = result
        super().__init__(
            "at least one field is empty: " + ", ".join(self.missing_fields)
        )


# -------------------------
# Image download
# -------------------------


class ImageDownloadError(FearGreedError):
    """The image request failed or returned a non-200 status."""


class ImageReadError(FearGreedError):
    """The image response body could not be read."""


BodyReadError = ImageReadError
