"""
Public entry points.

    >>> from cnn_fear_greed.client import parse, get_image_bytes
    >>> result = parse()
    >>> result.now.value, result.now.text
    >>> png = get_image_bytes(result)
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Optional

import requests

from cnn_fear_greed.adapters.cnn_fear_greed_extractor import CnnFearGreedExtractor
from cnn_fear_greed.adapters.requests_page_fetcher import RequestsPageFetcher
from cnn_fear_greed.domain.time.eastern import EASTERN
from cnn_fear_greed.entities.fear_greed_result import FearGreedResult
from cnn_fear_greed.use_cases.parse_fear_greed_use_case import (
    CNN_FEAR_GREED_URL,
    ParseFearGreedUseCase,
)


def build_use_case(
    *,
    url: str = CNN_FEAR_GREED_URL,
    timeout_seconds: Optional[float] = 30,
    session: Optional[requests.Session] = None,
    user_agent: Optional[str] = None,
    tz: tzinfo = EASTERN,
) -> ParseFearGreedUseCase:
    fetcher = RequestsPageFetcher(
        timeout_seconds=timeout_seconds,
        session=session,
        user_agent=user_agent,
    )
    return ParseFearGreedUseCase(
        page_fetcher=fetcher,
        extractor=CnnFearGreedExtractor(tz=tz),
        image_fetcher=fetcher,
        url=url,
    )


def parse(
    *,
    timeout_seconds: Optional[float] = 30,
    session: Optional[requests.Session] = None,
) -> FearGreedResult:
    """Fetch money.cnn.com/data/fear-and-greed and return the validated result."""
    if session is not None:
        return build_use_case(timeout_seconds=timeout_seconds, session=session).execute()

    # sessão criada aqui é fechada aqui
    with requests.Session() as owned:
        return build_use_case(timeout_seconds=timeout_seconds, session=owned).execute()


def get_image_bytes(
    result: FearGreedResult,
    *,
    timeout_seconds: Optional[float] = 30,
    session: Optional[requests.Session] = None,
) -> bytes:
    if session is not None:
        return result.get_image_bytes(
            RequestsPageFetcher(timeout_seconds=timeout_seconds, session=session)
        )

    with requests.Session() as owned:
        return result.get_image_bytes(
            RequestsPageFetcher(timeout_seconds=timeout_seconds, session=owned)
        )
