# cnn_fear_greed/adapters/requests_page_fetcher.py
from __future__ import annotations

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from cnn_fear_greed.domain.errors import (
    DocumentParseError,
    HTTPStatusError,
    ImageDownloadError,
    ImageReadError,
    RequestBuildError,
    TransportError,
)
from cnn_fear_greed.interfaces.image_fetcher import ImageFetcher
from cnn_fear_greed.interfaces.page_fetcher import PageFetcher

logger = logging.getLogger(__name__)

_REQUEST_BUILD_ERRORS = (
    requests.exceptions.URLRequired,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidHeader,
)


class RequestsPageFetcher(PageFetcher, ImageFetcher):
    """
    Adapter responsável por buscar a página (e a imagem do gráfico) via requests.

    Contrato:
    - um único GET, sem retry
    - só status 200 é sucesso
    - a resposta é sempre fechada, inclusive quando o parsing falha
    """

    def __init__(
        self,
        timeout_seconds: Optional[float] = 30,
        session: Optional[requests.Session] = None,
        user_agent: Optional[str] = None,
        parser: str = "html.parser",
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self._session = session or requests.Session()
        self._user_agent = user_agent
        self._parser = parser

    def _headers(self) -> dict[str, str]:
        if self._user_agent:
            return {"User-Agent": self._user_agent}
        return {}

    def fetch_document(self, url: str) -> BeautifulSoup:
        logger.info("Fetching page", extra={"url": url})

        try:
            with self._session.get(
                url,
                headers=self._headers(),
                timeout=self.timeout_seconds,
            ) as response:
                if response.status_code != 200:
                    raise HTTPStatusError(url, response.status_code, response.reason or "")

                body = response.content
        except _REQUEST_BUILD_ERRORS as exc:
            raise RequestBuildError(f"invalid request for {url!r}: {exc}") from exc
        except requests.RequestException as exc:
            raise TransportError(f"http GET failed for {url!r}: {exc}") from exc

        try:
            doc = BeautifulSoup(body, self._parser)
        except ParserRejectedMarkup as exc:
            raise DocumentParseError(f"could not parse markup from {url!r}: {exc}") from exc

        logger.info(
            "Page fetched",
            extra={"url": url, "status": 200, "bytes": len(body)},
        )
        return doc

    def download_image(self, url: str) -> bytes:
        if not url:
            raise ImageDownloadError("image download failed: empty image url")

        try:
            response = self._session.get(
                url,
                headers=self._headers(),
                timeout=self.timeout_seconds,
                stream=True,
            )
        except requests.RequestException as exc:
            raise ImageDownloadError(f"image download failed: {exc}") from exc

        with response:
            if response.status_code != 200:
                raise ImageDownloadError(
                    f"image download failed, non 200 response code: {response.status_code}"
                )

            try:
                data = response.content
            except requests.RequestException as exc:
                raise ImageReadError(f"reading image bytes failed: {exc}") from exc

        logger.info("Image downloaded", extra={"url": url, "bytes": len(data)})
        return data
