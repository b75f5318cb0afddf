# cnn_fear_greed/use_cases/parse_fear_greed_use_case.py
from __future__ import annotations

import logging

from cnn_fear_greed.entities.fear_greed_result import FearGreedResult
from cnn_fear_greed.interfaces.fear_greed_extractor import FearGreedExtractor
from cnn_fear_greed.interfaces.image_fetcher import ImageFetcher
from cnn_fear_greed.interfaces.page_fetcher import PageFetcher

logger = logging.getLogger(__name__)

CNN_FEAR_GREED_URL = "https://money.cnn.com/data/fear-and-greed/"


class ParseFearGreedUseCase:
    """
    Fetch the Fear & Greed page and extract a validated FearGreedResult.

    Every failure propagates to the caller as a FearGreedError; there is no
    retry and no partial result.
    """

    def __init__(
        self,
        page_fetcher: PageFetcher,
        extractor: FearGreedExtractor,
        image_fetcher: ImageFetcher | None = None,
        url: str = CNN_FEAR_GREED_URL,
    ) -> None:
        self.page_fetcher = page_fetcher
        self.extractor = extractor
        self.image_fetcher = image_fetcher
        self.url = url

    def execute(self) -> FearGreedResult:
        doc = self.page_fetcher.fetch_document(self.url)
        result = self.extractor.extract(doc)

        logger.info(
            "Fear & Greed parsed",
            extra={
                "url": self.url,
                "now": f"{result.now.value} ({result.now.text})",
            },
        )
        return result

    def download_image(self, result: FearGreedResult) -> bytes:
        if self.image_fetcher is None:
            raise RuntimeError("ParseFearGreedUseCase was built without an image_fetcher")
        return result.get_image_bytes(self.image_fetcher)
