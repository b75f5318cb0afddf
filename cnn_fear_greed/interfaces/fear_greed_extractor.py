from abc import ABC, abstractmethod

from bs4 import BeautifulSoup

from cnn_fear_greed.entities.fear_greed_result import FearGreedResult


class FearGreedExtractor(ABC):
    """
    Isolates the page-specific selectors and patterns from the result model.
    """

    @abstractmethod
    def extract(self, doc: BeautifulSoup) -> FearGreedResult:
        """Extract and validate a FearGreedResult from a parsed page."""
        ...
