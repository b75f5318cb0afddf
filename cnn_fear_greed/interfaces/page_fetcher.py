from abc import ABC, abstractmethod

from bs4 import BeautifulSoup


class PageFetcher(ABC):
    """
    Interface para obtenção de páginas HTML de fontes externas.
    Implementações concretas lidam com transporte, status HTTP e parsing do markup.
    """

    @abstractmethod
    def fetch_document(self, url: str) -> BeautifulSoup:
        """Busca a página e devolve a árvore DOM navegável."""
        ...
