from abc import ABC, abstractmethod


class ImageFetcher(ABC):
    @abstractmethod
    def download_image(self, url: str) -> bytes:
        ...
