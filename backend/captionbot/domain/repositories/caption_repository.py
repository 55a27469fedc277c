from abc import ABC, abstractmethod

from captionbot.domain.entities.caption_entity import CaptionResult


class CaptionRepository(ABC):
    @abstractmethod
    def describe_url(self, image_url: str) -> CaptionResult:
        """Caption the image the URL points to."""
        raise NotImplementedError

    @abstractmethod
    def describe_file(self, path: str) -> CaptionResult:
        """Caption a local image file."""
        raise NotImplementedError
