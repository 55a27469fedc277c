from captionbot.domain.entities.caption_entity import CaptionResult
from captionbot.domain.repositories.caption_repository import CaptionRepository


class DescribeImageUseCase:
    def __init__(self, repository: CaptionRepository) -> None:
        self._repo = repository

    def execute(self, image_url: str) -> CaptionResult:
        if not image_url or not image_url.strip():
            raise ValueError("Image URL must not be empty")
        return self._repo.describe_url(image_url=image_url.strip())
