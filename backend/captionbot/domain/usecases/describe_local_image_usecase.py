from captionbot.domain.entities.caption_entity import CaptionResult
from captionbot.domain.repositories.caption_repository import CaptionRepository


class DescribeLocalImageUseCase:
    def __init__(self, repository: CaptionRepository) -> None:
        self._repo = repository

    def execute(self, path: str) -> CaptionResult:
        # Existence is checked when the file is opened for upload
        if not path or not path.strip():
            raise ValueError("Image path must not be empty")
        return self._repo.describe_file(path=path)
