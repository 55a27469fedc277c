from captionbot.data.adapters.captionbot_client import CaptionBotClient
from captionbot.domain.entities.caption_entity import CaptionResult
from captionbot.domain.repositories.caption_repository import CaptionRepository


class CaptionRepositoryImpl(CaptionRepository):
    def __init__(self, client: CaptionBotClient) -> None:
        self._client = client

    def _ensure_session(self) -> None:
        if not self._client.is_initialized:
            self._client.initialize()

    def describe_url(self, image_url: str) -> CaptionResult:
        self._ensure_session()
        caption = self._client.caption_by_url(image_url)
        return CaptionResult(image_url=image_url, caption=caption)

    def describe_file(self, path: str) -> CaptionResult:
        self._ensure_session()
        caption = self._client.caption_by_upload(path)
        return CaptionResult(image_url=path, caption=caption)
