import copy
import json
import logging
import mimetypes
import os
from dataclasses import dataclass
from typing import Dict, Optional

import requests

from captionbot.core.config.environment_config import DEFAULT_BASE_URL
from captionbot.core.exceptions import (
    MalformedResponseError,
    NotInitializedError,
    TaskSubmissionError,
    TransportError,
    UploadError,
)
from captionbot.data.adapters.response_decoder import decode_caption_payload, decode_json_string
from captionbot.domain.entities.caption_entity import CaptionRequest, SessionState


logger = logging.getLogger(__name__)

# botMessages[0] echoes the submitted image locator; the caption follows it.
CAPTION_MESSAGE_INDEX = 1
DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass
class CaptionBotConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None  # None blocks until the service answers


def build_query_params(image_url: str, state: SessionState) -> Dict[str, str]:
    return CaptionRequest.from_state(image_url, state).to_payload()


class CaptionBotClient:
    """One conversation with the CaptionBot service.

    - initialize(): fetches the conversation token from /init.
    - caption_by_url(): submits a caption task, then reads the result back.
    - caption_by_upload(): uploads a local image and captions the reference.

    State only changes after a response was fully decoded, so a failed call
    leaves the session as it was. Not safe for concurrent use.

    An empty token from /init is stored as-is and leaves the client
    uninitialized; the next caption call raises NotInitializedError.
    """

    def __init__(self, config: Optional[CaptionBotConfig] = None, session: Optional[requests.Session] = None) -> None:
        self.config = config or CaptionBotConfig()
        self._session = session or requests.Session()
        self._state = SessionState()

    @classmethod
    def create(cls, config: Optional[CaptionBotConfig] = None, session: Optional[requests.Session] = None) -> "CaptionBotClient":
        client = cls(config=config, session=session)
        client.initialize()
        return client

    @property
    def state(self) -> SessionState:
        return copy.copy(self._state)

    @property
    def is_initialized(self) -> bool:
        return bool(self._state.conversation_token)

    def _url(self, endpoint: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{endpoint}"

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "CaptionBotClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def initialize(self) -> None:
        url = self._url("init")
        logger.debug("GET %s", url)
        try:
            resp = self._session.get(url, timeout=self.config.timeout)
        except requests.RequestException as e:
            logger.error("CaptionBot init request failed: %s", e)
            raise TransportError(f"GET {url} failed: {e}") from e

        self._state.conversation_token = decode_json_string(resp.text)
        logger.info("CaptionBot conversation started")

    def _create_caption_task(self, request: CaptionRequest) -> None:
        """Kick off captioning on the server; the result is read by a later GET."""
        url = self._url("message")
        headers = {"Content-Type": "application/json; charset=utf8"}
        logger.debug("POST %s userMessage=%s", url, request.user_message)
        try:
            resp = self._session.post(
                url,
                headers=headers,
                data=json.dumps(request.to_payload()),
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            logger.error("CaptionBot task submission failed: %s", e)
            raise TransportError(f"POST {url} failed: {e}") from e

        if not 200 <= resp.status_code <= 299:
            logger.error("CaptionBot rejected caption task with status %s", resp.status_code)
            raise TaskSubmissionError(resp.status_code)

    def caption_by_url(self, image_url: str) -> str:
        if not self.is_initialized:
            raise NotInitializedError("CaptionBot session not initialized; call initialize() first")

        request = CaptionRequest.from_state(image_url, self._state)
        self._create_caption_task(request)

        url = self._url("message")
        logger.debug("GET %s userMessage=%s", url, image_url)
        try:
            resp = self._session.get(url, params=build_query_params(image_url, self._state), timeout=self.config.timeout)
        except requests.RequestException as e:
            logger.error("CaptionBot caption request failed: %s", e)
            raise TransportError(f"GET {url} failed: {e}") from e

        response = decode_caption_payload(resp.text)
        if len(response.bot_messages) <= CAPTION_MESSAGE_INDEX:
            raise MalformedResponseError(
                f"expected at least {CAPTION_MESSAGE_INDEX + 1} bot messages, got {len(response.bot_messages)}"
            )

        self._state.water_mark = response.water_mark
        return response.bot_messages[CAPTION_MESSAGE_INDEX]

    def caption_by_upload(self, local_file_path: str) -> str:
        mime_type = mimetypes.guess_type(local_file_path)[0] or DEFAULT_MIME_TYPE
        file_name = os.path.basename(local_file_path)
        url = self._url("upload")

        with open(local_file_path, "rb") as fh:
            files = {"file": (file_name, fh, mime_type)}
            logger.debug("POST %s file=%s type=%s", url, file_name, mime_type)
            try:
                resp = self._session.post(url, files=files, timeout=self.config.timeout)
            except requests.RequestException as e:
                logger.error("CaptionBot upload of %s failed: %s", file_name, e)
                raise UploadError(f"POST {url} failed: {e}") from e

        reference = decode_json_string(resp.text)
        return self.caption_by_url(reference)
