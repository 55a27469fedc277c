import json
from unittest.mock import MagicMock


BASE_URL = "http://captionbot.test/api/"


def make_response(text: str = "", status_code: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    return resp


def caption_body(water_mark: str, messages: list) -> str:
    """Double-encoded body the service returns for GET /message."""
    return json.dumps(json.dumps({"waterMark": water_mark, "botMessages": messages}))
