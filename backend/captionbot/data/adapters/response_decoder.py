"""Decoding of the service's double-encoded JSON replies.

The service answers with a JSON string whose content is itself a JSON
document. Decoding happens in two named steps so each can be checked
against captured payloads:

1. ``decode_json_string``: the outer layer, a standards-compliant JSON string.
2. ``decode_caption_payload``: the inner object, mapped onto ``CaptionResponse``.

``sanitize_legacy_payload`` reproduces the hand-rolled unescaping older
clients applied to the raw body before a single JSON decode.
"""
import json
from typing import Any, Dict, List

from captionbot.core.exceptions import DecodeError
from captionbot.domain.entities.caption_entity import CaptionResponse


_STRING_FIELDS = {
    "conversationid": "conversation_id",
    "usermessage": "user_message",
    "watermark": "water_mark",
    "status": "status",
}
_MESSAGES_FIELD = "botmessages"


def decode_json_string(raw: str) -> str:
    try:
        value = json.loads(raw)
    except ValueError as e:
        raise DecodeError(f"response body is not valid JSON: {raw[:200]!r}") from e
    if not isinstance(value, str):
        raise DecodeError(f"expected a JSON string, got {type(value).__name__}")
    return value


def _decode_object(text: str) -> Dict[str, Any]:
    try:
        value = json.loads(text)
    except ValueError as e:
        raise DecodeError(f"embedded caption document is not valid JSON: {text[:200]!r}") from e
    if not isinstance(value, dict):
        raise DecodeError(f"expected an embedded JSON object, got {type(value).__name__}")
    return value


def _decode_messages(value: Any) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(m, str) for m in value):
        raise DecodeError("botMessages must be a list of strings")
    return list(value)


def response_from_mapping(data: Dict[str, Any]) -> CaptionResponse:
    # Keys match regardless of case; the service has shipped both
    # waterMark and WaterMark.
    response = CaptionResponse()
    for key, value in data.items():
        folded = key.lower()
        if folded == _MESSAGES_FIELD:
            response.bot_messages = _decode_messages(value)
            continue
        attr = _STRING_FIELDS.get(folded)
        if attr is None:
            continue
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise DecodeError(f"{key} must be a string, got {type(value).__name__}")
        setattr(response, attr, value)
    return response


def decode_caption_payload(raw: str) -> CaptionResponse:
    return response_from_mapping(_decode_object(decode_json_string(raw)))


def sanitize_legacy_payload(raw: str) -> str:
    """Turn a raw quoted body into the bare JSON object text.

    Strips one leading and trailing double quote, unescapes ``\\"`` and
    replaces the literal ``\\\\n`` sequence with a space.
    """
    if len(raw) < 2 or raw[0] != '"' or raw[-1] != '"':
        raise DecodeError("legacy payload must be wrapped in double quotes")
    trimmed = raw[1:-1]
    unescaped = trimmed.replace('\\"', '"')
    return unescaped.replace("\\\\n", " ")


def decode_legacy_caption_payload(raw: str) -> CaptionResponse:
    """Decode a captured body with the legacy sanitizer instead of the JSON string decoder.

    Not used by the client; kept as a fallback for replaying payloads
    recorded from older service versions.
    """
    return response_from_mapping(_decode_object(sanitize_legacy_payload(raw)))
