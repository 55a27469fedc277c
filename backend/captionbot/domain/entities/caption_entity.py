from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class SessionState:
    conversation_token: str = ""
    water_mark: str = ""


@dataclass
class CaptionRequest:
    conversation_token: str
    user_message: str
    water_mark: str

    @classmethod
    def from_state(cls, image_url: str, state: SessionState) -> "CaptionRequest":
        return cls(
            conversation_token=state.conversation_token,
            user_message=image_url,
            water_mark=state.water_mark,
        )

    def to_payload(self) -> Dict[str, str]:
        return {
            "conversationId": self.conversation_token,
            "userMessage": self.user_message,
            "waterMark": self.water_mark,
        }


@dataclass
class CaptionResponse:
    conversation_id: str = ""
    user_message: str = ""
    water_mark: str = ""
    status: str = ""
    bot_messages: List[str] = field(default_factory=list)


@dataclass
class CaptionResult:
    image_url: str
    caption: str
