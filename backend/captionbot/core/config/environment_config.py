import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv


DEFAULT_BASE_URL = "https://www.captionbot.ai/api/"


def load_environment(dotenv_path: Optional[str] = None) -> None:
    # .env values win over blanks inherited from the shell.
    load_dotenv(dotenv_path=dotenv_path or os.path.join(os.getcwd(), ".env"), override=True)


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    return float(raw)


@dataclass
class EnvironmentConfig:
    base_url: str = field(default_factory=lambda: os.getenv("CAPTIONBOT_BASE_URL", DEFAULT_BASE_URL))
    # Seconds; empty means requests block until the service answers
    timeout: Optional[float] = field(default_factory=lambda: _parse_timeout(os.getenv("CAPTIONBOT_TIMEOUT")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "EnvironmentConfig":
        load_environment(dotenv_path)
        return cls()
