from typing import Optional

from captionbot.core.config.environment_config import EnvironmentConfig
from captionbot.core.utils.logger import configure_logging, get_logger
from captionbot.data.adapters.captionbot_client import CaptionBotClient, CaptionBotConfig
from captionbot.data.repositories.caption_repository_impl import CaptionRepositoryImpl
from captionbot.domain.usecases.describe_image_usecase import DescribeImageUseCase
from captionbot.domain.usecases.describe_local_image_usecase import DescribeLocalImageUseCase


_logger = get_logger("service_locator")


class ServiceLocator:
    _config: Optional[EnvironmentConfig] = None
    _captionbot_client: Optional[CaptionBotClient] = None
    _caption_repo: Optional[CaptionRepositoryImpl] = None
    _describe_usecase: Optional[DescribeImageUseCase] = None
    _describe_local_usecase: Optional[DescribeLocalImageUseCase] = None

    @classmethod
    def config(cls) -> EnvironmentConfig:
        if cls._config is None:
            cls._config = EnvironmentConfig.from_env()
            configure_logging(cls._config.log_level)
            _logger.debug(
                "CAPTIONBOT_BASE_URL=%s CAPTIONBOT_TIMEOUT=%s",
                cls._config.base_url,
                cls._config.timeout,
            )
        return cls._config

    @classmethod
    def captionbot_client(cls) -> CaptionBotClient:
        if cls._captionbot_client is None:
            cfg = cls.config()
            client_cfg = CaptionBotConfig(base_url=cfg.base_url, timeout=cfg.timeout)
            cls._captionbot_client = CaptionBotClient(config=client_cfg)
        return cls._captionbot_client

    @classmethod
    def caption_repo(cls) -> CaptionRepositoryImpl:
        if cls._caption_repo is None:
            cls._caption_repo = CaptionRepositoryImpl(client=cls.captionbot_client())
        return cls._caption_repo

    @classmethod
    def describe_usecase(cls) -> DescribeImageUseCase:
        if cls._describe_usecase is None:
            cls._describe_usecase = DescribeImageUseCase(repository=cls.caption_repo())
        return cls._describe_usecase

    @classmethod
    def describe_local_usecase(cls) -> DescribeLocalImageUseCase:
        if cls._describe_local_usecase is None:
            cls._describe_local_usecase = DescribeLocalImageUseCase(repository=cls.caption_repo())
        return cls._describe_local_usecase

    @classmethod
    def reset(cls) -> None:
        if cls._captionbot_client is not None:
            cls._captionbot_client.close()
        cls._config = None
        cls._captionbot_client = None
        cls._caption_repo = None
        cls._describe_usecase = None
        cls._describe_local_usecase = None
