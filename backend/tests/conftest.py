from unittest.mock import MagicMock

import pytest

from captionbot.data.adapters.captionbot_client import CaptionBotClient, CaptionBotConfig
from tests.helpers import BASE_URL, make_response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return CaptionBotClient(config=CaptionBotConfig(base_url=BASE_URL), session=session)


@pytest.fixture
def ready_client(client, session):
    session.get.return_value = make_response('"conv-123"')
    client.initialize()
    session.get.reset_mock()
    return client
