"""Test fixtures for sms_notifier tests."""

from datetime import datetime
from unittest.mock import MagicMock

import httpx
import pytest
from flask import Flask
from flask.testing import FlaskClient

from sms_notifier.app import create_app
from sms_notifier.config import NotifierConfig, SmscConfig
from sms_notifier.enums import BuildStatus
from sms_notifier.models import BuildOutcome, GatewayCredentials
from sms_notifier.providers.base import DispatchResult, SmsProvider
from sms_notifier.providers.smsc import SmscProvider

from tests.helpers import GatewayStub, RecordingBuildLog


@pytest.fixture()
def build_log() -> RecordingBuildLog:
    return RecordingBuildLog()


@pytest.fixture()
def credentials() -> GatewayCredentials:
    return GatewayCredentials(username="ci-bot", password="s3cret")


@pytest.fixture()
def outcome() -> BuildOutcome:
    return BuildOutcome(
        number=42,
        project_name="Foo",
        status=BuildStatus.FAILURE,
        timestamp=datetime(2020, 1, 1, 10, 0, 0),
    )


@pytest.fixture()
def smsc_config() -> SmscConfig:
    return SmscConfig(username="ci-bot", password="s3cret")


@pytest.fixture()
def gateway() -> GatewayStub:
    return GatewayStub()


@pytest.fixture()
def smsc_provider(smsc_config: SmscConfig, gateway: GatewayStub) -> SmscProvider:
    """SMSC provider wired to an in-process mock transport."""
    client = httpx.Client(transport=httpx.MockTransport(gateway))
    return SmscProvider(smsc_config, client=client)


@pytest.fixture()
def mock_provider() -> MagicMock:
    """Provider that reports every send as successful."""
    provider = MagicMock(spec=SmsProvider)
    provider.send.side_effect = lambda credentials, recipient, message: DispatchResult(
        recipient=recipient, success=True
    )
    return provider


@pytest.fixture()
def app(mock_provider: MagicMock, smsc_config: SmscConfig) -> Flask:
    app = create_app(mock_provider, NotifierConfig(), smsc_config)
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
