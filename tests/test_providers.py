"""Tests for the SMSC gateway provider."""

from unittest.mock import MagicMock
from urllib.parse import parse_qs

import httpx

from sms_notifier.config import SmscConfig
from sms_notifier.models import GatewayCredentials
from sms_notifier.providers import create_default_provider
from sms_notifier.providers.smsc import SmscProvider

from tests.helpers import GatewayStub


class TestSmscProvider:
    def test_posts_form_to_gateway(
        self,
        smsc_provider: SmscProvider,
        gateway: GatewayStub,
        credentials: GatewayCredentials,
    ) -> None:
        result = smsc_provider.send(credentials, "+79991234567", "Build #1 of Foo is SUCCESS")

        assert result.success is True
        assert result.recipient == "+79991234567"
        assert result.error is None

        [request] = gateway.requests
        assert request.method == "POST"
        assert str(request.url) == "https://smsc.ru/sys/send.php"
        form = parse_qs(request.content.decode())
        assert form == {
            "login": ["ci-bot"],
            "psw": ["s3cret"],
            "phones": ["+79991234567"],
            "mes": ["Build #1 of Foo is SUCCESS"],
            "charset": ["utf-8"],
        }

    def test_response_body_is_not_inspected(
        self,
        smsc_provider: SmscProvider,
        gateway: GatewayStub,
        credentials: GatewayCredentials,
    ) -> None:
        gateway.responder = lambda request: httpx.Response(200, text="ERROR = 2 (bad login)")

        result = smsc_provider.send(credentials, "+79991234567", "hi")

        assert result.success is True

    def test_non_2xx_is_a_failure(
        self,
        smsc_provider: SmscProvider,
        gateway: GatewayStub,
        credentials: GatewayCredentials,
    ) -> None:
        gateway.responder = lambda request: httpx.Response(503)

        result = smsc_provider.send(credentials, "+79991234567", "hi")

        assert result.success is False
        assert "503" in result.error

    def test_transport_error_is_a_failure(
        self,
        smsc_provider: SmscProvider,
        gateway: GatewayStub,
        credentials: GatewayCredentials,
    ) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        gateway.responder = refuse

        result = smsc_provider.send(credentials, "+79991234567", "hi")

        assert result.success is False
        assert result.error == "Connection refused"

    def test_timeout_is_a_failure(
        self,
        smsc_provider: SmscProvider,
        gateway: GatewayStub,
        credentials: GatewayCredentials,
    ) -> None:
        def hang(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        gateway.responder = hang

        result = smsc_provider.send(credentials, "+79991234567", "hi")

        assert result.success is False
        assert result.error == "timed out"

    def test_empty_recipient_fails_without_request(
        self,
        smsc_provider: SmscProvider,
        gateway: GatewayStub,
        credentials: GatewayCredentials,
    ) -> None:
        result = smsc_provider.send(credentials, "", "hi")

        assert result.success is False
        assert result.error == "Empty recipient"
        assert gateway.requests == []

    def test_uses_configured_url(self, gateway: GatewayStub, credentials: GatewayCredentials) -> None:
        config = SmscConfig(url="https://sms.internal/send.php")
        provider = SmscProvider(config, client=httpx.Client(transport=httpx.MockTransport(gateway)))

        provider.send(credentials, "+79991234567", "hi")

        assert str(gateway.requests[0].url) == "https://sms.internal/send.php"

    def test_close_closes_client(self) -> None:
        client = MagicMock(spec=httpx.Client)
        provider = SmscProvider(SmscConfig(), client=client)

        provider.close()

        client.close.assert_called_once()


class TestCreateDefaultProvider:
    def test_returns_smsc_provider(self) -> None:
        provider = create_default_provider(SmscConfig())

        assert isinstance(provider, SmscProvider)
        provider.close()
