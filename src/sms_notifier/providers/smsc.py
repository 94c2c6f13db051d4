"""SMSC.ru HTTP gateway provider."""

import logging

import httpx

from sms_notifier.config import SmscConfig
from sms_notifier.models import GatewayCredentials
from sms_notifier.providers.base import DispatchResult, SmsProvider

logger = logging.getLogger(__name__)

_CHARSET = "utf-8"


class SmscProvider(SmsProvider):
    """Submits messages to the SMSC ``send.php`` endpoint.

    One form-encoded POST per recipient, no retries. The response body is
    not inspected: any completed 2xx exchange counts as sent. Transport
    errors and non-2xx statuses are returned as failed results.
    """

    def __init__(
        self,
        config: SmscConfig,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = config.url
        self._client = client or httpx.Client(timeout=config.timeout_seconds)

    def send(
        self,
        credentials: GatewayCredentials,
        recipient: str,
        message: str,
    ) -> DispatchResult:
        if not recipient:
            return DispatchResult(recipient=recipient, success=False, error="Empty recipient")

        form = {
            "login": credentials.username,
            "psw": credentials.password,
            "phones": recipient,
            "mes": message,
            "charset": _CHARSET,
        }
        try:
            response = self._client.post(self._url, data=form)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            error = f"Gateway responded with HTTP {exc.response.status_code}"
            logger.warning("SMS submission rejected", extra={"recipient": recipient, "reason": error})
            return DispatchResult(recipient=recipient, success=False, error=error)
        except httpx.HTTPError as exc:
            error = str(exc) or type(exc).__name__
            logger.warning("SMS submission failed", extra={"recipient": recipient, "reason": error})
            return DispatchResult(recipient=recipient, success=False, error=error)

        logger.debug("SMS submitted", extra={"recipient": recipient})
        return DispatchResult(recipient=recipient, success=True)

    def close(self) -> None:
        self._client.close()
