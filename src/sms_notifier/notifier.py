"""Build notifier: sends the build status SMS to every configured recipient."""

import logging

from jinja2 import TemplateError

from sms_notifier.composer import DEFAULT_TEMPLATE, MAX_LENGTH, compose_message
from sms_notifier.config import SmscConfig
from sms_notifier.log import BuildLog
from sms_notifier.models import BuildOutcome, GatewayCredentials
from sms_notifier.providers.base import DispatchResult, SmsProvider
from sms_notifier.recipients import parse_recipients

logger = logging.getLogger(__name__)

NO_RECIPIENTS = "No recipients"
NO_CREDENTIALS = "SMSC credentials not configured; cannot send SMS notification"
BAD_TEMPLATE = "Cannot compose SMS notification"


class BuildNotifier:
    """Composes the status message and dispatches it recipient by recipient.

    Stateless between calls. Recipients are sent to strictly in order, one
    request at a time, and a failure for one never stops the others.
    """

    def __init__(
        self,
        provider: SmsProvider,
        max_length: int = MAX_LENGTH,
        template: str = DEFAULT_TEMPLATE,
    ) -> None:
        self._provider = provider
        self._max_length = max_length
        self._template = template

    def notify(
        self,
        outcome: BuildOutcome,
        recipients: str,
        credentials: GatewayCredentials,
        log: BuildLog,
    ) -> list[DispatchResult]:
        """Send the status of *outcome* to every number in *recipients*.

        Missing recipients or credentials are logged and skip the run.
        Never raises; the returned results are for inspection only.
        """
        log_ctx = {"project": outcome.project_name, "build_number": outcome.number}

        if not recipients or not recipients.strip():
            log.error(NO_RECIPIENTS)
            logger.warning("Notification skipped, no recipients", extra=log_ctx)
            return []

        if not credentials.is_complete:
            log.error(NO_CREDENTIALS)
            logger.warning("Notification skipped, no credentials", extra=log_ctx)
            return []

        try:
            message = compose_message(outcome, self._max_length, self._template)
        except TemplateError as exc:
            log.error(f"{BAD_TEMPLATE}: {exc}")
            logger.exception("Message template failed to render", extra=log_ctx)
            return []

        results: list[DispatchResult] = []
        for recipient in parse_recipients(recipients):
            log.info(f"Start send message {message} on {recipient}")
            result = self._dispatch(credentials, recipient, message)
            if not result.success:
                log.error(f"Failed to send SMS notification to {recipient}: {result.error}")
            results.append(result)

        sent = sum(1 for r in results if r.success)
        logger.info(
            "Notification finished",
            extra={**log_ctx, "sent": sent, "failed": len(results) - sent},
        )
        return results

    def _dispatch(
        self,
        credentials: GatewayCredentials,
        recipient: str,
        message: str,
    ) -> DispatchResult:
        try:
            return self._provider.send(credentials, recipient, message)
        except Exception as exc:
            logger.exception("Provider error", extra={"recipient": recipient})
            return DispatchResult(recipient=recipient, success=False, error=str(exc))


class SmsNotification:
    """One configured notifier instance, registered with the build host.

    Holds the raw recipients string; gateway credentials are read from
    *smsc_config* once per build.
    """

    def __init__(
        self,
        recipients: str,
        notifier: BuildNotifier,
        smsc_config: SmscConfig,
    ) -> None:
        self.recipients = recipients
        self._notifier = notifier
        self._smsc_config = smsc_config

    def perform(self, outcome: BuildOutcome, log: BuildLog) -> bool:
        """Build-completion hook.

        Always returns True: the build result never depends on SMS delivery.
        """
        credentials = self._smsc_config.credentials()
        self._notifier.notify(outcome, self.recipients, credentials, log)
        return True
