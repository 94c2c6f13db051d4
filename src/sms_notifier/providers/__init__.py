"""SMS gateway providers."""

from sms_notifier.config import SmscConfig
from sms_notifier.providers.base import DispatchResult, SmsProvider
from sms_notifier.providers.smsc import SmscProvider

__all__ = ["DispatchResult", "SmsProvider", "SmscProvider", "create_default_provider"]


def create_default_provider(config: SmscConfig | None = None) -> SmsProvider:
    """Create the SMSC provider from environment configuration."""
    return SmscProvider(config or SmscConfig())
