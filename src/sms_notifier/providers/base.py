"""Abstract SMS provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from sms_notifier.models import GatewayCredentials


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Outcome of sending one message to one recipient."""

    recipient: str
    success: bool
    error: str | None = None


class SmsProvider(ABC):
    """Base class for SMS gateway clients."""

    @abstractmethod
    def send(
        self,
        credentials: GatewayCredentials,
        recipient: str,
        message: str,
    ) -> DispatchResult:
        """Attempt to deliver *message* to *recipient*.

        Implementations must not raise; return DispatchResult(success=False)
        on failure instead.
        """

    def close(self) -> None:
        """Release any held connections."""
