from jinja2 import TemplateError
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sms_notifier.composer import DEFAULT_TEMPLATE, MAX_LENGTH, check_template
from sms_notifier.models import GatewayCredentials


class SmscConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SMSC_")

    username: str = ""
    password: str = ""
    url: str = "https://smsc.ru/sys/send.php"
    timeout_seconds: float = 5.0

    def credentials(self) -> GatewayCredentials:
        """Snapshot the gateway login for one notification run."""
        return GatewayCredentials(username=self.username, password=self.password)


class NotifierConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="NOTIFIER_")

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    # Truncation keeps max_length - 5 characters, so shorter limits overflow.
    max_length: int = Field(default=MAX_LENGTH, ge=5)
    message_template: str = DEFAULT_TEMPLATE

    @field_validator("message_template")
    @classmethod
    def _template_renders(cls, value: str) -> str:
        try:
            check_template(value)
        except TemplateError as exc:
            raise ValueError(f"Invalid message template: {exc}") from exc
        return value
