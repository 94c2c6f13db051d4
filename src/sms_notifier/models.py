from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from sms_notifier.enums import BuildStatus


class BuildOutcome(BaseModel):
    """Terminal status and metadata of one finished build."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=0)
    project_name: str
    status: BuildStatus
    timestamp: datetime


class GatewayCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str = ""
    password: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.username.strip()) and bool(self.password.strip())
