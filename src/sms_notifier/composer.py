"""Jinja2 rendering of the build status SMS text."""

from datetime import datetime

from jinja2 import StrictUndefined
from jinja2.sandbox import SandboxedEnvironment

from sms_notifier.models import BuildOutcome

MAX_LENGTH = 150
ELLIPSIS = "..."

DEFAULT_TEMPLATE = "Build #{{ number }} of {{ project }} is {{ status }} on {{ timestamp }}"

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# SMS bodies are plain text, so no HTML escaping.
_env = SandboxedEnvironment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=False,
)


def format_timestamp(value: datetime) -> str:
    """Render *value* in the local system timezone.

    Naive datetimes are taken to be local already.
    """
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(_TIMESTAMP_FORMAT)


def truncate(message: str, max_length: int = MAX_LENGTH) -> str:
    if len(message) <= max_length:
        return message
    return message[: max_length - 5] + ELLIPSIS


def compose_message(
    outcome: BuildOutcome,
    max_length: int = MAX_LENGTH,
    template: str = DEFAULT_TEMPLATE,
) -> str:
    """Build the status message for *outcome*, cut down to *max_length*.

    Over-long messages keep their first ``max_length - 5`` characters and
    get an ellipsis appended.
    """
    message = _env.from_string(template).render(
        number=outcome.number,
        project=outcome.project_name,
        status=str(outcome.status),
        timestamp=format_timestamp(outcome.timestamp),
    )
    return truncate(message, max_length)


def check_template(template: str) -> None:
    """Parse *template* and render it against sample values.

    Raises jinja2.TemplateError if it does not compile or uses a variable
    the composer does not provide.
    """
    _env.from_string(template).render(
        number=1,
        project="project",
        status="SUCCESS",
        timestamp="1970-01-01 00:00:00",
    )
