"""Configuration-time validation of recipient phone numbers."""

import re
from dataclasses import dataclass

from sms_notifier.enums import ValidationKind
from sms_notifier.recipients import parse_recipients

# Optional leading "+" followed by 7 to 15 digits (E.164 upper bound).
_PHONE_RE = re.compile(r"\+?[0-9]{7,15}")

MISSING_RECIPIENTS = "You must fill recipients' numbers!"
INVALID_RECIPIENTS = "Formats of some recipients' numbers are invalid."


@dataclass(frozen=True, slots=True)
class FieldValidation:
    """Outcome of checking a configuration form field."""

    kind: ValidationKind
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind == ValidationKind.OK


def validate_phone_number(candidate: str) -> bool:
    """Return True if *candidate* is a single well-formed phone number.

    The caller strips whitespace first; no normalisation happens here.
    """
    return _PHONE_RE.fullmatch(candidate) is not None


def check_recipients(raw: str | None) -> FieldValidation:
    """Check a recipients field before it is saved.

    A blank field is a warning, any malformed entry is an error.
    """
    if raw is None or not raw.strip():
        return FieldValidation(ValidationKind.WARNING, MISSING_RECIPIENTS)

    for number in parse_recipients(raw):
        if not validate_phone_number(number):
            return FieldValidation(ValidationKind.ERROR, INVALID_RECIPIENTS)

    return FieldValidation(ValidationKind.OK)
