import re

_WHITESPACE_RE = re.compile(r"\s")


def parse_recipients(raw: str) -> list[str]:
    """Split a comma-separated recipient string into phone numbers.

    All whitespace is removed before splitting, so "+7 999 123" becomes
    "+7999123". Empty entries from stray commas are kept.
    """
    compact = _WHITESPACE_RE.sub("", raw.strip())
    return compact.split(",")
