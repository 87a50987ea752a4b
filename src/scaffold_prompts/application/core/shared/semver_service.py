import re
from typing import Any, Optional

# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
_SEMVER = re.compile(
    r"(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?",
    re.ASCII,
)


def valid_semver(value: Any) -> Optional[str]:
    """
    Returns the "MAJOR.MINOR.PATCH[-pre][+build]" form of value when it is a
    semantic version (semver.org), else None. A leading "v" or "=" and
    surrounding whitespace are ignored, as git tags usually carry them.
    """
    if value is None:
        return None

    text = str(value).strip().lstrip("=")
    if text[:1] in ("v", "V"):
        text = text[1:]

    if not _SEMVER.fullmatch(text):
        return None
    return text
