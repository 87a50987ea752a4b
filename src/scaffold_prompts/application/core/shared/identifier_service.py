import re
from typing import Iterable

_SEPARATORS = r"[\-\._]"


def strip_type_affixes(text: str, types: Iterable[str]) -> str:
    """
    Removes project-type noise from a directory name.
    - Leading "<type>" followed by an optional separator (-, ., _)
    - Trailing "<type>" and/or "js", each with an optional leading separator
    Matching is case-insensitive.
    """
    if not text:
        return ""

    alternatives = "|".join(re.escape(t) for t in types if t)
    if not alternatives:
        return text

    kind = f"(?:{alternatives})"
    pattern = re.compile(
        f"^{kind}{_SEPARATORS}?|(?:{_SEPARATORS}?{kind})?(?:{_SEPARATORS}?js)?$",
        re.IGNORECASE,
    )
    return pattern.sub("", text)


def package_safe_name(text: str) -> str:
    """Keeps letters, numbers, dashes, dots and underscores only."""
    return re.sub(r"[^\w\-\.]", "", text, flags=re.ASCII)


def identifier_safe_name(text: str) -> str:
    """
    Creates a name usable as a JavaScript (or Python) identifier.
    - Runs of non-word characters and underscores collapse into one underscore
    - A leading digit gets an underscore prefix
    """
    safe = re.sub(r"[\W_]+", "_", text, flags=re.ASCII)
    return re.sub(r"^(\d)", r"_\1", safe)


def title_case(text: str) -> str:
    words = re.sub(r"[\W_]+", " ", text or "", flags=re.ASCII)
    return re.sub(r"\w+", lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), words, flags=re.ASCII)
