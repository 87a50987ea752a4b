from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, MutableMapping, Union


@dataclass(frozen=True, slots=True)
class Unchanged:
    """The sanitizer kept the candidate value (it may still have enriched the answers)."""


@dataclass(frozen=True, slots=True)
class Replaced:
    value: Any


SanitizeResult = Union[Unchanged, Replaced]
Sanitizer = Callable[[Any, MutableMapping[str, Any]], Awaitable[SanitizeResult]]
