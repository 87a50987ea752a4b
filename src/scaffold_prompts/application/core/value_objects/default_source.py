from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, MutableMapping, Union

Answers = MutableMapping[str, Any]
DefaultProvider = Callable[[Any, Answers], Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class Constant:
    """A default that is known up front."""
    value: Any = None


@dataclass(frozen=True, slots=True)
class Computed:
    """
    A default computed at resolution time from the answers collected so far.
    The provider is awaited as provider(seed, answers); seed is the currently
    configured default, if any.
    """
    provider: DefaultProvider
    seed: Any = None


DefaultSource = Union[Constant, Computed]
