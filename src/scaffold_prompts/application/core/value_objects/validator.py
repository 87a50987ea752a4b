from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True, slots=True)
class NoValidator:
    def accepts(self, value: Any) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Predicate:
    check: Callable[[Any], Any]

    def accepts(self, value: Any) -> bool:
        return bool(self.check(value))


@dataclass(frozen=True, slots=True)
class Pattern:
    regex: re.Pattern[str]

    @classmethod
    def compile(cls, expression: str, flags: int = 0) -> "Pattern":
        return cls(re.compile(expression, flags))

    def accepts(self, value: Any) -> bool:
        # Unanchored search; anchors belong in the expression itself.
        return self.regex.search(str(value)) is not None


Validator = Union[NoValidator, Predicate, Pattern]
