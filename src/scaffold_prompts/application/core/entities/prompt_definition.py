from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from scaffold_prompts.application.core.value_objects.default_source import Constant, DefaultSource
from scaffold_prompts.application.core.value_objects.sanitize_result import Sanitizer
from scaffold_prompts.application.core.value_objects.validator import NoValidator, Validator

# Placeholder substituted for absent or empty defaults so templates never see a missing value.
NONE_VALUE = "none"


@dataclass(frozen=True)
class PromptDefinition:
    """
    One question asked by a scaffolding driver.

    Definitions are immutable: resolving a default produces a copy carrying a
    Constant default, so the registry's canonical definitions are never touched
    across scaffold runs.
    """
    name: str
    message: str
    default: DefaultSource = field(default_factory=Constant)
    validator: Validator = field(default_factory=NoValidator)
    sanitizer: Optional[Sanitizer] = None
    warning: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("PromptDefinition.message must be non-empty")
