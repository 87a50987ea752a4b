from scaffold_prompts.application.core.value_objects.default_source import (
    Answers,
    Computed,
    Constant,
    DefaultProvider,
    DefaultSource,
)
from scaffold_prompts.application.core.value_objects.sanitize_result import (
    Replaced,
    SanitizeResult,
    Sanitizer,
    Unchanged,
)
from scaffold_prompts.application.core.value_objects.validation_outcome import ValidationOutcome
from scaffold_prompts.application.core.value_objects.validator import (
    NoValidator,
    Pattern,
    Predicate,
    Validator,
)

__all__ = [
    "Answers",
    "Computed",
    "Constant",
    "DefaultProvider",
    "DefaultSource",
    "NoValidator",
    "Pattern",
    "Predicate",
    "Replaced",
    "SanitizeResult",
    "Sanitizer",
    "Unchanged",
    "ValidationOutcome",
    "Validator",
]
