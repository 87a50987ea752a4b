"""Prompt definitions and resolution engine for project scaffolding tools."""

from scaffold_prompts.application.core.entities.prompt_definition import NONE_VALUE, PromptDefinition
from scaffold_prompts.application.core.exceptions import (
    ConfigurationError,
    DefaultProviderError,
    DomainError,
    VersionControlQueryError,
)
from scaffold_prompts.application.core.services.prompt_registry_service import PromptRegistry
from scaffold_prompts.application.core.services.prompt_resolution_service import PromptResolutionService
from scaffold_prompts.application.core.value_objects import (
    Computed,
    Constant,
    NoValidator,
    Pattern,
    Predicate,
    Replaced,
    Unchanged,
    ValidationOutcome,
)

__all__ = [
    "NONE_VALUE",
    "Computed",
    "ConfigurationError",
    "Constant",
    "DefaultProviderError",
    "DomainError",
    "NoValidator",
    "Pattern",
    "Predicate",
    "PromptDefinition",
    "PromptRegistry",
    "PromptResolutionService",
    "Replaced",
    "Unchanged",
    "ValidationOutcome",
    "VersionControlQueryError",
]
