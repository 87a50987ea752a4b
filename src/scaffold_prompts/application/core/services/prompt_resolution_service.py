from __future__ import annotations

from dataclasses import replace
from typing import Any

from scaffold_prompts.application.core.entities.prompt_definition import NONE_VALUE, PromptDefinition
from scaffold_prompts.application.core.exceptions.default_provider_error import DefaultProviderError
from scaffold_prompts.application.core.value_objects.default_source import Answers, Computed, Constant
from scaffold_prompts.application.core.value_objects.sanitize_result import Replaced, Unchanged
from scaffold_prompts.application.core.value_objects.validation_outcome import ValidationOutcome


class PromptResolutionService:
    """
    Resolves defaults and validates answers for a single prompt at a time.

    Callers must resolve prompts sequentially, in registry order: later
    providers and sanitizers read fields that earlier sanitizers write into
    the shared answers mapping. Re-asking on invalid input is the driver's job.
    """

    async def resolve_default(self, definition: PromptDefinition, answers: Answers) -> PromptDefinition:
        """
        Returns a copy of the definition whose default is a concrete Constant.
        Provider failures are raised as DefaultProviderError, never retried.
        """
        source = definition.default
        if isinstance(source, Computed):
            try:
                value = await source.provider(source.seed, answers)
            except Exception as e:
                raise DefaultProviderError(prompt_name=definition.name, message=str(e)) from e
        else:
            value = source.value

        if value is None or value == "":
            value = NONE_VALUE

        return replace(definition, default=Constant(value))

    async def validate(self, definition: PromptDefinition, value: Any, answers: Answers) -> ValidationOutcome:
        """
        Sanitizes then validates a candidate answer in a single pass.

        The returned value is the one callers must keep, whether or not it is
        valid: sanitizers may already have written derived fields into answers.
        """
        value = await self.sanitize(definition, value, answers)
        return ValidationOutcome(valid=definition.validator.accepts(value), value=value)

    async def sanitize(self, definition: PromptDefinition, value: Any, answers: Answers) -> Any:
        if definition.sanitizer is None:
            return value

        result = await definition.sanitizer(value, answers)
        if isinstance(result, Replaced):
            return result.value
        if isinstance(result, Unchanged):
            return value
        raise TypeError(
            f"Sanitizer for prompt '{definition.name}' must return Unchanged or Replaced, got {type(result).__name__}"
        )
