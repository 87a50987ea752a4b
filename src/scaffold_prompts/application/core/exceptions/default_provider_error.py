from __future__ import annotations

from dataclasses import dataclass

from scaffold_prompts.application.core.exceptions.domain_error import DomainError


@dataclass(eq=False)
class DefaultProviderError(DomainError):
    """Raised when a computed default provider fails for a prompt."""
    prompt_name: str
    message: str

    def __str__(self) -> str:
        return f"Default provider for prompt '{self.prompt_name}' failed: {self.message}"
