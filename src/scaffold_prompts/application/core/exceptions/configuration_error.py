from __future__ import annotations

from scaffold_prompts.application.core.exceptions.infra_error import InfraError


class ConfigurationError(InfraError):
    """Raised when configuration is invalid or incomplete."""
