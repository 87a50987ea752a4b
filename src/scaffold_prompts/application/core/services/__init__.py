from .prompt_registry_service import PromptRegistry, PromptRequest
from .prompt_resolution_service import PromptResolutionService

__all__ = ["PromptRegistry", "PromptRequest", "PromptResolutionService"]
