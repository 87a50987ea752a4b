from scaffold_prompts.application.core.entities.prompt_definition import NONE_VALUE, PromptDefinition

__all__ = ["NONE_VALUE", "PromptDefinition"]
