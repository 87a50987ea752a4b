from .container import PromptToolkit, build_prompt_registry, build_toolkit

__all__ = ["PromptToolkit", "build_prompt_registry", "build_toolkit"]
