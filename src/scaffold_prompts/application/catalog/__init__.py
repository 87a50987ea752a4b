from .builtin_prompts import BuiltinPromptCatalog

__all__ = ["BuiltinPromptCatalog"]
