from .git_cli_adapter import GitCliAdapter

__all__ = ["GitCliAdapter"]
