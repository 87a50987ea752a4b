from __future__ import annotations

from typing import Optional, Protocol


class VersionControlPort(Protocol):
    """Read-only facts about the repository the project is scaffolded in."""

    async def origin(self) -> Optional[str]:
        """URL of the 'origin' remote, or None when there is none."""
        ...

    async def config_get(self, key: str) -> str:
        """Value of a git config key. Raises VersionControlQueryError when unset."""
        ...

    async def describe_tags(self) -> Optional[str]:
        ...
