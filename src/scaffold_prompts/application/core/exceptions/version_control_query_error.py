from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from scaffold_prompts.application.core.exceptions.infra_error import InfraError


@dataclass(eq=False)
class VersionControlQueryError(InfraError):
    command: str
    message: str
    exit_code: Optional[int] = None

    def __str__(self) -> str:
        code = f" exit_code={self.exit_code}" if self.exit_code is not None else ""
        return f"'{self.command}': {self.message}{code}"
