from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from scaffold_prompts.application.core.entities.prompt_definition import PromptDefinition

PromptRequest = Union[str, PromptDefinition, Any]


@dataclass(frozen=True)
class PromptRegistry:
    """
    Fixed mapping from prompt name to its built-in definition.

    Built once at startup and passed to whichever driver needs it. Iteration
    order is the order prompts were registered in, which doubles as a valid
    resolution order for their data dependencies.
    """
    prompts: Mapping[str, PromptDefinition] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze a private copy so callers cannot mutate the catalog afterwards.
        object.__setattr__(self, "prompts", MappingProxyType(dict(self.prompts)))

    @classmethod
    def from_definitions(cls, definitions: Iterable[PromptDefinition]) -> "PromptRegistry":
        catalog: Dict[str, PromptDefinition] = {}
        for definition in definitions:
            if definition.name in catalog:
                raise ValueError(f"Duplicate prompt name '{definition.name}'")
            catalog[definition.name] = definition
        return cls(catalog)

    def expand(self, requested: Sequence[PromptRequest]) -> List[PromptRequest]:
        """
        Maps requested prompt names to built-in definitions, preserving order.

        Anything that is not a known name (a typo, a caller-supplied
        PromptDefinition, an already resolved object) is passed through as-is:
        drivers rely on this to mix custom prompts with built-in ones.
        """
        expanded: List[PromptRequest] = []
        for item in requested:
            builtin = self.prompts.get(item) if isinstance(item, str) else None
            expanded.append(replace(builtin, name=item) if builtin is not None else item)
        return expanded

    def get(self, name: str) -> Optional[PromptDefinition]:
        return self.prompts.get(name)

    def names(self) -> List[str]:
        return list(self.prompts)

    def __contains__(self, name: object) -> bool:
        return name in self.prompts

    def __len__(self) -> int:
        return len(self.prompts)
