from __future__ import annotations

from pathlib import Path
from typing import List, Protocol


class LicenseCatalogPort(Protocol):
    def available(self) -> List[str]:
        ...

    def path_for(self, license_id: str) -> Path:
        ...
