from pathlib import Path
from typing import List, Optional

from scaffold_prompts.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)

LICENSE_PREFIX = "LICENSE-"
BUILTIN_CATALOG_DIR = Path(__file__).parent / "catalog"


class FileLicenseCatalog:
    """Built-in license texts stored as LICENSE-<id> files in a directory."""

    def __init__(self, catalog_dir: Optional[Path] = None):
        self.catalog_dir = catalog_dir or BUILTIN_CATALOG_DIR

    def available(self) -> List[str]:
        """
        Identifiers of the licenses shipped in the catalog, sorted.
        """
        if not self.catalog_dir.is_dir():
            logger.warning("License catalog directory not found", catalog_dir=str(self.catalog_dir))
            return []

        licenses = sorted(
            path.name[len(LICENSE_PREFIX):]
            for path in self.catalog_dir.iterdir()
            if path.is_file() and path.name.startswith(LICENSE_PREFIX)
        )
        logger.debug("Loaded license catalog", licenses=licenses)
        return licenses

    def path_for(self, license_id: str) -> Path:
        """Path of the text for license_id. The file is not required to exist."""
        if not license_id:
            raise ValueError("license_id cannot be empty")

        # Sanitize license_id to prevent path traversal
        clean_id = license_id.replace("..", "").replace("/", "").replace("\\", "")
        return self.catalog_dir / f"{LICENSE_PREFIX}{clean_id}"
