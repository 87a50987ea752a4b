from .license_catalog_port import LicenseCatalogPort
from .version_control_port import VersionControlPort

__all__ = ["LicenseCatalogPort", "VersionControlPort"]
