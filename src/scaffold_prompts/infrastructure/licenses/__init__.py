from .license_catalog_adapter import BUILTIN_CATALOG_DIR, FileLicenseCatalog

__all__ = ["BUILTIN_CATALOG_DIR", "FileLicenseCatalog"]
