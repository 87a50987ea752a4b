from dataclasses import dataclass
from typing import Optional

from scaffold_prompts.application.catalog.builtin_prompts import BuiltinPromptCatalog
from scaffold_prompts.application.core.ports.license_catalog_port import LicenseCatalogPort
from scaffold_prompts.application.core.ports.version_control_port import VersionControlPort
from scaffold_prompts.application.core.services.prompt_registry_service import PromptRegistry
from scaffold_prompts.application.core.services.prompt_resolution_service import PromptResolutionService
from scaffold_prompts.infrastructure.configuration.main_settings import PromptSettings, load_settings
from scaffold_prompts.infrastructure.licenses.license_catalog_adapter import FileLicenseCatalog
from scaffold_prompts.infrastructure.observability.logger_factory_service import configure_logging, get_logger
from scaffold_prompts.infrastructure.vcs.git_cli_adapter import GitCliAdapter

logger = get_logger(__name__)


@dataclass(frozen=True)
class PromptToolkit:
    """Everything a scaffolding driver needs for one process: settings, registry and engine."""
    settings: PromptSettings
    registry: PromptRegistry
    resolver: PromptResolutionService
    licenses: LicenseCatalogPort


def build_prompt_registry(
    settings: PromptSettings,
    vcs: Optional[VersionControlPort] = None,
    licenses: Optional[LicenseCatalogPort] = None,
) -> PromptRegistry:
    """Assembles the built-in prompt registry, wiring the git CLI and bundled licenses by default."""
    vcs = vcs or GitCliAdapter(settings.working_dir, settings.git_executable)
    licenses = licenses or FileLicenseCatalog()

    catalog = BuiltinPromptCatalog(
        vcs=vcs,
        licenses=licenses,
        working_dir=settings.working_dir,
        fallback_user=settings.fallback_user,
        hosting_hosts=settings.hosting_hosts,
        default_description=settings.default_description,
        default_license=settings.default_license,
    )
    registry = PromptRegistry.from_definitions(catalog.definitions())
    logger.info("Prompt registry built", prompts=len(registry), working_dir=str(settings.working_dir))
    return registry


def build_toolkit(
    settings: Optional[PromptSettings] = None,
    vcs: Optional[VersionControlPort] = None,
    licenses: Optional[LicenseCatalogPort] = None,
) -> PromptToolkit:
    settings = settings or load_settings()
    configure_logging(settings.log_level, settings.log_format)

    licenses = licenses or FileLicenseCatalog()
    registry = build_prompt_registry(settings, vcs=vcs, licenses=licenses)
    return PromptToolkit(
        settings=settings,
        registry=registry,
        resolver=PromptResolutionService(),
        licenses=licenses,
    )
