from .configuration_error import ConfigurationError
from .default_provider_error import DefaultProviderError
from .domain_error import DomainError
from .infra_error import InfraError
from .version_control_query_error import VersionControlQueryError

__all__ = [
    "ConfigurationError",
    "DefaultProviderError",
    "DomainError",
    "InfraError",
    "VersionControlQueryError",
]
