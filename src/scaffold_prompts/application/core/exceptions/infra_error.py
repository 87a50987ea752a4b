from scaffold_prompts.application.core.exceptions.domain_error import DomainError


class InfraError(DomainError):
    """
    Base class for all infrastructure layer exceptions.
    These are domain errors caused by failures of external collaborators (git, filesystem).
    """
    pass
