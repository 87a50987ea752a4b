from __future__ import annotations

import re
from pathlib import Path
from typing import Any, List, Optional, Sequence

from scaffold_prompts.application.core.entities.prompt_definition import NONE_VALUE, PromptDefinition
from scaffold_prompts.application.core.exceptions.version_control_query_error import VersionControlQueryError
from scaffold_prompts.application.core.ports.license_catalog_port import LicenseCatalogPort
from scaffold_prompts.application.core.ports.version_control_port import VersionControlPort
from scaffold_prompts.application.core.shared.hosting_url_service import (
    DEFAULT_HOSTS,
    hosting_web_url,
    repository_owner_and_name,
)
from scaffold_prompts.application.core.shared.identifier_service import (
    identifier_safe_name,
    package_safe_name,
    strip_type_affixes,
    title_case,
)
from scaffold_prompts.application.core.shared.semver_service import valid_semver
from scaffold_prompts.application.core.value_objects.default_source import Answers, Computed, Constant
from scaffold_prompts.application.core.value_objects.sanitize_result import Replaced, SanitizeResult, Unchanged
from scaffold_prompts.application.core.value_objects.validator import Pattern, Predicate
from scaffold_prompts.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)

FALLBACK_VERSION = "0.1.0"
NAME_TYPES = ("javascript", "js")

ANY_CHARACTERS = "May consist of any characters."
PUBLIC_URL = "Should be a public URL."
SEMVER_RANGE = "Must be a valid semantic version range descriptor."
RELATIVE_PATH = "Must be a path relative to the project root."


class BuiltinPromptCatalog:
    """
    The stock prompts offered to scaffolding templates, in resolution order.

    Later prompts read what earlier ones stored: title uses name, homepage and
    bugs use repository, main and bin use slugname (supplied by the template).
    """

    def __init__(
        self,
        vcs: VersionControlPort,
        licenses: LicenseCatalogPort,
        working_dir: Path,
        fallback_user: str = "???",
        hosting_hosts: Sequence[str] = DEFAULT_HOSTS,
        default_description: str = "The best project ever.",
        default_license: str = "MIT",
    ):
        self.vcs = vcs
        self.licenses = licenses
        self.working_dir = working_dir
        self.fallback_user = fallback_user
        self.hosting_hosts = tuple(hosting_hosts)
        self.default_description = default_description
        self.default_license = default_license

    def definitions(self) -> List[PromptDefinition]:
        return [
            PromptDefinition(
                name="name",
                message="Project name",
                default=Computed(self._default_name),
                validator=Pattern.compile(r"^[\w\-\.]+\Z", re.ASCII),
                warning="Must be only letters, numbers, dashes, dots or underscores.",
                sanitizer=self._sanitize_name,
            ),
            PromptDefinition(
                name="title",
                message="Project title",
                default=Computed(self._default_title),
                warning=ANY_CHARACTERS,
            ),
            PromptDefinition(
                name="description",
                message="Description",
                default=Constant(self.default_description),
                warning=ANY_CHARACTERS,
            ),
            PromptDefinition(
                name="version",
                message="Version",
                default=Computed(self._default_version),
                validator=Predicate(valid_semver),
                warning="Must be a valid semantic version (semver.org).",
            ),
            PromptDefinition(
                name="repository",
                message="Project git repository",
                default=Computed(self._default_repository),
                warning="Should be a public git:// URI.",
                sanitizer=self._sanitize_repository,
            ),
            PromptDefinition(
                name="homepage",
                message="Project homepage",
                default=Computed(self._default_homepage),
                warning=PUBLIC_URL,
            ),
            PromptDefinition(
                name="bugs",
                message="Project issues tracker",
                default=Computed(self._default_bugs),
                warning=PUBLIC_URL,
            ),
            PromptDefinition(
                name="licenses",
                message="Licenses",
                default=Constant(self.default_license),
                warning=self._licenses_warning(),
                sanitizer=self._sanitize_licenses,
            ),
            PromptDefinition(
                name="author_name",
                message="Author name",
                default=Computed(self._git_config_default, seed="user.name"),
                warning=ANY_CHARACTERS,
            ),
            PromptDefinition(
                name="author_email",
                message="Author email",
                default=Computed(self._git_config_default, seed="user.email"),
                warning="Should be a valid email address.",
            ),
            PromptDefinition(
                name="author_url",
                message="Author url",
                default=Constant(NONE_VALUE),
                warning=PUBLIC_URL,
            ),
            PromptDefinition(
                name="jquery_version",
                message="Required jQuery version",
                default=Constant("*"),
                warning=SEMVER_RANGE,
            ),
            PromptDefinition(
                name="node_version",
                message="What versions of node does it run on?",
                default=Constant(">= 0.8.0"),
                warning=SEMVER_RANGE,
            ),
            PromptDefinition(
                name="main",
                message="Main module/entry point",
                default=Computed(self._default_main),
                warning=RELATIVE_PATH,
            ),
            PromptDefinition(
                name="bin",
                message="CLI script",
                default=Computed(self._default_bin),
                warning=RELATIVE_PATH,
            ),
            PromptDefinition(
                name="npm_test",
                message="Npm test command",
                default=Constant("grunt nodeunit"),
                warning="Must be an executable command.",
            ),
            PromptDefinition(
                name="grunt_version",
                message="What versions of grunt does it require?",
                default=Constant("~0.4.1"),
                warning=SEMVER_RANGE,
            ),
            PromptDefinition(
                name="travis",
                message="Will this project be tested with Travis CI?",
                default=Constant("Y/n"),
                warning="If selected, you must enable Travis support for this project in https://travis-ci.org/profile",
            ),
        ]

    # --- name / title ---

    async def _default_name(self, value: Any, answers: Answers) -> str:
        types: List[str] = list(NAME_TYPES)
        if answers.get("type"):
            types.append(str(answers["type"]))
        name = strip_type_affixes(self.working_dir.name, types)
        return package_safe_name(name)

    async def _sanitize_name(self, value: Any, answers: Answers) -> SanitizeResult:
        answers["js_safe_name"] = identifier_safe_name(str(value))
        # Avoids clashing with the "test" module of generated unit tests.
        answers["js_test_safe_name"] = "myTest" if answers["js_safe_name"] == "test" else answers["js_safe_name"]
        return Unchanged()

    async def _default_title(self, value: Any, answers: Answers) -> str:
        return title_case(str(answers.get("name") or ""))

    # --- version ---

    async def _default_version(self, value: Any, answers: Answers) -> str:
        described = await self.vcs.describe_tags()
        tag = (described or "").split("-")[0]
        return valid_semver(tag) or FALLBACK_VERSION

    # --- repository / homepage / bugs ---

    async def _default_repository(self, value: Any, answers: Answers) -> str:
        origin = await self.vcs.origin()
        if origin is None:
            guess = f"git://github.com/{self.fallback_user}/{self.working_dir.name}.git"
            logger.info("No git origin found, guessing repository", repository=guess)
            return guess
        return re.sub(r"^git@([^:]+):", r"git://\1/", origin)

    async def _sanitize_repository(self, value: Any, answers: Answers) -> SanitizeResult:
        web_url = hosting_web_url(value, hosts=self.hosting_hosts)
        if web_url is not None:
            answers["git_user"], answers["git_repo"] = repository_owner_and_name(web_url)
            return Unchanged()

        try:
            git_user = await self.vcs.config_get("github.user")
        except VersionControlQueryError as e:
            logger.debug("github.user is not configured", error=str(e))
            git_user = ""
        answers["git_user"] = git_user or self.fallback_user
        answers["git_repo"] = self.working_dir.name
        return Unchanged()

    async def _default_homepage(self, value: Any, answers: Answers) -> str:
        return hosting_web_url(answers.get("repository"), hosts=self.hosting_hosts) or NONE_VALUE

    async def _default_bugs(self, value: Any, answers: Answers) -> str:
        return hosting_web_url(answers.get("repository"), "issues", hosts=self.hosting_hosts) or NONE_VALUE

    # --- licenses ---

    def _licenses_warning(self) -> str:
        return (
            "Must be zero or more space-separated licenses. Built-in licenses are: "
            + " ".join(self.licenses.available())
            + ", but you may specify any number of custom licenses."
        )

    async def _sanitize_licenses(self, value: Any, answers: Answers) -> SanitizeResult:
        if isinstance(value, str):
            return Replaced(value.split())
        return Unchanged()

    # --- author ---

    async def _git_config_default(self, key: str, answers: Answers) -> str:
        # Unset keys raise; the engine reports them as DefaultProviderError.
        return await self.vcs.config_get(key)

    # --- entry points ---

    async def _default_main(self, value: Any, answers: Answers) -> Optional[str]:
        slugname = answers.get("slugname")
        return f"lib/{slugname}.js" if slugname else None

    async def _default_bin(self, value: Any, answers: Answers) -> Optional[str]:
        slugname = answers.get("slugname")
        return f"bin/{slugname}" if slugname else None


