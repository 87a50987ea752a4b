import pytest

from scaffold_prompts.application.catalog.builtin_prompts import BuiltinPromptCatalog
from scaffold_prompts.application.core.entities.prompt_definition import NONE_VALUE
from scaffold_prompts.application.core.exceptions.default_provider_error import DefaultProviderError
from scaffold_prompts.application.core.services.prompt_registry_service import PromptRegistry
from scaffold_prompts.application.core.services.prompt_resolution_service import PromptResolutionService

EXPECTED_ORDER = [
    "name",
    "title",
    "description",
    "version",
    "repository",
    "homepage",
    "bugs",
    "licenses",
    "author_name",
    "author_email",
    "author_url",
    "jquery_version",
    "node_version",
    "main",
    "bin",
    "npm_test",
    "grunt_version",
    "travis",
]


@pytest.fixture
def catalog(mock_vcs, mock_licenses, project_dir):
    return BuiltinPromptCatalog(
        vcs=mock_vcs,
        licenses=mock_licenses,
        working_dir=project_dir,
        fallback_user="octocat",
    )


@pytest.fixture
def registry(catalog):
    return PromptRegistry.from_definitions(catalog.definitions())


@pytest.fixture
def resolver():
    return PromptResolutionService()


async def _default_of(registry, resolver, name, answers):
    (definition,) = registry.expand([name])
    resolved = await resolver.resolve_default(definition, answers)
    return resolved.default.value


def test_catalog_order(registry):
    assert registry.names() == EXPECTED_ORDER


@pytest.mark.asyncio
async def test_name_default_and_sanitizer(registry, resolver, answers):
    default = await _default_of(registry, resolver, "name", answers)
    assert default == "my-cool-app"

    (definition,) = registry.expand(["name"])
    outcome = await resolver.validate(definition, default, answers)

    assert outcome.valid is True
    assert outcome.value == "my-cool-app"
    assert answers["js_safe_name"] == "my_cool_app"
    assert answers["js_test_safe_name"] == "my_cool_app"


@pytest.mark.asyncio
async def test_name_strips_template_type(mock_vcs, mock_licenses, temp_workspace, resolver):
    project = temp_workspace / "jquery-tooltip.js"
    project.mkdir()
    registry = PromptRegistry.from_definitions(
        BuiltinPromptCatalog(mock_vcs, mock_licenses, working_dir=project).definitions()
    )

    assert await _default_of(registry, resolver, "name", {"type": "jquery"}) == "tooltip"


@pytest.mark.asyncio
async def test_name_rejects_spaces_and_guards_test_identifier(registry, resolver, answers):
    (definition,) = registry.expand(["name"])

    assert (await resolver.validate(definition, "my app", answers)).valid is False
    assert (await resolver.validate(definition, "my-app\n", answers)).valid is False

    outcome = await resolver.validate(definition, "test", answers)
    assert outcome.valid is True
    assert answers["js_test_safe_name"] == "myTest"


@pytest.mark.asyncio
async def test_title_follows_name(registry, resolver):
    assert await _default_of(registry, resolver, "title", {"name": "my-cool_app"}) == "My Cool App"
    assert await _default_of(registry, resolver, "title", {}) == NONE_VALUE


@pytest.mark.asyncio
async def test_version_uses_described_tag(registry, resolver, mock_vcs, answers):
    mock_vcs.describe_tags.return_value = "v1.4.2-3-gdeadbee"

    assert await _default_of(registry, resolver, "version", answers) == "1.4.2"


@pytest.mark.asyncio
async def test_version_falls_back_without_tags(registry, resolver, answers):
    assert await _default_of(registry, resolver, "version", answers) == "0.1.0"


@pytest.mark.asyncio
async def test_version_validator(registry, resolver, answers):
    (definition,) = registry.expand(["version"])

    assert (await resolver.validate(definition, "1.0.0", answers)).valid is True
    assert (await resolver.validate(definition, "one", answers)).valid is False
    assert (await resolver.validate(definition, "1.2.3.post1", answers)).valid is False


@pytest.mark.asyncio
async def test_version_ignores_non_semver_tags(registry, resolver, mock_vcs, answers):
    mock_vcs.describe_tags.return_value = "1.2.3.post1"

    assert await _default_of(registry, resolver, "version", answers) == "0.1.0"


@pytest.mark.asyncio
async def test_repository_rewrites_ssh_origin(registry, resolver, mock_vcs, answers):
    mock_vcs.origin.return_value = "git@github.com:user/repo.git"

    assert await _default_of(registry, resolver, "repository", answers) == "git://github.com/user/repo.git"


@pytest.mark.asyncio
async def test_repository_guess_without_origin(registry, resolver, answers):
    default = await _default_of(registry, resolver, "repository", answers)

    assert default == "git://github.com/octocat/my-cool-app.git"


@pytest.mark.asyncio
async def test_repository_sanitizer_uses_hosting_url(registry, resolver, answers):
    (definition,) = registry.expand(["repository"])

    outcome = await resolver.validate(definition, "git://github.com/user/repo.git", answers)

    assert outcome.value == "git://github.com/user/repo.git"
    assert answers["git_user"] == "user"
    assert answers["git_repo"] == "repo"


@pytest.mark.asyncio
async def test_repository_sanitizer_falls_back_to_git_config(registry, resolver, mock_vcs, answers):
    mock_vcs.config_get.side_effect = None
    mock_vcs.config_get.return_value = "hubber"
    (definition,) = registry.expand(["repository"])

    await resolver.validate(definition, "https://example.com/repo.git", answers)

    mock_vcs.config_get.assert_awaited_once_with("github.user")
    assert answers["git_user"] == "hubber"
    assert answers["git_repo"] == "my-cool-app"


@pytest.mark.asyncio
async def test_repository_sanitizer_falls_back_to_user_name(registry, resolver, answers):
    (definition,) = registry.expand(["repository"])

    await resolver.validate(definition, "none", answers)

    assert answers["git_user"] == "octocat"
    assert answers["git_repo"] == "my-cool-app"


@pytest.mark.asyncio
async def test_homepage_and_bugs_follow_repository(registry, resolver):
    answers = {"repository": "git@github.com:user/repo.git"}

    assert await _default_of(registry, resolver, "homepage", answers) == "https://github.com/user/repo"
    assert await _default_of(registry, resolver, "bugs", answers) == "https://github.com/user/repo/issues"


@pytest.mark.asyncio
async def test_homepage_and_bugs_without_hosting_service(registry, resolver):
    answers = {"repository": "git://example.com/repo.git"}

    assert await _default_of(registry, resolver, "homepage", answers) == NONE_VALUE
    assert await _default_of(registry, resolver, "bugs", answers) == NONE_VALUE


@pytest.mark.asyncio
async def test_licenses_are_split(registry, resolver, answers):
    (definition,) = registry.expand(["licenses"])

    outcome = await resolver.validate(definition, "MIT  Apache-2.0", answers)

    assert outcome.value == ["MIT", "Apache-2.0"]
    assert definition.default.value == "MIT"


def test_licenses_warning_lists_builtin_licenses(registry):
    warning = registry.get("licenses").warning

    assert "Built-in licenses are: Apache-2.0 MIT," in warning


@pytest.mark.asyncio
async def test_author_defaults_come_from_git_config(registry, resolver, mock_vcs, answers):
    mock_vcs.config_get.side_effect = lambda key: {"user.name": "Mona Lisa", "user.email": "mona@example.com"}[key]

    assert await _default_of(registry, resolver, "author_name", answers) == "Mona Lisa"
    assert await _default_of(registry, resolver, "author_email", answers) == "mona@example.com"


@pytest.mark.asyncio
async def test_author_default_propagates_git_failure(registry, resolver, answers):
    (definition,) = registry.expand(["author_email"])

    with pytest.raises(DefaultProviderError) as exc:
        await resolver.resolve_default(definition, answers)

    assert exc.value.prompt_name == "author_email"


@pytest.mark.asyncio
async def test_entry_points_use_slugname(registry, resolver):
    answers = {"slugname": "widget"}

    assert await _default_of(registry, resolver, "main", answers) == "lib/widget.js"
    assert await _default_of(registry, resolver, "bin", answers) == "bin/widget"


@pytest.mark.asyncio
async def test_entry_points_without_slugname_are_none(registry, resolver, answers):
    assert await _default_of(registry, resolver, "main", answers) == NONE_VALUE
    assert await _default_of(registry, resolver, "bin", answers) == NONE_VALUE


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name, expected",
    [
        ("description", "The best project ever."),
        ("author_url", NONE_VALUE),
        ("jquery_version", "*"),
        ("node_version", ">= 0.8.0"),
        ("npm_test", "grunt nodeunit"),
        ("grunt_version", "~0.4.1"),
        ("travis", "Y/n"),
    ],
)
async def test_constant_defaults(registry, resolver, answers, name, expected):
    assert await _default_of(registry, resolver, name, answers) == expected
