import shutil
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from scaffold_prompts.application.core.exceptions.version_control_query_error import VersionControlQueryError
from scaffold_prompts.infrastructure.configuration.main_settings import PromptSettings


@pytest.fixture
def temp_workspace():
    tmp = tempfile.mkdtemp()
    yield Path(tmp)
    shutil.rmtree(tmp)


@pytest.fixture
def project_dir(temp_workspace):
    path = temp_workspace / "my-cool-app"
    path.mkdir()
    return path


@pytest.fixture
def settings(project_dir):
    return PromptSettings(
        working_dir=project_dir,
        user_name="octocat",
        git_executable="git",
        log_level="DEBUG",
    )


@pytest.fixture
def mock_vcs():
    """A repository without origin, tags or git config."""
    vcs = MagicMock()
    vcs.origin = AsyncMock(return_value=None)
    vcs.describe_tags = AsyncMock(return_value=None)
    vcs.config_get = AsyncMock(
        side_effect=VersionControlQueryError(command="git config --get", message="", exit_code=1)
    )
    return vcs


@pytest.fixture
def mock_licenses():
    licenses = MagicMock()
    licenses.available.return_value = ["Apache-2.0", "MIT"]
    return licenses


@pytest.fixture
def answers():
    return {}
