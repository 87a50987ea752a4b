import asyncio
import re
from pathlib import Path
from typing import Optional

from scaffold_prompts.application.core.exceptions.version_control_query_error import VersionControlQueryError
from scaffold_prompts.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)

_ORIGIN_LINE = re.compile(r"^origin\s")


class GitCliAdapter:
    """
    Answers read-only questions about the working copy by running the git CLI.

    Each query is a single awaited subprocess; there is no timeout, so a hung
    git process blocks the prompt that asked.
    """

    def __init__(self, working_dir: Path, git_executable: str = "git"):
        self.working_dir = working_dir
        self.git_executable = git_executable

    async def origin(self) -> Optional[str]:
        """URL of the 'origin' remote, or None when git fails or there is no origin."""
        try:
            stdout = await self._run("remote", "-v")
        except VersionControlQueryError as e:
            logger.warning("Could not list git remotes", error=str(e))
            return None

        lines = [line for line in stdout.split("\n") if _ORIGIN_LINE.match(line)]
        if not lines:
            logger.debug("No origin remote configured", working_dir=str(self.working_dir))
            return None
        return lines[0].split()[1]

    async def config_get(self, key: str) -> str:
        stdout = await self._run("config", "--get", key)
        return stdout.strip()

    async def describe_tags(self) -> Optional[str]:
        try:
            stdout = await self._run("describe", "--tags")
        except VersionControlQueryError as e:
            logger.debug("No tag describes HEAD", error=str(e))
            return None
        return stdout.strip() or None

    async def _run(self, *args: str) -> str:
        command = " ".join((self.git_executable, *args))
        logger.debug("Running git query", command=command, working_dir=str(self.working_dir))

        try:
            process = await asyncio.create_subprocess_exec(
                self.git_executable,
                *args,
                cwd=str(self.working_dir),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise VersionControlQueryError(command=command, message=f"could not start git: {e}") from e

        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            raise VersionControlQueryError(
                command=command,
                message=_decode(stderr).strip() or "git exited with an error",
                exit_code=process.returncode,
            )
        return _decode(stdout)


def _decode(data: Optional[bytes]) -> str:
    return (data or b"").decode("utf-8", errors="replace")
