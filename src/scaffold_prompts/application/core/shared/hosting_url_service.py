import re
from typing import Iterable, Optional

DEFAULT_HOSTS = ("github.com", "gitlab.com", "bitbucket.org")


def _hosting_regex(hosts: Iterable[str]) -> "re.Pattern[str]":
    alternatives = "|".join(re.escape(h) for h in hosts)
    return re.compile(rf"^.+(?:@|://)({alternatives})[:/](.+?)(?:\.git|/)?$")


def hosting_web_url(uri: Optional[str], suffix: Optional[str] = None, hosts: Iterable[str] = DEFAULT_HOSTS) -> Optional[str]:
    """
    Generates the web URL of a repository hosted on a known service.

    "git@github.com:user/repo.git" -> "https://github.com/user/repo"
    With suffix "issues"           -> "https://github.com/user/repo/issues"

    Returns None when the URI does not point to one of hosts.
    """
    hosts = tuple(hosts)
    if not uri or not hosts:
        return None

    matches = _hosting_regex(hosts).match(uri)
    if not matches:
        return None

    url = f"https://{matches.group(1)}/{matches.group(2)}"
    if suffix:
        url += "/" + re.sub(r"^/", "", suffix)
    return url


def repository_owner_and_name(web_url: str) -> tuple[str, str]:
    """Splits "https://host/user/repo" into ("user", "repo")."""
    parts = web_url.split("/")
    return parts[-2], parts[-1]
