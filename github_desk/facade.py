import logging
from typing import Optional

import httpx

from . import config, github
from .github import JSONValue
from .models import Gist

log = logging.getLogger(__name__)


class GitHubFacade:
    """
    The operations the desktop frontend calls, one GitHub endpoint each.
    Every call decodes into its own local result; nothing is kept between calls.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None, base_url: Optional[str] = None):
        self.client = client
        self.base_url = (base_url or config.BASE).rstrip("/")

    async def _get_json(self, url: str, token: str = "") -> JSONValue:
        raw = await github.get(url, token, client=self.client)
        return github.decode_json(raw, url)

    def greet(self, name: str) -> str:
        return f"Hello {name}, It's show time!"

    async def get_public_repositories(self) -> JSONValue:
        return await self._get_json(f"{self.base_url}/repositories")

    async def get_public_gists(self) -> JSONValue:
        return await self._get_json(f"{self.base_url}/gists/public")

    async def get_repositories_for_authenticated_user(self, token: str) -> JSONValue:
        return await self._get_json(f"{self.base_url}/user/repos?type=private", token)

    async def get_gists_for_authenticated_user(self, token: str) -> JSONValue:
        return await self._get_json(f"{self.base_url}/gists", token)

    async def get_more_information_from_url(self, url: str, token: str) -> JSONValue:
        """Follow a URL taken from an earlier response (forks_url, commits_url, ...)."""
        return await self._get_json(url, token)

    async def get_gist_content(self, url: str, token: str) -> str:
        """Raw file text, e.g. a gist file's raw_url. Never parsed as JSON."""
        return await github.get_text(url, token, client=self.client)

    async def create_new_gist(self, gist: Gist, token: str) -> JSONValue:
        url = f"{self.base_url}/gists"
        payload = gist.model_dump_json().encode("utf-8")
        log.info("Creating %s gist with %d file(s)", "public" if gist.public else "secret", len(gist.files))
        raw = await github.post(url, token, payload, client=self.client)
        return github.decode_json(raw, url)
