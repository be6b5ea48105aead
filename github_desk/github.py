import json
import logging
from typing import Any, Optional

import httpx

from . import config
from .errors import GitHubDecodeError, GitHubTransportError

log = logging.getLogger(__name__)

ACCEPT = "application/vnd.github+json"

# null, bool, number, string, list or dict, exactly as GitHub sent it
JSONValue = Any


def build_headers(token: str = "") -> dict:
    headers = {"Accept": ACCEPT}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


async def _send(client: httpx.AsyncClient, method: str, url: str, token: str, body: Optional[bytes]) -> httpx.Response:
    log.debug("%s %s (authenticated=%s)", method, url, bool(token))
    try:
        r = await client.request(method, url, headers=build_headers(token), content=body, timeout=config.TIMEOUT)
    except httpx.RequestError as exc:
        # connection failures, but also unreadable bodies (bad Content-Encoding) and redirect loops
        log.warning("GitHub request failed: %s %s: %s", method, url, exc)
        raise GitHubTransportError(f"request failed: {exc}", url) from exc
    if r.status_code >= 400:
        # passed through untouched, interpreting the body is the caller's job
        log.warning("GitHub API %s for %s %s", r.status_code, method, url)
    return r


async def _exchange(method: str, url: str, token: str, body: Optional[bytes],
                    client: Optional[httpx.AsyncClient]) -> httpx.Response:
    if client is not None:
        return await _send(client, method, url, token, body)
    async with httpx.AsyncClient() as c:
        return await _send(c, method, url, token, body)


async def request(method: str, url: str, token: str = "", body: Optional[bytes] = None,
                  client: Optional[httpx.AsyncClient] = None) -> bytes:
    """Issue one request and return the raw response body, whatever the status.

    Raises GitHubTransportError when no response was received. There is no
    retry; a fresh client is opened and closed when none is given.
    """
    r = await _exchange(method, url, token, body, client)
    return r.content


async def get(url: str, token: str = "", client: Optional[httpx.AsyncClient] = None) -> bytes:
    return await request("GET", url, token, client=client)


async def get_text(url: str, token: str = "", client: Optional[httpx.AsyncClient] = None) -> str:
    """GET a body as text, decoded with the charset the response declares (UTF-8 otherwise)."""
    r = await _exchange("GET", url, token, None, client)
    return r.text


async def post(url: str, token: str, payload: bytes, client: Optional[httpx.AsyncClient] = None) -> bytes:
    return await request("POST", url, token, body=payload, client=client)


def decode_json(raw: bytes, url: str = "") -> JSONValue:
    try:
        return json.loads(raw)
    except ValueError as exc:
        excerpt = raw[:200].decode("utf-8", errors="replace")
        log.warning("Undecodable JSON from %s: %s", url, exc)
        raise GitHubDecodeError(f"invalid JSON from GitHub: {exc}", url, excerpt) from exc
