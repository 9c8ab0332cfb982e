from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlencode

import httpx

from .constants import USER_AGENT
from .errors import SupabaseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Json:
    value: Any


@dataclass(frozen=True)
class Text:
    value: str


def is_absolute_url(endpoint: str) -> bool:
    lowered = endpoint.lower()
    return lowered.startswith("http://") or lowered.startswith("https://")


def resolve_url(base_url: str, endpoint: str) -> str:
    if is_absolute_url(endpoint):
        return endpoint
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"


def append_query(url: str, params: Mapping[str, Any] | None) -> str:
    if not params:
        return url
    query = urlencode({k: str(v) for k, v in params.items()})
    return url + ("&" if "?" in url else "?") + query


def build_headers(api_key: str, token: str | None) -> dict[str, str]:
    return {
        "apikey": api_key,
        "Authorization": f"Bearer {token or api_key}",
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }


def encode_body(body: Any) -> bytes | None:
    if body is None:
        return None
    return json.dumps(body).encode("utf-8")


def parse_body(text: str) -> Json | Text:
    if not text:
        return Json({})
    try:
        return Json(json.loads(text))
    except ValueError:
        return Text(text)


def check_response(method: str, url: str, r: httpx.Response) -> str:
    """Return the body text of a 2xx response, raise on anything else."""
    text = r.text
    logger.debug("%s %s -> %s", method, _redact(url), r.status_code)
    if not r.is_success:
        raise SupabaseError.request_failed(r.status_code, text)
    return text


def _redact(url: str) -> str:
    # query values may carry filters on user data, keep the path only
    return url.split("?", 1)[0]


class Transport:
    def __init__(self, *, timeout_s: float, client: httpx.Client | None = None):
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout_s, follow_redirects=True)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def send(self, method: str, url: str, *, headers: dict[str, str], body: Any | None = None) -> str:
        content = encode_body(body)
        logger.debug("%s %s", method, _redact(url))
        try:
            r = self._client.request(method, url, headers=headers, content=content)
        except httpx.HTTPError as e:
            raise SupabaseError.network_error(e) from e
        return check_response(method, url, r)


class AsyncTransport:
    def __init__(self, *, timeout_s: float, client: httpx.AsyncClient | None = None):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_s, follow_redirects=True)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def send(self, method: str, url: str, *, headers: dict[str, str], body: Any | None = None) -> str:
        content = encode_body(body)
        logger.debug("%s %s", method, _redact(url))
        try:
            r = await self._client.request(method, url, headers=headers, content=content)
        except httpx.HTTPError as e:
            raise SupabaseError.network_error(e) from e
        return check_response(method, url, r)
