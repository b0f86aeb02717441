from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..errors import UnexpectedResponseError, UnknownEndpointError
from .http import JsonHttpClient

logger = logging.getLogger(__name__)

GEN_CERTIFICATE = "gen_certificate"
TOKEN = "token"


class EndpointDirectory:
    """Absolute endpoint URLs keyed by their symbolic name."""

    def __init__(self, links: Mapping[str, str] | None = None) -> None:
        self._links: dict[str, str] = dict(links or {})

    @classmethod
    def discover(cls, http: JsonHttpClient, url: str | None = None) -> EndpointDirectory:
        """Fetch the discovery document and build a directory from it.

        Nested objects are flattened, so ``{"a": {"b": url}}`` is stored as ``a.b``.
        """
        url = url or http.settings.discovery_url
        response = http.get(url)
        if response.status_code != 200:
            raise UnexpectedResponseError(response.status_code, response.text, expected=200)
        directory = cls(flatten_links(response.json()))
        logger.info(f"Discovered {len(directory)} endpoints")
        return directory

    def url(self, name: str) -> str:
        href = self._links.get(name)
        if not href:
            raise UnknownEndpointError(f"no URL known for endpoint {name!r}")
        return href

    def update(self, links: Mapping[str, str]) -> None:
        self._links.update(links)

    def __contains__(self, name: object) -> bool:
        return name in self._links

    def __len__(self) -> int:
        return len(self._links)


def flatten_links(document: dict[str, Any]) -> dict[str, str]:
    links: dict[str, str] = {}
    for key, value in document.items():
        if isinstance(value, str):
            links[key] = value
        elif isinstance(value, dict):
            for sub_key, sub_value in value.items():
                if isinstance(sub_value, str):
                    links[f"{key}.{sub_key}"] = sub_value
    return links
