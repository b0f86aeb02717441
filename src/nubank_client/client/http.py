from __future__ import annotations

import json as json_module
import logging
import threading
import time
from typing import Any

import requests

from ..config import Settings
from ..errors import RequestCancelledError

logger = logging.getLogger(__name__)


class JsonHttpClient:
    """Sends JSON requests with the client's fixed identifying headers."""

    def __init__(
        self, settings: Settings | None = None, session: requests.Session | None = None
    ) -> None:
        self.settings = settings or Settings()
        self._session = session or requests.Session()

    def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        *,
        headers: dict[str, str] | None = None,
        deadline: float | None = None,
        cancel: threading.Event | None = None,
        **kwargs: Any,
    ) -> requests.Response:
        """POST ``payload`` as JSON to ``url``.

        ``deadline`` is an absolute ``time.monotonic()`` value; the request
        timeout is capped so the call never outlives it.
        """
        timeout = self._timeout(deadline, cancel)
        request_headers = {"Content-Type": "application/json", **self._default_headers()}
        request_headers.update(headers or {})
        logger.debug(f"POST {url}")
        return self._session.post(
            url,
            data=json_module.dumps(payload),
            headers=request_headers,
            timeout=timeout,
            **kwargs,
        )

    def get(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        deadline: float | None = None,
        cancel: threading.Event | None = None,
        **kwargs: Any,
    ) -> requests.Response:
        timeout = self._timeout(deadline, cancel)
        request_headers = self._default_headers()
        request_headers.update(headers or {})
        logger.debug(f"GET {url}")
        return self._session.get(url, headers=request_headers, timeout=timeout, **kwargs)

    def close(self) -> None:
        self._session.close()

    def _default_headers(self) -> dict[str, str]:
        return {
            "X-Correlation-Id": self.settings.correlation_id,
            "User-Agent": self.settings.user_agent,
        }

    def _timeout(self, deadline: float | None, cancel: threading.Event | None) -> float:
        if cancel is not None and cancel.is_set():
            raise RequestCancelledError("request cancelled before sending")
        timeout = self.settings.timeout
        if deadline is not None:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise RequestCancelledError("request deadline exceeded before sending")
            timeout = min(timeout, remaining)
        return timeout
