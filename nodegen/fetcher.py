"""HTTP download of grammar node-types.json payloads."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .errors import FetchError
from .logging import get_logger

_USER_AGENT = "nodegen (node type declaration generator)"


class SchemaFetcher:
    """Downloads a grammar's node type schemas as a JSON array."""

    def __init__(
        self,
        *,
        timeout: Optional[float] = 60.0,
        opener: Callable[..., Any] | None = None,
    ) -> None:
        self.timeout = timeout
        self._opener = opener
        self.logger = get_logger("fetcher")

    def fetch(self, language: str, url: str) -> List[Dict[str, Any]]:
        """GET ``url`` and return the decoded array of node type records."""
        self.logger.debug("GET %s", url)
        request = Request(
            url,
            headers={"Accept": "application/json", "User-Agent": _USER_AGENT},
            method="GET",
        )
        opener = self._opener or urlopen
        try:
            with opener(request, timeout=self.timeout) as response:
                raw = response.read()
        except HTTPError as exc:
            raise FetchError(language, url, f"HTTP {exc.code} {exc.reason}") from exc
        except URLError as exc:
            raise FetchError(language, url, str(exc.reason)) from exc
        except OSError as exc:
            raise FetchError(language, url, str(exc)) from exc

        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise FetchError(language, url, "response body is not valid JSON") from exc

        if not isinstance(payload, list):
            raise FetchError(
                language, url, f"expected a JSON array, got {type(payload).__name__}"
            )
        return payload


__all__ = ["SchemaFetcher"]
