"""
HTTP client implementations for chimplite.

This module exposes a minimal interface `MailChimpHTTPClient` used by the
API mixins and a concrete httpx-based adapter `HttpxMailChimpHTTPClient`.

Notes:
- `HttpxMailChimpHTTPClient` is a synchronous adapter using `httpx.Client`.
- The adapter returns the `httpx.Response` and raises
  `httpx.HTTPStatusError` on non-2xx responses. Classifying status codes
  and decoding bodies is left to the dispatch layer.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Tuple

import httpx

logger = logging.getLogger(__name__)


class MailChimpHTTPClient:
    """
    Minimal HTTP client interface used by API mixins.

    Implementations must raise `httpx.HTTPStatusError` for non-2xx
    responses and return the response object otherwise.
    """

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Any] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        raise NotImplementedError("MailChimpHTTPClient.request must be implemented by the runtime client")

    def close(self) -> None:
        pass


# Concrete httpx adapter ----------------------------------------------------

class HttpxMailChimpHTTPClient(MailChimpHTTPClient):
    """
    Synchronous httpx-based implementation of MailChimpHTTPClient.

    Example:
        client = HttpxMailChimpHTTPClient(
            base_url="https://us6.api.mailchimp.com/3.0/",
            auth=("user", "0123abcd-us6"),
        )
        resp = client.request("GET", "lists", params={"limit": 10})
        client.close()

    Paths are relative to `base_url`, so "lists" resolves to ".../3.0/lists"
    and "" to the API root.
    """

    def __init__(
        self,
        base_url: str,
        auth: Optional[Tuple[str, str]] = None,
        timeout: Optional[float] = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            auth=auth,
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Any] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        logger.debug("%s %s", method, path or "/")
        resp = self._client.request(method, path, json=json, params=params)
        logger.debug("%s %s -> %s", method, path or "/", resp.status_code)
        resp.raise_for_status()
        return resp

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxMailChimpHTTPClient":
        return self

    def __exit__(self, exc_type: Optional[type], exc: Optional[BaseException], tb: Optional[Any]) -> None:
        self.close()


__all__ = ["MailChimpHTTPClient", "HttpxMailChimpHTTPClient"]
