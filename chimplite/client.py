from __future__ import annotations

import logging
import os
from typing import Any, Optional

from chimplite.api.core.authentication import (
    ENV_DEBUG,
    MailChimpConfig,
    build_auth,
    build_base_url,
)
from chimplite.api.lists import ListsMixin
from chimplite.api.members import MembersMixin
from chimplite.api.ping import PingMixin
from chimplite.http_client import HttpxMailChimpHTTPClient, MailChimpHTTPClient

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


class MailChimpClient(
    PingMixin,
    ListsMixin,
    MembersMixin,
):
    """
    Thin client for the MailChimp v3 API.

    The data center is validated and the HTTP client is built here, so an
    invalid `dc` fails at construction rather than on the first request.
    Pass `http` to supply a preconfigured transport.

    With `debug=True`, 400/404/422 responses raise MailChimpClientException
    instead of returning None.
    """

    def __init__(
        self,
        config: MailChimpConfig,
        *,
        debug: bool = False,
        http: Optional[MailChimpHTTPClient] = None,
        timeout: Optional[float] = 10.0,
    ) -> None:
        base_url = build_base_url(config.dc)
        self._config = config
        self._debug = debug
        if http is None:
            http = HttpxMailChimpHTTPClient(
                base_url=base_url,
                auth=build_auth(config),
                timeout=timeout,
            )
        self._http = http
        logger.debug("MailChimpClient ready for %s (debug=%s)", base_url, debug)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "MailChimpClient":
        """Build a client from MAILCHIMP_* environment variables."""
        kwargs.setdefault("debug", os.getenv(ENV_DEBUG, "").strip().lower() in _TRUTHY)
        return cls(MailChimpConfig.from_env(), **kwargs)

    @property
    def config(self) -> MailChimpConfig:
        return self._config

    @property
    def debug(self) -> bool:
        return self._debug

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "MailChimpClient":
        return self

    def __exit__(self, exc_type: Optional[type], exc: Optional[BaseException], tb: Optional[Any]) -> None:
        self.close()


__all__ = ["MailChimpClient"]
