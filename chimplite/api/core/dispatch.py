"""
Request dispatch
================

The single code path every API mixin goes through.

Status handling
---------------
200, 201        → parsed JSON body (EMPTY when the body is blank)
204             → NO_CONTENT, value {}
400, 404, 422   → SUPPRESSED (value None), or raised in debug mode
other errors    → MailChimpClientException

Credential checks happen before anything touches the network and are
never wrapped.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx

from chimplite.api.core.authentication import MailChimpConfig
from chimplite.exceptions import CredentialsNotSetException, MailChimpClientException
from chimplite.http_client import MailChimpHTTPClient

logger = logging.getLogger(__name__)

JSON = Dict[str, Any]

SUPPRESSIBLE_STATUS_CODES = frozenset({400, 404, 422})


class Outcome(enum.Enum):
    SUCCESS = "success"
    NO_CONTENT = "no_content"
    EMPTY = "empty"
    SUPPRESSED = "suppressed"


@dataclass(frozen=True)
class ApiResult:
    """
    Typed outcome of a single request.

    Attributes:
        outcome:
            Which branch of the status handling produced this result.
        status_code:
            HTTP status of the response.
        data:
            Parsed JSON body for SUCCESS, otherwise None.
        error:
            The swallowed HTTP error for SUPPRESSED results.
    """

    outcome: Outcome
    status_code: int
    data: Optional[JSON] = None
    error: Optional[httpx.HTTPStatusError] = None

    @property
    def value(self) -> Optional[JSON]:
        """What the public methods return: JSON, {} for 204, or None."""
        if self.outcome is Outcome.SUCCESS:
            return self.data
        if self.outcome is Outcome.NO_CONTENT:
            return {}
        return None

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.SUCCESS, Outcome.NO_CONTENT)


def _decode(resp: httpx.Response) -> ApiResult:
    status = resp.status_code
    if status in (200, 201):
        if not resp.content.strip():
            return ApiResult(Outcome.EMPTY, status)
        return ApiResult(Outcome.SUCCESS, status, data=resp.json())
    if status == 204:
        return ApiResult(Outcome.NO_CONTENT, status)
    return ApiResult(Outcome.EMPTY, status)


class DispatchMixin:
    """
    Shared low-level request method for the API mixins.

    Expects `self._http`, `self._config` and `self._debug` to be set by the
    composing client.
    """

    _http: MailChimpHTTPClient
    _config: MailChimpConfig
    _debug: bool

    def request(
        self,
        method: str,
        path: str,
        body: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> ApiResult:
        """
        Send one authenticated request and classify the response.

        Raises:
            CredentialsNotSetException: the API key is empty.
            MailChimpClientException: transport failure, malformed body, or
                an HTTP error that is not suppressed.
        """
        if not self._config.api_key:
            raise CredentialsNotSetException("ApiKey must be set")

        json_body = dict(body) if body else None

        try:
            resp = self._http.request(method, path, json=json_body, params=params)
            return _decode(resp)
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            if status in SUPPRESSIBLE_STATUS_CODES and not self._debug:
                logger.debug("%s %s returned %s, suppressed", method, path or "/", status)
                return ApiResult(Outcome.SUPPRESSED, status, error=exc)
            logger.warning("%s %s failed with HTTP %s", method, path or "/", status)
            raise MailChimpClientException(exc, status_code=status) from exc
        except Exception as exc:
            logger.warning("%s %s failed: %s", method, path or "/", exc)
            raise MailChimpClientException(exc) from exc

    def check_list(self) -> str:
        """
        Return the default list id.

        Raises:
            CredentialsNotSetException: no list id is configured.
        """
        if not self._config.list_id:
            raise CredentialsNotSetException("ListId must be set")
        return self._config.list_id

    # Verb helpers -----------------------------------------------------------

    def _get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Optional[JSON]:
        return self.request("GET", path, params=params).value

    def _put(self, path: str, body: Optional[Mapping[str, Any]] = None) -> Optional[JSON]:
        return self.request("PUT", path, body).value

    def _patch(self, path: str, body: Optional[Mapping[str, Any]] = None) -> Optional[JSON]:
        return self.request("PATCH", path, body).value

    def _delete(self, path: str) -> bool:
        return self.request("DELETE", path).value is not None


__all__ = [
    "ApiResult",
    "DispatchMixin",
    "JSON",
    "Outcome",
    "SUPPRESSIBLE_STATUS_CODES",
]
