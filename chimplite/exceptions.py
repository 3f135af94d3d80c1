"""Exceptions raised by chimplite."""

from __future__ import annotations

from typing import Optional


class MailChimpError(Exception):
    """Base class for every error raised by this package."""


class CredentialsNotSetException(MailChimpError):
    """Raised when the API key or the default list id is not configured."""


class InvalidStateError(MailChimpError, RuntimeError):
    """Raised when the configuration cannot produce a usable client."""


class MailChimpClientException(MailChimpError):
    """
    Wraps any failure that happened while talking to MailChimp.

    The original error is chained as ``__cause__`` and kept on ``cause``.
    ``status_code`` is set when the failure came with an HTTP response.
    """

    def __init__(self, cause: BaseException, status_code: Optional[int] = None) -> None:
        super().__init__(str(cause) or cause.__class__.__name__)
        self.cause = cause
        self.status_code = status_code


__all__ = [
    "MailChimpError",
    "CredentialsNotSetException",
    "InvalidStateError",
    "MailChimpClientException",
]
