"""
Authentication
==============

Helpers for configuring and applying authentication to MailChimp requests.

This module encodes the rules of the MailChimp Marketing API v3:

- API keys are required and must be kept secret.
- Authentication is via HTTP Basic auth; the username is ignored by
  MailChimp, the API key is the password.
- Each account lives on a data center ("us6"), which is part of the
  base URL:
      https://us6.api.mailchimp.com/3.0/

This module provides:

- StoreConfig / MailChimpConfig: typed configuration values
- MailChimpConfig.from_env(), MailChimpConfig.from_mapping(): loaders
- validate_dc(), build_base_url(): data-center checks
- build_auth(): basic auth credentials for the HTTP client
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from chimplite.exceptions import InvalidStateError

# Environment variable names.
ENV_API_KEY = "MAILCHIMP_API_KEY"
ENV_DC = "MAILCHIMP_DC"
ENV_LIST_ID = "MAILCHIMP_LIST_ID"
ENV_DEBUG = "MAILCHIMP_DEBUG"
ENV_STORE_PREFIX = "MAILCHIMP_STORE_"

AUTH_USERNAME = "user"
BASE_URL_TEMPLATE = "https://{dc}.api.mailchimp.com/3.0/"

_DC_PATTERN = re.compile(r"us([1-9]|1[0-6])")
_STORE_FIELDS = ("id", "name", "domain", "email", "currency")


@dataclass(frozen=True)
class StoreConfig:
    """E-commerce store metadata. Carried for callers, not used by requests."""

    id: Optional[str] = None
    name: Optional[str] = None
    domain: Optional[str] = None
    email: Optional[str] = None
    currency: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "StoreConfig":
        return cls(**{k: d.get(k) for k in _STORE_FIELDS})


@dataclass(frozen=True)
class MailChimpConfig:
    """
    Connection settings for one MailChimp account.

    Attributes:
        api_key:
            Secret API key. Hidden from repr.
        dc:
            Data center code, "us1" to "us16".
        list_id:
            Default audience used by the member methods.
        store:
            Optional store metadata.
    """

    api_key: str = field(repr=False)
    dc: str
    list_id: Optional[str] = None
    store: Optional[StoreConfig] = None

    @classmethod
    def from_env(cls) -> "MailChimpConfig":
        """
        Load the configuration from environment variables.

        Read:
            - MAILCHIMP_API_KEY
            - MAILCHIMP_DC (defaults to the API key suffix, "<key>-us6")
            - MAILCHIMP_LIST_ID
            - MAILCHIMP_STORE_ID, _NAME, _DOMAIN, _EMAIL, _CURRENCY

        Missing values are left empty; the client reports them when a
        request needs them.
        """
        api_key = os.getenv(ENV_API_KEY, "")
        dc = os.getenv(ENV_DC) or dc_from_api_key(api_key) or ""
        list_id = os.getenv(ENV_LIST_ID) or None

        store_values = {k: os.getenv(ENV_STORE_PREFIX + k.upper()) for k in _STORE_FIELDS}
        store = StoreConfig(**store_values) if any(store_values.values()) else None

        return cls(api_key=api_key, dc=dc, list_id=list_id, store=store)

    @classmethod
    def from_mapping(cls, d: Mapping[str, Any]) -> "MailChimpConfig":
        """
        Build a configuration from a settings mapping.

        Both camelCase ("apiKey", "listId") and snake_case keys are accepted.
        """
        api_key = d.get("apiKey", d.get("api_key")) or ""
        dc = d.get("dc") or dc_from_api_key(api_key) or ""
        list_id = d.get("listId", d.get("list_id")) or None
        store = d.get("store")
        return cls(
            api_key=api_key,
            dc=dc,
            list_id=list_id,
            store=StoreConfig.from_dict(store) if store else None,
        )


def dc_from_api_key(api_key: Optional[str]) -> Optional[str]:
    """Return the data center suffix of an API key ("abc-us6" -> "us6")."""
    if not api_key or "-" not in api_key:
        return None
    return api_key.rsplit("-", 1)[1] or None


def validate_dc(dc: str) -> str:
    """
    Check a data center code.

    Raises:
        InvalidStateError: unless `dc` is "us1" to "us16".
    """
    if not isinstance(dc, str) or _DC_PATTERN.fullmatch(dc) is None:
        raise InvalidStateError(f"Invalid dc {dc!r} (available: us1 - us16)")
    return dc


def build_base_url(dc: str) -> str:
    """Return the API root for a validated data center."""
    return BASE_URL_TEMPLATE.format(dc=validate_dc(dc))


def build_auth(config: MailChimpConfig) -> Tuple[str, str]:
    """Basic auth credentials: fixed username, API key as password."""
    return (AUTH_USERNAME, config.api_key)


__all__ = [
    "StoreConfig",
    "MailChimpConfig",
    "dc_from_api_key",
    "validate_dc",
    "build_base_url",
    "build_auth",
    "AUTH_USERNAME",
    "ENV_API_KEY",
    "ENV_DC",
    "ENV_LIST_ID",
    "ENV_DEBUG",
]
