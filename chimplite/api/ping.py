"""
Ping API
========

Health check for the API key and data center.

Endpoints
---------
GET    /3.0/        → API root, "Everything's Chimpy!"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from chimplite.api.core.dispatch import DispatchMixin
from chimplite.exceptions import MailChimpClientException

JSON = Dict[str, Any]


@dataclass(frozen=True)
class Health:
    health_status: str
    raw: JSON = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Health":
        return cls(health_status=d.get("health_status", ""), raw=dict(d))


class PingMixin(DispatchMixin):

    def ping(self) -> JSON:
        """
        Aliveness test.

        Returns the parsed root payload. Raises MailChimpClientException when
        MailChimp answers with anything that carries no payload.
        """
        result = self.request("GET", "")
        if result.value is None:
            raise MailChimpClientException(
                RuntimeError(f"Ping returned no payload (HTTP {result.status_code})"),
                status_code=result.status_code,
            )
        return result.value

    def get_health(self) -> Health:
        return Health.from_dict(self.ping())


__all__ = ["Health", "PingMixin"]
