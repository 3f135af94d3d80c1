"""
Lists API
=========

Look up audiences (lists) of the account.

Endpoints
---------
GET    /3.0/lists              → list audiences
GET    /3.0/lists/{list_id}    → retrieve an audience
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from chimplite.api.core.dispatch import DispatchMixin

JSON = Dict[str, Any]


# ───────────────────────────────────────────────────────────────
# Dataclasses
# ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class MailingList:
    """
    An audience. Only the fields this package reads are typed; everything
    else stays available in `raw`.
    """

    id: str
    name: str
    member_count: int
    raw: JSON = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "MailingList":
        stats = d.get("stats") or {}
        return cls(
            id=d["id"],
            name=d.get("name", ""),
            member_count=int(stats.get("member_count", 0)),
            raw=dict(d),
        )


@dataclass(frozen=True)
class MailingLists:
    lists: List[MailingList]
    total_items: int
    raw: JSON = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "MailingLists":
        return cls(
            lists=[MailingList.from_dict(x) for x in d.get("lists", [])],
            total_items=int(d.get("total_items", 0)),
            raw=dict(d),
        )


# ───────────────────────────────────────────────────────────────
# ListsMixin
# ───────────────────────────────────────────────────────────────

class ListsMixin(DispatchMixin):
    """
        client.find_lists(limit=20)
        client.find_lists(email="jan@example.com")
        client.get_list("a1b2c3d4e5")
    """

    def find_lists(
        self,
        email: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> Optional[JSON]:
        """
        Get information about all lists, optionally only those `email`
        belongs to.
        """
        params: Dict[str, Any] = {"limit": limit, "offset": offset}
        if email is not None:
            params["email"] = email
        return self._get("lists", params=params)

    def get_list(self, list_id: str) -> Optional[JSON]:
        """Get information about a specific list."""
        return self._get(f"lists/{list_id}")

    # Convenience helpers ----------------------------------------------------

    def list_ids(self, limit: int = 10, offset: int = 0) -> List[str]:
        resp = self.find_lists(limit=limit, offset=offset)
        if not resp:
            return []
        return [lst.id for lst in MailingLists.from_dict(resp).lists]


__all__ = ["MailingList", "MailingLists", "ListsMixin"]
