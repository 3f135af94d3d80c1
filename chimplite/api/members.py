"""
Members API
===========

Read and upsert contacts of the default audience.

Endpoints
---------
GET    /3.0/lists/{list_id}/members                    → list members
GET    /3.0/lists/{list_id}/members/{subscriber_hash}  → retrieve member
PUT    /3.0/lists/{list_id}/members/{subscriber_hash}  → add or update member
PATCH  /3.0/lists/{list_id}/members/{subscriber_hash}  → update member
DELETE /3.0/lists/{list_id}/members/{subscriber_hash}  → archive member

The subscriber hash is the MD5 hex digest of the email address. MailChimp
documents hashing the lower-cased address; this module hashes the address
exactly as given.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from chimplite.api.core.dispatch import DispatchMixin

JSON = Dict[str, Any]

STATUS_SUBSCRIBED = "subscribed"


def subscriber_hash(email: str) -> str:
    return hashlib.md5(email.encode("utf-8")).hexdigest()


# ───────────────────────────────────────────────────────────────
# Dataclasses
# ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ListMember:
    id: str
    email_address: str
    status: str
    merge_fields: JSON
    list_id: Optional[str] = None
    raw: JSON = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ListMember":
        return cls(
            id=d.get("id", ""),
            email_address=d.get("email_address", ""),
            status=d.get("status", ""),
            merge_fields=dict(d.get("merge_fields") or {}),
            list_id=d.get("list_id"),
            raw=dict(d),
        )

    @property
    def is_subscribed(self) -> bool:
        return self.status == STATUS_SUBSCRIBED


@dataclass(frozen=True)
class ListMembers:
    members: List[ListMember]
    list_id: Optional[str]
    total_items: int
    raw: JSON = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ListMembers":
        return cls(
            members=[ListMember.from_dict(x) for x in d.get("members", [])],
            list_id=d.get("list_id"),
            total_items=int(d.get("total_items", 0)),
            raw=dict(d),
        )


# ───────────────────────────────────────────────────────────────
# MembersMixin
# ───────────────────────────────────────────────────────────────

class MembersMixin(DispatchMixin):
    """
    Member operations on the configured default list.

        client.create_member("jan@example.com", "Jan", "Novak")
        client.get_member("jan@example.com")
    """

    def _member_path(self, email: str) -> str:
        list_id = self.check_list()
        return f"lists/{list_id}/members/{subscriber_hash(email)}"

    def find_members(self) -> Optional[JSON]:
        """Get information about members in the default list."""
        list_id = self.check_list()
        return self._get(f"lists/{list_id}/members")

    def get_member(self, email: str) -> Optional[JSON]:
        """Get information about a specific list member."""
        return self._get(self._member_path(email))

    def create_member(
        self,
        email: str,
        name: Optional[str] = None,
        surname: Optional[str] = None,
    ) -> Optional[JSON]:
        """
        Add or update a list member. The member ends up subscribed either
        way; FNAME/LNAME are only sent when given.
        """
        path = self._member_path(email)
        data: JSON = {
            "email_address": email,
            "status_if_new": STATUS_SUBSCRIBED,
            "status": STATUS_SUBSCRIBED,
        }
        merge_fields: JSON = {}
        if name is not None:
            merge_fields["FNAME"] = name
        if surname is not None:
            merge_fields["LNAME"] = surname
        if merge_fields:
            data["merge_fields"] = merge_fields
        return self._put(path, data)

    def update_member(
        self,
        email: str,
        merge_fields: Optional[Mapping[str, Any]] = None,
        status: Optional[str] = None,
    ) -> Optional[JSON]:
        """Partially update a member. Only the given keys are sent."""
        path = self._member_path(email)
        data: JSON = {}
        if merge_fields:
            data["merge_fields"] = dict(merge_fields)
        if status is not None:
            data["status"] = status
        return self._patch(path, data)

    def delete_member(self, email: str) -> bool:
        """Archive a member. False when MailChimp reported nothing to delete."""
        return self._delete(self._member_path(email))

    # Convenience helpers ----------------------------------------------------

    def member_records(self) -> Optional[ListMembers]:
        resp = self.find_members()
        if not resp:
            return None
        return ListMembers.from_dict(resp)

    def get_member_record(self, email: str) -> Optional[ListMember]:
        resp = self.get_member(email)
        if not resp:
            return None
        return ListMember.from_dict(resp)

    def is_subscribed(self, email: str) -> bool:
        member = self.get_member_record(email)
        return member is not None and member.is_subscribed


__all__ = [
    "ListMember",
    "ListMembers",
    "MembersMixin",
    "STATUS_SUBSCRIBED",
    "subscriber_hash",
]
