"""
Allowed mentions policy.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

MAX_MENTION_IDS = 100


class AllowedMentionType(str, Enum):
    ROLES = "roles"
    USERS = "users"
    EVERYONE = "everyone"


class AllowedMentions(BaseModel):
    parse: list[AllowedMentionType] = Field(default_factory=list)
    roles: list[int] = Field(default_factory=list)
    users: list[int] = Field(default_factory=list)
    replied_user: Optional[bool] = None

    def verify(self) -> None:
        """Raise ValueError if the policy is structurally inconsistent."""
        if len(self.roles) > MAX_MENTION_IDS:
            raise ValueError(f"roles list length {len(self.roles)} is over {MAX_MENTION_IDS}")
        if len(self.users) > MAX_MENTION_IDS:
            raise ValueError(f"users list length {len(self.users)} is over {MAX_MENTION_IDS}")
        for allowed in self.parse:
            if allowed == AllowedMentionType.ROLES and self.roles:
                raise ValueError("parse has roles and roles list is not empty")
            if allowed == AllowedMentionType.USERS and self.users:
                raise ValueError("parse has users and users list is not empty")

    def to_payload(self) -> dict[str, Any]:
        # parse is always sent: an empty list suppresses every mention
        data: dict[str, Any] = {"parse": [p.value for p in self.parse]}
        if self.roles:
            data["roles"] = [str(r) for r in self.roles]
        if self.users:
            data["users"] = [str(u) for u in self.users]
        if self.replied_user is not None:
            data["replied_user"] = self.replied_user
        return data
