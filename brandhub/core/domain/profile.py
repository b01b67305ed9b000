"""
Operator Domain Models

Operator preferences persisted beside the brand collection:
- OperatorProfile: who is running the console
- Theme: UI colour scheme preference
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class Theme(str, Enum):
    DARK = "dark"
    LIGHT = "light"

    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


@dataclass(frozen=True)
class OperatorProfile:
    """Value Object cho operator profile"""
    name: str = "Admin User"
    email: str = "admin@brandhub.com"
    role: str = "Administrator"
    avatar: str = ""

    def with_changes(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        role: Optional[str] = None,
        avatar: Optional[str] = None
    ) -> "OperatorProfile":
        changes = {
            key: value
            for key, value in (
                ("name", name),
                ("email", email),
                ("role", role),
                ("avatar", avatar),
            )
            if value is not None
        }
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "avatar": self.avatar,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "OperatorProfile":
        return OperatorProfile(
            name=data["name"],
            email=data["email"],
            role=data["role"],
            avatar=data.get("avatar", ""),
        )
