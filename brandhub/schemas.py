from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from typing import Optional, List, Dict, Literal

from .core.domain.profile import OperatorProfile


# --- Resource Schemas ---
class ResourceData(BaseModel):
    """Wire shape of one resource, camelCase as stored"""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    provider: str = Field(..., min_length=1)
    plan: Optional[str] = None
    login_url: Optional[str] = Field(default=None, alias="loginUrl")
    username: Optional[str] = None
    password: Optional[str] = None
    expiry: Optional[str] = None
    nameservers: Optional[List[str]] = None
    status: Optional[str] = None
    registrar: Optional[str] = None
    auto_renew: Optional[bool] = Field(default=None, alias="autoRenew")
    google_id: Optional[str] = Field(default=None, alias="googleId")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# --- Brand Schemas ---
class BrandRecord(BaseModel):
    """Persisted shape of one brand"""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    color: str = "#6366f1"
    logo: str = ""
    industry: str = "Technology"
    description: str = ""
    status: Literal["active", "warning", "inactive"] = "active"
    website: str = ""
    resources: Dict[str, ResourceData] = Field(default_factory=dict)

    def to_wire(self) -> dict:
        data = self.model_dump(exclude={"resources"})
        data["resources"] = {
            kind: resource.to_wire() for kind, resource in self.resources.items()
        }
        return data


# --- Operator Schemas ---
class ProfileRecord(BaseModel):
    """Persisted shape of the operator profile"""
    name: str
    email: str
    role: str
    avatar: str = ""

    @staticmethod
    def from_domain(profile: OperatorProfile) -> "ProfileRecord":
        return ProfileRecord(**profile.to_dict())


BRAND_SNAPSHOT = TypeAdapter(List[BrandRecord])
