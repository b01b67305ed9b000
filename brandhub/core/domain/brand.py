"""
Brand Domain Models

Value Objects:
- BrandId: Identity derived from the brand name at creation time
- BrandStatus: Advisory status tag, caller-controlled

Aggregate Root:
- Brand: Identity + metadata + keyed collection of resources
"""

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Mapping

from .exceptions import InvalidBrandError, ResourceNotFoundError
from .resource import Resource, build_resource, coerce_resource, normalize_kind, ResourceKind

_WHITESPACE = re.compile(r"\s+")

EDITABLE_FIELDS = (
    "name",
    "color",
    "logo",
    "industry",
    "description",
    "website",
    "status",
    "resources",
)


class BrandStatus(str, Enum):
    """Advisory status shown next to a brand"""
    ACTIVE = "active"
    WARNING = "warning"
    INACTIVE = "inactive"

    @classmethod
    def parse(cls, value) -> "BrandStatus":
        try:
            return cls(value)
        except ValueError:
            raise InvalidBrandError(
                f"status must be one of {[s.value for s in cls]}, got {value!r}"
            )


@dataclass(frozen=True)
class BrandId:
    """
    Value Object cho Brand ID
    Immutable, never recomputed after the brand is created
    """
    value: str

    def __post_init__(self):
        if not self.value:
            raise InvalidBrandError("Brand ID cannot be empty")

    @classmethod
    def from_name(cls, name: str) -> "BrandId":
        """
        Derive identity from a brand name

        Lower-cases the name and replaces each run of whitespace with a
        single hyphen: "Gift a Link" -> "gift-a-link"
        """
        return cls(_WHITESPACE.sub("-", name.lower()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Brand:
    """
    Aggregate Root cho Brand

    Immutable: every change goes through with_changes / with_resource /
    without_resource, which return a new Brand with the same id.
    """
    id: BrandId
    name: str
    color: str = "#6366f1"
    logo: str = ""
    industry: str = "Technology"
    description: str = ""
    website: str = ""
    status: BrandStatus = BrandStatus.ACTIVE
    resources: Dict[str, Resource] = field(default_factory=dict)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidBrandError("Brand name cannot be empty")
        if not isinstance(self.status, BrandStatus):
            object.__setattr__(self, "status", BrandStatus.parse(self.status))

    def logo_is_image(self) -> bool:
        """Logo is an image URL rather than an emoji glyph"""
        return self.logo.startswith("http")

    def has_resource(self, kind) -> bool:
        return normalize_kind(kind) in self.resources

    def get_resource(self, kind) -> Resource:
        key = normalize_kind(kind)
        if key not in self.resources:
            raise ResourceNotFoundError(self.id.value, key)
        return self.resources[key]

    def with_changes(self, **changes) -> "Brand":
        """
        Shallow-merge changes over this brand

        Raises:
            InvalidBrandError: If a change targets id or an unknown field
            InvalidResourceError: If a resources entry does not fit its kind
        """
        unknown = [name for name in changes if name not in EDITABLE_FIELDS]
        if unknown:
            raise InvalidBrandError(f"Cannot update brand fields {sorted(unknown)}")
        if "status" in changes:
            changes["status"] = BrandStatus.parse(changes["status"])
        if "resources" in changes:
            changes["resources"] = {
                normalize_kind(kind): coerce_resource(kind, resource)
                for kind, resource in (changes["resources"] or {}).items()
            }
        return replace(self, **changes)

    def with_resource(self, kind, resource: Resource) -> "Brand":
        """
        Raises:
            InvalidResourceError: If resource is not the variant of kind
        """
        key = normalize_kind(kind)
        resources = dict(self.resources)
        resources[key] = coerce_resource(key, resource)
        return replace(self, resources=resources)

    def without_resource(self, kind) -> "Brand":
        key = normalize_kind(kind)
        if key not in self.resources:
            raise ResourceNotFoundError(self.id.value, key)
        resources = {k: v for k, v in self.resources.items() if k != key}
        return replace(self, resources=resources)

    def counted_resources(self) -> int:
        """Hosting, DNS and domain entries, as the dashboard counts them"""
        counted = (
            ResourceKind.HOSTING.value,
            ResourceKind.DNS.value,
            ResourceKind.DOMAIN.value,
        )
        return sum(1 for kind in counted if kind in self.resources)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted JSON layout"""
        return {
            "id": self.id.value,
            "name": self.name,
            "color": self.color,
            "logo": self.logo,
            "industry": self.industry,
            "description": self.description,
            "status": self.status.value,
            "website": self.website,
            "resources": {
                kind: resource.to_dict()
                for kind, resource in self.resources.items()
            },
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any], strict: bool = True) -> "Brand":
        """
        Build a Brand from the persisted JSON layout

        The stored id is kept as-is; it is never re-derived from the name.
        """
        return Brand(
            id=BrandId(data["id"]),
            name=data["name"],
            color=data.get("color", "#6366f1"),
            logo=data.get("logo", ""),
            industry=data.get("industry", "Technology"),
            description=data.get("description", ""),
            website=data.get("website", ""),
            status=BrandStatus.parse(data.get("status", BrandStatus.ACTIVE.value)),
            resources={
                normalize_kind(kind): build_resource(kind, payload, strict=strict)
                for kind, payload in (data.get("resources") or {}).items()
            },
        )

    def __str__(self) -> str:
        return f"Brand(id={self.id}, name={self.name})"
