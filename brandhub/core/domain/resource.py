"""
Resource Domain Models

One infrastructure integration attached to a brand. Each resource kind is its
own frozen value object with only the fields that kind owns:

- HostingResource: hosting account (plan, panel login)
- DnsResource: DNS provider and nameservers
- DomainResource: domain registration
- AnalyticsResource: analytics property
- GenericResource: any kind added later, carries every known field

Wire form is the camelCase JSON object stored in snapshots, e.g.
{"provider": "GoDaddy", "registrar": "GoDaddy", "autoRenew": true}
"""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Union

from .exceptions import InvalidResourceError

logger = logging.getLogger(__name__)


class ResourceKind(str, Enum):
    """Resource kinds known to the application"""
    HOSTING = "hosting"
    DNS = "dns"
    DOMAIN = "domain"
    ANALYTICS = "analytics"


# python attribute -> JSON key
WIRE_NAMES = {
    "provider": "provider",
    "plan": "plan",
    "login_url": "loginUrl",
    "username": "username",
    "password": "password",
    "expiry": "expiry",
    "nameservers": "nameservers",
    "status": "status",
    "registrar": "registrar",
    "auto_renew": "autoRenew",
    "google_id": "googleId",
}
ATTR_NAMES = {wire: attr for attr, wire in WIRE_NAMES.items()}


class _ResourceMixin:
    """Shared behaviour for all resource variants"""

    kind: ClassVar[str] = ""

    def __post_init__(self):
        if not self.provider or not self.provider.strip():
            raise InvalidResourceError("Resource provider cannot be empty")
        nameservers = getattr(self, "nameservers", None)
        if nameservers is not None and not isinstance(nameservers, tuple):
            # Keep the value object hashable and immutable
            object.__setattr__(self, "nameservers", tuple(nameservers))

    def to_dict(self) -> Dict[str, Any]:
        """Wire form, absent fields omitted"""
        payload: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, tuple):
                value = list(value)
            payload[WIRE_NAMES[f.name]] = value
        return payload

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


@dataclass(frozen=True)
class HostingResource(_ResourceMixin):
    kind: ClassVar[str] = ResourceKind.HOSTING.value

    provider: str
    plan: Optional[str] = None
    login_url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None  # masked display string, not a secret
    expiry: Optional[str] = None


@dataclass(frozen=True)
class DnsResource(_ResourceMixin):
    kind: ClassVar[str] = ResourceKind.DNS.value

    provider: str
    nameservers: Optional[Tuple[str, ...]] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class DomainResource(_ResourceMixin):
    kind: ClassVar[str] = ResourceKind.DOMAIN.value

    provider: str
    registrar: Optional[str] = None
    expiry: Optional[str] = None
    auto_renew: Optional[bool] = None


@dataclass(frozen=True)
class AnalyticsResource(_ResourceMixin):
    kind: ClassVar[str] = ResourceKind.ANALYTICS.value

    provider: str
    google_id: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class GenericResource(_ResourceMixin):
    """Resource of a kind the application does not model yet"""

    provider: str
    plan: Optional[str] = None
    login_url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    expiry: Optional[str] = None
    nameservers: Optional[Tuple[str, ...]] = None
    status: Optional[str] = None
    registrar: Optional[str] = None
    auto_renew: Optional[bool] = None
    google_id: Optional[str] = None


Resource = Union[
    HostingResource,
    DnsResource,
    DomainResource,
    AnalyticsResource,
    GenericResource,
]

RESOURCE_TYPES = {
    ResourceKind.HOSTING.value: HostingResource,
    ResourceKind.DNS.value: DnsResource,
    ResourceKind.DOMAIN.value: DomainResource,
    ResourceKind.ANALYTICS.value: AnalyticsResource,
}


def normalize_kind(kind: Union[str, ResourceKind]) -> str:
    """Return the plain string key for a resource kind"""
    value = kind.value if isinstance(kind, ResourceKind) else str(kind)
    value = value.strip().lower()
    if not value:
        raise InvalidResourceError("Resource kind cannot be empty")
    return value


def build_resource(
    kind: Union[str, ResourceKind],
    data: Mapping[str, Any],
    strict: bool = True
) -> Resource:
    """
    Decode a wire-form mapping into the variant for `kind`

    Args:
        kind: Resource kind key ("hosting", "dns", ...)
        data: Wire-form mapping (camelCase keys)
        strict: Reject fields the kind does not own. When False they are
            dropped with a warning (used when reading persisted snapshots).

    Returns:
        Resource variant instance

    Raises:
        InvalidResourceError: On empty provider, unknown key or, in strict
            mode, a field foreign to the kind
    """
    key = normalize_kind(kind)
    resource_cls = RESOURCE_TYPES.get(key, GenericResource)
    allowed = set(resource_cls.field_names())

    values: Dict[str, Any] = {}
    foreign = []
    for wire_name, value in data.items():
        attr = ATTR_NAMES.get(wire_name)
        if attr is None:
            raise InvalidResourceError(f"Unknown resource field '{wire_name}'")
        if value is None:
            continue
        if attr not in allowed:
            foreign.append(wire_name)
            continue
        values[attr] = value

    if foreign:
        if strict:
            raise InvalidResourceError(
                f"Fields {sorted(foreign)} are not valid for a {key} resource"
            )
        logger.warning(f"Dropping fields {sorted(foreign)} from {key} resource")

    if "provider" not in values:
        raise InvalidResourceError("Resource provider cannot be empty")

    return resource_cls(**values)


def coerce_resource(
    kind: Union[str, ResourceKind],
    value: Union[Resource, Mapping[str, Any]],
    strict: bool = True
) -> Resource:
    """
    Return `value` as the variant for `kind`

    Mappings are decoded with build_resource. Resource objects must already
    be the variant of their kind (GenericResource for unmodelled kinds).

    Raises:
        InvalidResourceError: If value is neither a mapping nor the right variant
    """
    key = normalize_kind(kind)
    if isinstance(value, Mapping):
        return build_resource(key, value, strict=strict)

    expected = RESOURCE_TYPES.get(key, GenericResource)
    if type(value) is not expected:
        raise InvalidResourceError(
            f"A {key} resource must be a {expected.__name__}, got {type(value).__name__}"
        )
    return value
