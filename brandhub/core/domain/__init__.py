"""
Domain Models Package

Value objects and the Brand aggregate, independent of persistence and HTTP.

- Value Objects: Immutable, identified by their attributes
- Aggregates: Brand is the root owning its resources
"""

from .brand import (
    BrandId,
    BrandStatus,
    Brand
)

from .resource import (
    ResourceKind,
    HostingResource,
    DnsResource,
    DomainResource,
    AnalyticsResource,
    GenericResource,
    Resource,
    build_resource
)

from .profile import (
    OperatorProfile,
    Theme
)

from .exceptions import (
    BrandHubError,
    BrandNotFoundError,
    ResourceNotFoundError,
    DuplicateBrandIdError,
    InvalidBrandError,
    InvalidResourceError,
    PersistenceError
)

__all__ = [
    # Brand
    "BrandId",
    "BrandStatus",
    "Brand",

    # Resource
    "ResourceKind",
    "HostingResource",
    "DnsResource",
    "DomainResource",
    "AnalyticsResource",
    "GenericResource",
    "Resource",
    "build_resource",

    # Operator
    "OperatorProfile",
    "Theme",

    # Errors
    "BrandHubError",
    "BrandNotFoundError",
    "ResourceNotFoundError",
    "DuplicateBrandIdError",
    "InvalidBrandError",
    "InvalidResourceError",
    "PersistenceError"
]
