"""
Domain Exceptions

Every failure the Domain Store can signal to its callers.
None of them is fatal: a raised error means "the operation had no effect".
"""


class BrandHubError(Exception):
    """Base class for all brand hub errors"""
    pass


class BrandNotFoundError(BrandHubError):
    """Raised when a mutation or lookup targets a brand id that does not exist"""

    def __init__(self, brand_id: str):
        self.brand_id = brand_id
        super().__init__(f"Brand '{brand_id}' not found")


class ResourceNotFoundError(BrandHubError):
    """Raised when a brand has no resource under the requested kind"""

    def __init__(self, brand_id: str, kind: str):
        self.brand_id = brand_id
        self.kind = kind
        super().__init__(f"Brand '{brand_id}' has no {kind} resource")


class DuplicateBrandIdError(BrandHubError):
    """Raised when a new brand name derives an id that is already taken"""

    def __init__(self, brand_id: str):
        self.brand_id = brand_id
        super().__init__(f"A brand with id '{brand_id}' already exists")


class InvalidBrandError(BrandHubError, ValueError):
    """Raised for malformed brand input (empty name, unknown status or field)"""
    pass


class InvalidResourceError(BrandHubError, ValueError):
    """Raised for malformed resource input (empty provider, foreign field)"""
    pass


class PersistenceError(BrandHubError):
    """Raised when the durable key/value store could not be written"""
    pass
