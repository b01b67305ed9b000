"""
Brand Service - Domain Store + Mutation API
Implements: Single Responsibility Principle (SRP)

Owns the ordered brand sequence for the lifetime of the process. Every
mutation is one in-memory transition, followed by a full write-through of
the snapshot, followed by exactly one notification. The in-memory sequence
stays authoritative when the durable write fails.
"""
import copy
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Union

from ..domain.brand import Brand, BrandId, BrandStatus
from ..domain.exceptions import (
    BrandNotFoundError,
    DuplicateBrandIdError,
    PersistenceError,
)
from ..domain.resource import Resource, ResourceKind, coerce_resource, normalize_kind
from ..notifier import Notifier
from ..repositories.brand_repo import BrandSnapshotRepository

logger = logging.getLogger(__name__)

MSG_BRAND_CREATED = "New brand created successfully!"
MSG_BRAND_UPDATED = "Brand updated successfully!"
MSG_RESOURCE_ADDED = "{kind} added to brand!"
MSG_RESOURCE_UPDATED = "{kind} details updated!"
MSG_RESOURCE_DELETED = "{kind} deleted."
MSG_NOT_SAVED = "{message} Changes could not be saved."

LISTED_KINDS = (
    ResourceKind.HOSTING.value,
    ResourceKind.DOMAIN.value,
    ResourceKind.DNS.value,
)


@dataclass(frozen=True)
class ResourceEntry:
    """One row of the flattened resource listing"""
    brand_id: str
    brand_name: str
    kind: str
    resource: Resource


@dataclass(frozen=True)
class DashboardStats:
    total_brands: int
    total_domains: int
    total_resources: int


class BrandService:
    """Service xử lý brand business logic"""

    def __init__(
        self,
        brand_repo: BrandSnapshotRepository,
        notifier: Notifier,
        seed: Optional[Callable[[], List[Brand]]] = None
    ):
        """
        Load the initial state once

        Args:
            brand_repo: Snapshot repository (durable store)
            notifier: Notification channel
            seed: Factory for the dataset used when no valid snapshot exists.
                None starts with an empty store.

        Raises:
            PersistenceError: If the durable store cannot be read. Startup
                stops here rather than seeding over a snapshot it could not see.
        """
        self.brand_repo = brand_repo
        self.notifier = notifier
        self._brands: List[Brand] = self._load_initial(seed)

    def _load_initial(self, seed) -> List[Brand]:
        try:
            stored = self.brand_repo.load()
        except PersistenceError as e:
            logger.error(f"[STARTUP] Brand store unreadable: {e}")
            raise
        if stored is not None:
            return stored
        brands = seed() if seed is not None else []
        logger.info(f"[STARTUP] Starting from built-in dataset ({len(brands)} brands)")
        return brands

    # ========== Reads ==========

    def list_brands(self) -> List[Brand]:
        """Snapshot of all brands in display order"""
        return copy.deepcopy(self._brands)

    def get_brand(self, brand_id: str) -> Brand:
        """
        Resolve a brand by id

        Raises:
            BrandNotFoundError: If no brand has this id
        """
        return copy.deepcopy(self._brands[self._index_of(brand_id)])

    def list_resources(
        self,
        kind: Optional[Union[str, ResourceKind]] = None
    ) -> List[ResourceEntry]:
        """
        Resources across brands in brand order

        Args:
            kind: Only this kind. When omitted, the infrastructure kinds
                (hosting, domain, dns, in that order) are listed.
        """
        kinds = (normalize_kind(kind),) if kind is not None else LISTED_KINDS
        entries = []
        for brand in self._brands:
            for resource_kind in kinds:
                resource = brand.resources.get(resource_kind)
                if resource is None:
                    continue
                entries.append(ResourceEntry(
                    brand_id=brand.id.value,
                    brand_name=brand.name,
                    kind=resource_kind,
                    resource=resource
                ))
        return entries

    def dashboard_stats(self) -> DashboardStats:
        return DashboardStats(
            total_brands=len(self._brands),
            total_domains=sum(1 for brand in self._brands if brand.website),
            total_resources=sum(brand.counted_resources() for brand in self._brands)
        )

    # ========== Mutations ==========

    def create_brand(
        self,
        name: str,
        color: str = "#6366f1",
        logo: str = "",
        industry: str = "Technology",
        description: str = "",
        website: str = "",
        status: Union[str, BrandStatus] = BrandStatus.ACTIVE
    ) -> Brand:
        """
        Create a brand and append it to the end of the sequence

        Business rules:
        - id is derived from the name once and never recomputed
        - a derived id that already exists is rejected
        - new brands start with no resources

        Raises:
            InvalidBrandError: If name is empty or status unknown
            DuplicateBrandIdError: If the derived id is taken
        """
        brand = Brand(
            id=BrandId.from_name(name or ""),
            name=name,
            color=color,
            logo=logo,
            industry=industry,
            description=description,
            website=website,
            status=status,
            resources={}
        )
        if self._find(brand.id.value) is not None:
            raise DuplicateBrandIdError(brand.id.value)

        self._brands = self._brands + [brand]
        logger.info(f"[BRAND] Created {brand}")
        self._commit(MSG_BRAND_CREATED)
        return copy.deepcopy(brand)

    def update_brand(self, brand_id: str, **changes: Any) -> Brand:
        """
        Shallow-merge changes over an existing brand

        id never changes; status and resources are kept unless given.

        Raises:
            BrandNotFoundError: If no brand has this id
            InvalidBrandError: If a change targets id or an unknown field
            InvalidResourceError: If a resources entry does not fit its kind
        """
        index = self._index_of(brand_id)
        updated = self._brands[index].with_changes(**changes)
        self._replace(index, updated)
        logger.info(f"[BRAND] Updated {updated} fields={sorted(changes)}")
        self._commit(MSG_BRAND_UPDATED)
        return copy.deepcopy(updated)

    def set_resource(
        self,
        brand_id: str,
        kind: Union[str, ResourceKind],
        data: Union[Resource, Mapping[str, Any]],
        is_edit: bool = False
    ) -> Brand:
        """
        Create or replace the resource keyed by kind

        Idempotent: repeating the call with the same data leaves the same
        state. The message follows the caller's declared intent (is_edit),
        not whether a value existed before.

        Raises:
            BrandNotFoundError: If no brand has this id
            InvalidResourceError: If data does not fit the kind
        """
        key = normalize_kind(kind)
        index = self._index_of(brand_id)
        resource = coerce_resource(key, data)

        updated = self._brands[index].with_resource(key, resource)
        self._replace(index, updated)
        logger.info(f"[RESOURCE] {'Edited' if is_edit else 'Added'} {key} on {updated.id}")

        template = MSG_RESOURCE_UPDATED if is_edit else MSG_RESOURCE_ADDED
        self._commit(template.format(kind=key))
        return copy.deepcopy(updated)

    def delete_resource(self, brand_id: str, kind: Union[str, ResourceKind]) -> Brand:
        """
        Remove the resource keyed by kind (the key disappears entirely)

        Confirmation is the caller's job; this delete is unconditional.

        Raises:
            BrandNotFoundError: If no brand has this id
            ResourceNotFoundError: If the brand has no such resource
        """
        key = normalize_kind(kind)
        index = self._index_of(brand_id)
        updated = self._brands[index].without_resource(key)
        self._replace(index, updated)
        logger.info(f"[RESOURCE] Deleted {key} from {updated.id}")
        self._commit(MSG_RESOURCE_DELETED.format(kind=key))
        return copy.deepcopy(updated)

    # ========== Internals ==========

    def _find(self, brand_id: str) -> Optional[int]:
        for index, brand in enumerate(self._brands):
            if brand.id.value == brand_id:
                return index
        return None

    def _index_of(self, brand_id: str) -> int:
        index = self._find(brand_id)
        if index is None:
            raise BrandNotFoundError(brand_id)
        return index

    def _replace(self, index: int, brand: Brand):
        brands = list(self._brands)
        brands[index] = brand
        self._brands = brands

    def _commit(self, message: str):
        """Write the whole sequence through, then notify once"""
        try:
            self.brand_repo.save(self._brands)
        except PersistenceError as e:
            logger.error(f"[PERSIST] Brand snapshot not saved: {e}")
            self.notifier.warn(MSG_NOT_SAVED.format(message=message))
            return
        self.notifier.notify(message)
