"""
Brand Snapshot Repository

Persists the whole brand sequence as one JSON array under `brandHub_brands`.
Snapshots are validated (pydantic) and decoded into the resource variants on
the way in; fields foreign to a resource kind are dropped, not trusted.
"""

import json
import logging
from typing import List

from .base import BaseSnapshotRepository
from ..domain.brand import Brand
from ..domain.exceptions import InvalidBrandError
from ...schemas import BRAND_SNAPSHOT

logger = logging.getLogger(__name__)

BRANDS_KEY = "brandHub_brands"


class BrandSnapshotRepository(BaseSnapshotRepository[List[Brand]]):
    """Repository cho the ordered brand collection"""

    key = BRANDS_KEY

    def serialize(self, value: List[Brand]) -> str:
        return json.dumps([brand.to_dict() for brand in value], ensure_ascii=False)

    def deserialize(self, raw: str) -> List[Brand]:
        records = BRAND_SNAPSHOT.validate_json(raw)
        brands = [Brand.from_dict(record.to_wire(), strict=False) for record in records]

        seen = set()
        for brand in brands:
            if brand.id.value in seen:
                raise InvalidBrandError(f"Duplicate brand id '{brand.id}' in snapshot")
            seen.add(brand.id.value)

        logger.info(f"Loaded {len(brands)} brands from snapshot")
        return brands
