"""
Operator Settings Repositories

Sibling snapshots of the brand collection, same read-fallback/write-through
contract, disjoint schemas:
- brandHub_profile: JSON object {name, email, role, avatar}
- brandHub_theme: bare string "dark" | "light"
"""

from .base import BaseSnapshotRepository
from ..domain.profile import OperatorProfile, Theme
from ...schemas import ProfileRecord

PROFILE_KEY = "brandHub_profile"
THEME_KEY = "brandHub_theme"


class ProfileRepository(BaseSnapshotRepository[OperatorProfile]):
    key = PROFILE_KEY

    def serialize(self, value: OperatorProfile) -> str:
        return ProfileRecord.from_domain(value).model_dump_json()

    def deserialize(self, raw: str) -> OperatorProfile:
        record = ProfileRecord.model_validate_json(raw)
        return OperatorProfile.from_dict(record.model_dump())


class ThemeRepository(BaseSnapshotRepository[Theme]):
    key = THEME_KEY

    def serialize(self, value: Theme) -> str:
        return value.value

    def deserialize(self, raw: str) -> Theme:
        # Theme(...) raises ValueError for anything but "dark"/"light"
        return Theme(raw.strip())
