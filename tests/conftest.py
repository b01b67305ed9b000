"""
Pytest configuration và shared fixtures
"""
import pytest
import sys
from pathlib import Path
from typing import Generator
from sqlalchemy.orm import Session

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from brandhub.database import build_engine, build_session_factory, init_db
from brandhub.core.notifier import Notifier
from brandhub.core.repositories.kv_repo import KeyValueRepository
from brandhub.core.repositories.brand_repo import BrandSnapshotRepository
from brandhub.core.repositories.settings_repo import ProfileRepository, ThemeRepository
from brandhub.core.services.brand_service import BrandService
from brandhub.core.domain.brand import Brand, BrandId


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture(scope="function")
def test_engine():
    """In-memory SQLite engine with tables created"""
    engine = init_db(build_engine("sqlite://"))
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def test_session(test_engine) -> Generator[Session, None, None]:
    SessionLocal = build_session_factory(test_engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def kv_repo(test_session) -> KeyValueRepository:
    return KeyValueRepository(test_session)


@pytest.fixture
def brand_repo(kv_repo) -> BrandSnapshotRepository:
    return BrandSnapshotRepository(kv_repo)


@pytest.fixture
def profile_repo(kv_repo) -> ProfileRepository:
    return ProfileRepository(kv_repo)


@pytest.fixture
def theme_repo(kv_repo) -> ThemeRepository:
    return ThemeRepository(kv_repo)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def notifier(clock) -> Notifier:
    return Notifier(delay_seconds=3.0, clock=clock)


@pytest.fixture
def acme_brand() -> Brand:
    return Brand(id=BrandId("acme"), name="Acme", resources={})


@pytest.fixture
def brand_service(brand_repo, notifier, acme_brand) -> BrandService:
    """Store seeded with one brand: {id: "acme", resources: {}}"""
    return BrandService(brand_repo, notifier, seed=lambda: [acme_brand])


@pytest.fixture
def sample_brand_data():
    """Wire-form brand as stored in the snapshot"""
    return {
        "id": "nextech",
        "name": "NexTech",
        "color": "#4facfe",
        "logo": "🤖",
        "industry": "AI Solutions",
        "description": "Advanced AI solutions for enterprise automation.",
        "status": "active",
        "website": "https://nextech.ai",
        "resources": {
            "hosting": {
                "provider": "AWS",
                "plan": "EC2 t3.large",
                "loginUrl": "https://aws.amazon.com",
                "username": "admin@nextech",
                "password": "••••••••",
                "expiry": "2024-10-30"
            },
            "domain": {
                "provider": "Namecheap",
                "registrar": "Namecheap",
                "expiry": "2024-09-15",
                "autoRenew": True
            }
        }
    }
