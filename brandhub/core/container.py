"""
Dependency Injection Container

Central place that builds and owns the process-wide objects:
- Database engine and the long-lived session of the key/value store
- Snapshot repositories
- Notifier
- BrandService (the Domain Store) and SettingsService

The Domain Store is a Singleton, created once per process and handed to
consumers by injection; the session is a Resource closed on shutdown. Tests
override providers instead of patching globals.

Uses dependency-injector library for IoC container
"""

from typing import Callable, Iterator, List, Optional

from dependency_injector import containers, providers
from sqlalchemy.orm import Session, sessionmaker

from ..config import AppSettings
from ..database import build_engine, build_session_factory, init_db
from .domain.brand import Brand
from .notifier import Notifier
from .repositories.kv_repo import KeyValueRepository
from .repositories.brand_repo import BrandSnapshotRepository
from .repositories.settings_repo import ProfileRepository, ThemeRepository
from .seed_data import default_brands
from .services.brand_service import BrandService
from .services.settings_service import SettingsService


def _open_engine(url: str):
    return init_db(build_engine(url))


def _open_session(factory: sessionmaker) -> Iterator[Session]:
    session = factory()
    try:
        yield session
    finally:
        session.close()


def _seed_for(enabled: Optional[bool]) -> Optional[Callable[[], List[Brand]]]:
    # Unset config counts as enabled
    return default_brands if enabled is not False else None


class Container(containers.DeclarativeContainer):
    """Main DI Container"""

    # ========== Configuration ==========
    config = providers.Configuration()

    # ========== Database ==========
    engine = providers.Singleton(
        _open_engine,
        url=config.database_url
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=engine
    )

    db_session = providers.Resource(
        _open_session,
        factory=session_factory
    )

    # ========== Repositories ==========
    key_value_repository = providers.Singleton(
        KeyValueRepository,
        session=db_session
    )

    brand_repository = providers.Singleton(
        BrandSnapshotRepository,
        store=key_value_repository
    )

    profile_repository = providers.Singleton(
        ProfileRepository,
        store=key_value_repository
    )

    theme_repository = providers.Singleton(
        ThemeRepository,
        store=key_value_repository
    )

    # ========== Notification ==========
    notifier = providers.Singleton(
        Notifier,
        delay_seconds=config.notification_delay_seconds
    )

    # ========== Services ==========
    brand_service = providers.Singleton(
        BrandService,
        brand_repo=brand_repository,
        notifier=notifier,
        seed=providers.Callable(_seed_for, enabled=config.seed_defaults)
    )

    settings_service = providers.Singleton(
        SettingsService,
        profile_repo=profile_repository,
        theme_repo=theme_repository,
        notifier=notifier
    )


# Global container instance
container = Container()


def init_container(settings: Optional[AppSettings] = None) -> Container:
    """
    Load configuration into the container

    Call this on app startup
    """
    settings = settings or AppSettings()
    container.config.from_dict(settings.model_dump())
    return container


def reset_container():
    """
    Close the store session and drop every singleton

    Useful for testing and on shutdown
    """
    container.shutdown_resources()
    container.reset_singletons()
