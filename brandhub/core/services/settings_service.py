"""
Settings Service - Operator profile and theme
Implements: Single Responsibility Principle (SRP)

Same discipline as the brand store: read once with fallback to defaults,
write the whole value through on every change.
"""
import logging
from typing import Optional, Union

from ..domain.exceptions import PersistenceError
from ..domain.profile import OperatorProfile, Theme
from ..notifier import Notifier
from ..repositories.settings_repo import ProfileRepository, ThemeRepository

logger = logging.getLogger(__name__)

MSG_PROFILE_UPDATED = "Profile updated successfully!"
MSG_AVATAR_UPDATED = "Avatar updated successfully!"


class SettingsService:
    """Service xử lý operator preferences"""

    def __init__(
        self,
        profile_repo: ProfileRepository,
        theme_repo: ThemeRepository,
        notifier: Notifier
    ):
        self.profile_repo = profile_repo
        self.theme_repo = theme_repo
        self.notifier = notifier
        self._profile = profile_repo.load() or OperatorProfile()
        self._theme = theme_repo.load() or Theme.DARK

    # ========== Profile ==========

    def get_profile(self) -> OperatorProfile:
        return self._profile

    def update_profile(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        role: Optional[str] = None
    ) -> OperatorProfile:
        """Merge the given fields over the current profile"""
        self._profile = self._profile.with_changes(name=name, email=email, role=role)
        self._save_profile(MSG_PROFILE_UPDATED)
        return self._profile

    def update_avatar(self, url: str) -> OperatorProfile:
        self._profile = self._profile.with_changes(avatar=url)
        self._save_profile(MSG_AVATAR_UPDATED)
        return self._profile

    def _save_profile(self, message: str):
        try:
            self.profile_repo.save(self._profile)
        except PersistenceError as e:
            logger.error(f"[PERSIST] Profile not saved: {e}")
            self.notifier.warn(f"{message} Changes could not be saved.")
            return
        self.notifier.notify(message)

    # ========== Theme ==========

    def get_theme(self) -> Theme:
        return self._theme

    def set_theme(self, theme: Union[str, Theme]) -> Theme:
        """
        Raises:
            ValueError: If theme is not "dark" or "light"
        """
        self._theme = Theme(theme)
        try:
            self.theme_repo.save(self._theme)
        except PersistenceError as e:
            # Theme changes are silent; only the log records the failure
            logger.error(f"[PERSIST] Theme not saved: {e}")
        return self._theme

    def toggle_theme(self) -> Theme:
        return self.set_theme(self._theme.toggled())
