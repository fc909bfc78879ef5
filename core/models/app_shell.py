# =============================================================================
# core/models/app_shell.py - Native App Shell Descriptor
# =============================================================================
# Static description of the mobile wrapper around the built web app. It has
# no behavior of its own; the native packaging tool (Capacitor) reads it as
# capacitor.config.json.
# =============================================================================

from dataclasses import dataclass
from typing import Any

from app.exceptions import InvalidShellConfigError


@dataclass(frozen=True)
class AppShellConfig:
    """
    Identifier, display name and web asset directory of the app shell.

    Attributes:
        app_id: Reverse-DNS bundle identifier (e.g. "town.flyer.app")
        app_name: Name shown under the app icon
        web_dir: Directory holding the built web assets, relative to the
            project root

    Raises:
        InvalidShellConfigError: If app_id or app_name is empty
    """

    app_id: str
    app_name: str
    web_dir: str = "dist"

    def __post_init__(self):
        if not self.app_id or not self.app_id.strip():
            raise InvalidShellConfigError("appId must not be empty")
        if not self.app_name or not self.app_name.strip():
            raise InvalidShellConfigError("appName must not be empty")

    def to_capacitor_dict(self) -> dict[str, Any]:
        """Key names as the packaging tool expects them."""
        return {
            "appId": self.app_id,
            "appName": self.app_name,
            "webDir": self.web_dir,
        }
