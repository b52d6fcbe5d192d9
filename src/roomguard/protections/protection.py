"""Base class for protections: the name, description and settings surface."""
from __future__ import annotations

from typing import Dict

from roomguard.protections.protection_settings import AbstractProtectionSetting


class Protection:
    """
    A pluggable moderation behavior as seen by the settings framework.

    Subclasses set ``name`` and ``description`` and build their own settings
    in ``__init__`` so that every instance owns independent setting state.

    Attributes:
        enabled: Whether the host should run this protection.
        settings: Setting objects keyed by setting name.
    """

    name: str = ""
    description: str = ""

    def __init__(self) -> None:
        self.enabled: bool = False
        self.settings: Dict[str, AbstractProtectionSetting] = {}

    def get_setting(self, setting_name: str) -> AbstractProtectionSetting | None:
        """Return the named setting, or None if this protection has no such setting."""
        return self.settings.get(setting_name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} enabled={self.enabled}>"
