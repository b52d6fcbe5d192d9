"""
Instantiate and configure the protections a deployment has enabled.

Provides:
- load(config): build one instance per enabled protection and apply its overrides
- get(name): the live instance for a protection name
- set_enabled(name, enabled): toggle a protection, creating it if needed
"""
from __future__ import annotations

from typing import Dict, List

from roomguard.configuration.app_configuration import AppConfig
from roomguard.protections.errors import ProtectionNotFoundError
from roomguard.protections.protection import Protection
from roomguard.protections.registry import ProtectionRegistry
from roomguard.protections.setting_changes import SettingChangeResult, configure_protection
from roomguard.util.logger import get_logger

logger = get_logger("protection_manager")


class ProtectionManager:
    """Owns the live protection instances for one host."""

    def __init__(self, registry: ProtectionRegistry) -> None:
        self.registry = registry
        self._protections: Dict[str, Protection] = {}

    def load(self, config: AppConfig) -> Dict[str, Dict[str, SettingChangeResult]]:
        """
        Instantiate every enabled protection named in ``config``.

        Protections that are no longer enabled in ``config`` are disabled.
        Names without a registry entry are logged and skipped.

        Returns:
            Per protection, the results of applying its setting overrides.
        """
        enabled_names = config.enabled_protections
        for name, protection in self._protections.items():
            if protection.enabled and name not in enabled_names:
                protection.enabled = False
                logger.info("[PROTECTION MANAGER] Disabled %s (no longer enabled in config)", name)

        results: Dict[str, Dict[str, SettingChangeResult]] = {}
        for name in enabled_names:
            if name not in self.registry:
                logger.warning("[PROTECTION MANAGER] Config enables unknown protection %s", name)
                continue
            protection = self._ensure(name)
            protection.enabled = True
            results[name] = configure_protection(protection, config.protection_settings(name))

        logger.info("[PROTECTION MANAGER] Loaded %d enabled protections", len(self.enabled_protections))
        return results

    def _ensure(self, name: str) -> Protection:
        protection = self._protections.get(name)
        if protection is None:
            protection = self.registry.instantiate(name)
            self._protections[name] = protection
        return protection

    def get(self, name: str) -> Protection | None:
        return self._protections.get(name)

    def set_enabled(self, name: str, enabled: bool) -> Protection:
        """
        Enable or disable a protection, instantiating it on first use.

        Raises:
            ProtectionNotFoundError: If ``name`` is not registered.
        """
        if name not in self.registry:
            raise ProtectionNotFoundError(name)
        protection = self._ensure(name)
        protection.enabled = enabled
        logger.info("[PROTECTION MANAGER] %s %s", "Enabled" if enabled else "Disabled", name)
        return protection

    @property
    def enabled_protections(self) -> List[Protection]:
        return [p for p in self._protections.values() if p.enabled]
