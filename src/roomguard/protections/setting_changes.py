"""
Apply raw textual input to protection settings.

Hosts receive setting values as text (from a config file, a command, or
storage). The helpers here run that text through ``from_string``,
``validate`` and ``set_value`` in order and report the outcome as a
:class:`SettingChangeResult`. A rejected change never mutates the setting.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping

from roomguard.protections.protection import Protection
from roomguard.protections.protection_settings import AbstractProtectionSetting, is_list_setting
from roomguard.util.logger import get_logger

logger = get_logger("setting_changes")

LIST_SEPARATOR = ","


class RejectionReason(Enum):
    """Why a setting change was not committed."""

    UNPARSEABLE = "unparseable"
    INVALID = "invalid"
    NOT_A_LIST = "not_a_list"
    UNKNOWN_SETTING = "unknown_setting"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class SettingChangeResult:
    """Outcome of a single attempted setting change.

    Attributes:
        ok: True when the new value was committed.
        value: The setting's value after the attempt.
        reason: Why the change was rejected, None on success.
        raw: The input text the change was attempted with.
    """

    ok: bool
    value: Any = None
    reason: RejectionReason | None = None
    raw: str = ""


def _reject(setting: AbstractProtectionSetting, raw: str, reason: RejectionReason) -> SettingChangeResult:
    logger.warning("[SETTING CHANGES] Rejected %r for %s: %s", raw, type(setting).__name__, reason)
    return SettingChangeResult(ok=False, value=setting.value, reason=reason, raw=raw)


def _commit(setting: AbstractProtectionSetting, raw: str, new_value: Any) -> SettingChangeResult:
    setting.set_value(new_value)
    logger.debug("[SETTING CHANGES] Committed %r to %s", new_value, type(setting).__name__)
    return SettingChangeResult(ok=True, value=setting.value, raw=raw)


def apply_setting(setting: AbstractProtectionSetting, raw: str) -> SettingChangeResult:
    """
    Replace the value of ``setting`` with the value parsed from ``raw``.

    List settings take a comma separated string; every element must parse
    and validate or nothing is committed. An empty string clears a list.

    Args:
        setting: The setting to change.
        raw: Operator supplied text.

    Returns:
        SettingChangeResult describing whether the value was committed.
    """
    if is_list_setting(setting):
        items = [part.strip() for part in raw.split(LIST_SEPARATOR)] if raw.strip() else []
        parsed = []
        for item in items:
            candidate = setting.from_string(item)
            if candidate is None:
                return _reject(setting, raw, RejectionReason.UNPARSEABLE)
            if not setting.validate(candidate):
                return _reject(setting, raw, RejectionReason.INVALID)
            parsed.append(candidate)
        return _commit(setting, raw, parsed)

    candidate = setting.from_string(raw)
    if candidate is None:
        return _reject(setting, raw, RejectionReason.UNPARSEABLE)
    if not setting.validate(candidate):
        return _reject(setting, raw, RejectionReason.INVALID)
    return _commit(setting, raw, candidate)


def _change_list(setting: AbstractProtectionSetting, raw: str, remove: bool) -> SettingChangeResult:
    if not is_list_setting(setting):
        return _reject(setting, raw, RejectionReason.NOT_A_LIST)

    candidate = setting.from_string(raw)
    if candidate is None:
        return _reject(setting, raw, RejectionReason.UNPARSEABLE)
    if not setting.validate(candidate):
        return _reject(setting, raw, RejectionReason.INVALID)

    new_value = setting.remove_value(candidate) if remove else setting.add_value(candidate)
    return _commit(setting, raw, new_value)


def add_to_list_setting(setting: AbstractProtectionSetting, raw: str) -> SettingChangeResult:
    """Parse ``raw`` as one element and append it to a list setting."""
    return _change_list(setting, raw, remove=False)


def remove_from_list_setting(setting: AbstractProtectionSetting, raw: str) -> SettingChangeResult:
    """Parse ``raw`` as one element and remove its first occurrence from a list setting."""
    return _change_list(setting, raw, remove=True)


def configure_protection(protection: Protection, overrides: Mapping[str, str]) -> Dict[str, SettingChangeResult]:
    """
    Apply textual overrides to the settings of ``protection``.

    Unknown setting names are reported, not raised, so one bad entry in a
    config file does not prevent the rest from loading.

    Returns:
        Mapping of setting name to the result of applying its override.
    """
    results: Dict[str, SettingChangeResult] = {}
    for setting_name, raw in overrides.items():
        setting = protection.get_setting(setting_name)
        if setting is None:
            logger.warning("[SETTING CHANGES] %s has no setting named %s", protection.name, setting_name)
            results[setting_name] = SettingChangeResult(ok=False, reason=RejectionReason.UNKNOWN_SETTING, raw=raw)
            continue
        results[setting_name] = apply_setting(setting, raw)
    return results
