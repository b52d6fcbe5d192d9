from __future__ import annotations
from pathlib import Path
import fcntl
from typing import Any, Dict, List
import yaml

from roomguard.util.logger import get_logger

logger = get_logger("app_configuration")


CONFIG_PATH = Path("./config/app_config.yml").resolve()


class AppConfig:
    """File-lock based accessor around the YAML application configuration.

    The expected layout is::

        protections:
          BasicFloodingProtection:
            enabled: true
            settings:
              maxPerMinute: 20

    Setting values are handed out as strings so they go through each
    setting's ``from_string`` like any other operator input.
    """

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path
        self._data: Dict[str, Any] = {}
        self.reload()

    # --------------------------
    # Private helpers
    # --------------------------
    def load_from_disk(self) -> Dict[str, Any]:
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_SH)
                try:
                    data = yaml.safe_load(f)
                finally:
                    fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        except FileNotFoundError:
            logger.error("[APP CONFIGURATION] Config file %s not found.", self.config_path)
            return {}
        except (OSError, yaml.YAMLError) as exc:
            logger.error("[APP CONFIGURATION] Failed to load config %s: %s", self.config_path, exc)
            return {}

        if not isinstance(data, dict):
            if data is not None:
                logger.error("[APP CONFIGURATION] Config %s is not a mapping, ignoring it.", self.config_path)
            return {}
        return data

    def _protection_section(self, protection_name: str) -> Dict[str, Any]:
        section = self.protections.get(protection_name, {})
        return section if isinstance(section, dict) else {}

    # --------------------------
    # Public API
    # --------------------------
    def reload(self) -> Dict[str, Any]:
        """Re-read the YAML file, replace the in-memory cache and return it.

        Returns an empty dict when the file is missing or malformed.
        """
        self._data = self.load_from_disk()
        return self._data

    @property
    def data(self) -> Dict[str, Any]:
        """The cached configuration mapping. Callers should not mutate it."""
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Return the top-level value for `key`, otherwise `default`."""
        return self._data.get(key, default)

    # --------------------------
    # High-level shortcuts
    # --------------------------
    @property
    def protections(self) -> Dict[str, Any]:
        value = self._data.get("protections", {})
        return value if isinstance(value, dict) else {}

    @property
    def enabled_protections(self) -> List[str]:
        """Names of protections marked ``enabled: true``, in file order.

        Only a YAML boolean enables a protection; anything else (for example
        the quoted string ``"false"``) is logged and treated as disabled.
        """
        names: List[str] = []
        for name in self.protections:
            enabled = self._protection_section(name).get("enabled", False)
            if enabled is True:
                names.append(name)
            elif enabled is not False:
                logger.warning("[APP CONFIGURATION] enabled for %s is not a boolean (%r), treating it as false.",
                               name, enabled)
        return names

    def protection_settings(self, protection_name: str) -> Dict[str, str]:
        """Return the setting overrides for a protection as raw strings.

        List values are joined with commas, matching what list settings
        accept as text. Missing or malformed sections yield an empty dict.
        """
        settings = self._protection_section(protection_name).get("settings", {})
        if not isinstance(settings, dict):
            logger.warning("[APP CONFIGURATION] Settings for %s are not a mapping, ignoring them.", protection_name)
            return {}

        overrides: Dict[str, str] = {}
        for key, value in settings.items():
            if isinstance(value, (list, tuple)):
                overrides[str(key)] = ",".join(str(item) for item in value)
            elif value is None:
                overrides[str(key)] = ""
            else:
                overrides[str(key)] = str(value)
        return overrides


def load_app_config(config_path: Path = CONFIG_PATH) -> AppConfig:
    """Load the application configuration from ``config_path``."""
    return AppConfig(config_path)
