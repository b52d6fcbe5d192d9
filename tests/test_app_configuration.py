import json
from pathlib import Path
from unittest.mock import patch

from roomguard.configuration.app_configuration import AppConfig, load_app_config


CONFIG_YAML = """
protections:
  BasicFloodingProtection:
    enabled: true
    settings:
      maxPerMinute: 25
  FirstMessageIsImageProtection:
    enabled: false
  WordListProtection:
    enabled: yes
    settings:
      words:
        - spam
        - scam
      note: null
"""


def test_app_config_reload_parses_yaml(config_path: Path) -> None:
    config_path.write_text(CONFIG_YAML, encoding="utf-8")

    config = AppConfig(config_path)

    assert config.enabled_protections == ["BasicFloodingProtection", "WordListProtection"]
    assert config.protection_settings("BasicFloodingProtection") == {"maxPerMinute": "25"}
    assert config.protection_settings("WordListProtection") == {"words": "spam,scam", "note": ""}
    assert config.protection_settings("FirstMessageIsImageProtection") == {}


def test_app_config_accepts_json(config_path: Path) -> None:
    payload = {"protections": {"BasicFloodingProtection": {"enabled": True}}}
    config_path.write_text(json.dumps(payload), encoding="utf-8")

    config = load_app_config(config_path)

    assert config.get("protections") == payload["protections"]
    assert config.enabled_protections == ["BasicFloodingProtection"]


def test_app_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = AppConfig(tmp_path / "does_not_exist.yml")

    assert config.data == {}
    assert config.protections == {}
    assert config.enabled_protections == []
    assert config.protection_settings("BasicFloodingProtection") == {}


def test_app_config_malformed_yaml_returns_empty(config_path: Path) -> None:
    config_path.write_text("protections: [unclosed", encoding="utf-8")

    assert AppConfig(config_path).data == {}


def test_app_config_non_mapping_sections_are_ignored(config_path: Path) -> None:
    config_path.write_text(
        "protections:\n  BasicFloodingProtection:\n    enabled: true\n    settings: [1, 2]\n",
        encoding="utf-8",
    )

    config = AppConfig(config_path)

    assert config.enabled_protections == ["BasicFloodingProtection"]
    assert config.protection_settings("BasicFloodingProtection") == {}


def test_app_config_reload_picks_up_changes(config_path: Path) -> None:
    config_path.write_text("protections: {}\n", encoding="utf-8")
    config = AppConfig(config_path)
    assert config.enabled_protections == []

    config_path.write_text(CONFIG_YAML, encoding="utf-8")
    config.reload()

    assert "BasicFloodingProtection" in config.enabled_protections


def test_app_config_only_boolean_true_enables(config_path: Path) -> None:
    config_path.write_text(
        "protections:\n"
        "  BasicFloodingProtection:\n"
        "    enabled: \"false\"\n"
        "  FirstMessageIsImageProtection:\n"
        "    enabled: 1\n"
        "  WordListProtection:\n"
        "    enabled: true\n",
        encoding="utf-8",
    )

    with patch("roomguard.configuration.app_configuration.logger") as mock_logger:
        enabled = AppConfig(config_path).enabled_protections

    assert enabled == ["WordListProtection"]
    assert mock_logger.warning.call_count == 2
