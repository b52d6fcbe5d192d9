"""
Protections and their settings.

- **protection_settings.py**: Setting type hierarchy (scalar and list kinds)
- **protection.py**: Protection base class owning named settings
- **registry.py**: Protection name -> description/factory registry
- **setting_changes.py**: Parse, validate and commit raw text into settings
- **protection_manager.py**: Live protection instances configured from YAML
"""
