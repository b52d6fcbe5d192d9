"""
Configuration management for roomguard.

- **app_configuration.py**: File-locked YAML loader for the application
  config: which protections are enabled and the raw setting overrides for
  each of them.
"""
