"""
roomguard - settings and registry for room-moderation protections

Core Components:

- **Protection Settings**: Typed settings (string, string list, bounded
  number) with a uniform parse / validate / commit contract
- **Protection Registry**: Name-keyed table of protection descriptions and
  factories, checked for key/name consistency when built
- **Protection Manager**: Instantiates enabled protections and applies
  setting overrides from the YAML application config

Usage:
    from roomguard.protections.registry import get_default_registry
    flooding = get_default_registry().instantiate("BasicFloodingProtection")
"""
