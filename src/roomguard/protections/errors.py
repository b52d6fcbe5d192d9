"""
Exceptions raised by the protection settings framework.

Ordinary rejections (unparseable text, values outside their bounds) are not
errors: ``from_string`` returns ``None`` and ``validate`` returns ``False``.
The exceptions below mark programming or initialization faults only.
"""


class ProtectionSettingValidationError(ValueError):
    """A setting was asked to commit a value that does not pass its own validation."""


class ProtectionRegistryError(RuntimeError):
    """The protection registry is inconsistent (key/name mismatch, duplicate name)."""


class ProtectionNotFoundError(ProtectionRegistryError, KeyError):
    """No protection is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No protection registered under name {name!r}")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]
