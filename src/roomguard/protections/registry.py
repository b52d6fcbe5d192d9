"""
Name-keyed registry of available protections.

The registry maps a protection name to a :class:`ProtectionDescriptor`
holding a human readable description and a factory. It is built once by
:func:`build_registry` which checks that every factory produces a protection
whose ``name`` equals its key; a mismatch is fatal. After construction the
mapping is exposed read-only. Late registration through
:meth:`ProtectionRegistry.register` is serialized and publishes a fresh
snapshot, so readers never observe a half-updated mapping.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Tuple

from roomguard.protections.basic_flooding import BasicFlooding
from roomguard.protections.errors import ProtectionNotFoundError, ProtectionRegistryError
from roomguard.protections.first_message_is_image import FirstMessageIsImage
from roomguard.protections.protection import Protection
from roomguard.util.logger import get_logger

logger = get_logger("protection_registry")

ProtectionFactory = Callable[[], Protection]


@dataclass(frozen=True, slots=True)
class ProtectionDescriptor:
    """Registry entry for one protection.

    Attributes:
        name: Registry key; must equal ``factory().name``.
        description: Text shown to operators when listing protections.
        factory: Zero-argument callable returning a fresh protection instance.
    """

    name: str
    description: str
    factory: ProtectionFactory

    @classmethod
    def for_protection(cls, protection_cls: type[Protection]) -> "ProtectionDescriptor":
        """Describe a protection class using its own name and description."""
        return cls(protection_cls.name, protection_cls.description, protection_cls)


def check_descriptor(descriptor: ProtectionDescriptor) -> None:
    """
    Verify that ``descriptor``'s factory builds a protection named after its key.

    Raises:
        ProtectionRegistryError: If the factory fails or the names differ.
    """
    try:
        produced = descriptor.factory()
    except Exception as exc:
        raise ProtectionRegistryError(
            f"Factory for protection {descriptor.name!r} failed: {exc}"
        ) from exc

    if produced.name != descriptor.name:
        raise ProtectionRegistryError(
            f"Protection registered as {descriptor.name!r} reports name {produced.name!r}"
        )


class ProtectionRegistry:
    """Read-mostly mapping from protection name to descriptor."""

    def __init__(self) -> None:
        self._write_lock = threading.Lock()
        self._entries: Mapping[str, ProtectionDescriptor] = MappingProxyType({})

    # --------------------------
    # Lookup
    # --------------------------
    @property
    def entries(self) -> Mapping[str, ProtectionDescriptor]:
        """Immutable snapshot of the current name -> descriptor mapping."""
        return self._entries

    def lookup(self, name: str) -> ProtectionDescriptor | None:
        """Return the descriptor registered under ``name``, or None."""
        return self._entries.get(name)

    def names(self) -> List[str]:
        return list(self._entries)

    def enumerate(self) -> List[Tuple[str, str, ProtectionFactory]]:
        """Return ``(name, description, factory)`` triples in registration order."""
        return [(d.name, d.description, d.factory) for d in self._entries.values()]

    def instantiate(self, name: str) -> Protection:
        """
        Build a fresh protection instance for ``name``.

        Each call returns a new instance with its own settings.

        Raises:
            ProtectionNotFoundError: If no protection is registered under ``name``.
        """
        descriptor = self.lookup(name)
        if descriptor is None:
            raise ProtectionNotFoundError(name)
        return descriptor.factory()

    # --------------------------
    # Registration
    # --------------------------
    def register(self, descriptor: ProtectionDescriptor) -> None:
        """
        Add ``descriptor`` to the registry.

        Raises:
            ProtectionRegistryError: If the name is already taken or the
                factory produces a protection with a different name.
        """
        check_descriptor(descriptor)
        with self._write_lock:
            if descriptor.name in self._entries:
                raise ProtectionRegistryError(
                    f"Protection {descriptor.name!r} is already registered"
                )
            updated: Dict[str, ProtectionDescriptor] = dict(self._entries)
            updated[descriptor.name] = descriptor
            self._entries = MappingProxyType(updated)
        logger.debug("[PROTECTION REGISTRY] Registered %s", descriptor.name)

    # --------------------------
    # Container protocol
    # --------------------------
    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def build_registry(descriptors: Iterable[ProtectionDescriptor]) -> ProtectionRegistry:
    """
    Build a registry from ``descriptors``, failing fast on any inconsistency.

    Raises:
        ProtectionRegistryError: On duplicate names or key/name mismatches.
    """
    registry = ProtectionRegistry()
    for descriptor in descriptors:
        registry.register(descriptor)
    logger.info("[PROTECTION REGISTRY] Built registry with %d protections: %s",
                len(registry), ", ".join(registry.names()))
    return registry


def default_descriptors() -> List[ProtectionDescriptor]:
    """Descriptors for the protections shipped with roomguard."""
    return [
        ProtectionDescriptor.for_protection(FirstMessageIsImage),
        ProtectionDescriptor.for_protection(BasicFlooding),
    ]


_default_registry: ProtectionRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> ProtectionRegistry:
    """Return the process-wide registry, building it on first use."""
    global _default_registry

    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = build_registry(default_descriptors())
        return _default_registry
