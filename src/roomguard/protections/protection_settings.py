"""
Typed, self-describing settings owned by protections.

Every setting follows the same contract so that a host can drive it from raw
text without knowing its concrete type:

1. ``from_string(raw)`` parses operator input into the setting's change type,
   returning ``None`` when the text cannot be parsed.
2. ``validate(candidate)`` decides whether the parsed candidate is acceptable.
3. ``set_value(value)`` commits a validated value.

List settings additionally expose ``add_value``/``remove_value`` which compute
the *potential* new collection without committing it; the caller validates and
then commits the result with ``set_value``.

Whether a setting supports the list operations is answered by its ``kind``
(see :func:`is_list_setting`) rather than by inspecting its class.
"""
from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, Iterable, List, TypeVar

from roomguard.protections.errors import ProtectionSettingValidationError

TChange = TypeVar("TChange")
TValue = TypeVar("TValue")

Number = int | float

# Plain ASCII decimal with optional fraction and exponent, e.g. "-12", "2.5", "1e3"
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class SettingKind(Enum):
    """Capability discriminant for protection settings."""

    SCALAR = "scalar"
    LIST = "list"

    def __str__(self) -> str:
        return self.value


class AbstractProtectionSetting(ABC, Generic[TChange, TValue]):
    """Base contract for a single configurable value of a protection.

    ``value`` is read-only from the outside; ``set_value`` is the only path
    that changes it.
    """

    kind: SettingKind = SettingKind.SCALAR

    def __init__(self, default: TValue) -> None:
        self._value: TValue = default

    @property
    def value(self) -> TValue:
        """The currently committed value."""
        return self._value

    @abstractmethod
    def from_string(self, data: str) -> TChange | None:
        """
        Deserialise a value for this setting from a string.

        Args:
            data: Serialised value.

        Returns:
            The deserialised value, or None if the text cannot be parsed.
        """

    @abstractmethod
    def validate(self, data: TChange) -> bool:
        """
        Check whether a given value is valid for this setting.

        Must never raise; any input that is not acceptable yields False.
        """

    def is_committable(self, data: TValue) -> bool:
        """Return True if ``data`` may be stored as this setting's value."""
        return self.validate(data)  # type: ignore[arg-type]

    def set_value(self, data: TValue) -> None:
        """
        Store a value in this setting. Only to be used after ``validate()``.

        Args:
            data: Validated setting value.

        Raises:
            ProtectionSettingValidationError: If ``data`` does not pass validation.
        """
        if not self.is_committable(data):
            raise ProtectionSettingValidationError(
                f"{type(self).__name__} refused to commit invalid value {data!r}"
            )
        self._value = data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r})"


class AbstractProtectionListSetting(AbstractProtectionSetting[TChange, List[TChange]]):
    """Setting whose value is an ordered collection of ``TChange`` elements.

    ``validate`` judges a single element; a whole collection is committable
    when every element validates.
    """

    kind = SettingKind.LIST

    def __init__(self, default: Iterable[TChange] | None = None) -> None:
        super().__init__(list(default or []))

    @property
    def value(self) -> List[TChange]:
        # Copy so callers cannot edit the committed collection in place
        return list(self._value)

    def is_committable(self, data: List[TChange]) -> bool:
        if not isinstance(data, (list, tuple)):
            return False
        return all(self.validate(item) for item in data)

    def set_value(self, data: List[TChange]) -> None:
        super().set_value(data)
        self._value = list(data)

    def add_value(self, data: TChange) -> List[TChange]:
        """
        Return the current value with ``data`` appended, without committing it.

        Order and duplicates are preserved.
        """
        return [*self._value, data]

    def remove_value(self, data: TChange) -> List[TChange]:
        """
        Return the current value with the first occurrence of ``data`` removed.

        Nothing is committed. When ``data`` is not present the returned list
        equals the current value.
        """
        result = list(self._value)
        if data in result:
            result.remove(data)
        return result


def is_list_setting(setting: AbstractProtectionSetting) -> bool:
    """Return True if ``setting`` supports ``add_value`` and ``remove_value``."""
    return setting.kind is SettingKind.LIST


class StringProtectionSetting(AbstractProtectionSetting[str, str]):
    """Free-form text setting; accepts any string."""

    def __init__(self, default: str = "") -> None:
        super().__init__(default)

    def from_string(self, data: str) -> str | None:
        return data

    def validate(self, data: str) -> bool:
        return isinstance(data, str)


class StringListProtectionSetting(AbstractProtectionListSetting[str]):
    """Ordered list of strings, e.g. user IDs or words."""

    def from_string(self, data: str) -> str | None:
        return data

    def validate(self, data: str) -> bool:
        return isinstance(data, str)


class NumberProtectionSetting(AbstractProtectionSetting[Number, Number]):
    """
    Numeric setting with optional inclusive bounds.

    The default is committed on construction and must satisfy the bounds.

    Example:
        >>> setting = NumberProtectionSetting(20, min=1, max=1000)
        >>> setting.from_string("500")
        500
        >>> setting.validate(5000)
        False
    """

    def __init__(self, default: Number, min: Number | None = None, max: Number | None = None) -> None:
        self._min = min
        self._max = max
        super().__init__(default)
        if not self.validate(default):
            raise ProtectionSettingValidationError(
                f"Default {default!r} is outside the bounds [{min}, {max}]"
            )

    @property
    def min(self) -> Number | None:
        """Inclusive lower bound, None when unbounded. Fixed at construction."""
        return self._min

    @property
    def max(self) -> Number | None:
        """Inclusive upper bound, None when unbounded. Fixed at construction."""
        return self._max

    def from_string(self, data: str) -> Number | None:
        text = data.strip() if isinstance(data, str) else ""
        if not NUMBER_PATTERN.fullmatch(text):
            return None
        try:
            return int(text)
        except ValueError:
            # Fractions, exponents and integers longer than the int digit limit
            return float(text)

    def validate(self, data: Number) -> bool:
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            return False
        # An int is never NaN; only floats need the check
        if isinstance(data, float) and math.isnan(data):
            return False
        return (self._min is None or self._min <= data) and (self._max is None or data <= self._max)

    def __repr__(self) -> str:
        return f"NumberProtectionSetting(value={self._value!r}, min={self._min!r}, max={self._max!r})"
