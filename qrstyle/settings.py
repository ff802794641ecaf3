"""
Typed settings shared by the shape generators.

Each generator declares the keys it supports as a table of SettingSpec
values; ShapeSettings is the read-only snapshot handed back to callers.
"""

from __future__ import annotations

import enum
import math
import numbers
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

SettingValue = Union[float, bool]


class SettingKey(str, enum.Enum):
    """Every settings key understood by at least one generator."""

    INSET_FRACTION = "insetFraction"
    CORNER_RADIUS_FRACTION = "cornerRadiusFraction"
    HAS_INNER_CORNERS = "hasInnerCorners"

    @classmethod
    def parse(cls, key: Union[str, SettingKey]) -> Optional[SettingKey]:
        """Return the matching key, or None when the name is unknown."""
        if isinstance(key, SettingKey):
            return key
        try:
            return cls(key)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SettingSpec:
    """
    Declaration of one supported setting.

    Parameters
    ----------
    kind : type
        Either float (a fraction clamped into [0, 1]) or bool.
    default : float or bool
        Value used on construction and after ``reset``.
    """

    kind: type
    default: SettingValue

    def coerce(self, value: object) -> SettingValue:
        if self.kind is bool:
            if not isinstance(value, (bool, numbers.Integral)) or value not in (0, 1):
                raise TypeError(f"expected a bool, got {value!r}")
            return bool(value)

        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"expected a number, got {value!r}")
        value = float(value)
        if math.isnan(value):
            raise ValueError("setting value must not be NaN")
        return max(0.0, min(1.0, value))


def fraction(default: float) -> SettingSpec:
    return SettingSpec(float, float(default))


def flag(default: bool) -> SettingSpec:
    return SettingSpec(bool, bool(default))


class ShapeSettings(Mapping[SettingKey, SettingValue]):
    """
    Immutable snapshot of a generator's settings.

    Lookups accept either a SettingKey or its string value
    (for example ``"cornerRadiusFraction"``).
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[SettingKey, SettingValue]) -> None:
        self._values = MappingProxyType(dict(values))

    def __getitem__(self, key: Union[str, SettingKey]) -> SettingValue:
        parsed = SettingKey.parse(key)
        if parsed is None:
            raise KeyError(key)
        return self._values[parsed]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        parsed = SettingKey.parse(key)
        return parsed is not None and parsed in self._values

    def __iter__(self) -> Iterator[SettingKey]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ShapeSettings):
            return dict(self._values) == dict(other._values)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(sorted((k.value, v) for k, v in self._values.items())))

    def as_dict(self) -> dict[str, SettingValue]:
        """Plain dictionary keyed by the string form of each key."""
        return {k.value: v for k, v in self._values.items()}

    def __repr__(self) -> str:
        return f"ShapeSettings({self.as_dict()!r})"
