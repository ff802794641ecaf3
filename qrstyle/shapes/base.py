"""
Shape generator contract for the three visual roles.

Pixel generators draw a single module in a 1x1 frame. Eye and pupil
generators draw in a 90x90 frame that covers the 7x7 finder pattern
plus its one-module separator, at 10 units per module: the eye ring
spans 10..80 and the pupil 30..60.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Optional, Union

import numpy as np

from qrstyle.errors import UnsupportedSetting
from qrstyle.path import Path
from qrstyle.settings import SettingKey, SettingSpec, SettingValue, ShapeSettings

KeyLike = Union[str, SettingKey]


@dataclass(frozen=True)
class NeighborContext:
    """Which of the eight cells around a module are drawn as on-pixels."""

    top_left: bool = False
    top: bool = False
    top_right: bool = False
    left: bool = False
    right: bool = False
    bottom_left: bool = False
    bottom: bool = False
    bottom_right: bool = False

    @classmethod
    def from_mask(cls, mask: np.ndarray, row: int, col: int) -> NeighborContext:
        """
        Build the context of ``(row, col)`` from a boolean mask.

        Cells outside the mask count as off.
        """
        rows, cols = mask.shape

        def on(r: int, c: int) -> bool:
            return 0 <= r < rows and 0 <= c < cols and bool(mask[r, c])

        return cls(
            top_left=on(row - 1, col - 1),
            top=on(row - 1, col),
            top_right=on(row - 1, col + 1),
            left=on(row, col - 1),
            right=on(row, col + 1),
            bottom_left=on(row + 1, col - 1),
            bottom=on(row + 1, col),
            bottom_right=on(row + 1, col + 1),
        )


class ShapeGenerator(abc.ABC):
    """
    Base class for every named shape generator.

    Subclasses set ``name``, ``title`` and the ``SETTINGS`` table listing
    the keys they accept. Settings are the only mutable state and are
    written through ``set_setting``; ``path`` must be a pure function of
    them.

    Parameters
    ----------
    settings : mapping, optional
        Initial setting values keyed by SettingKey or its string value.
        All keys are validated before any is applied.

    Raises
    ------
    UnsupportedSetting
        If a key is not in ``SETTINGS``.
    """

    role: ClassVar[str] = ""
    name: ClassVar[str] = ""
    title: ClassVar[str] = ""
    SETTINGS: ClassVar[Mapping[SettingKey, SettingSpec]] = {}

    def __init__(self, settings: Optional[Mapping[KeyLike, Any]] = None) -> None:
        self._values: dict[SettingKey, SettingValue] = {
            key: spec.default for key, spec in self.SETTINGS.items()
        }
        if settings:
            self._values.update(self._validate(settings))

    # ---------- Settings ----------

    @classmethod
    def supports(cls, key: KeyLike) -> bool:
        parsed = SettingKey.parse(key)
        return parsed is not None and parsed in cls.SETTINGS

    @classmethod
    def supported_keys(cls) -> tuple[SettingKey, ...]:
        return tuple(cls.SETTINGS)

    def settings(self) -> ShapeSettings:
        return ShapeSettings(self._values)

    def _validate(self, settings: Mapping[KeyLike, Any]) -> dict[SettingKey, SettingValue]:
        resolved: dict[SettingKey, SettingValue] = {}
        for key, value in settings.items():
            parsed = SettingKey.parse(key)
            if parsed is None or parsed not in self.SETTINGS:
                raise UnsupportedSetting(self.name, key)
            resolved[parsed] = self.SETTINGS[parsed].coerce(value)
        return resolved

    def set_setting(self, key: KeyLike, value: Any) -> None:
        """
        Write one setting.

        Raises
        ------
        UnsupportedSetting
            If this generator does not accept `key`.
        TypeError
            If `value` has the wrong type for the key.
        """
        self._values.update(self._validate({key: value}))

    def try_set_setting(self, key: KeyLike, value: Any) -> bool:
        """Write one setting, returning False instead of raising when unsupported."""
        if not self.supports(key):
            return False
        self.set_setting(key, value)
        return True

    def reset(self) -> None:
        self._values = {key: spec.default for key, spec in self.SETTINGS.items()}

    def copy(self) -> ShapeGenerator:
        return type(self)(dict(self._values))

    def _get(self, key: SettingKey) -> SettingValue:
        return self._values[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShapeGenerator):
            return NotImplemented
        return type(self) is type(other) and self._values == other._values

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.settings()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.settings().as_dict()!r})"


class PixelShapeGenerator(ShapeGenerator):
    """Draws one on-module in a 1x1 frame."""

    role = "pixel"
    FRAME_SIZE: ClassVar[float] = 1.0
    # True when the generator reads the neighbour context.
    uses_context: ClassVar[bool] = False

    @abc.abstractmethod
    def path(self, context: NeighborContext = NeighborContext()) -> Path:
        ...


class PupilShapeGenerator(ShapeGenerator):
    """Draws the 3x3 inner dot of a finder pattern in the 90x90 frame."""

    role = "pupil"
    FRAME_SIZE: ClassVar[float] = 90.0

    @abc.abstractmethod
    def path(self) -> Path:
        ...


class EyeShapeGenerator(ShapeGenerator):
    """Draws the 7x7 outer ring of a finder pattern in the 90x90 frame."""

    role = "eye"
    FRAME_SIZE: ClassVar[float] = 90.0

    @abc.abstractmethod
    def path(self) -> Path:
        ...

    @abc.abstractmethod
    def default_pupil(self) -> PupilShapeGenerator:
        """Pupil generator that matches this eye when none is chosen."""
