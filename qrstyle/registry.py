"""
Name registries for the pixel, eye and pupil shape generators.

Each role has its own table, built once at import time. Names are
matched case-insensitively and may repeat across roles.

Usage:
    shape = PIXEL_SHAPES.create("roundedrect", {"cornerRadiusFraction": 0.6})
    names = EYE_SHAPES.available_names()
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Mapping, Optional, TypeVar

from qrstyle.errors import UnknownShapeName
from qrstyle.shapes import eye, pixel, pupil
from qrstyle.shapes.base import (
    EyeShapeGenerator,
    PixelShapeGenerator,
    PupilShapeGenerator,
    ShapeGenerator,
)

G = TypeVar("G", bound=ShapeGenerator)


class ShapeRegistry(Generic[G]):
    """
    Registry mapping stable shape names to generator classes for one role.

    The table is filled on construction and is read-only afterwards.

    Parameters
    ----------
    role : str
        Role label used in error messages ("pixel", "eye", "pupil").
    base : type
        Generator base class every registered class must derive from.
    generators : iterable of type
        Generator classes making up the table.

    Raises
    ------
    TypeError
        If a class does not derive from `base`.
    ValueError
        If a class has no lowercase name or two classes share a name.
    """

    def __init__(
        self,
        role: str,
        base: type[G],
        generators: Iterable[type[G]],
    ) -> None:
        self.role = role
        self._base = base
        self._classes: dict[str, type[G]] = {}
        for cls in generators:
            self._register(cls)

    def _register(self, cls: type[G]) -> None:
        if not (isinstance(cls, type) and issubclass(cls, self._base)):
            raise TypeError(f"{cls!r} is not a {self.role} shape generator")
        key = cls.name.strip().lower()
        if not key or key != cls.name:
            raise ValueError(f"{cls.__name__} must define a lowercase name")
        if key in self._classes:
            raise ValueError(f"Duplicate {self.role} shape name: {key}")
        self._classes[key] = cls

    def available_names(self) -> list[str]:
        """Registered names, sorted."""
        return sorted(self._classes)

    def titles(self) -> dict[str, str]:
        """Human-readable title per name, in ``available_names`` order."""
        return {name: self._classes[name].title for name in self.available_names()}

    def generator_class(self, name: str) -> type[G]:
        """
        Generator class registered under `name`, matched case-insensitively.

        Raises
        ------
        UnknownShapeName
            If no generator is registered under `name`.
        """
        cls = self._classes.get(name.strip().lower())
        if cls is None:
            raise UnknownShapeName(self.role, name, self.available_names())
        return cls

    def create(self, name: str, settings: Optional[Mapping[str, Any]] = None) -> G:
        """
        Create a generator by name.

        Parameters
        ----------
        name : str
            Registered name, matched case-insensitively.
        settings : mapping, optional
            Initial settings; every key is validated before any is applied.

        Returns
        -------
        ShapeGenerator
            A new, independent generator instance.

        Raises
        ------
        UnknownShapeName
            If no generator is registered under `name`.
        UnsupportedSetting
            If a settings key is not accepted by that generator.
        """
        return self.generator_class(name)(settings)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._classes

    def __iter__(self) -> Iterator[str]:
        return iter(self.available_names())

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return f"ShapeRegistry({self.role!r}, {self.available_names()!r})"


PIXEL_SHAPES: ShapeRegistry[PixelShapeGenerator] = ShapeRegistry(
    "pixel", PixelShapeGenerator, pixel.GENERATORS
)
EYE_SHAPES: ShapeRegistry[EyeShapeGenerator] = ShapeRegistry(
    "eye", EyeShapeGenerator, eye.GENERATORS
)
PUPIL_SHAPES: ShapeRegistry[PupilShapeGenerator] = ShapeRegistry(
    "pupil", PupilShapeGenerator, pupil.GENERATORS
)
