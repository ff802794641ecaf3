"""
Error taxonomy for QR code styling and rendering.

All errors derive from QRStyleError and are raised to the caller. None
of them is retried or replaced by a default inside the library.
"""

from __future__ import annotations


class QRStyleError(Exception):
    """Base class for every error raised by qrstyle."""


class UnknownShapeName(QRStyleError, LookupError):
    """A shape name is not registered for the requested role."""

    def __init__(self, role: str, name: str, known: list[str]) -> None:
        self.role = role
        self.name = name
        self.known = known
        super().__init__(
            f"Unknown {role} shape '{name}'. "
            f"Available {role} shapes are {', '.join(known)}"
        )


class UnsupportedSetting(QRStyleError, LookupError):
    """A shape generator does not accept the given settings key."""

    def __init__(self, generator: str, key: object) -> None:
        self.generator = generator
        self.key = key
        super().__init__(f"Shape '{generator}' does not support setting '{key}'")


class InvalidDimension(QRStyleError, ValueError):
    """The requested canvas size is not a positive finite number."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Canvas size must be a positive number, got {value!r}")


class InvalidLogoPlacement(QRStyleError, ValueError):
    """The logo rectangle is empty, outside the grid, or covers a finder eye."""

    def __init__(self, rect: tuple[float, float, float, float], reason: str) -> None:
        self.rect = rect
        self.reason = reason
        super().__init__(f"Invalid logo placement {rect}: {reason}")


class UnsupportedFormat(QRStyleError, ValueError):
    """The requested export format is not known."""

    def __init__(self, fmt: object, known: list[str]) -> None:
        self.format = fmt
        self.known = known
        super().__init__(
            f"Unknown output format '{fmt}'. Supported formats are {','.join(known)}."
        )
