"""Standard sRGB colors and a small color type for the Obsidian UI."""

from __future__ import annotations

from dataclasses import dataclass, replace

__all__ = [
    "Srgba",
    "U1",
    "U2",
    "U3",
    "U4",
    "U5",
    "BACKGROUND",
    "FOREGROUND",
    "ACCENT",
    "ANIMATION",
    "ASSET",
    "CODE",
    "LIGHT",
    "RESOURCE",
    "X_RED",
    "Y_GREEN",
    "Z_BLUE",
    "PRIMARY",
    "PRIMARY_ACC",
    "DESTRUCTIVE",
    "DESTRUCTIVE_ACC",
    "TRANSPARENT",
    "FOCUS",
    "TEXT_SELECT",
]


def _gamma_to_linear(value: float) -> float:
    if value <= 0.0:
        return value
    if value <= 0.04045:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


@dataclass(frozen=True)
class Srgba:
    """A color in the sRGB color space with straight alpha."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0

    def with_alpha(self, alpha: float) -> Srgba:
        """Return a copy of this color with a different alpha."""
        return replace(self, alpha=alpha)

    def mix(self, other: Srgba, factor: float) -> Srgba:
        """Interpolate component-wise towards ``other`` in sRGB space."""
        return Srgba(
            *(
                a + (b - a) * factor
                for a, b in zip(self.to_vec4(), other.to_vec4())
            )
        )

    def to_linear(self) -> tuple[float, float, float, float]:
        """Return the linear-light (red, green, blue, alpha) components."""
        return (
            _gamma_to_linear(self.red),
            _gamma_to_linear(self.green),
            _gamma_to_linear(self.blue),
            self.alpha,
        )

    def to_vec4(self) -> tuple[float, float, float, float]:
        """Return the raw (red, green, blue, alpha) components."""
        return (self.red, self.green, self.blue, self.alpha)


U1 = Srgba(0.094, 0.094, 0.102, 1.0)
U2 = Srgba(0.137, 0.137, 0.149, 1.0)
U3 = Srgba(0.224, 0.224, 0.243, 1.0)
U4 = Srgba(0.486, 0.486, 0.529, 1.0)
U5 = Srgba(1.0, 1.0, 1.0, 1.0)
BACKGROUND = Srgba(0.118, 0.118, 0.133, 1.0)
FOREGROUND = Srgba(0.925, 0.925, 0.925, 1.0)
ACCENT = Srgba(0.055, 0.647, 0.914, 1.0)
ANIMATION = Srgba(0.514, 0.094, 0.263, 1.0)
ASSET = Srgba(0.576, 0.200, 0.918, 1.0)
CODE = Srgba(0.969, 0.298, 0.000, 1.0)
LIGHT = Srgba(0.988, 0.827, 0.302, 1.0)
RESOURCE = Srgba(0.063, 0.725, 0.506, 1.0)
X_RED = Srgba(0.600, 0.000, 0.000, 1.0)
Y_GREEN = Srgba(0.000, 0.467, 0.000, 1.0)
Z_BLUE = Srgba(0.000, 0.000, 0.800, 1.0)
PRIMARY = Srgba(0.341, 0.435, 0.525, 1.0)
PRIMARY_ACC = Srgba(0.475, 0.604, 0.733, 1.0)
DESTRUCTIVE = Srgba(0.525, 0.341, 0.404, 1.0)
DESTRUCTIVE_ACC = Srgba(0.733, 0.475, 0.612, 1.0)
TRANSPARENT = Srgba(0.0, 0.0, 0.0, 0.0)
FOCUS = Srgba(0.055, 0.647, 0.914, 0.15)
TEXT_SELECT = Srgba(0.055, 0.647, 0.914, 0.5)