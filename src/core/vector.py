# core/vector.py
import math
import numbers
from typing import Iterator, Tuple, Union

import numpy as np

Number = Union[int, float]


def _format_component(value: float) -> str:
    """
    Shortest round-tripping positional rendering, without a trailing ".0"
    for integral values (5.0 -> "5", 0.5 -> "0.5", 1e-7 -> "0.0000001").
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(value, unique=True, trim="-")


def _to_byte(value: float) -> int:
    # Clamp into [0, 255] first, then truncate toward zero. The upper clamp
    # takes NaN to 255.
    if math.isnan(value):
        return 255
    return int(min(max(value, 0.0), 255.0))


class Vec3:
    """
    An immutable 3D vector of doubles supporting arithmetic, dot and cross
    products, and conversion to an 8-bit RGB triple.

    Components are named x, y, z; r, g, b are aliases for use as a color.
    Every operation returns a new Vec3. `Vec3 * Vec3` is the Hadamard
    (component-wise) product, `Vec3 * number` and `number * Vec3` scale.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: Number, y: Number, z: Number):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError(f"Vec3 is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"Vec3 is immutable, cannot delete '{name}'")

    def __reduce__(self):
        return (Vec3, (self.x, self.y, self.z))

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    # Named operations

    def add(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def negate(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def scale(self, t: Number) -> "Vec3":
        """
        Multiply every component by t. Same result as `t * v` and `v * t`.
        """
        return Vec3(self.x * t, self.y * t, self.z * t)

    def hadamard(self, other: "Vec3") -> "Vec3":
        """
        Component-wise product. Not to be confused with dot().
        """
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def divide(self, t: Number) -> "Vec3":
        """
        Divide every component by t. A zero divisor yields inf or nan per
        IEEE-754 instead of raising ZeroDivisionError.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            x, y, z = np.divide((self.x, self.y, self.z), float(t)).tolist()
        return Vec3(x, y, z)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vec3":
        l = self.length()
        if l == 0:
            return Vec3(0, 0, 0)
        return self / l

    def to_rgb(self) -> Tuple[int, int, int]:
        """
        Convert to an (r, g, b) byte triple. Each component is clamped to
        [0, 255] and then truncated, so -1 -> 0, 2.9 -> 2, 300 -> 255.
        NaN maps to 255.
        """
        return _to_byte(self.x), _to_byte(self.y), _to_byte(self.z)

    # Operators

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Vec3":
        return self.negate()

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return self.hadamard(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Number) -> "Vec3":
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, t: Number) -> "Vec3":
        if not isinstance(t, numbers.Real):
            return NotImplemented
        return self.divide(t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __str__(self) -> str:
        return f"({_format_component(self.x)}, {_format_component(self.y)}, {_format_component(self.z)})"

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"
