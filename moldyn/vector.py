"""Two-dimensional vector value type.

``Vector2D`` holds two components of the same physical quantity.  Components
are stored as :class:`numpy.float64` so that dividing by a zero quantity yields
``inf``/``nan`` instead of raising, matching the behaviour of the array-based
code paths.
"""

from typing import Any, Generic, TypeVar

import numpy as np

Q = TypeVar("Q")


class Vector2D(Generic[Q]):
    """Immutable 2-D vector supporting the usual linear-algebra operators."""

    __slots__ = ("x", "y")

    x: np.float64
    y: np.float64

    # Make numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    def __init__(self, x, y):
        object.__setattr__(self, "x", np.float64(x))
        object.__setattr__(self, "y", np.float64(y))

    def __setattr__(self, name, value):
        raise AttributeError("Vector2D is immutable")

    @classmethod
    def zero(cls) -> "Vector2D[Any]":
        return cls(0.0, 0.0)

    @classmethod
    def from_array(cls, values) -> "Vector2D[Any]":
        """Build a vector from any length-2 sequence or array."""
        x, y = np.asarray(values, dtype=np.float64).reshape(2)
        return cls(x, y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def mag(self):
        """Euclidean magnitude, in the same dimension as the components."""
        return np.sqrt(self.x * self.x + self.y * self.y)

    def __add__(self, other: "Vector2D[Q]") -> "Vector2D[Q]":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D[Q]") -> "Vector2D[Q]":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2D[Q]":
        return Vector2D(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Vector2D[Any]":
        if isinstance(scalar, Vector2D):
            return NotImplemented
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2D[Any]":
        if isinstance(scalar, Vector2D):
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vector2D(self.x / np.float64(scalar), self.y / np.float64(scalar))

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y)

    def __hash__(self):
        return hash((float(self.x), float(self.y)))

    def __repr__(self):
        return f"Vector2D(x={float(self.x)!r}, y={float(self.y)!r})"
