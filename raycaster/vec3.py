"""
Vector3 class for 3D math operations.

This is the fundamental building block of the ray caster, used for:
- Points in 3D space
- Direction vectors
- RGB color values
"""

from __future__ import annotations
import math
from typing import Tuple, Union
import numpy as np


class ZeroLengthVectorError(ValueError):
    """Raised when a zero-length vector is normalized."""
    pass


class Vec3:
    """A 3D vector class supporting common vector operations.

    Uses numpy internally for efficient computation while providing
    a clean, Pythonic API. Arithmetic returns new vectors; only the
    augmented assignment operators (``+=``, ``-=``, ``*=``, ``/=``)
    modify a vector in place. Because vectors are mutable and compare
    approximately, they are not hashable.
    """

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Create Vec3 from numpy array (the array is copied)."""
        v = cls.__new__(cls)
        v._data = np.array(arr, dtype=np.float64)
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @x.setter
    def x(self, value: float):
        self._data[0] = value

    @y.setter
    def y(self, value: float):
        self._data[1] = value

    @z.setter
    def z(self, value: float):
        self._data[2] = value

    # Aliases for color operations
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    # Byte-truncated color channels
    @property
    def r8(self) -> int:
        return _to_byte(self.x)

    @property
    def g8(self) -> int:
        return _to_byte(self.y)

    @property
    def b8(self) -> int:
        return _to_byte(self.z)

    def to_bytes(self) -> Tuple[int, int, int]:
        """Convert to an 8-bit (r, g, b) triple.

        Each component is truncated toward zero and wrapped modulo 256.
        Values are NOT clamped: 256.0 becomes 0 and -1.0 becomes 255.
        Scale to [0, 255] before calling.
        """
        return (self.r8, self.g8, self.b8)

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.allclose(self._data, other._data))

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Union[Vec3, float]) -> Vec3:
        return Vec3.from_array(self._data + _operand(other))

    def __radd__(self, other: float) -> Vec3:
        return Vec3.from_array(other + self._data)

    def __iadd__(self, other: Union[Vec3, float]) -> Vec3:
        self._data += _operand(other)
        return self

    def __sub__(self, other: Union[Vec3, float]) -> Vec3:
        return Vec3.from_array(self._data - _operand(other))

    def __rsub__(self, other: float) -> Vec3:
        return Vec3.from_array(other - self._data)

    def __isub__(self, other: Union[Vec3, float]) -> Vec3:
        self._data -= _operand(other)
        return self

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        return Vec3.from_array(self._data * _operand(other))

    def __rmul__(self, other: float) -> Vec3:
        return Vec3.from_array(other * self._data)

    def __imul__(self, other: Union[Vec3, float]) -> Vec3:
        self._data *= _operand(other)
        return self

    def __truediv__(self, other: Union[Vec3, float]) -> Vec3:
        return Vec3.from_array(self._data / _operand(other))

    def __rtruediv__(self, other: float) -> Vec3:
        return Vec3.from_array(other / self._data)

    def __itruediv__(self, other: Union[Vec3, float]) -> Vec3:
        self._data /= _operand(other)
        return self

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __setitem__(self, index: int, value: float):
        self._data[index] = value

    def __iter__(self):
        return (float(c) for c in self._data)

    def length(self) -> float:
        """Return the magnitude (length) of the vector."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons)."""
        return float(np.dot(self._data, self._data))

    def normalize(self) -> Vec3:
        """Return a unit vector in the same direction.

        Raises:
            ZeroLengthVectorError: if the vector has zero length
        """
        length = self.length()
        if length == 0:
            raise ZeroLengthVectorError(f"Cannot normalize zero-length vector {self!r}")
        return Vec3.from_array(self._data / length)

    def dot(self, other: Vec3) -> float:
        """Compute dot product with another vector."""
        return float(np.dot(self._data, other._data))

    def cross(self, other: Vec3) -> Vec3:
        """Compute the right-handed cross product with another vector."""
        return Vec3.from_array(np.cross(self._data, other._data))

    def near_zero(self, epsilon: float = 1e-8) -> bool:
        """Check if vector is close to zero in all dimensions."""
        return all(abs(c) < epsilon for c in self._data)

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


def _operand(other: Union[Vec3, float]):
    if isinstance(other, Vec3):
        return other._data
    return other


def _to_byte(value: float) -> int:
    # Truncate toward zero, then keep the low 8 bits.
    return int(value) & 0xFF


def dot(a: Vec3, b: Vec3) -> float:
    """Dot product of two vectors."""
    return a.dot(b)


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Right-handed cross product of two vectors."""
    return a.cross(b)


def unit_vector(v: Vec3) -> Vec3:
    """Return ``v`` scaled to unit length."""
    return v.normalize()


# Convenience type aliases
Point3 = Vec3
Color = Vec3
