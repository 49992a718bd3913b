import types

import numpy as np

from . import operand
from .base import ComponentValue, component
from .config import get_setting
from .constants import DEG2RAD, RAD2DEG, TWO_PI
from .diagnostics import diagnostics
from .errors import NonPlanarVectorError

_rng = np.random.default_rng()


class dualmethod:
    """Bind to the instance when called on one, otherwise to the class."""

    def __init__(self, func):
        self.func = func
        self.__doc__ = func.__doc__

    def __get__(self, obj, objtype=None):
        return types.MethodType(self.func, objtype if obj is None else obj)


class Vector(ComponentValue):
    """
    Free 3D vector. Arithmetic mutates the receiver and returns it so calls
    can be chained; ``copy``, ``distance``, ``cross`` and ``from_angle``
    return new vectors.
    """
    fields = ('x', 'y', 'z')

    x = component(0)
    y = component(1)
    z = component(2)

    def __init__(self, x=0, y=0, z=0):
        if isinstance(x, Vector):
            x, y, z = x.v
        elif operand.is_sequence(x):
            components = operand.as_components(x, 3)
            if components is None:
                raise TypeError(f"Vector needs numeric components, got {x!r}")
            x, y, z = operand.defined(components)
        super().__init__(x, y, z)

    def mul(self, x=1):
        return super().mul(x)

    def mag_sq(self) -> float:
        return float(np.dot(self.v, self.v))

    def mag(self) -> float:
        return float(np.sqrt(self.mag_sq()))

    def dot(self, x, y=None, z=None) -> float:
        """Dot product with a vector, a sequence, a broadcast scalar or 1-3 scalars."""
        if isinstance(x, Vector) or operand.is_sequence(x):
            other = operand.defined(self._coerce(x))
        elif y is None:
            other = np.full(3, float(x))
        else:
            other = np.array([x, y, 0 if z is None else z], dtype=float)
        return float(np.dot(self.v, other))

    def distance(self, other) -> float:
        return Vector(other).sub(self).mag()

    def normalize(self):
        length = self.mag()
        if length != 0:
            self.v /= length
        return self

    def orientation(self):
        """Direction of this vector as an EulerAngle (normalized components)."""
        from .euler import EulerAngle
        return EulerAngle(*self.copy().normalize().v)

    def cross(self, v):
        other = Vector(v)
        return Vector(*np.cross(self.v, other.v))

    def limit(self, max):
        m_sq = self.mag_sq()
        if m_sq > max * max:
            self.div(np.sqrt(m_sq)).mul(max)
        return self

    def set_mag(self, n):
        return self.normalize().mul(n)

    def set(self, x, y=None, z=None):
        if isinstance(x, Vector):
            return self.set(*x.v)
        if operand.is_sequence(x) and operand.as_components(x, 3) is not None:
            return self.set(*operand.defined(operand.as_components(x, 3)))
        given = [value for value in (x, y, z) if value is not None]
        if not given or not all(operand.is_scalar(value) for value in given):
            diagnostics.log(
                f"Vector.set() aborted. Error: Data type not supported; Data provided: {x}, {y}, {z}"
            )
            return self
        if y is None:
            return self.set(x, x, x)
        self.v[:] = (x, y, 0 if z is None else z)
        return self

    def clamp(self, min, max):
        self.v = np.maximum(np.minimum(self.v, max), min)
        return self

    # -- 2D helpers ---------------------------------------------------------------
    # Only meaningful for z == 0. A non-zero z is ignored, not rejected;
    # use check_2d() to catch it during development. Angles are in degrees.

    def heading(self) -> float:
        return float(np.arctan2(self.v[1], self.v[0]) * RAD2DEG)

    def rotate(self, a):
        new_heading = (self.heading() + a) * DEG2RAD
        mag = self.mag()
        self.v[0] = np.cos(new_heading) * mag
        self.v[1] = np.sin(new_heading) * mag
        return self

    def angle_between(self, x) -> float:
        """Signed angle to ``x``; counter-clockwise (positive cross z) is positive."""
        other = Vector(x)
        with np.errstate(divide='ignore', invalid='ignore'):
            cos_angle = np.float64(self.dot(other)) / (self.mag() * other.mag())
        angle = np.arccos(np.clip(cos_angle, -1.0, 1.0))
        return float(angle * np.sign(self.cross(other).z or 1) * RAD2DEG)

    @classmethod
    def from_angle(cls, angle=0, length=1):
        angle = angle * DEG2RAD
        return cls(length * np.cos(angle), length * np.sin(angle), 0)

    @dualmethod
    def random_2d(self, rng=None):
        """Random unit vector on the XY circle. Mutates an instance, builds one on the class."""
        rng = rng or _rng
        v = Vector.from_angle(rng.uniform(0.0, 360.0))
        if isinstance(self, type):
            return v
        self.v[:] = v.v
        return self

    @dualmethod
    def random_3d(self, rng=None):
        """Random unit vector on the sphere. Mutates an instance, builds one on the class."""
        rng = rng or _rng
        angle = rng.uniform(0.0, TWO_PI)
        vz = rng.uniform(-1.0, 1.0)
        vz_base = np.sqrt(1 - vz * vz)
        components = (vz_base * np.cos(angle), vz_base * np.sin(angle), vz)
        if isinstance(self, type):
            return self(*components)
        self.v[:] = components
        return self

    # -- Debug helpers -------------------------------------------------------------
    def check_2d(self, halt_execution=None):
        """
        Flag a non-zero z component on a vector meant to be 2D.

        Raises NonPlanarVectorError when ``halt_execution`` is true, otherwise
        sends a warning to the diagnostic sink. ``None`` uses the
        ``halt_on_non_2d`` setting.
        """
        if halt_execution is None:
            halt_execution = get_setting("halt_on_non_2d")
        warning = f"Warning: Vector with non-zero component. {self}"
        if self.v[2] != 0:
            if halt_execution:
                raise NonPlanarVectorError(warning)
            diagnostics.log(warning)
        return self

    def log_debug(self):
        diagnostics.log(str(self))
        return self
