import numpy as np

from . import operand
from .base import ComponentValue, component
from .constants import DEG2RAD, RAD2DEG

_IDENTITY = (1.0, 0.0, 0.0, 0.0)


class Quaternion(ComponentValue):
    """
    Rotation quaternion (w, x, y, z), right-handed, identity by default.

    Nothing re-normalizes after arithmetic; call ``normalize`` before reading
    the value as a rotation. ``mul`` is the Hamilton product (in place) and
    ``div`` returns a new quaternion.
    """
    fields = ('w', 'x', 'y', 'z')

    w = component(0)
    x = component(1)
    y = component(2)
    z = component(3)

    def __init__(self, w=None, x=None, y=None, z=None):
        from .euler import EulerAngle  # Local import to avoid circular dependency

        if isinstance(w, EulerAngle):
            components = w.to_quaternion().v
        elif isinstance(w, Quaternion):
            components = w.v
        elif operand.is_sequence(w):
            components = operand.as_components(w, 4)
            if components is None:
                raise TypeError(f"Quaternion needs numeric components, got {w!r}")
            components = operand.defined(components)
        else:
            components = [default if given is None else given
                          for given, default in zip((w, x, y, z), _IDENTITY)]
        super().__init__(*components)

    @property
    def q(self):
        return self.v

    @classmethod
    def identity(cls):
        return cls(*_IDENTITY)

    def _convert(self, value):
        from .euler import EulerAngle

        if isinstance(value, EulerAngle):
            return value.to_quaternion().v
        return None

    def mul(self, x):
        """Compose with ``x`` (Hamilton product, ``self * x``), in place."""
        components = self._operand(x, "mul")
        if components is None:
            return self
        w1, x1, y1, z1 = self.v
        # undefined operand components count as 0 for the Hamilton product
        w2, x2, y2, z2 = operand.defined(components)

        self.v[:] = (
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 + y1 * w2 + z1 * x2 - x1 * z2,
            w1 * z2 + z1 * w2 + x1 * y2 - y1 * x2,
        )
        return self

    def _divide(self, components):
        # self * divisor^-1, where divisor^-1 = conj(divisor) / |divisor|^2
        norm_sq = float(np.dot(components, components))
        if norm_sq == 0:
            return Quaternion(0, 0, 0, 0)
        divisor = Quaternion(*components).conjugate()
        result = self.copy().mul(divisor)
        result.v /= norm_sq
        return result

    def __rmul__(self, other):
        # scalar * q: the broadcast scalar is the left factor
        if operand.is_scalar(other):
            return Quaternion(*operand.as_components(other, 4)).mul(self)
        return NotImplemented

    def conjugate(self):
        w, x, y, z = self.v
        return Quaternion(w, -x, -y, -z)

    def mag_sq(self) -> float:
        return float(np.dot(self.v, self.v))

    def mag(self) -> float:
        return float(np.sqrt(self.mag_sq()))

    def normalize(self):
        norm = self.mag()
        if norm != 0:
            self.v /= norm
        return self

    def to_euler_angles(self):
        """Convert to roll/pitch/yaw degrees; pitch is clamped to +/-90 at gimbal lock."""
        from .euler import EulerAngle

        w, x, y, z = self.v

        # Roll (x-axis rotation)
        sinr_cosp = 2 * (w * x + y * z)
        cosr_cosp = 1 - 2 * (x * x + y * y)
        roll = np.arctan2(sinr_cosp, cosr_cosp) * RAD2DEG

        # Pitch (y-axis rotation)
        sinp = 2 * (w * y - z * x)
        if abs(sinp) >= 1:
            pitch = np.copysign(90.0, sinp)
        else:
            pitch = np.arcsin(sinp) * RAD2DEG

        # Yaw (z-axis rotation)
        siny_cosp = 2 * (w * z + x * y)
        cosy_cosp = 1 - 2 * (y * y + z * z)
        yaw = np.arctan2(siny_cosp, cosy_cosp) * RAD2DEG

        return EulerAngle(roll, pitch, yaw)

    # -- Angle-axis helpers ---------------------------------------------------------
    @classmethod
    def from_axis_angle(cls, axis, angle):
        """Rotation of ``angle`` degrees about ``axis`` (Vector or sequence, any length)."""
        from .vector import Vector

        axis = Vector(axis).normalize()
        half = angle * DEG2RAD / 2
        sin_a = np.sin(half)
        return cls(np.cos(half), *(axis.v * sin_a))

    def to_axis_angle(self):
        """Return ``(axis, degrees)``. The axis is (1, 0, 0) for a null rotation."""
        from .vector import Vector

        q = self.copy().normalize()
        w = np.clip(q.v[0], -1.0, 1.0)
        angle = 2.0 * np.arccos(w) * RAD2DEG
        s = np.sqrt(1.0 - w * w)
        if s < 1e-9:
            return Vector(1, 0, 0), float(angle)
        return Vector(*(q.v[1:] / s)), float(angle)

    def rotate(self, vector):
        """Rotate a Vector by this (unit) quaternion and return a new Vector."""
        from .vector import Vector

        vector = Vector(vector)
        v_quat = Quaternion(0, *vector.v)
        rotated = self.copy().mul(v_quat).mul(self.conjugate())
        return Vector(*rotated.v[1:])
