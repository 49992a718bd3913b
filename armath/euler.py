import numpy as np

from . import operand
from .base import ComponentValue, component
from .constants import DEG2RAD, RAD2DEG


class EulerAngle(ComponentValue):
    """
    Rotation as roll (x), pitch (y) and yaw (z), in degrees.

    No range normalization is applied; values may leave +/-180 after
    arithmetic. Constructing from a Quaternion converts it.
    """
    fields = ('x', 'y', 'z')

    x = component(0, "roll")
    y = component(1, "pitch")
    z = component(2, "yaw")

    def __init__(self, x=0, y=0, z=0):
        from .quaternion import Quaternion  # Local import to avoid circular dependency

        if isinstance(x, Quaternion):
            x, y, z = x.to_euler_angles().v
        elif isinstance(x, EulerAngle):
            x, y, z = x.v
        elif operand.is_sequence(x):
            components = operand.as_components(x, 3)
            if components is None:
                raise TypeError(f"EulerAngle needs numeric components, got {x!r}")
            x, y, z = operand.defined(components)
        super().__init__(x, y, z)

    def _convert(self, value):
        from .quaternion import Quaternion

        if isinstance(value, Quaternion):
            return value.to_euler_angles().v
        return None

    def from_radians(self, x=0, y=0, z=0):
        """Assign angles given in radians; they are stored in degrees."""
        if operand.is_sequence(x):
            components = operand.as_components(x, 3)
            if components is None:
                raise TypeError(f"EulerAngle needs numeric radians, got {x!r}")
            x, y, z = operand.defined(components)
        self.v[:] = (x, y, z)
        self.v *= RAD2DEG
        return self

    def to_quaternion(self):
        """Convert to a Quaternion using the intrinsic Z-Y-X (yaw, pitch, roll) sequence."""
        from .quaternion import Quaternion

        roll, pitch, yaw = self.v * DEG2RAD
        cy = np.cos(yaw * 0.5)
        sy = np.sin(yaw * 0.5)
        cp = np.cos(pitch * 0.5)
        sp = np.sin(pitch * 0.5)
        cr = np.cos(roll * 0.5)
        sr = np.sin(roll * 0.5)

        w = cr * cp * cy + sr * sp * sy
        x = sr * cp * cy - cr * sp * sy
        y = cr * sp * cy + sr * cp * sy
        z = cr * cp * sy - sr * sp * cy

        return Quaternion(w, x, y, z)
