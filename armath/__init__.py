# armath/__init__.py

from .vector import Vector
from .euler import EulerAngle
from .quaternion import Quaternion
from .config import configure, load_config, get_setting
from .diagnostics import Diagnostics, set_sink
from .errors import KernelError, InvalidDivisorError, UnsupportedOperandError, NonPlanarVectorError

__all__ = [
    'Vector', 'EulerAngle', 'Quaternion',
    'configure', 'load_config', 'get_setting',
    'Diagnostics', 'set_sink',
    'KernelError', 'InvalidDivisorError', 'UnsupportedOperandError', 'NonPlanarVectorError',
]
