"""
Exceptions raised by the kernel.

Ordinary arithmetic never raises: bad divisors and unsupported operands are
reported through the diagnostic sink instead. These are only raised by
``Vector.check_2d`` and by the ``try_*`` companions.
"""


class KernelError(Exception):
    """Base class for armath errors."""


class InvalidDivisorError(KernelError, ValueError):
    """Divisor has a zero, NaN or infinite component."""


class UnsupportedOperandError(KernelError, TypeError):
    """Operand can't be coerced to the receiver's components."""


class NonPlanarVectorError(KernelError):
    """A vector used as 2D has a non-zero z component."""
