"""
Operand coercion shared by every polymorphic operation.

An operand is one of: a value of the receiver's own type (handled by the
receiver), an ordered sequence, or a real scalar that is broadcast across all
components. This module turns the last two into a float array of the
receiver's width and validates divisors.
"""
import numbers
from collections.abc import Sequence

import numpy as np


def is_scalar(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_sequence(value) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def as_components(value, width: int):
    """
    Return ``value`` as a float array of ``width`` components, or None if it
    is neither a scalar nor a sequence of numbers.

    Missing or ``None`` sequence items come back as NaN.
    """
    if is_scalar(value):
        return np.full(width, float(value))
    if not is_sequence(value):
        return None
    items = [np.nan if item is None else item for item in list(value)[:width]]
    items += [np.nan] * (width - len(items))
    if not all(is_scalar(item) for item in items):
        return None
    return np.asarray(items, dtype=float)


def defined(components):
    """Undefined (NaN) components count as 0."""
    return np.where(np.isnan(components), 0.0, components)


def divisor_error(components):
    """Return why ``components`` can't be used as a divisor, or None."""
    if not np.all(np.isfinite(components)):
        return "values are either undefined or not finite"
    if np.any(components == 0):
        return "divide by 0"
    return None
