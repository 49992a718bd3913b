"""
Numpy-backed base for the fixed-width value types.

Subclasses declare their component names in ``fields`` and may accept
another value type in ``_convert``. Every polymorphic operation goes through
``_coerce``, so broadcast and sequence handling is the same everywhere.
"""
import numpy as np

from . import operand
from .diagnostics import diagnostics
from .errors import InvalidDivisorError, UnsupportedOperandError


def component(index: int, doc: str = None):
    """Property reading and writing one slot of ``self.v``."""
    def fget(self):
        return float(self.v[index])

    def fset(self, value):
        self.v[index] = value

    return property(fget, fset, doc=doc)


class ComponentValue:
    fields = ()

    def __init__(self, *components):
        self.v = np.array(components, dtype=float)

    # -- Operand coercion ---------------------------------------------------
    def _convert(self, value):
        """Components of a foreign value type this type understands, or None."""
        return None

    def _coerce(self, value):
        if isinstance(value, type(self)):
            return value.v.copy()
        converted = self._convert(value)
        if converted is not None:
            return converted
        return operand.as_components(value, len(self.fields))

    def _unsupported(self, op: str, value) -> str:
        return f"{type(self).__name__}.{op}() aborted. Error: Data type not supported; Data provided: {value!r}"

    def _operand(self, value, op: str):
        components = self._coerce(value)
        if components is None:
            diagnostics.log(self._unsupported(op, value))
        return components

    def _divisor(self, value, strict: bool = False):
        components = self._coerce(value)
        if components is None:
            message = self._unsupported("div", value)
            if strict:
                raise UnsupportedOperandError(message)
            diagnostics.log(message)
            return None
        reason = operand.divisor_error(components)
        if reason is not None:
            message = f"{type(self).__name__}.div() aborted. Error: {reason}"
            if strict:
                raise InvalidDivisorError(message)
            diagnostics.log(message)
            return None
        return components

    # -- Arithmetic (in place, chainable) -------------------------------------
    def add(self, x):
        components = self._operand(x, "add")
        if components is not None:
            self.v += operand.defined(components)
        return self

    def sub(self, x):
        components = self._operand(x, "sub")
        if components is not None:
            self.v -= operand.defined(components)
        return self

    def mul(self, x):
        components = self._operand(x, "mul")
        if components is not None:
            self.v *= components
        return self

    def _divide(self, components):
        self.v /= components
        return self

    def div(self, x):
        """
        Divide component-wise. A zero, NaN or infinite divisor component is
        reported to the diagnostic sink and the receiver is returned unchanged.
        """
        components = self._divisor(x)
        if components is None:
            return self
        return self._divide(components)

    def try_div(self, x):
        """Like ``div`` but raises ``InvalidDivisorError`` instead of reporting."""
        return self._divide(self._divisor(x, strict=True))

    # -- Utilities -------------------------------------------------------------
    def copy(self):
        return type(self)(*self.v)

    def equals(self, *args) -> bool:
        """Exact component-wise equality against any supported operand form."""
        value = args[0] if len(args) == 1 else list(args)
        components = self._coerce(value)
        return components is not None and bool(np.array_equal(self.v, components))

    # -- Python protocol ------------------------------------------------------
    def __iter__(self):
        return iter(self.v.tolist())

    def __str__(self):
        return f"{type(self).__name__}: [{', '.join(str(c) for c in self)}]"

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(c) for c in self)})"

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __neg__(self):
        return type(self)(*(-self.v))

    def _binary(self, other, method):
        if self._coerce(other) is None:
            return NotImplemented
        return method(self.copy(), other)

    def __add__(self, other):
        return self._binary(other, type(self).add)

    def __sub__(self, other):
        return self._binary(other, type(self).sub)

    def __mul__(self, other):
        return self._binary(other, type(self).mul)

    def __truediv__(self, other):
        return self._binary(other, type(self).div)

    def __radd__(self, other):
        if operand.is_scalar(other):
            return self.__add__(other)
        return NotImplemented

    def __rmul__(self, other):
        if operand.is_scalar(other):
            return self.__mul__(other)
        return NotImplemented

    def __iadd__(self, other):
        return self.add(other)

    def __isub__(self, other):
        return self.sub(other)

    def __imul__(self, other):
        return self.mul(other)

    def __itruediv__(self, other):
        return self.div(other)
