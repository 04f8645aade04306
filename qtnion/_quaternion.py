import numbers

import numpy as np

from ._scalar import arithmetic_dtype, coerce, divide, is_integer, sqrt
from .utils import logger


__all__ = ["Quaternion", "quaternion_type"]


# Specialisations per scalar dtype, see quaternion_type()
_types = {}


class Quaternion:
    """A quaternion ``one + i*I + j*J + k*K``.

    Quaternion values are immutable: every operation returns a new
    quaternion. The components are numpy scalars of the class ``dtype``,
    which is float64 for ``Quaternion`` itself. Use ``Quaternion[T]`` to
    get the quaternion type for another integer or floating point
    scalar type ``T``, e.g. ``Quaternion[np.float32]``.

    Construction depends on the number of arguments:

    * ``Quaternion()``: zero.
    * ``Quaternion(r)``, ``Quaternion(r, x)``: a real or complex number.
    * ``Quaternion(x, y, z)``: a 3D vector, with a zero real part.
    * ``Quaternion(r, x, y, z)``: a general quaternion.
    """

    __slots__ = ("_one", "_i", "_j", "_k")

    dtype = np.dtype(np.float64)

    def __init__(self, *components: float) -> None:
        n = len(components)
        if n == 0:
            one = i = j = k = 0
        elif n == 1:
            one, i, j, k = components[0], 0, 0, 0
        elif n == 2:
            one, i, j, k = components[0], components[1], 0, 0
        elif n == 3:
            one, i, j, k = 0, *components
        elif n == 4:
            one, i, j, k = components
        else:
            raise TypeError(
                f"{type(self).__name__}() takes at most 4 components ({n} given)."
            )
        dtype = self.dtype
        self._one = coerce(one, dtype)
        self._i = coerce(i, dtype)
        self._j = coerce(j, dtype)
        self._k = coerce(k, dtype)

    def __class_getitem__(cls, scalar_type) -> type:
        return quaternion_type(scalar_type)

    @property
    def one(self):
        """The real part."""
        return self._one

    @property
    def i(self):
        return self._i

    @property
    def j(self):
        return self._j

    @property
    def k(self):
        return self._k

    def __repr__(self) -> str:
        components = ", ".join(repr(c.item()) for c in self)
        return f"{type(self).__name__}({components})"

    def __iter__(self):
        yield self._one
        yield self._i
        yield self._j
        yield self._k

    def __hash__(self) -> int:
        return hash(tuple(c.item() for c in self))

    def __eq__(self, other: "Quaternion") -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(
            self._one == other._one
            and self._i == other._i
            and self._j == other._j
            and self._k == other._k
        )

    def to_array(self) -> np.ndarray:
        """Get the components ``(one, i, j, k)`` as a numpy array of this dtype."""
        return np.array(tuple(self), dtype=self.dtype)

    # %% Arithmetic

    def _operands(self, other: "Quaternion"):
        # The result type and both operands' components cast to its dtype
        if type(other) is type(self):
            return type(self), tuple(self), tuple(other)
        cls = quaternion_type(np.promote_types(self.dtype, other.dtype))
        cast = cls.dtype.type
        return cls, tuple(map(cast, self)), tuple(map(cast, other))

    def __add__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        cls, (a1, b1, c1, d1), (a2, b2, c2, d2) = self._operands(other)
        return cls(a1 + a2, b1 + b2, c1 + c2, d1 + d2)

    def __sub__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        cls, (a1, b1, c1, d1), (a2, b2, c2, d2) = self._operands(other)
        return cls(a1 - a2, b1 - b2, c1 - c2, d1 - d2)

    def __mul__(self, other) -> "Quaternion":
        if isinstance(other, Quaternion):
            # Hamilton product, the order of the operands matters
            cls, (a1, b1, c1, d1), (a2, b2, c2, d2) = self._operands(other)
            return cls(
                a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2,
                a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2,
                a1 * c2 - b1 * d2 + c1 * a2 + d1 * b2,
                a1 * d2 + b1 * c2 - c1 * b2 + d1 * a2,
            )
        elif _is_real(other):
            s = coerce(other, self.dtype)
            return type(self)(*(c * s for c in self))
        return NotImplemented

    def __rmul__(self, other) -> "Quaternion":
        # A real scalar commutes with any quaternion
        if _is_real(other):
            return self * other
        return NotImplemented

    def __truediv__(self, other) -> "Quaternion":
        if not _is_real(other):
            return NotImplemented
        dtype = self.dtype
        divisor = coerce(other, dtype)
        if divisor == 0:
            raise ValueError("Quaternion division by zero.")
        return type(self)(*(divide(c, divisor, dtype) for c in self))

    def __neg__(self) -> "Quaternion":
        return type(self)(-self._one, -self._i, -self._j, -self._k)

    def __abs__(self):
        return self.norm()

    # %% Algebra

    def conjugate(self) -> "Quaternion":
        """Get the conjugate, with the imaginary components negated."""
        return type(self)(self._one, -self._i, -self._j, -self._k)

    def squ_norm(self):
        """Get the squared norm ``one² + i² + j² + k²`` as a scalar of this dtype."""
        one, i, j, k = self
        return one * one + i * i + j * j + k * k

    def norm(self):
        """Get the norm (Euclidean length), as a scalar of this dtype.

        For integer types the result is truncated.
        """
        return sqrt(self.squ_norm(), self.dtype)

    def inverse(self) -> "Quaternion":
        """Get the multiplicative inverse.

        Raises ValueError if the quaternion is zero.
        """
        squ_norm = self.squ_norm()
        if squ_norm == 0:
            raise ValueError("Cannot invert a quaternion with zero norm.")
        return self.conjugate() / squ_norm

    def normalize(self) -> "Quaternion":
        """Get the unit quaternion with the same direction.

        Raises ValueError if the quaternion is zero.
        """
        norm = self.norm()
        if norm == 0:
            raise ValueError("Cannot normalize a quaternion with zero norm.")
        return self / norm

    def turn3Dvec(self, q: "Quaternion") -> "Quaternion":  # noqa: N802
        """Rotate this vector quaternion (with a zero real part) by the
        unit quaternion q, i.e. ``q * self * conjugate(q)``.
        """
        return q * self * q.conjugate()

    @classmethod
    def polarturn(cls, x: float, y: float, z: float, theta: float) -> "Quaternion":
        """Get the unit quaternion for a rotation of theta radians around
        the axis (x, y, z). The axis is assumed to be normalized.
        """
        # Integer quaternions get the truncated float64 result
        work = np.dtype(np.float64) if is_integer(cls.dtype) else cls.dtype
        half_angle = coerce(theta, work) / 2
        s = np.sin(half_angle)
        return cls(
            np.cos(half_angle),
            coerce(x, work) * s,
            coerce(y, work) * s,
            coerce(z, work) * s,
        )


_types[Quaternion.dtype] = Quaternion


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def quaternion_type(scalar_type) -> type:
    """Get the quaternion type for the given scalar type.

    The scalar type can be anything that ``numpy.dtype()`` maps onto an
    integer or floating point dtype, e.g. ``int``, ``np.float32`` or
    ``"u2"``. Raises TypeError for any other type. The returned class is
    a subclass of ``Quaternion`` and the same class is returned for
    equal scalar types. This is also available as ``Quaternion[T]``.
    """
    dtype = arithmetic_dtype(scalar_type)
    try:
        return _types[dtype]
    except KeyError:
        pass
    name = f"Quaternion[{dtype.name}]"
    cls = type(
        name,
        (Quaternion,),
        {
            "__slots__": (),
            "__module__": __name__,
            "__qualname__": name,
            "dtype": dtype,
        },
    )
    cls = _types.setdefault(dtype, cls)
    logger.debug(f"Defined quaternion type for scalar type {dtype.name}.")
    return cls
