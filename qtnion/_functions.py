"""
Quaternion algebra as free functions. Each of these is also available
as a method on Quaternion.
"""

import numpy as np

from ._quaternion import Quaternion, quaternion_type


__all__ = [
    "conjugate",
    "squ_norm",
    "norm",
    "inverse",
    "normalize",
    "polarturn",
    "turn3Dvec",
    "isclose",
]


def conjugate(q: Quaternion) -> Quaternion:
    """Get the conjugate ``{one, -i, -j, -k}`` of q."""
    return q.conjugate()


def squ_norm(q: Quaternion):
    """Get the squared norm of q."""
    return q.squ_norm()


def norm(q: Quaternion):
    """Get the norm of q, i.e. ``sqrt(squ_norm(q))``."""
    return q.norm()


def inverse(q: Quaternion) -> Quaternion:
    """Get ``conjugate(q) / squ_norm(q)``. Raises ValueError if q is zero."""
    return q.inverse()


def normalize(q: Quaternion) -> Quaternion:
    """Get ``q / norm(q)``. Raises ValueError if q is zero."""
    return q.normalize()


def polarturn(x, y, z, theta, dtype=None) -> Quaternion:
    """Get the unit quaternion for a rotation of theta radians around the
    unit axis (x, y, z).

    The axis is not normalized. The result is a ``Quaternion[dtype]``,
    float64 by default.
    """
    cls = Quaternion if dtype is None else quaternion_type(dtype)
    return cls.polarturn(x, y, z, theta)


def turn3Dvec(v: Quaternion, q: Quaternion) -> Quaternion:  # noqa: N802
    """Rotate the vector quaternion v by the unit quaternion q.

    Returns ``q * v * conjugate(q)``. Neither the zero real part of v nor
    the unit length of q is checked.
    """
    return v.turn3Dvec(q)


def isclose(p: Quaternion, q: Quaternion, rtol=1e-05, atol=1e-08) -> bool:
    """Get whether two quaternions are equal within a tolerance.

    The components are compared as in ``numpy.allclose()``. Note that
    ``p == q`` compares exactly.
    """
    return bool(np.allclose(p.to_array(), q.to_array(), rtol=rtol, atol=atol))
