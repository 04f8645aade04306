"""
Scalar types for quaternion components.

A quaternion can be specialised for any primitive arithmetic type: the
numpy integer (signed or unsigned) and floating point dtypes, or a
Python type that numpy maps onto one of these.
"""

import numbers

import numpy as np


# Kinds accepted by numpy.dtype: signed int, unsigned int, float.
ARITHMETIC_KINDS = "iuf"


def arithmetic_dtype(scalar_type) -> np.dtype:
    """Get the numpy dtype for the given scalar type.

    Raises TypeError if the type is not a primitive arithmetic type.
    """
    # numpy maps None to float64, but that's not a type
    if scalar_type is None:
        dtype = None
    else:
        try:
            dtype = np.dtype(scalar_type)
        except (TypeError, ValueError):
            dtype = None
    if dtype is None:
        raise TypeError(
            f"Quaternion scalar type must be an arithmetic type, not {scalar_type!r}."
        )
    if dtype.kind not in ARITHMETIC_KINDS or dtype.fields is not None:
        raise TypeError(
            f"Quaternion scalar type must be an integer or floating point type, not {dtype}."
        )
    return dtype.newbyteorder("=")


def is_integer(dtype: np.dtype) -> bool:
    return dtype.kind in "iu"


def coerce(value, dtype: np.dtype):
    """Convert a real number to a numpy scalar of the given dtype.

    Conversion of a float to an integer dtype truncates toward zero.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeError(f"Quaternion components must be real numbers, not {value!r}.")
    if is_integer(dtype) and not isinstance(value, numbers.Integral):
        value = int(value)
    return dtype.type(value)


def divide(value, divisor, dtype: np.dtype):
    """Divide two scalars of the given dtype.

    The divisor must be non-zero; this is checked by the caller.
    Integer division truncates toward zero.
    """
    if is_integer(dtype):
        n, d = int(value), int(divisor)
        quotient = abs(n) // abs(d)
        if (n < 0) != (d < 0):
            quotient = -quotient
        return dtype.type(quotient)
    return value / divisor


def sqrt(value, dtype: np.dtype):
    if is_integer(dtype):
        return dtype.type(int(np.sqrt(np.float64(value))))
    return np.sqrt(value)
