"""Complex-number and quaternion arithmetic used by the fractal samplers.

Complex values are plain Python ``complex`` numbers. Quaternions are
``Quat`` values whose ``x`` component is the real part and ``y``, ``z``
and ``w`` the imaginary parts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

PI = 3.14159265358979323846
E = 2.718281828459045235360


@dataclass(frozen=True)
class Quat:
    """A quaternion ``x + y*i + z*j + w*k``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self):
        yield from (self.x, self.y, self.z, self.w)


def creal(n: complex) -> float:
    """Real part of a complex number."""
    return n.real


def cimag(n: complex) -> float:
    """Imaginary part of a complex number."""
    return n.imag


def cmod(n: complex) -> float:
    """Modulus of a complex number."""
    return math.sqrt(n.real * n.real + n.imag * n.imag)


def cdot(a: complex, b: complex) -> float:
    """Dot product of two complex numbers taken as 2D vectors."""
    return a.real * b.real + a.imag * b.imag


def cadd(a: complex, b: complex) -> complex:
    """Sum of two complex numbers."""
    return complex(a.real + b.real, a.imag + b.imag)


def cmult(a: complex, b: complex) -> complex:
    """Product of two complex numbers."""
    return complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
    )


def cpow(base: complex, exp: int) -> complex:
    """Square-and-multiply power starting from ``1 + 1j``.

    The accumulator is seeded with ``1 + 1j`` and squared after every bit,
    so the result is not the true power; the behaviour is kept as is.
    """
    if exp < 0:
        raise ValueError(f"exponent must be non-negative: {exp}")
    res = complex(1.0, 1.0)
    while exp:
        if exp & 1:
            res = cmult(res, base)
        exp >>= 1
        res = cmult(res, res)
    return res


def cdiv(a: complex, b: complex) -> complex:
    """Quotient of two complex numbers; raises ZeroDivisionError for ``b == 0``."""
    dividend = b.real * b.real + b.imag * b.imag
    if dividend == 0:
        raise ZeroDivisionError("complex division by zero")
    return complex(
        (a.real * b.real + a.imag * b.imag) / dividend,
        (a.imag * b.real - a.real * b.imag) / dividend,
    )


def carg(a: complex) -> float:
    """Argument of a complex number in ``(-pi, pi]``; zero for the origin."""
    x, y = a.real, a.imag
    if x > 0:
        return math.atan(y / x)
    if x < 0 and y >= 0:
        return math.atan(y / x) + PI
    if x < 0 and y < 0:
        return math.atan(y / x) - PI
    if x == 0 and y > 0:
        return PI / 2
    if x == 0 and y < 0:
        return -PI / 2
    return 0.0


def csqrt(n: complex) -> complex:
    """Principal square root of a complex number."""
    sm = math.sqrt(cmod(n))
    half = carg(n) / 2
    return complex(sm * math.cos(half), sm * math.sin(half))


def cexp(n: complex) -> complex:
    """Complex exponential."""
    e = math.exp(n.real)
    return complex(e * math.cos(n.imag), e * math.sin(n.imag))


def clog(z: complex) -> complex:
    """Principal natural logarithm; raises ValueError for zero."""
    modulus = cmod(z)
    if modulus == 0:
        raise ValueError("logarithm of zero")
    return complex(math.log(modulus), carg(z))


def quat_mult(q1: Quat, q2: Quat) -> Quat:
    """Single-precision style quaternion product.

    The ``w`` component uses ``q1.x * q1.w`` in its first term, which the
    fractal sampler's modulus relies on; it is not the Hamilton product.
    """
    return Quat(
        q1.x * q2.x - q1.y * q2.y - q1.z * q2.z - q1.w * q2.w,
        q1.x * q2.y + q1.y * q2.x + q1.z * q2.w - q1.w * q2.z,
        q1.x * q2.z + q1.z * q2.x + q1.w * q2.y - q1.y * q2.w,
        q1.x * q1.w + q1.w * q2.x + q1.y * q2.z - q1.z * q2.y,
    )


def quat_sum(q1: Quat, q2: Quat) -> Quat:
    """Component-wise sum of two quaternions."""
    return Quat(q1.x + q2.x, q1.y + q2.y, q1.z + q2.z, q1.w + q2.w)


def quat_conjugate(q: Quat) -> Quat:
    """Quaternion conjugate."""
    return Quat(q.x, -q.y, -q.z, -q.w)


def quat_mod(q: Quat) -> float:
    """Length of ``q`` multiplied by its conjugate, using ``quat_mult``."""
    t = quat_mult(q, quat_conjugate(q))
    return math.sqrt(t.x * t.x + t.y * t.y + t.z * t.z + t.w * t.w)


def quat_mult_d(q1: Quat, q2: Quat) -> Quat:
    """Hamilton product of two quaternions."""
    return Quat(
        q1.x * q2.x - q1.y * q2.y - q1.z * q2.z - q1.w * q2.w,
        q1.x * q2.y + q1.y * q2.x + q1.z * q2.w - q1.w * q2.z,
        q1.x * q2.z - q1.y * q2.w + q1.z * q2.x + q1.w * q2.y,
        q1.x * q2.w + q1.y * q2.z - q1.z * q2.y + q1.w * q2.x,
    )


def quat_sum_d(q1: Quat, q2: Quat) -> Quat:
    """Component-wise sum of two quaternions."""
    return quat_sum(q1, q2)


def quat_mod_d(q: Quat) -> float:
    """Euclidean norm of a quaternion."""
    return math.sqrt(q.x * q.x + q.y * q.y + q.z * q.z + q.w * q.w)