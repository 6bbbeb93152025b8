"""
This module implements point arithmetic on secp256k1. Points are handled in
affine coordinates at the edges and in Jacobian coordinates internally, so
that a full scalar multiplication needs a single field inversion at the end.

A Jacobian point (X, Y, Z) represents the affine point (X/Z^2, Y/Z^3). Any
Jacobian point with Y == 0 is treated as the point at infinity, and the point
at infinity lowers to the affine pair (0, 0).

The algorithms here are not constant time. They reproduce the reference
signatures bit for bit but must not be used where timing side channels
matter.
"""

from __future__ import annotations
from typing import NamedTuple, Tuple
from .constants import A, N, P, G_x, G_y
from .field import inv


class Point(NamedTuple):
    """Class representing an elliptic curve point in affine coordinates."""

    x: int
    y: int


class JacobianPoint(NamedTuple):
    """Class representing an elliptic curve point in Jacobian coordinates."""

    x: int
    y: int
    z: int


AffineLike = Tuple[int, int]
JacobianLike = Tuple[int, int, int]


def to_jacobian(p: AffineLike) -> JacobianPoint:
    """Lift an affine point into Jacobian coordinates with Z = 1."""
    return JacobianPoint(p[0], p[1], 1)


def from_jacobian(p: JacobianLike) -> Point:
    """
    Lower a Jacobian point to affine coordinates.

    Parameters:
    p (JacobianLike): The point (X, Y, Z) to convert.

    Returns:
    Point: The affine point (X/Z^2, Y/Z^3) reduced modulo P. Since the
    inverse of zero is zero, a point with Z == 0 lowers to (0, 0).
    """
    z = inv(p[2], P)
    z2 = (z * z) % P
    z3 = (z2 * z) % P
    return Point((p[0] * z2) % P, (p[1] * z3) % P)


def jacobian_double(p: JacobianLike) -> JacobianPoint:
    """
    Double a point in Jacobian coordinates.

    Parameters:
    p (JacobianLike): The point to double.

    Returns:
    JacobianPoint: 2 * p. If p is the point at infinity (Y == 0), the
    point at infinity (0, 0, 0) is returned.
    """
    if p[1] == 0:
        return JacobianPoint(0, 0, 0)

    x, y, z = p
    ysq = (y**2) % P
    s = (4 * x * ysq) % P
    m = (3 * x**2 + A * z**4) % P
    nx = (m**2 - 2 * s) % P
    ny = (m * (s - nx) - 8 * ysq**2) % P
    nz = (2 * y * z) % P

    return JacobianPoint(nx, ny, nz)


def jacobian_add(p: JacobianLike, q: JacobianLike) -> JacobianPoint:
    """
    Add two points in Jacobian coordinates.

    Parameters:
    p (JacobianLike): The first summand.
    q (JacobianLike): The second summand.

    Returns:
    JacobianPoint: p + q. Either operand at infinity yields the other one
    unchanged; inverse points yield the point at infinity (0, 0, 1); equal
    points are doubled.
    """
    if p[1] == 0:
        return JacobianPoint(*q)
    if q[1] == 0:
        return JacobianPoint(*p)

    u1 = (p[0] * q[2] ** 2) % P
    u2 = (q[0] * p[2] ** 2) % P
    s1 = (p[1] * q[2] ** 3) % P
    s2 = (q[1] * p[2] ** 3) % P

    if u1 == u2:
        if s1 != s2:
            return JacobianPoint(0, 0, 1)
        return jacobian_double(p)

    h = (u2 - u1) % P
    r = (s2 - s1) % P
    h2 = (h * h) % P
    h3 = (h * h2) % P
    u1h2 = (u1 * h2) % P
    nx = (r**2 - h3 - 2 * u1h2) % P
    ny = (r * (u1h2 - nx) - s1 * h3) % P
    nz = (h * p[2] * q[2]) % P

    return JacobianPoint(nx, ny, nz)


def jacobian_multiply(a: JacobianLike, n: int) -> JacobianPoint:
    """
    Multiply a Jacobian point by an integer scalar using double-and-add.

    Scalars outside [0, N) are reduced modulo the curve order first. The
    bits of the scalar are consumed from the most significant one down,
    which performs the same sequence of doublings and additions as the
    recursive definition mul(a, n) = double(mul(a, n // 2)) [+ a].

    Parameters:
    a (JacobianLike): The point to multiply.
    n (int): The scalar.

    Returns:
    JacobianPoint: n * a, or the point at infinity (0, 0, 1) when a is at
    infinity or the reduced scalar is zero.
    """
    if n < 0 or n >= N:
        n = n % N
    if a[1] == 0 or n == 0:
        return JacobianPoint(0, 0, 1)

    base = JacobianPoint(*a)
    result = base
    for bit in bin(n)[3:]:
        result = jacobian_double(result)
        if bit == "1":
            result = jacobian_add(result, base)

    return result


def fast_multiply(a: AffineLike, n: int) -> Point:
    """Multiply an affine point by a scalar, returning an affine point."""
    return from_jacobian(jacobian_multiply(to_jacobian(a), n))


# The generator point G
G: Point = Point(G_x, G_y)
