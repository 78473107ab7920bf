"""Number-theoretic primitives behind the RSA operations.

All functions are written against a generic integer-like type rather than `int` specifically: anything supporting
`+ - * // %`, `divmod`, ordering and the int literals `0` and `1` as identities will do (`int`, `sympy.Integer`,
`gmpy2.mpz`, ...). Consequently, we do not lean on `math.gcd` or the three-argument `pow`.

Typical usage example:

    gcd(3120, 17)
    d = mod_mult_inv(3120, 17) % 3120
    c = mod_pow(65, 17, 3233)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


def gcd(a, b):
    """Euclidean greatest common divisor.

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        The non-negative greatest common divisor of `a` and `b`.
    """
    while b != 0:
        a, b = b, a % b
    return -a if a < 0 else a


def mod_mult_inv(r1, r2):
    """Modular multiplicative inverse via the Extended Euclidean Algorithm.

    Tracks only the Bezout coefficient belonging to `r2`, so that for the returned `t`:
    t*r2 = gcd(r1, r2) (mod r1). With `r1` as the modulus and gcd 1, `t` is the inverse of `r2` modulo `r1`.
    The coefficient is returned as-is, which means it may very well be negative. Bringing it into `[0, r1)` is left
    to the caller.

    Args:
        r1: The modulus. May not be zero together with `r2`.
        r2: The value to invert.

    Returns:
        The Bezout coefficient of `r2`, possibly negative.

    Raises:
        ValueError: If both `r1` and `r2` are zero.
    """
    if r1 == 0 and r2 == 0:
        raise ValueError("r1 and r2 cannot both be zero")
    t1, t2 = 0, 1
    while r2 != 0:
        q, r = divmod(r1, r2)
        r1, r2 = r2, r
        t1, t2 = t2, t1 - q * t2
    return t1


def mod_pow(base, exponent, modulus):
    """Right-to-left binary modular exponentiation.

    Scans the exponent from its lowest bit, squaring the base every step and folding it into the result whenever
    the current bit is set. Textbook and not constant-time.

    Args:
        base: The base.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be non-zero.

    Returns:
        `base**exponent % modulus`, or 1 for a zero exponent.

    Raises:
        ValueError: If `exponent` is negative.
        ZeroDivisionError: If `modulus` is zero.
    """
    if exponent < 0:
        raise ValueError("exponent must be >= 0")
    out = 1
    base = base % modulus
    while exponent > 0:
        if exponent % 2 == 1:
            out = (out * base) % modulus
        base = (base * base) % modulus
        exponent = exponent // 2
    return out
