"""Key pair generation from a pair of caller-supplied primes.

Derives the modulus and totient, draws a random public exponent coprime to the totient and inverts it to get the
private exponent. Primality of the inputs is taken on trust, as is the quality of the randomness source.

Typical usage example:

    keys = gen_key_pair(61, 53)
    keys = gen_key_pair(p, q, random.Random(1337), max_attempts=50)
    check_key_pair(keys, 61, 53)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import secrets
from typing import Protocol
import warnings

from rsacore import util
from rsacore.rsa import KeyPair
from rsacore.rsa import PrivateKey
from rsacore.rsa import PublicKey

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS: int = 1000


class RandomSource(Protocol):
    """Anything able to sample uniformly from a half-open range, such as `random.Random`."""

    def randrange(self, start, stop):
        ...


class KeyGenerationExhausted(RuntimeError):
    """Raised when no usable public exponent was drawn within the allowed number of attempts.

    Attributes:
        attempts: The number of candidates drawn and rejected.
    """

    def __init__(self, attempts: int) -> None:
        super().__init__(f"No public exponent coprime to the totient found in {attempts} attempts. "
                         "Check the random number generator.")
        self.attempts = attempts


def totient(p, q):
    """Euler's totient of `p*q`, assuming both are distinct primes."""
    return (p - 1) * (q - 1)


def _draw_public_exponent(phi, rng: RandomSource, max_attempts: int):
    """Rejection-samples a public exponent.

    Args:
        phi: The totient. Must be > 2.
        rng: Randomness source to draw candidates from.
        max_attempts: Maximum number of candidates to draw.

    Returns:
        A value `e` with 1 < e < phi and gcd(phi, e) == 1.

    Raises:
        KeyGenerationExhausted: If every one of the `max_attempts` candidates was rejected.
    """
    for attempt in range(1, max_attempts + 1):
        e = rng.randrange(2, phi)
        if util.gcd(phi, e) == 1:
            logger.debug("Public exponent accepted after %d draw(s).", attempt)
            return e
    raise KeyGenerationExhausted(max_attempts)


def gen_key_pair(p, q, rng: RandomSource | None = None, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> KeyPair:
    """Generates an RSA key pair from two primes.

    The public exponent is drawn uniformly from the open interval (1, phi) until one coprime to phi turns up,
    the private exponent is then its inverse modulo phi, normalized into [0, phi).

    Args:
        p: The first prime. Not verified.
        q: The second prime. Not verified.
        rng: Randomness source providing `randrange(start, stop)`. Defaults to a fresh `secrets.SystemRandom()`.
        max_attempts: Maximum number of public exponent candidates to draw. Defaults to `DEFAULT_MAX_ATTEMPTS`.

    Returns:
        The generated `KeyPair`.

    Raises:
        ValueError: If the totient leaves no room for a public exponent or `max_attempts` is < 1.
        KeyGenerationExhausted: If no usable public exponent was drawn in time.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")
    if p == q:
        warnings.warn("p and q are equal, the resulting key will not be valid RSA.", RuntimeWarning)
    if rng is None:
        rng = secrets.SystemRandom()
    n = p * q
    phi = totient(p, q)
    if phi <= 2:
        raise ValueError("Totient must be > 2 to allow for a public exponent")
    logger.debug("Generating key pair for a %d-bit modulus.", int(n).bit_length())
    e = _draw_public_exponent(phi, rng, max_attempts)
    d = util.mod_mult_inv(phi, e)
    if d < 0:
        d = d + phi
    return KeyPair(PublicKey(n, e), PrivateKey(d))


def check_key_pair(keys: tuple[PublicKey, PrivateKey], p, q) -> bool:
    """Checks a key pair against the primes it was supposedly generated from.

    Args:
        keys: The key pair to check.
        p: The first prime.
        q: The second prime.

    Returns:
        True if the modulus matches and both exponents satisfy the key invariants, False otherwise.
    """
    (n, e), (d,) = keys
    phi = totient(p, q)
    if n != p * q:
        return False
    if not 1 < e < phi or util.gcd(e, phi) != 1:
        return False
    return 0 <= d < phi and (d * e) % phi == 1
