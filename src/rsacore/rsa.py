"""Provides the RSA key types and the core encryption and decryption primitives.

Strictly "textbook" RSA: the message representative is exponentiated as-is, with no padding, encoding or
range validation. Keys are immutable named tuples, so a key pair unpacks straight into its public and private
halves.

Typical usage example:

    keys = gen_key_pair(61, 53)
    c = encrypt(50, keys.public)
    m = decrypt(c, keys)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from typing import Any, NamedTuple

from rsacore import util


class PublicKey(NamedTuple):
    """The public half of a key pair.

    Attributes:
        n: The modulus, product of the two primes.
        e: The public exponent, coprime to the totient of `n`.
    """
    n: Any
    e: Any

    def encrypt(self, data):
        """Encrypt `data` with this key. See `encrypt`."""
        return encrypt(data, self)


class PrivateKey(NamedTuple):
    """The private half of a key pair.

    Only holds the exponent, the modulus has to come from the matching public key.

    Attributes:
        d: The private exponent, inverse of the public exponent modulo the totient.
    """
    d: Any


class KeyPair(NamedTuple):
    """A public and private key produced together by a single generation call.

    Attributes:
        public: The public key.
        private: The matching private key.
    """
    public: PublicKey
    private: PrivateKey

    def encrypt(self, data):
        """Encrypt `data` with the public half. See `encrypt`."""
        return encrypt(data, self.public)

    def decrypt(self, data):
        """Decrypt `data` with this key pair. See `decrypt`."""
        return decrypt(data, self)


def encrypt(data, key: PublicKey):
    """Performs the RSA encryption primitive.

    Args:
        data: The integer message representative, expected in range [0, n-1].
        key: The public key to encrypt with.

    Returns:
        The ciphertext representative.
    """
    return util.mod_pow(data, key.e, key.n)


def decrypt(data, keys: tuple[PublicKey, PrivateKey]):
    """Performs the RSA decryption primitive.

    Needs the whole key pair, as the private key does not store the modulus.

    Args:
        data: The integer ciphertext representative.
        keys: The `KeyPair`, or any (public, private) pair that was generated together.

    Returns:
        The cleartext representative.
    """
    public, private = keys
    return util.mod_pow(data, private.d, public.n)
