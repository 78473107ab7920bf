"""Textbook RSA arithmetic in an Academic Sense.

Provides RSA key pair generation from two supplied primes, encryption and decryption by modular exponentiation.
Furthermore, exposes the number-theoretic primitives under-the-hood. All of it works on any integer-like type,
not just `int`.

Typical usage example:

    keys = gen_key_pair(61, 53)
    c = encrypt(50, keys.public)
    r = decrypt(c, keys)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsacore.keygen import check_key_pair
from rsacore.keygen import DEFAULT_MAX_ATTEMPTS
from rsacore.keygen import gen_key_pair
from rsacore.keygen import KeyGenerationExhausted
from rsacore.keygen import RandomSource
from rsacore.keygen import totient
from rsacore.rsa import decrypt
from rsacore.rsa import encrypt
from rsacore.rsa import KeyPair
from rsacore.rsa import PrivateKey
from rsacore.rsa import PublicKey
from rsacore.util import gcd
from rsacore.util import mod_mult_inv
from rsacore.util import mod_pow

__version__ = "0.0.1"
__all__ = [
    "KeyPair",
    "PublicKey",
    "PrivateKey",
    "RandomSource",
    "KeyGenerationExhausted",
    "DEFAULT_MAX_ATTEMPTS",
    "gen_key_pair",
    "check_key_pair",
    "totient",
    "encrypt",
    "decrypt",
    "gcd",
    "mod_mult_inv",
    "mod_pow",
]
