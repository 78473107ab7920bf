# pylint: disable=missing-module-docstring,redefined-outer-name
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import random

from cryptography.hazmat.primitives.asymmetric import rsa
import pytest
import sympy

import rsacore
from rsacore import rsa as rsac

standard_payload = 17092025232642
wiki_keys = rsac.KeyPair(rsac.PublicKey(3233, 17), rsac.PrivateKey(2753))


@pytest.fixture(scope="module", params=range(5))
def small_keys(request) -> rsac.KeyPair:
    return rsacore.gen_key_pair(61, 53, random.Random(request.param))


@pytest.fixture(scope="module", params=[1024, pytest.param(2048, marks=pytest.mark.slow)])
def crypto_key(request) -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=request.param)


def localize_keys(pk: rsa.RSAPrivateKey) -> rsac.KeyPair:
    privs = pk.private_numbers()
    pubs = pk.public_key().public_numbers()
    return rsac.KeyPair(rsac.PublicKey(pubs.n, pubs.e), rsac.PrivateKey(privs.d))


def test_encrypt_concrete():
    assert rsac.encrypt(65, wiki_keys.public) == 2790


def test_decrypt_concrete():
    assert rsac.decrypt(2790, wiki_keys) == 65


def test_roundtrip_concrete(small_keys):
    assert small_keys.public.n == 3233
    assert rsac.decrypt(rsac.encrypt(50, small_keys.public), small_keys) == 50


def test_roundtrip_whole_domain(small_keys):
    n = small_keys.public.n
    for m in range(n):
        assert rsac.decrypt(rsac.encrypt(m, small_keys.public), small_keys) == m


@pytest.mark.parametrize("offset", [0, 1, -1])
def test_roundtrip_boundaries(small_keys, offset):
    m = offset % small_keys.public.n
    assert rsac.decrypt(rsac.encrypt(m, small_keys.public), small_keys) == m


def test_decrypt_plain_tuple():
    public, private = wiki_keys
    assert rsac.decrypt(2790, (public, private)) == 65


def test_key_methods(small_keys):
    c = small_keys.public.encrypt(1234)
    assert c == small_keys.encrypt(1234)
    assert small_keys.decrypt(c) == 1234


def test_keys_immutable():
    with pytest.raises(AttributeError):
        wiki_keys.public.e = 3
    with pytest.raises(AttributeError):
        wiki_keys.private.d = 1


def test_encrypt_matches_builtin(crypto_key):
    keys = localize_keys(crypto_key)
    n, e = keys.public
    assert rsac.encrypt(standard_payload, keys.public) == pow(standard_payload, e, n)


def test_roundtrip_foreign_key(crypto_key):
    keys = localize_keys(crypto_key)
    assert keys.decrypt(keys.encrypt(standard_payload)) == standard_payload
    top = keys.public.n - 1
    assert keys.decrypt(keys.encrypt(top)) == top


def test_roundtrip_generated_large(crypto_key):
    privs = crypto_key.private_numbers()
    keys = rsacore.gen_key_pair(privs.p, privs.q, random.Random(privs.p))
    assert keys.decrypt(keys.encrypt(standard_payload)) == standard_payload


def test_roundtrip_sympy_integers():
    keys = rsacore.gen_key_pair(sympy.Integer(61), sympy.Integer(53), random.Random(3))
    c = rsac.encrypt(sympy.Integer(50), keys.public)
    assert isinstance(c, sympy.Integer)
    assert rsac.decrypt(c, keys) == 50


def test_public_surface():
    for name in rsacore.__all__:
        assert hasattr(rsacore, name)
