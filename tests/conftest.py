import math

import pytest

from petlib.bn import Bn

from zkrsa.rsa_key import RSASecretKey


# secp256k1 and NIST P-256 field primes, their product has exactly 512 bits.
FIXED_P = 2 ** 256 - 2 ** 32 - 977
FIXED_Q = 2 ** 256 - 2 ** 224 + 2 ** 192 + 2 ** 96 - 1
FIXED_E = 65537


def make_secret_key(key_length, e=65537):
    """Generate a key whose modulus has exactly ``key_length`` bits."""
    while True:
        p = Bn.get_prime(key_length // 2, safe=0)
        q = Bn.get_prime(key_length - key_length // 2, safe=0)
        if p == q or (p * q).num_bits() != key_length:
            continue
        if math.gcd(e, int((p - 1) * (q - 1))) != 1:
            continue
        return RSASecretKey(p, q, e)


@pytest.fixture(scope="session")
def key_factory():
    cache = {}

    def get_key(key_length):
        if key_length not in cache:
            cache[key_length] = make_secret_key(key_length)
        return cache[key_length]

    return get_key


@pytest.fixture(scope="session")
def fixed_key():
    return RSASecretKey(FIXED_P, FIXED_Q, FIXED_E)


@pytest.fixture
def context():
    return b"public string"
