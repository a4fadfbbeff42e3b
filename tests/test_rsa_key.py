import pytest

from petlib.bn import Bn

from zkrsa.exceptions import ParameterError, DeserializationError
from zkrsa.rsa_key import RSASecretKey, RSAPublicKey


def test_public_key_from_secret_key():
    sk = RSASecretKey(11, 13, 7)
    pk = sk.public_key
    assert pk.modulus == 143
    assert pk.exponent == 7
    assert sk.phi == 120


def test_values_become_bn():
    sk = RSASecretKey(11, 13, 7)
    assert isinstance(sk.p, Bn)
    assert isinstance(sk.public_key.modulus, Bn)


def test_num_bits(fixed_key):
    assert fixed_key.num_bits == 512
    assert fixed_key.public_key.num_bits == 512


def test_equal_primes_rejected():
    with pytest.raises(ParameterError):
        RSASecretKey(11, 11, 7)


def test_keys_are_immutable():
    pk = RSAPublicKey(143, 7)
    with pytest.raises(AttributeError):
        pk.modulus = Bn(15)


def test_encoding_is_canonical(fixed_key):
    pk1 = fixed_key.public_key
    pk2 = RSAPublicKey(int(pk1.modulus), int(pk1.exponent))
    assert pk1.to_bytes() == pk2.to_bytes()


def test_encoding_depends_on_exponent():
    assert RSAPublicKey(143, 7).to_bytes() != RSAPublicKey(143, 17).to_bytes()


def test_encoding_round_trip(fixed_key):
    pk = fixed_key.public_key
    assert RSAPublicKey.from_bytes(pk.to_bytes()) == pk


def test_decoding_wrong_type():
    from petlib.pack import encode

    with pytest.raises(DeserializationError):
        RSAPublicKey.from_bytes(encode([1, 2]))


def test_int_primes_above_machine_size():
    p = 2 ** 256 - 2 ** 32 - 977
    q = 2 ** 256 - 2 ** 224 + 2 ** 192 + 2 ** 96 - 1
    sk = RSASecretKey(p, q, 65537)
    assert int(sk.modulus) == p * q
    assert int(sk.phi) == (p - 1) * (q - 1)


def test_large_public_exponent():
    pk = RSAPublicKey(2 ** 127 - 1, 2 ** 80 + 1)
    assert RSAPublicKey.from_bytes(pk.to_bytes()) == pk


@pytest.mark.parametrize("data", [b"", b"\xc1", b"\x92\x01\x02", 42, None])
def test_decoding_garbage(data):
    with pytest.raises(DeserializationError):
        RSAPublicKey.from_bytes(data)


def test_decoding_bad_key_payload():
    import msgpack

    data = msgpack.packb(msgpack.ExtType(20, msgpack.packb([1, 2])))
    with pytest.raises(DeserializationError):
        RSAPublicKey.from_bytes(data)
