"""
Minimal RSA key model used by the proofs.

Keys are built elsewhere. Here we only wrap the values the proofs need: the two secret primes, the
public exponent, and the modulus :math:`N = p q` derived from them.

>>> sk = RSASecretKey(p=11, q=13, e=7)
>>> pk = sk.public_key
>>> int(pk.modulus), int(pk.exponent)
(143, 7)
>>> RSAPublicKey.from_bytes(pk.to_bytes()) == pk
True
"""
import attr
import msgpack

from petlib.pack import encode, register_coders

from zkrsa.exceptions import ParameterError, DeserializationError
from zkrsa.utils.misc import ensure_bn
from zkrsa.utils.octets import os2ip


RSA_PUBLIC_KEY_EXT_TYPE = 20


@attr.s(frozen=True)
class RSAPublicKey:
    """
    Public RSA key :math:`(N, e)`.

    Args:
        modulus: The modulus :math:`N`
        exponent: The public exponent :math:`e`
    """

    modulus = attr.ib(converter=ensure_bn)
    exponent = attr.ib(converter=ensure_bn)

    @property
    def num_bits(self):
        """Bit length of the modulus."""
        return self.modulus.num_bits()

    def to_bytes(self):
        """
        Canonical encoding of the key, used as hash input.

        Prover and verifier must hash the very same bytes, so this never changes for a given key.
        """
        return encode(self)

    @classmethod
    def from_bytes(cls, data):
        """
        Decode a key produced by :py:meth:`to_bytes`.

        Raises:
            DeserializationError: If the data does not encode a public key.
        """
        try:
            key = msgpack.unpackb(data, ext_hook=_ext_hook, raw=False)
        except (ValueError, TypeError, msgpack.UnpackException) as e:
            raise DeserializationError("Cannot unpack public key: {}".format(e))
        if not isinstance(key, cls):
            raise DeserializationError("Data does not encode an RSA public key")
        return key


@attr.s(frozen=True)
class RSASecretKey:
    """
    Secret RSA key :math:`(p, q, e)`.

    That :math:`p` and :math:`q` are primes and that :math:`e` is invertible modulo
    :math:`\\varphi(N)` is the caller's responsibility.

    Args:
        p: First prime
        q: Second prime
        e: Public exponent
    """

    p = attr.ib(converter=ensure_bn)
    q = attr.ib(converter=ensure_bn)
    e = attr.ib(converter=ensure_bn)

    @q.validator
    def _check_distinct(self, attribute, value):
        if value == self.p:
            raise ParameterError("RSA primes must be distinct")

    @property
    def modulus(self):
        return self.p * self.q

    @property
    def phi(self):
        """Euler's totient :math:`(p - 1)(q - 1)`."""
        return (self.p - 1) * (self.q - 1)

    @property
    def num_bits(self):
        return self.modulus.num_bits()

    @property
    def public_key(self):
        return RSAPublicKey(self.modulus, self.e)


def enc_RSAPublicKey(obj):
    return msgpack.packb((obj.modulus.binary(), obj.exponent.binary()), use_bin_type=True)


def dec_RSAPublicKey(data):
    modulus, exponent = msgpack.unpackb(data, raw=False)
    if not isinstance(modulus, bytes) or not isinstance(exponent, bytes):
        raise ValueError("Key components must be bytes")
    return RSAPublicKey(os2ip(modulus), os2ip(exponent))


def _ext_hook(code, data):
    if code == RSA_PUBLIC_KEY_EXT_TYPE:
        return dec_RSAPublicKey(data)
    return msgpack.ExtType(code, data)


register_coders(
    RSAPublicKey, RSA_PUBLIC_KEY_EXT_TYPE, enc_RSAPublicKey, dec_RSAPublicKey
)
