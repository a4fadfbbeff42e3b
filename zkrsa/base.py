"""
Common pieces of the proofs: the proof transcript, parameter derivation and the Fiat-Shamir
challenge.
"""
import attr
import msgpack

from zkrsa.consts import PROOF_FORMAT_VERSION
from zkrsa.exceptions import DeserializationError, ParameterError
from zkrsa.utils.misc import ensure_bn, ensure_bytes, byte_length, round_up_to_byte
from zkrsa.utils.octets import (
    i2osp,
    os2ip,
    octet_length,
    combine,
    sha256,
    truncate_to_k_bits,
)


def get_security_params(k):
    """
    Round the security parameter up to whole bytes and derive the number of bases :math:`K`.

    >>> get_security_params(128)
    (128, 129)
    >>> get_security_params(121)
    (128, 129)

    Returns:
        tuple: Rounded :math:`k` and :math:`K = k + 1`.
    """
    if not isinstance(k, int) or isinstance(k, bool) or k <= 0:
        raise ParameterError("Security parameter must be a positive integer")
    k = round_up_to_byte(k)
    return k, k + 1


def build_fiat_shamir_challenge(pub_key, context, x_values, k, key_length):
    """
    Generate the Fiat-Shamir challenge :math:`w`.

    The challenge is ``SHA256(key || context || I2OSP(x_0) || ... || I2OSP(x_{K-1}))`` truncated to
    its :math:`k` low-order bits. Every :math:`x_i` is encoded on ``ceil(key_length / 8)`` bytes.

    >>> from zkrsa.rsa_key import RSAPublicKey
    >>> pk = RSAPublicKey(143, 7)
    >>> w = build_fiat_shamir_challenge(pk, b"ctx", [3, 5], 16, 8)
    >>> w < 2**16
    True

    Args:
        pub_key (:py:class:`zkrsa.rsa_key.RSAPublicKey`): Public key
        context: Context string
        x_values: Commitments :math:`x_i`, in index order
        k: Challenge length in bits
        key_length: Claimed bit length of the modulus

    Raises:
        EncodingError: If some :math:`x_i` does not fit in ``ceil(key_length / 8)`` bytes.
    """
    if x_values is None:
        raise TypeError("x_values cannot be None")

    x_len = byte_length(key_length)
    encoded_xs = combine(*[i2osp(x, x_len) for x in x_values])
    digest = sha256(combine(pub_key.to_bytes(), ensure_bytes(context), encoded_xs))
    return os2ip(truncate_to_k_bits(digest, k))


@attr.s
class PoupardSternProof:
    """
    Non-interactive Poupard-Stern proof.

    Unpacks as ``x_values, y = proof``.
    """

    x_values = attr.ib(converter=lambda xs: [ensure_bn(x) for x in xs])
    y = attr.ib(converter=ensure_bn)

    def __iter__(self):
        return iter((self.x_values, self.y))

    def serialize(self, key_length):
        """
        Pack the proof into bytes.

        Each :math:`x_i` is written on ``ceil(key_length / 8)`` bytes, the same width the challenge
        hashes, and :math:`y` on its minimal big-endian encoding.
        """
        x_len = byte_length(key_length)
        return msgpack.packb(
            [
                PROOF_FORMAT_VERSION,
                key_length,
                [i2osp(x, x_len) for x in self.x_values],
                i2osp(self.y, octet_length(self.y)),
            ],
            use_bin_type=True,
        )

    @classmethod
    def deserialize(cls, data, key_length):
        """
        Unpack a proof produced by :py:meth:`serialize`.

        Raises:
            DeserializationError: If the data is malformed or was made for another key length.
        """
        try:
            version, length, xs, y = msgpack.unpackb(data, raw=False)
        except (ValueError, TypeError, msgpack.UnpackException) as e:
            raise DeserializationError("Cannot unpack proof: {}".format(e))

        if version != PROOF_FORMAT_VERSION:
            raise DeserializationError("Unknown proof format {}".format(version))
        if length != key_length:
            raise DeserializationError(
                "Proof was made for {}-bit keys, expected {}".format(length, key_length)
            )
        if not isinstance(xs, list) or not isinstance(y, bytes):
            raise DeserializationError("Unexpected proof layout")

        x_len = byte_length(key_length)
        for x in xs:
            if not isinstance(x, bytes) or len(x) != x_len:
                raise DeserializationError("x values must be {} bytes long".format(x_len))

        return cls(x_values=[os2ip(x) for x in xs], y=os2ip(y))
