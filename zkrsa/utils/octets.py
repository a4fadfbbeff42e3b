"""
Octet-string primitives in the style of PKCS#1 (RFC 8017).

All integers are big-endian and unsigned. The order in which byte strings are concatenated is part
of the protocol, prover and verifier have to feed the hash functions exactly the same bytes.

>>> os2ip(i2osp(1025, 4)) == 1025
True
"""
from hashlib import sha256 as _sha256

from petlib.bn import Bn

from zkrsa.consts import MGF_COUNTER_LENGTH
from zkrsa.exceptions import EncodingError
from zkrsa.utils.misc import ensure_bn, byte_length


def i2osp(value, length):
    """
    Encode a non-negative integer into exactly ``length`` big-endian bytes.

    >>> i2osp(1, 2)
    b'\\x00\\x01'
    >>> i2osp(0, 0)
    b''

    Args:
        value: Integer or :py:class:`petlib.bn.Bn`
        length: Output length in bytes

    Raises:
        EncodingError: If the value is negative or does not fit.
    """
    value = ensure_bn(value)
    if value < 0:
        raise EncodingError("Cannot encode negative integer {}".format(value))
    if octet_length(value) > length:
        raise EncodingError(
            "Integer too large to encode in {} octets".format(length)
        )
    raw = value.binary() if value > 0 else b""
    return b"\x00" * (length - len(raw)) + raw


def os2ip(data):
    """
    Interpret bytes as a big-endian non-negative integer.

    >>> int(os2ip(b"\\x01\\x00"))
    256
    >>> int(os2ip(b""))
    0
    """
    if len(data) == 0:
        return Bn(0)
    return Bn.from_binary(bytes(data))


def octet_length(value):
    """
    Smallest number of bytes able to represent ``value``.

    >>> [octet_length(v) for v in (0, 1, 255, 256)]
    [0, 1, 1, 2]
    """
    return byte_length(ensure_bn(value).num_bits())


def combine(*parts):
    """
    Concatenate byte strings in the order given.

    >>> combine(b"ab", b"", b"c")
    b'abc'
    """
    return b"".join(bytes(part) for part in parts)


def sha256(data):
    """One-shot SHA-256 digest."""
    return _sha256(data).digest()


def mgf1_sha256(seed, bit_length):
    """
    Stretch ``seed`` to ``ceil(bit_length / 8)`` pseudorandom bytes with MGF1 over SHA-256.

    Block ``i`` is ``SHA256(seed || I2OSP(i, 4))``, blocks are concatenated and the result is cut
    to the requested length.

    >>> out = mgf1_sha256(b"seed", 1024)
    >>> len(out)
    128
    >>> out[:32] == sha256(b"seed" + b"\\x00\\x00\\x00\\x00")
    True
    """
    length = byte_length(bit_length)
    output = b""
    counter = 0
    while len(output) < length:
        output += sha256(combine(seed, i2osp(counter, MGF_COUNTER_LENGTH)))
        counter += 1
    return output[:length]


def truncate_to_k_bits(data, k):
    """
    Keep only the ``k`` low-order bits of a big-endian byte string.

    The result has ``ceil(k / 8)`` bytes, with the bits above ``k`` cleared.

    >>> truncate_to_k_bits(b"\\xff\\xff\\xff", 12)
    b'\\x0f\\xff'
    >>> truncate_to_k_bits(b"\\x01\\x02\\x03", 16)
    b'\\x02\\x03'
    """
    length = byte_length(k)
    if len(data) < length:
        data = b"\x00" * (length - len(data)) + data
    truncated = bytearray(data[len(data) - length :])
    extra_bits = length * 8 - k
    if truncated and extra_bits:
        truncated[0] &= 0xFF >> extra_bits
    return bytes(truncated)
