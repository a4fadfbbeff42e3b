"""
Deterministic sampling of elements of :math:`\\mathbb{Z}_N^*`.

Both sides of a proof derive the same bases from public data only: the public key, the context
string and an index. No randomness is involved.
"""
import math
import warnings

from zkrsa.consts import SAMPLER_FIRST_COUNTER, SAMPLER_WARNING_THRESHOLD
from zkrsa.exceptions import SamplingWarning
from zkrsa.utils.misc import ensure_bytes
from zkrsa.utils.octets import i2osp, os2ip, octet_length, combine, mgf1_sha256


def sample_from_zn_star(pub_key, context, index, big_k, key_length):
    """
    Hash public data to a unit modulo :math:`N`.

    The hash input is ``key || context || I2OSP(index) || I2OSP(j)``, stretched to ``key_length``
    bits with MGF1. The counter :math:`j` starts at 2 and is incremented until the candidate is
    smaller than :math:`N` and coprime to it.

    >>> from zkrsa.rsa_key import RSAPublicKey
    >>> pk = RSAPublicKey(143, 7)
    >>> z = sample_from_zn_star(pk, b"ctx", 0, 17, 8)
    >>> 0 < z < 143 and math.gcd(int(z), 143) == 1
    True
    >>> z == sample_from_zn_star(pk, b"ctx", 0, 17, 8)
    True

    Args:
        pub_key (:py:class:`zkrsa.rsa_key.RSAPublicKey`): Public key
        context: Context string binding the proof to an application
        index: Index :math:`i` of the element, in :math:`[0, K)`
        big_k: Number of elements :math:`K`, fixes the width of the index encoding
        key_length: Claimed bit length of the modulus
    """
    modulus = pub_key.modulus
    encoded_index = i2osp(index, octet_length(big_k))
    prefix = combine(pub_key.to_bytes(), ensure_bytes(context), encoded_index)

    j = SAMPLER_FIRST_COUNTER
    while True:
        encoded_j = i2osp(j, octet_length(j))
        candidate = os2ip(mgf1_sha256(combine(prefix, encoded_j), key_length))
        if candidate < modulus and math.gcd(int(candidate), int(modulus)) == 1:
            return candidate

        if j - SAMPLER_FIRST_COUNTER + 1 == SAMPLER_WARNING_THRESHOLD:
            warnings.warn(
                "Rejected {} candidates for index {}, is the modulus well-formed?".format(
                    SAMPLER_WARNING_THRESHOLD, index
                ),
                SamplingWarning,
            )
        j += 1


def make_bases(pub_key, context, big_k, key_length):
    """
    Sample the :math:`K` public bases :math:`z_0, ..., z_{K-1}`.

    Args:
        pub_key (:py:class:`zkrsa.rsa_key.RSAPublicKey`): Public key
        context: Context string
        big_k: Number of bases
        key_length: Claimed bit length of the modulus
    """
    return [
        sample_from_zn_star(pub_key, context, i, big_k, key_length)
        for i in range(big_k)
    ]
