r"""
Poupard-Stern proof of knowledge of :math:`\varphi(N)`.

The prover convinces the verifier that the RSA modulus :math:`N` has the claimed bit length
:math:`L` and that it knows the totient of :math:`N`, without revealing the factorization.

For :math:`K = k + 1` public bases :math:`z_i \in \mathbb{Z}_N^*`, the prover picks a random
:math:`r < 2^{L-1}`, commits to :math:`x_i = z_i^r \bmod N`, derives the challenge :math:`w` from
the commitments and answers :math:`y = r + (N - \varphi(N)) w`. The verifier recomputes
:math:`w` and checks :math:`z_i^{y - N w} = x_i` for every :math:`i`. Since
:math:`z_i^{\varphi(N)} = 1`, an honest transcript always passes.

See "Short Proofs of Knowledge for Factoring" by Poupard and Stern, PKC 2000, and the setup
protocol of TumbleBit.

Example:

>>> from zkrsa.rsa_key import RSASecretKey
>>> from petlib.bn import Bn
>>> sk = RSASecretKey(Bn.get_prime(256), Bn.get_prime(256), 65537)
>>> stmt = PoupardSternStmt(sk.public_key, sk.num_bits, b"public string", k=16)
>>> proof = stmt.prove(sk)
>>> stmt.verify(proof)
True

"""
import time
import warnings
from collections.abc import Sequence

from petlib.bn import Bn

from zkrsa.base import PoupardSternProof, build_fiat_shamir_challenge, get_security_params
from zkrsa.consts import DEFAULT_SECURITY_PARAMETER, MAX_PROVING_ATTEMPTS
from zkrsa.exceptions import (
    ParameterError,
    ValidationError,
    ProvingError,
    ProvingTimeout,
    ProvingWarning,
)
from zkrsa.rsa_key import RSAPublicKey
from zkrsa.utils import ensure_bn, ensure_bytes, get_random_num
from zkrsa.utils.groups import sample_from_zn_star, make_bases


def _mod_pow(base, exponent, modulus):
    if exponent < 0:
        return pow(base.mod_inverse(modulus), -exponent, modulus)
    return pow(base, exponent, modulus)


def _to_bn(value):
    if isinstance(value, bool) or not isinstance(value, (int, Bn)):
        raise ValidationError("Expected an integer, got {}".format(type(value).__name__))
    try:
        return ensure_bn(value)
    except Exception as e:
        # petlib reports conversion failures as a bare Exception
        raise ValidationError("Cannot convert {}: {}".format(type(value).__name__, e))


class PoupardSternStmt:
    """
    Proof statement: the modulus of ``pub_key`` has ``key_length`` bits and the prover knows its
    totient.

    Args:
        pub_key (:py:class:`zkrsa.rsa_key.RSAPublicKey`): Public key the proof is about
        key_length: Claimed bit length :math:`L` of the modulus
        context: Public string binding the proof to an application
        k: Security parameter, rounded up to a multiple of 8
    """

    def __init__(self, pub_key, key_length, context, k=DEFAULT_SECURITY_PARAMETER):
        if not isinstance(pub_key, RSAPublicKey):
            raise TypeError("Expected an RSAPublicKey. Got: {}".format(pub_key))
        if not isinstance(key_length, int) or isinstance(key_length, bool) or key_length < 2:
            raise ParameterError("Invalid key length {}".format(key_length))

        self.pub_key = pub_key
        self.key_length = key_length
        self.context = ensure_bytes(context)
        self.k, self.big_k = get_security_params(k)

        # 2^{L-1} <= N < 2^L
        self.lower_limit = Bn(2).pow(key_length - 1)
        self.upper_limit = Bn(2).pow(key_length)

    @property
    def modulus(self):
        return self.pub_key.modulus

    def bases(self):
        """Sample the public bases :math:`z_0, ..., z_{K-1}`."""
        return make_bases(self.pub_key, self.context, self.big_k, self.key_length)

    def challenge(self, x_values):
        return build_fiat_shamir_challenge(
            self.pub_key, self.context, x_values, self.k, self.key_length
        )

    def check_parameters(self, secret_key):
        """
        Check the key can be proven at this security level.

        Returns:
            :math:`\\delta = N - \\varphi(N)`

        Raises:
            ParameterError: If the key does not match the statement, the modulus does not have
                exactly ``key_length`` bits, or :math:`\\delta` is too large for :math:`k`.
        """
        if secret_key.public_key != self.pub_key:
            raise ParameterError("Secret key does not match the public key")

        modulus = self.modulus
        if modulus < self.lower_limit or modulus >= self.upper_limit:
            raise ParameterError("Bad RSA modulus N")
        if modulus.num_bits() != self.key_length:
            raise ParameterError("Bad RSA P and Q")

        delta = modulus - secret_key.phi

        # 2^{L-1} / ((N - phi) 2^k) must exceed 2^k
        bound = 2 ** self.k
        if int(self.lower_limit) // (int(delta) * bound) <= bound:
            raise ParameterError(
                "Modulus too short for security parameter k={}".format(self.k)
            )
        return delta

    def prove(self, secret_key, deadline=None, max_attempts=None):
        """
        Construct a non-interactive proof.

        Args:
            secret_key (:py:class:`zkrsa.rsa_key.RSASecretKey`): Factorization of the modulus
            deadline: Optional :py:func:`time.monotonic` timestamp after which to give up
            max_attempts: Optional override of :py:data:`zkrsa.consts.MAX_PROVING_ATTEMPTS`

        Returns:
            :py:class:`zkrsa.base.PoupardSternProof`

        Raises:
            ParameterError: If the key cannot be proven with these parameters.
            ProvingTimeout: If the deadline passed.
            ProvingError: If no acceptable response was found within ``max_attempts``.
        """
        delta = self.check_parameters(secret_key)
        if max_attempts is None:
            max_attempts = MAX_PROVING_ATTEMPTS

        modulus = self.modulus
        z_values = self.bases()

        for attempt in range(1, max_attempts + 1):
            if deadline is not None and time.monotonic() > deadline:
                raise ProvingTimeout("Deadline passed after {} attempts".format(attempt - 1))

            r = get_random_num(self.key_length - 1)
            x_values = [pow(z, r, modulus) for z in z_values]
            w = self.challenge(x_values)

            # No modular reduction here, y is checked against 2^{L-1}.
            y = r + delta * w
            if 0 <= y < self.lower_limit:
                return PoupardSternProof(x_values=x_values, y=y)

            if attempt == max_attempts // 4:
                warnings.warn(
                    "No acceptable response after {} attempts".format(attempt),
                    ProvingWarning,
                )

        raise ProvingError("No acceptable response after {} attempts".format(max_attempts))

    def validate(self, proof):
        """
        Check the proof values are well-formed before doing any exponentiation.

        Returns:
            tuple: The :math:`x_i` and :math:`y` as big numbers.

        Raises:
            ValidationError: If any check fails.
        """
        try:
            x_values, y = proof
        except (TypeError, ValueError):
            raise ValidationError("Proof must unpack to (x_values, y)")

        y = _to_bn(y)
        if y < 0 or y >= self.lower_limit:
            raise ValidationError("y out of range")

        modulus = self.modulus
        if modulus < self.lower_limit or modulus >= self.upper_limit:
            raise ValidationError("Modulus does not have {} bits".format(self.key_length))

        if (
            not isinstance(x_values, Sequence)
            or isinstance(x_values, (str, bytes, bytearray))
            or len(x_values) != self.big_k
        ):
            raise ValidationError("Expected {} x values".format(self.big_k))

        x_values = [_to_bn(x) for x in x_values]
        for x in x_values:
            if x <= 0 or x >= modulus:
                raise ValidationError("x value out of range")

        return x_values, y

    def verify(self, proof):
        """
        Verify a non-interactive proof.

        Args:
            proof: :py:class:`zkrsa.base.PoupardSternProof` or a pair ``(x_values, y)``

        Returns:
            bool: True if verification succeeded, False otherwise. Never raises on malformed
            proofs.
        """
        try:
            x_values, y = self.validate(proof)
        except ValidationError:
            return False

        modulus = self.modulus
        w = self.challenge(x_values)

        # The verifier does not know phi(N), so it uses N: y - N w = r - phi(N) w.
        r_prime = y - modulus * w

        for i, x in enumerate(x_values):
            z = sample_from_zn_star(
                self.pub_key, self.context, i, self.big_k, self.key_length
            )
            if _mod_pow(z, r_prime, modulus) != x:
                return False
        return True


def prove(secret_key, key_length, context, k=DEFAULT_SECURITY_PARAMETER, deadline=None):
    """
    Prove that the modulus of ``secret_key`` is well-formed.

    >>> from zkrsa.rsa_key import RSASecretKey
    >>> sk = RSASecretKey(11, 13, 7)
    >>> prove(sk, 8, b"ctx", k=8)
    Traceback (most recent call last):
    ...
    zkrsa.exceptions.ParameterError: Modulus too short for security parameter k=8

    Returns:
        :py:class:`zkrsa.base.PoupardSternProof`, unpackable as ``x_values, y``.
    """
    stmt = PoupardSternStmt(secret_key.public_key, key_length, context, k)
    return stmt.prove(secret_key, deadline=deadline)


def verify(public_key, x_values, y, key_length, context, k=DEFAULT_SECURITY_PARAMETER):
    """
    Verify a Poupard-Stern proof.

    Returns:
        bool: True if the proof is valid. Malformed input yields False, never an exception.
    """
    try:
        stmt = PoupardSternStmt(public_key, key_length, context, k)
    except (ParameterError, TypeError):
        return False
    return stmt.verify((x_values, y))
