"""
Complete setup proof: the Poupard-Stern proof composed with a permutation test.

The Poupard-Stern proof shows the prover knows :math:`\\varphi(N)`. The permutation test shows
that a small prime :math:`\\alpha` does not divide :math:`\\varphi(N)`, so that the RSA function
is a permutation. The permutation test is provided by the caller through the
:py:class:`PermutationTest` interface.
"""
import abc

import attr

from zkrsa.base import PoupardSternProof
from zkrsa.consts import DEFAULT_SECURITY_PARAMETER
from zkrsa.primitives.poupard_stern import PoupardSternStmt
from zkrsa.exceptions import ParameterError


class PermutationTest(metaclass=abc.ABCMeta):
    """
    Interface of a permutation-test proof system.
    """

    @abc.abstractmethod
    def prove(self, secret_key, small_prime, context):
        """Build a proof that ``small_prime`` does not divide the group order."""

    @abc.abstractmethod
    def verify(self, public_key, proof, small_prime, key_length, context):
        """
        Check a proof.

        Returns:
            bool: True if the proof is valid.
        """

    @abc.abstractmethod
    def check_candidate(self, small_prime, modulus):
        """
        Check ``small_prime`` is usable with ``modulus``.

        Returns:
            bool: True if the candidate is acceptable.
        """


@attr.s
class SetupProof:
    """
    Poupard-Stern proof and permutation-test proof for the same key and context.
    """

    poupard_stern = attr.ib(validator=attr.validators.instance_of(PoupardSternProof))
    permutation = attr.ib()


def prove_setup(
    secret_key,
    key_length,
    context,
    permutation_test,
    small_prime,
    k=DEFAULT_SECURITY_PARAMETER,
):
    """
    Prove the key was honestly generated.

    Args:
        secret_key (:py:class:`zkrsa.rsa_key.RSASecretKey`): Key to prove
        key_length: Claimed bit length of the modulus
        context: Public string binding the proof to an application
        permutation_test (:py:class:`PermutationTest`): Permutation-test proof system
        small_prime: Small prime :math:`\\alpha` for the permutation test
        k: Security parameter of the Poupard-Stern proof

    Raises:
        ParameterError: If the small prime is rejected for this modulus, or the Poupard-Stern
            parameters are unusable.
    """
    if not permutation_test.check_candidate(small_prime, secret_key.modulus):
        raise ParameterError(
            "Small prime {} is not usable with this modulus".format(small_prime)
        )

    stmt = PoupardSternStmt(secret_key.public_key, key_length, context, k)
    return SetupProof(
        poupard_stern=stmt.prove(secret_key),
        permutation=permutation_test.prove(secret_key, small_prime, stmt.context),
    )


def verify_setup(
    public_key,
    proof,
    key_length,
    context,
    permutation_test,
    small_prime,
    k=DEFAULT_SECURITY_PARAMETER,
):
    """
    Verify a :py:class:`SetupProof`.

    Both sub-proofs have to pass. Malformed input yields False.
    """
    if not isinstance(proof, SetupProof):
        return False

    try:
        stmt = PoupardSternStmt(public_key, key_length, context, k)
    except (ParameterError, TypeError):
        return False

    if not stmt.verify(proof.poupard_stern):
        return False
    return bool(
        permutation_test.verify(
            public_key, proof.permutation, small_prime, key_length, stmt.context
        )
    )
