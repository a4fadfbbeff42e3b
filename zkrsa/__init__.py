__version__ = "0.1.0"
__title__ = "zkrsa"
__author__ = "Wouter Lueks, Bogdan Kulynych"
__email__ = "wouter.lueks@epfl.ch"
__url__ = "https://github.com/spring-epfl/zkrsa"
__license__ = "MIT"
__description__ = "Non-interactive zero-knowledge proofs that an RSA modulus was honestly generated."
__copyright__ = "2020, Wouter Lueks, Bogdan Kulynych (EPFL SPRING Lab)"


from zkrsa.rsa_key import RSASecretKey, RSAPublicKey
from zkrsa.base import PoupardSternProof
from zkrsa.primitives.poupard_stern import PoupardSternStmt, prove, verify
