"""
Sending a proof and a public key as bytes.
"""

from petlib.bn import Bn

from zkrsa import RSASecretKey, RSAPublicKey, PoupardSternStmt, PoupardSternProof

key_length = 768
while True:
    p = Bn.get_prime(key_length // 2, safe=0)
    q = Bn.get_prime(key_length // 2, safe=0)
    if (p * q).num_bits() == key_length:
        break

secret_key = RSASecretKey(p, q, 65537)

# Prover side.
stmt = PoupardSternStmt(secret_key.public_key, key_length, b"transport example", k=80)
proof = stmt.prove(secret_key)
key_bytes = secret_key.public_key.to_bytes()
proof_bytes = proof.serialize(key_length)

# Verifier side.
public_key = RSAPublicKey.from_bytes(key_bytes)
received = PoupardSternProof.deserialize(proof_bytes, key_length)
stmt = PoupardSternStmt(public_key, key_length, b"transport example", k=80)
assert stmt.verify(received)
