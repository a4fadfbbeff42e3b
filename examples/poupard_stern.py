"""
Proof that an RSA modulus is well-formed:
PK{ (phi): N has L bits and phi = phi(N) }
"""

from petlib.bn import Bn

from zkrsa import RSASecretKey, prove, verify

# Key generation happens elsewhere. Here, two 512-bit primes.
key_length = 1024
while True:
    p = Bn.get_prime(key_length // 2, safe=0)
    q = Bn.get_prime(key_length // 2, safe=0)
    if (p * q).num_bits() == key_length:
        break

secret_key = RSASecretKey(p, q, 65537)

# Both sides agree on a public string binding the proof to the application.
context = b"example application"

# The prover only needs the secret key.
x_values, y = prove(secret_key, key_length, context, k=128)

# The verifier only needs the public key.
assert verify(secret_key.public_key, x_values, y, key_length, context, k=128)

# A modified response is rejected.
assert not verify(secret_key.public_key, x_values, int(y) + 1, key_length, context, k=128)
