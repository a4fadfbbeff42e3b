"""
Protocol constants and tunables.
"""

# Security parameter k. Rounded up to a multiple of 8 before use.
DEFAULT_SECURITY_PARAMETER = 128

# First value of the disambiguating counter when sampling from Z_N^*.
SAMPLER_FIRST_COUNTER = 2

# Width in bytes of the MGF1 block counter.
MGF_COUNTER_LENGTH = 4

# Number of rejected candidates for one index after which the sampler warns.
SAMPLER_WARNING_THRESHOLD = 64

# Upper bound on proving attempts. Only reached if something is badly broken.
MAX_PROVING_ATTEMPTS = 4096

# Tag of the serialized proof format.
PROOF_FORMAT_VERSION = 1
