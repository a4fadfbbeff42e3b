"""
Common exception and warning classes.
"""


class EncodingError(ValueError):
    """Integer cannot be represented in the requested number of octets."""


class ParameterError(ValueError):
    """Key or protocol parameters are unusable, the proof cannot be built."""


class ValidationError(Exception):
    """Error during validation."""


class ProvingError(Exception):
    """Proving loop gave up without an acceptable response."""


class ProvingTimeout(ProvingError):
    """Caller deadline passed before a proof was found."""


class DeserializationError(ValueError):
    """Serialized proof is malformed."""


class SamplingWarning(UserWarning):
    """Unusually many candidates rejected while sampling from Z_N^*."""


class ProvingWarning(UserWarning):
    """Unusually many proving attempts."""
