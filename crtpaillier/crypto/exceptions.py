"""
Exceptions raised by the Paillier primitives.

Input-validation errors also derive from ValueError so callers can handle
them generically; key generation and entropy faults derive from RuntimeError.
"""


class PaillierError(Exception):
    """Base exception for Paillier-related errors."""

    pass


class InvalidKeySize(PaillierError, ValueError):
    """Requested key size cannot yield two distinct primes of adequate width."""

    pass


class PlaintextOutOfRange(PaillierError, ValueError):
    """Plaintext is not in [0, n)."""

    pass


class CiphertextOutOfRange(PaillierError, ValueError):
    """Ciphertext is not in [0, n^2)."""

    pass


class KeyGenerationError(PaillierError, RuntimeError):
    """
    A modular inverse that must exist for distinct primes was missing.

    Signals an internal defect; it is never retried.
    """

    pass


class RandomnessUnavailable(PaillierError, RuntimeError):
    """The random source failed or a bounded sampling loop was exhausted."""

    pass


class KeyFormatError(PaillierError, ValueError):
    """Serialized key material is missing, malformed or inconsistent."""

    pass
