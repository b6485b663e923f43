"""Shared pytest fixtures for the crtpaillier test suite."""

import pytest

from crtpaillier.crypto import PrivateKey, generate_key_pair


class StuckRandom:
    """Random source that returns the same bits forever."""

    def __init__(self, value: int = 0):
        self.value = value

    def getrandbits(self, bits: int) -> int:
        return self.value & ((1 << bits) - 1)


class BrokenRandom:
    """Random source whose entropy pool is gone."""

    def getrandbits(self, bits: int) -> int:
        raise OSError("entropy source unavailable")


@pytest.fixture(scope="session")
def key_pair():
    """A 256-bit key pair shared across the session."""
    return generate_key_pair(256)


@pytest.fixture(scope="session")
def toy_private_key():
    """Private key for the primes p=7, q=11 (n=77)."""
    return PrivateKey.from_primes(7, 11)


@pytest.fixture()
def stuck_rng():
    """Factory for a random source stuck on one value."""
    return StuckRandom


@pytest.fixture()
def broken_rng():
    return BrokenRandom()
