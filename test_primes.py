import random

import pytest

from crtpaillier.config import CryptoConfig
from crtpaillier.crypto import (
    InvalidKeySize,
    RandomnessUnavailable,
    is_probable_prime,
    sample_prime
)


@pytest.mark.parametrize("bits", [2, 3, 8, 64, 512])
def test_sample_prime_has_exact_width(bits):
    p = sample_prime(bits)
    assert p.bit_length() == bits
    assert p % 2 == 1
    assert is_probable_prime(p)


def test_sample_prime_is_reproducible_with_seeded_source():
    assert sample_prime(128, rng=random.Random(1234)) == sample_prime(128, rng=random.Random(1234))


@pytest.mark.parametrize("bits", [1, 0, -5, True, 2.0, "64"])
def test_sample_prime_rejects_bad_width(bits):
    with pytest.raises(InvalidKeySize):
        sample_prime(bits)


def test_stuck_source_is_detected(stuck_rng):
    # 0 becomes (1 << 15) | 1 = 32769 = 3 * 10923, composite on every draw
    with pytest.raises(RandomnessUnavailable):
        sample_prime(16, rng=stuck_rng(0))


def test_candidate_budget_is_enforced(stuck_rng):
    # 2^1023 + 1 is divisible by 3; repeat detection is disabled by the config
    config = CryptoConfig(max_repeated_candidates=1000)
    with pytest.raises(RandomnessUnavailable, match="no 1024-bit prime"):
        sample_prime(1024, rng=stuck_rng(0), config=config, max_attempts=5)


def test_entropy_failure_is_reported(broken_rng):
    with pytest.raises(RandomnessUnavailable):
        sample_prime(64, rng=broken_rng)


@pytest.mark.parametrize("value", [2, 3, 97, 7919, 2**61 - 1, 2**127 - 1])
def test_known_primes(value):
    assert is_probable_prime(value)


@pytest.mark.parametrize("value", [-7, 0, 1, 4, 561, 7917, 2**61 + 1, (2**31 - 1) * (2**61 - 1)])
def test_known_composites(value):
    assert not is_probable_prime(value)
