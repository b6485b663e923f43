import dataclasses

import pytest

from crtpaillier.config import CryptoConfig
from crtpaillier.crypto import (
    InvalidKeySize,
    KeyGenerationError,
    KeyPair,
    PrivateKey,
    PublicKey,
    RandomnessUnavailable,
    generate_key_pair,
    is_probable_prime
)


def test_key_pair_structure(key_pair):
    pk, sk = key_pair
    assert isinstance(key_pair, KeyPair)
    assert key_pair.public_key is pk and key_pair.private_key is sk

    assert sk.p != sk.q
    assert sk.p < sk.q
    assert is_probable_prime(sk.p) and is_probable_prime(sk.q)
    assert sk.p.bit_length() == 128 and sk.q.bit_length() == 128
    assert pk.n == sk.p * sk.q
    assert pk.n_sq == pk.n ** 2
    assert pk.n.bit_length() in (255, 256)
    assert sk.public_key == pk


def test_precomputed_fields_are_consistent(key_pair):
    sk = key_pair.private_key
    p, q, n = sk.p, sk.q, sk.n
    assert sk.p_sq == p * p and sk.q_sq == q * q
    assert sk.p_minus_one == p - 1 and sk.q_minus_one == q - 1
    assert sk.phi == (p - 1) * (q - 1)
    assert (sk.d_n * n) % sk.phi == 1
    assert sk.d_p == sk.d_n % (p - 1) and sk.d_q == sk.d_n % (q - 1)
    assert (sk.p_inv * p) % q == 1
    # h_r inverts L((n + 1)^(r - 1) mod r^2, r)
    for r, h in ((p, sk.h_p), (q, sk.h_q)):
        l_r = (pow(n + 1, r - 1, r * r) - 1) // r
        assert (l_r * h) % r == 1


def test_toy_key_vector(toy_private_key):
    sk = toy_private_key
    assert (sk.p, sk.q, sk.n, sk.n_sq) == (7, 11, 77, 5929)
    assert (sk.p_sq, sk.q_sq, sk.phi) == (49, 121, 60)
    assert (sk.d_n, sk.d_p, sk.d_q) == (53, 5, 3)
    assert (sk.p_inv, sk.h_p, sk.h_q) == (8, 5, 3)


def test_from_primes_orders_primes():
    assert PrivateKey.from_primes(11, 7) == PrivateKey.from_primes(7, 11)


@pytest.mark.parametrize("p, q", [(7, 7), (1, 7), (0, 11), (3, 7), (9, 11), (7, 15), (91, 101)])
def test_from_primes_rejects_bad_primes(p, q):
    # (3, 7): gcd(21, 12) = 3, so n has no inverse mod phi
    # (9, 11), (7, 15), (91, 101): one factor is composite
    with pytest.raises(KeyGenerationError):
        PrivateKey.from_primes(p, q)


def test_keys_are_immutable(key_pair):
    pk, sk = key_pair
    with pytest.raises(dataclasses.FrozenInstanceError):
        pk.n = 5
    with pytest.raises(dataclasses.FrozenInstanceError):
        sk.h_p = 1


def test_private_key_repr_hides_factors(key_pair):
    sk = key_pair.private_key
    text = repr(sk)
    assert str(sk.p) not in text and str(sk.q) not in text
    assert f"bits={sk.n.bit_length()}" in text


def test_toy_private_key_repr(toy_private_key):
    assert repr(toy_private_key) == "PrivateKey(bits=7)"


def test_public_key_validation():
    assert PublicKey.from_modulus(77) == PublicKey(n=77, n_sq=5929)
    assert PublicKey.from_modulus(77).g == 78
    with pytest.raises(ValueError):
        PublicKey(n=77, n_sq=5928)


def test_independent_runs_never_repeat_primes():
    primes = []
    for _ in range(5):
        _, sk = generate_key_pair(64)
        assert sk.p != sk.q
        primes.extend(sk.primes)
    assert len(set(primes)) == len(primes)


def test_minimum_key_size():
    pk, sk = generate_key_pair(16)
    assert sk.p.bit_length() == 8 and sk.q.bit_length() == 8
    assert sk.p != sk.q


@pytest.mark.parametrize("bits", [15, 8, 0, -2048, True, 2048.0, "2048"])
def test_invalid_key_sizes(bits):
    with pytest.raises(InvalidKeySize):
        generate_key_pair(bits)


def test_default_strength_comes_from_config():
    pk, _ = generate_key_pair(config=CryptoConfig(key_size=64))
    assert pk.n.bit_length() in (63, 64)


def test_parallel_generation():
    pk, sk = generate_key_pair(128, parallel=True)
    assert sk.p != sk.q
    assert pk.n == sk.p * sk.q


def test_stuck_source_fails_fast(stuck_rng):
    with pytest.raises(RandomnessUnavailable):
        generate_key_pair(64, rng=stuck_rng(0))


def test_source_repeating_a_prime_fails_fast(stuck_rng):
    # Every draw yields the 8-bit prime 251, so q can never differ from p
    with pytest.raises(RandomnessUnavailable):
        generate_key_pair(16, rng=stuck_rng(251))
