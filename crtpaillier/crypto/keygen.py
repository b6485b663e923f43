"""
Paillier key pair generation.

Samples two distinct primes of half the target modulus width, orders them
so p < q and derives all private-key precomputation in one step.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from ..config import CryptoConfig, DEFAULT_CONFIG
from .exceptions import InvalidKeySize, RandomnessUnavailable
from .keys import KeyPair, PrivateKey
from .primes import sample_prime

logger = logging.getLogger(__name__)


def _prime_bits(strength_bits, config: CryptoConfig) -> int:
    if isinstance(strength_bits, bool) or not isinstance(strength_bits, int):
        raise InvalidKeySize(f"key size must be an integer, got {strength_bits!r}")
    prime_bits = strength_bits // 2
    if prime_bits < config.min_prime_bits:
        raise InvalidKeySize(
            f"key size {strength_bits} gives {prime_bits}-bit primes; "
            f"at least {config.min_prime_bits} bits per prime are required"
        )
    return prime_bits


def _sample_prime_pair(prime_bits: int, rng, config: CryptoConfig, parallel: bool):
    if parallel:
        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [
                executor.submit(sample_prime, prime_bits, rng, config)
                for _ in range(2)
            ]
            return futures[0].result(), futures[1].result()
    return sample_prime(prime_bits, rng, config), sample_prime(prime_bits, rng, config)


def generate_key_pair(
    strength_bits: Optional[int] = None,
    rng=None,
    config: Optional[CryptoConfig] = None,
    parallel: Optional[bool] = None
) -> KeyPair:
    """
    Generate a new Paillier key pair.

    Args:
        strength_bits: Target bit length of n; each prime gets half.
            Defaults to config.key_size
        rng: Object with getrandbits(); the system CSPRNG when omitted
        config: Crypto parameters (DEFAULT_CONFIG.crypto when omitted)
        parallel: Search for p and q concurrently. Defaults to
            config.parallel_keygen

    Returns:
        KeyPair of matching public and private keys

    Raises:
        InvalidKeySize: if the primes would be narrower than
            config.min_prime_bits
        RandomnessUnavailable: if prime sampling cannot complete
        KeyGenerationError: if key derivation hits a missing inverse
    """
    config = config if config is not None else DEFAULT_CONFIG.crypto
    if strength_bits is None:
        strength_bits = config.key_size
    if parallel is None:
        parallel = config.parallel_keygen
    prime_bits = _prime_bits(strength_bits, config)

    start = time.time()
    p, q = _sample_prime_pair(prime_bits, rng, config, parallel)

    retries = 0
    while q == p:
        retries += 1
        if retries > config.max_repeated_candidates:
            raise RandomnessUnavailable(
                f"sampled the same {prime_bits}-bit prime {retries + 1} times"
            )
        logger.debug("p and q collided, resampling q")
        q = sample_prime(prime_bits, rng, config)

    if q < p:
        p, q = q, p

    private_key = PrivateKey.from_primes(p, q)
    public_key = private_key.public_key

    logger.info(
        f"Generated {public_key.bit_length}-bit Paillier key pair "
        f"in {time.time() - start:.3f}s"
    )
    return KeyPair(public_key, private_key)
