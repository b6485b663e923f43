"""
Prime sampling for key generation.

Candidates are drawn from a cryptographically secure source with the top and
bottom bits forced on, then filtered through Miller-Rabin until one passes.
The search is bounded so a broken entropy source fails fast instead of hanging.
"""

import logging
import secrets
from typing import Optional

from ..config import CryptoConfig, DEFAULT_CONFIG
from .arithmetic import is_probable_prime
from .exceptions import InvalidKeySize, RandomnessUnavailable

logger = logging.getLogger(__name__)

# SystemRandom reads os.urandom and keeps no state, so it is safe to share
_SYSTEM_RANDOM = secrets.SystemRandom()


def default_rng() -> secrets.SystemRandom:
    """Return the shared secure random source."""
    return _SYSTEM_RANDOM


def random_bits(rng, bits: int) -> int:
    """
    Draw `bits` random bits from rng.

    Raises:
        RandomnessUnavailable: if the source cannot produce entropy
    """
    try:
        return rng.getrandbits(bits)
    except (OSError, NotImplementedError) as exc:
        raise RandomnessUnavailable(f"random source failed: {exc}") from exc


def sample_prime(
    bit_width: int,
    rng=None,
    config: Optional[CryptoConfig] = None,
    rounds: Optional[int] = None,
    max_attempts: Optional[int] = None
) -> int:
    """
    Generate a prime number with exactly `bit_width` bits.

    Args:
        bit_width: Bit length of the prime
        rng: Object with getrandbits(); the system CSPRNG when omitted
        config: Crypto parameters (DEFAULT_CONFIG.crypto when omitted)
        rounds: Miller-Rabin rounds, overriding the config
        max_attempts: Candidate budget, overriding the config

    Returns:
        An odd probable prime of exactly bit_width bits

    Raises:
        InvalidKeySize: if bit_width < 2
        RandomnessUnavailable: if the candidate budget runs out or the
            random source keeps repeating itself
    """
    if isinstance(bit_width, bool) or not isinstance(bit_width, int) or bit_width < 2:
        raise InvalidKeySize(f"cannot sample a {bit_width!r}-bit prime")

    config = config if config is not None else DEFAULT_CONFIG.crypto
    rng = rng if rng is not None else default_rng()
    rounds = rounds if rounds is not None else config.primality_rounds
    if max_attempts is None:
        max_attempts = config.prime_attempts_per_bit * bit_width

    previous = None
    repeats = 0
    for attempt in range(1, max_attempts + 1):
        candidate = random_bits(rng, bit_width)
        candidate |= (1 << bit_width - 1) | 1  # Ensure correct bit length and odd

        if candidate == previous:
            repeats += 1
            if repeats >= config.max_repeated_candidates:
                raise RandomnessUnavailable(
                    f"random source returned the same {bit_width}-bit candidate "
                    f"{repeats + 1} times in a row"
                )
        else:
            previous = candidate
            repeats = 0

        if is_probable_prime(candidate, rounds):
            logger.debug(f"Found {bit_width}-bit prime after {attempt} candidates")
            return candidate

    raise RandomnessUnavailable(
        f"no {bit_width}-bit prime found in {max_attempts} candidates"
    )
