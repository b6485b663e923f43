"""
Configuration settings for crtpaillier.
Security parameters, sampling bounds and runner settings.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CryptoConfig:
    """Cryptographic parameters configuration."""
    # Target modulus bit length (each prime gets half)
    key_size: int = 2048
    # Smallest prime width accepted by key generation
    min_prime_bits: int = 8
    # Miller-Rabin rounds for primality testing
    primality_rounds: int = 40
    # Prime search gives up after this many candidates per bit of width
    prime_attempts_per_bit: int = 64
    # Consecutive identical candidates tolerated from the random source
    max_repeated_candidates: int = 16
    # Rejection-sampling bound for the encryption randomness
    max_sampling_attempts: int = 1024
    # Search for p and q on two threads
    parallel_keygen: bool = False

    def __post_init__(self):
        if self.min_prime_bits < 3:
            raise ValueError(f"min_prime_bits must be >= 3, got {self.min_prime_bits}")
        if self.key_size < 2 * self.min_prime_bits:
            raise ValueError(
                f"key_size {self.key_size} is below the minimum of "
                f"{2 * self.min_prime_bits} bits"
            )
        if self.primality_rounds < 30:
            raise ValueError(f"primality_rounds must be >= 30, got {self.primality_rounds}")
        for name in ('prime_attempts_per_bit', 'max_repeated_candidates', 'max_sampling_attempts'):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = 'INFO'
    # Directory for log files (console only when None)
    log_dir: Optional[str] = None
    name: str = 'crtpaillier'


@dataclass
class BenchmarkConfig:
    """Benchmark runner configuration."""
    key_sizes: List[int] = field(default_factory=lambda: [512, 1024, 2048])
    # Plaintexts encrypted/decrypted per key size
    num_messages: int = 20
    output_dir: str = './outputs'
    seed: Optional[int] = None


@dataclass
class PaillierConfig:
    """Complete configuration."""
    crypto: CryptoConfig = field(default_factory=CryptoConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)


# Default configuration instance
DEFAULT_CONFIG = PaillierConfig()


def get_config(
    key_size: int = 2048,
    primality_rounds: int = 40,
    parallel_keygen: bool = False,
    log_level: str = 'INFO',
    output_dir: str = './outputs'
) -> PaillierConfig:
    """
    Get configuration for a specific setup.

    Args:
        key_size: Modulus bit length used when none is given explicitly
        primality_rounds: Miller-Rabin rounds per candidate
        parallel_keygen: Sample p and q concurrently
        log_level: Logging level name
        output_dir: Directory for benchmark results

    Returns:
        Configured PaillierConfig instance
    """
    return PaillierConfig(
        crypto=CryptoConfig(
            key_size=key_size,
            primality_rounds=primality_rounds,
            parallel_keygen=parallel_keygen
        ),
        logging=LoggingConfig(level=log_level),
        benchmark=BenchmarkConfig(output_dir=output_dir)
    )
