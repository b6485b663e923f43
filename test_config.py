import pytest

from crtpaillier.config import (
    BenchmarkConfig,
    CryptoConfig,
    DEFAULT_CONFIG,
    PaillierConfig,
    get_config
)


def test_defaults():
    assert DEFAULT_CONFIG.crypto.key_size == 2048
    assert DEFAULT_CONFIG.crypto.min_prime_bits == 8
    assert DEFAULT_CONFIG.crypto.primality_rounds >= 30
    assert DEFAULT_CONFIG.logging.name == 'crtpaillier'
    assert isinstance(DEFAULT_CONFIG, PaillierConfig)


def test_get_config():
    config = get_config(key_size=1024, primality_rounds=64, parallel_keygen=True,
                        log_level='DEBUG', output_dir='/tmp/bench')
    assert config.crypto.key_size == 1024
    assert config.crypto.primality_rounds == 64
    assert config.crypto.parallel_keygen is True
    assert config.logging.level == 'DEBUG'
    assert config.benchmark.output_dir == '/tmp/bench'


@pytest.mark.parametrize("kwargs", [
    {'key_size': 8},
    {'min_prime_bits': 1},
    {'min_prime_bits': 2},
    {'primality_rounds': 10},
    {'prime_attempts_per_bit': 0},
    {'max_repeated_candidates': 0},
    {'max_sampling_attempts': -1},
])
def test_invalid_crypto_config(kwargs):
    with pytest.raises(ValueError):
        CryptoConfig(**kwargs)


def test_benchmark_defaults():
    config = BenchmarkConfig()
    assert config.key_sizes == [512, 1024, 2048]
    assert config.num_messages == 20
    assert config.seed is None
    assert config.key_sizes is not BenchmarkConfig().key_sizes


def test_smallest_prime_width():
    config = CryptoConfig(key_size=6, min_prime_bits=3)
    assert config.min_prime_bits == 3
