from .config import (
    CryptoConfig,
    LoggingConfig,
    BenchmarkConfig,
    PaillierConfig,
    DEFAULT_CONFIG,
    get_config
)

__all__ = [
    'CryptoConfig',
    'LoggingConfig',
    'BenchmarkConfig',
    'PaillierConfig',
    'DEFAULT_CONFIG',
    'get_config'
]
