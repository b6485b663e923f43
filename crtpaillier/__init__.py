"""
crtpaillier: Paillier Homomorphic Encryption with CRT Decryption

A Paillier public-key cryptosystem using the fixed generator g = n + 1.
Ciphertexts multiply to encryptions of the sum of their plaintexts.

Main components:
- Prime sampling with bounded Miller-Rabin search
- Key pair generation with CRT precomputation
- Probabilistic encryption with unbiased rejection-sampled randomness
- CRT-accelerated decryption

Supported key sizes:
- Any modulus width of at least 16 bits (primes get half, rounded down)
- 2048 bits by default
"""

__version__ = '1.0.0'

from . import config
from . import crypto
from . import utils

from .crypto import (
    PaillierError,
    InvalidKeySize,
    PlaintextOutOfRange,
    CiphertextOutOfRange,
    KeyGenerationError,
    RandomnessUnavailable,
    KeyFormatError,
    PublicKey,
    PrivateKey,
    KeyPair,
    generate_key_pair,
    encrypt,
    decrypt
)

__all__ = [
    'config',
    'crypto',
    'utils',
    'PaillierError',
    'InvalidKeySize',
    'PlaintextOutOfRange',
    'CiphertextOutOfRange',
    'KeyGenerationError',
    'RandomnessUnavailable',
    'KeyFormatError',
    'PublicKey',
    'PrivateKey',
    'KeyPair',
    'generate_key_pair',
    'encrypt',
    'decrypt'
]
