"""
Cryptographic primitives for crtpaillier.

Provides implementations of:
- Prime sampling with bounded Miller-Rabin search
- Paillier key generation with CRT precomputation
- Paillier encryption and CRT-accelerated decryption
- Element-wise encryption of integer arrays
"""

from .exceptions import (
    PaillierError,
    InvalidKeySize,
    PlaintextOutOfRange,
    CiphertextOutOfRange,
    KeyGenerationError,
    RandomnessUnavailable,
    KeyFormatError
)

from .arithmetic import is_probable_prime

from .primes import sample_prime

from .keys import (
    Ciphertext,
    Plaintext,
    PublicKey,
    PrivateKey,
    KeyPair
)

from .keygen import generate_key_pair

from .paillier import (
    sample_randomness,
    raw_encrypt,
    encrypt,
    decrypt,
    decrypt_textbook,
    recover_randomness
)

from .batch import encrypt_array, decrypt_array

__all__ = [
    # Errors
    'PaillierError',
    'InvalidKeySize',
    'PlaintextOutOfRange',
    'CiphertextOutOfRange',
    'KeyGenerationError',
    'RandomnessUnavailable',
    'KeyFormatError',
    # Primes
    'is_probable_prime',
    'sample_prime',
    # Keys
    'Ciphertext',
    'Plaintext',
    'PublicKey',
    'PrivateKey',
    'KeyPair',
    'generate_key_pair',
    # Encryption
    'sample_randomness',
    'raw_encrypt',
    'encrypt',
    'decrypt',
    'decrypt_textbook',
    'recover_randomness',
    'encrypt_array',
    'decrypt_array'
]
