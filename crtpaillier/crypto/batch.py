"""
Element-wise encryption and decryption of integer arrays.

Values are carried in numpy object arrays so arbitrary-precision ints are
never truncated to fixed-width dtypes.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import numpy as np

from .keys import PrivateKey, PublicKey
from .paillier import decrypt, encrypt


def _map(fn, values: np.ndarray, workers: Optional[int]) -> np.ndarray:
    flat = [int(v) for v in values.ravel()]
    if workers and workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(fn, flat))
    else:
        results = [fn(v) for v in flat]

    out = np.empty(len(results), dtype=object)
    out[:] = results
    return out.reshape(values.shape)


def _as_object_array(values) -> np.ndarray:
    array = np.asarray(values, dtype=object)
    if array.size and not all(
        isinstance(v, (int, np.integer)) and not isinstance(v, bool)
        for v in array.ravel()
    ):
        raise TypeError("array elements must be integers")
    return array


def encrypt_array(
    values,
    public_key: PublicKey,
    rng=None,
    workers: Optional[int] = None
) -> np.ndarray:
    """
    Encrypt every element of an integer array.

    Args:
        values: Integer array-like, each element in [0, n)
        public_key: Recipient public key
        rng: Object with getrandbits(); the system CSPRNG when omitted
        workers: Thread count for concurrent encryption

    Returns:
        Object array of ciphertexts with the same shape as values
    """
    array = _as_object_array(values)
    return _map(lambda m: encrypt(m, public_key, rng), array, workers)


def decrypt_array(
    ciphertexts,
    private_key: PrivateKey,
    workers: Optional[int] = None
) -> np.ndarray:
    """Decrypt every element of a ciphertext array."""
    array = _as_object_array(ciphertexts)
    return _map(lambda c: decrypt(c, private_key), array, workers)
