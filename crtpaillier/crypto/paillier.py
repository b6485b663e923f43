"""
Paillier Cryptosystem Implementation.

Implements encryption with the fixed generator g = n + 1 and decryption
accelerated by the Chinese Remainder Theorem:

- encrypt / raw_encrypt: c = (1 + m*n) * r^n mod n^2
- decrypt: two half-size exponentiations mod p^2 and q^2, recombined mod n
- decrypt_textbook: the single full-size exponentiation with lambda = phi
- recover_randomness: extracts r from a ciphertext using d_n
"""

import numbers

from ..config import CryptoConfig, DEFAULT_CONFIG
from .arithmetic import gcd, l_function, mod_inverse, powmod, powmod_sec
from .exceptions import CiphertextOutOfRange, PlaintextOutOfRange, RandomnessUnavailable
from .keys import Ciphertext, Plaintext, PrivateKey, PublicKey
from .primes import default_rng, random_bits


def _as_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def _check_plaintext(plaintext, public_key: PublicKey) -> int:
    plaintext = _as_int(plaintext, 'plaintext')
    if not 0 <= plaintext < public_key.n:
        raise PlaintextOutOfRange(
            f"plaintext must be in [0, n) for a {public_key.bit_length}-bit modulus"
        )
    return plaintext


def _check_ciphertext(ciphertext, n_sq: int) -> int:
    ciphertext = _as_int(ciphertext, 'ciphertext')
    if not 0 <= ciphertext < n_sq:
        raise CiphertextOutOfRange("ciphertext must be in [0, n^2)")
    return ciphertext


def sample_randomness(public_key: PublicKey, rng=None, config: CryptoConfig = None) -> int:
    """
    Sample encryption randomness r uniformly from the units of Z_n.

    Candidates of n's bit length are drawn and rejected until 0 < r < n and
    gcd(r, n) = 1, which keeps the distribution unbiased.

    Raises:
        RandomnessUnavailable: if no candidate is accepted within
            config.max_sampling_attempts draws
    """
    config = config if config is not None else DEFAULT_CONFIG.crypto
    rng = rng if rng is not None else default_rng()
    n = public_key.n
    bits = n.bit_length()

    for _ in range(config.max_sampling_attempts):
        r = random_bits(rng, bits)
        if 0 < r < n and gcd(r, n) == 1:
            return r

    raise RandomnessUnavailable(
        f"no encryption randomness accepted in {config.max_sampling_attempts} draws"
    )


def raw_encrypt(plaintext: Plaintext, public_key: PublicKey, r: int) -> Ciphertext:
    """
    Encrypt with caller-supplied randomness.

    Args:
        plaintext: Message in [0, n)
        public_key: Recipient public key
        r: Randomness in (0, n), coprime to n

    Returns:
        Ciphertext c = (1 + m*n) * r^n mod n^2
    """
    plaintext = _check_plaintext(plaintext, public_key)
    r = _as_int(r, 'r')
    if not 0 < r < public_key.n:
        raise ValueError("randomness must be in (0, n)")

    n, n_sq = public_key.n, public_key.n_sq
    # g^m with g = n + 1 collapses to 1 + m*n
    g_m = (1 + plaintext * n) % n_sq
    r_n = powmod_sec(r, n, n_sq)
    return (g_m * r_n) % n_sq


def encrypt(plaintext: Plaintext, public_key: PublicKey, rng=None) -> Ciphertext:
    """
    Encrypt a plaintext message.

    Args:
        plaintext: Message to encrypt (must be in [0, n))
        public_key: Recipient public key
        rng: Object with getrandbits(); the system CSPRNG when omitted

    Returns:
        A fresh probabilistic ciphertext in [0, n^2)

    Raises:
        PlaintextOutOfRange: if plaintext is negative or >= n
        RandomnessUnavailable: if the random source fails
    """
    plaintext = _check_plaintext(plaintext, public_key)
    r = sample_randomness(public_key, rng)
    return raw_encrypt(plaintext, public_key, r)


def _partial_decrypt(ciphertext: int, prime: int, prime_sq: int, h: int) -> int:
    c_r = ciphertext % prime_sq
    d_r = powmod_sec(c_r, prime - 1, prime_sq)
    return (l_function(d_r, prime) * h) % prime


def decrypt(ciphertext: Ciphertext, private_key: PrivateKey) -> Plaintext:
    """
    Decrypt a ciphertext using CRT decomposition.

    Args:
        ciphertext: Encrypted message in [0, n^2)
        private_key: Private key from the same generation run as the
            encrypting public key

    Returns:
        Decrypted plaintext in [0, n)

    Raises:
        CiphertextOutOfRange: if ciphertext is negative or >= n^2
    """
    ciphertext = _check_ciphertext(ciphertext, private_key.n_sq)
    p, q = private_key.p, private_key.q

    m_p = _partial_decrypt(ciphertext, p, private_key.p_sq, private_key.h_p)
    m_q = _partial_decrypt(ciphertext, q, private_key.q_sq, private_key.h_q)

    # Recombine: m = m_p + ((m_q - m_p) * p^{-1} mod q) * p
    diff = (m_q - m_p) % q
    u = (diff * private_key.p_inv) % q
    return m_p + u * p


def decrypt_textbook(ciphertext: Ciphertext, private_key: PrivateKey) -> Plaintext:
    """
    Decrypt without CRT: m = L(c^phi mod n^2) * mu mod n.

    Slower than `decrypt`; kept as a reference path.
    """
    ciphertext = _check_ciphertext(ciphertext, private_key.n_sq)
    n, n_sq, phi = private_key.n, private_key.n_sq, private_key.phi

    g_phi = powmod(n + 1, phi, n_sq)
    mu = mod_inverse(l_function(g_phi, n), n)
    c_phi = powmod_sec(ciphertext, phi, n_sq)
    return (l_function(c_phi, n) * mu) % n


def recover_randomness(ciphertext: Ciphertext, private_key: PrivateKey) -> int:
    """
    Recover the randomness r used to produce a ciphertext.

    Since c = r^n (mod n), r = c^{d_n} mod n; the exponentiation is split
    over p and q with d_p and d_q.
    """
    ciphertext = _check_ciphertext(ciphertext, private_key.n_sq)
    p, q = private_key.p, private_key.q

    r_p = powmod_sec(ciphertext % p, private_key.d_p, p)
    r_q = powmod_sec(ciphertext % q, private_key.d_q, q)

    u = ((r_q - r_p) * private_key.p_inv) % q
    return r_p + u * p
