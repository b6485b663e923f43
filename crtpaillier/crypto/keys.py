"""
Paillier key material.

Keys are frozen value objects. The private key carries every decryption
constant precomputed from (p, q) once, at construction, using the fixed
generator g = n + 1.
"""

from dataclasses import dataclass
from typing import NamedTuple, Tuple

from .arithmetic import is_probable_prime, l_function, mod_inverse
from .exceptions import KeyGenerationError

# Ciphertexts and plaintexts are plain ints
Ciphertext = int
Plaintext = int


@dataclass(frozen=True)
class PublicKey:
    """Paillier public key {n, n^2}."""

    n: int
    n_sq: int

    def __post_init__(self):
        if self.n < 2:
            raise ValueError("modulus must be at least 2")
        if self.n_sq != self.n * self.n:
            raise ValueError("n_sq does not match n")

    @classmethod
    def from_modulus(cls, n: int) -> 'PublicKey':
        return cls(n=n, n_sq=n * n)

    @property
    def g(self) -> int:
        """Generator, fixed to n + 1."""
        return self.n + 1

    @property
    def bit_length(self) -> int:
        return self.n.bit_length()

    def __repr__(self) -> str:
        return f"PublicKey(bits={self.bit_length}, n={self.n})"


def _decryption_helper(n: int, r: int, r_sq: int) -> int:
    """
    Per-prime constant h_r = L(g^(r-1) mod r^2, r)^{-1} mod r for g = n + 1.

    (n + 1)^(r-1) reduces to 1 - n modulo r^2, so no exponentiation is needed.
    """
    g_r = (1 - n) % r_sq
    l_r = l_function(g_r, r)
    return mod_inverse(l_r, r)


@dataclass(frozen=True)
class PrivateKey:
    """
    Paillier private key with CRT decryption precomputation.

    Build instances with `from_primes`; every field other than p and q is a
    deterministic function of them.

    Attributes:
        p, q: Prime factors with p < q
        p_sq, q_sq: Squares of the primes
        n, n_sq: Modulus and its square
        p_minus_one, q_minus_one: p - 1 and q - 1
        phi: (p - 1)(q - 1)
        d_n: n^{-1} mod phi
        d_p, d_q: d_n reduced mod (p - 1) and mod (q - 1)
        p_inv: p^{-1} mod q, for CRT recombination
        h_p, h_q: Per-prime decryption helpers
    """

    p: int
    q: int
    p_sq: int
    q_sq: int
    n: int
    n_sq: int
    p_minus_one: int
    q_minus_one: int
    phi: int
    d_n: int
    d_p: int
    d_q: int
    p_inv: int
    h_p: int
    h_q: int

    @classmethod
    def from_primes(cls, p: int, q: int) -> 'PrivateKey':
        """
        Derive the full private key from two distinct primes.

        The primes are reordered so that p < q.

        Raises:
            KeyGenerationError: if either factor is not prime, the primes are
                equal, or a required modular inverse does not exist
        """
        p, q = int(p), int(q)
        if p < 2 or q < 2:
            raise KeyGenerationError("primes must be greater than 1")
        if not (is_probable_prime(p) and is_probable_prime(q)):
            raise KeyGenerationError("p and q must both be prime")
        if p == q:
            raise KeyGenerationError("p and q must be distinct")
        if q < p:
            p, q = q, p

        n = p * q
        p_minus_one = p - 1
        q_minus_one = q - 1
        phi = p_minus_one * q_minus_one
        p_sq = p * p
        q_sq = q * q

        try:
            d_n = mod_inverse(n, phi)
            p_inv = mod_inverse(p, q)
            h_p = _decryption_helper(n, p, p_sq)
            h_q = _decryption_helper(n, q, q_sq)
        except ZeroDivisionError as exc:
            raise KeyGenerationError(
                "modular inverse missing while deriving the private key"
            ) from exc

        return cls(
            p=p,
            q=q,
            p_sq=p_sq,
            q_sq=q_sq,
            n=n,
            n_sq=n * n,
            p_minus_one=p_minus_one,
            q_minus_one=q_minus_one,
            phi=phi,
            d_n=d_n,
            d_p=d_n % p_minus_one,
            d_q=d_n % q_minus_one,
            p_inv=p_inv,
            h_p=h_p,
            h_q=h_q
        )

    @property
    def public_key(self) -> PublicKey:
        """The public key matching this private key."""
        return PublicKey(n=self.n, n_sq=self.n_sq)

    @property
    def primes(self) -> Tuple[int, int]:
        return self.p, self.q

    def __repr__(self) -> str:
        # Never print the factors
        return f"PrivateKey(bits={self.n.bit_length()})"


class KeyPair(NamedTuple):
    """Public and private key from a single generation run."""

    public_key: PublicKey
    private_key: PrivateKey
