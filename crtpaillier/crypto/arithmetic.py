"""
Big-integer arithmetic backed by gmpy2.

Thin wrappers so the rest of the package works on plain Python ints while
GMP does the modular exponentiation, inversion and primality testing.
"""

import gmpy2


def powmod(base: int, exponent: int, modulus: int) -> int:
    """Compute base^exponent mod modulus."""
    return int(gmpy2.powmod(base, exponent, modulus))


def powmod_sec(base: int, exponent: int, modulus: int) -> int:
    """
    Constant-time modular exponentiation for secret operands.

    Args:
        base: Base (may be secret)
        exponent: Positive exponent (may be secret)
        modulus: Odd modulus

    Returns:
        base^exponent mod modulus
    """
    return int(gmpy2.powmod_sec(base, exponent, modulus))


def mod_inverse(a: int, m: int) -> int:
    """
    Compute the modular multiplicative inverse of a modulo m.

    Raises:
        ZeroDivisionError: if a is not invertible modulo m
    """
    return int(gmpy2.invert(a, m))


def gcd(a: int, b: int) -> int:
    return int(gmpy2.gcd(a, b))


def is_probable_prime(value: int, rounds: int = 40) -> bool:
    """Miller-Rabin primality test with the given number of rounds."""
    if value < 2:
        return False
    return bool(gmpy2.is_prime(value, rounds))


def l_function(u: int, r: int) -> int:
    """L function: L(u, r) = (u - 1) / r, exact when u = 1 (mod r)."""
    return (u - 1) // r
