"""Big-integer helpers shared by the prime generator and the key classes."""

import math
import random
import secrets
from typing import Optional, Tuple

_SYSTEM_RANDOM = secrets.SystemRandom()


def default_rng() -> random.Random:
    """OS entropy source used whenever the caller does not inject one."""
    return _SYSTEM_RANDOM


def modpow(base: int, exp: int, modulus: int) -> int:
    return pow(base, exp, modulus)


def gcd(a: int, b: int) -> int:
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    return abs(a * b) // math.gcd(a, b)


def _egcd(a: int, b: int) -> Tuple[int, int]:
    """Return (g, x) with a*x = g (mod b). Iterative: operands are thousands of bits."""
    x0, x1 = 1, 0
    while b != 0:
        q = a // b
        a, b = b, a - q * b
        x0, x1 = x1, x0 - q * x1
    return a, x0


def modinv(a: int, modulus: int) -> Optional[int]:
    """Inverse of ``a`` modulo ``modulus``, or None when they share a factor."""
    g, x = _egcd(a % modulus, modulus)
    if g != 1:
        return None
    return x % modulus


def random_in_range(lo: int, hi: int, rng: Optional[random.Random] = None) -> int:
    if hi <= lo:
        raise ValueError("empty range")
    rng = rng or default_rng()
    return rng.randrange(lo, hi)


def l_function(u: int, n: int) -> int:
    return (u - 1) // n
