"""
Miller-Rabin primality testing and random prime generation.
"""

import logging
import random
from typing import Optional

from paillier_core.config import DEFAULT_MR_ROUNDS, MIN_PRIME_BITS
from paillier_core.crypto.arith import default_rng, modpow, random_in_range

logger = logging.getLogger(__name__)

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def is_probable_prime(candidate: int, rounds: int, rng: Optional[random.Random] = None) -> bool:
    """
    Miller-Rabin test with ``rounds`` random witnesses.

    A composite passes with probability at most 4^-rounds.
    """
    if rounds < 1:
        raise ValueError("rounds must be positive")
    if candidate < 2:
        return False
    for p in SMALL_PRIMES:
        if candidate == p:
            return True
        if candidate % p == 0:
            return False

    # candidate - 1 = d * 2^s with d odd
    d = candidate - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    rng = rng or default_rng()
    for _ in range(rounds):
        a = random_in_range(2, candidate - 1, rng)
        x = modpow(a, d, candidate)
        if x == 1 or x == candidate - 1:
            continue
        for _ in range(s - 1):
            x = modpow(x, 2, candidate)
            if x == candidate - 1:
                break
        else:
            return False
    return True


def random_prime(bits: int, rng: Optional[random.Random] = None, rounds: int = DEFAULT_MR_ROUNDS) -> int:
    """
    Random probable prime of exactly ``bits`` bits.

    Loops until a candidate passes; primes near 2^bits have density about
    1/(bits ln 2), so the expected number of odd candidates is ~bits/3.
    """
    if bits < MIN_PRIME_BITS:
        raise ValueError(f"prime size must be at least {MIN_PRIME_BITS} bits, got {bits}")
    if rounds < DEFAULT_MR_ROUNDS:
        raise ValueError(f"prime generation needs at least {DEFAULT_MR_ROUNDS} rounds, got {rounds}")
    rng = rng or default_rng()

    attempts = 0
    while True:
        attempts += 1
        candidate = rng.getrandbits(bits) | (1 << (bits - 1)) | 1
        if is_probable_prime(candidate, rounds, rng):
            logger.debug("found %d-bit prime after %d candidates", bits, attempts)
            return candidate
