"""Consistency check of a Paillier key pair, reported as a dict of violations."""

import logging
import random
from typing import Optional

from paillier_core.crypto.paillier import PrivateKey, PublicKey
from paillier_core.crypto.primes import is_probable_prime

logger = logging.getLogger(__name__)

AUDIT_ROUNDS = 32


def check_keypair(
    public_key: PublicKey, private_key: PrivateKey, rng: Optional[random.Random] = None
) -> dict:
    if private_key.destroyed:
        return {"check": "keypair", "violations": ["private key wiped"], "passed": False}

    n = public_key.n
    p, q = private_key.p, private_key.q
    violations = []

    if p * q != n:
        violations.append("n != p * q")
    if p == q:
        violations.append("p == q")
    for name, factor in (("p", p), ("q", q)):
        if not is_probable_prime(factor, AUDIT_ROUNDS, rng):
            violations.append(f"{name} is composite")
    if public_key.g != n + 1:
        violations.append("g != n + 1")
    if public_key.n_sq != n * n:
        violations.append("n_sq != n^2")
    if (private_key.mu * private_key.lam) % n != 1:
        violations.append("mu * lam != 1 mod n")

    # only meaningful once the arithmetic above holds
    if not violations:
        probe = (n - 1) // 3
        c = public_key.encrypt(probe, rng)
        if private_key.decrypt(public_key, c) != probe:
            violations.append("decrypt(encrypt(m)) != m")
        elif private_key.decrypt_crt(public_key, c) != probe:
            violations.append("decrypt_crt disagrees with decrypt")

    if violations:
        logger.warning("key pair audit failed with %d violation(s)", len(violations))

    return {
        "check": "keypair",
        "modulus_bits": n.bit_length(),
        "violations": violations,
        "passed": len(violations) == 0,
    }
