"""
Cryptographic primitives: Miller-Rabin prime generation and the Paillier
public-key cryptosystem.
"""

from .paillier import (
    Ciphertext,
    KeyPair,
    PrivateKey,
    PublicKey,
    generate_keypair,
)
from .primes import is_probable_prime, random_prime

__all__ = [
    'Ciphertext',
    'KeyPair',
    'PrivateKey',
    'PublicKey',
    'generate_keypair',
    'is_probable_prime',
    'random_prime',
]
