"""
paillier-core: additively homomorphic Paillier encryption.

    pub, priv = generate_keypair(2048)
    c = pub.add(pub.encrypt(42), pub.encrypt(99))
    with priv:
        assert priv.decrypt(pub, c) == 141
"""

import logging

from .crypto import (
    Ciphertext,
    KeyPair,
    PrivateKey,
    PublicKey,
    generate_keypair,
    is_probable_prime,
    random_prime,
)
from .errors import (
    InvalidCiphertext,
    KeyDestroyed,
    MessageOutOfRange,
    NoInverseFound,
    PaillierError,
    RandomnessNotInvertible,
)

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Ciphertext',
    'KeyPair',
    'PrivateKey',
    'PublicKey',
    'generate_keypair',
    'is_probable_prime',
    'random_prime',
    'InvalidCiphertext',
    'KeyDestroyed',
    'MessageOutOfRange',
    'NoInverseFound',
    'PaillierError',
    'RandomnessNotInvertible',
]
