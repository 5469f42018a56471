"""Exceptions raised by the Paillier core."""


class PaillierError(Exception):
    """Base class for every error raised by this package."""


class MessageOutOfRange(PaillierError, ValueError):
    def __init__(self, message: str = "message out of range (expected 0 <= m < n)"):
        super().__init__(message)


class RandomnessNotInvertible(PaillierError, ValueError):
    def __init__(self, message: str = "randomness not invertible mod n"):
        super().__init__(message)


class InvalidCiphertext(PaillierError, ValueError):
    def __init__(self, message: str = "invalid ciphertext (expected 0 <= c < n^2)"):
        super().__init__(message)


class NoInverseFound(PaillierError):
    """Key generation could not invert lambda mod n.

    Unreachable with genuine primes; seeing it means the prime generator or
    the randomness source is broken.
    """

    def __init__(self, message: str = "internal error: modular inverse not found"):
        super().__init__(message)


class KeyDestroyed(PaillierError):
    def __init__(self, message: str = "private key has been wiped"):
        super().__init__(message)
