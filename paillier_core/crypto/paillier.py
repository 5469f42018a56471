"""
Paillier cryptosystem with g = n + 1.

Encryption is randomized (IND-CPA under the decisional composite residuosity
assumption) and malleable: ciphertexts can be added together, shifted by a
known plaintext, multiplied by a public scalar and rerandomized without the
private key. Arithmetic is not constant-time and there is no protection
against chosen-ciphertext attacks.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Optional

from paillier_core.config import DEFAULT_MR_ROUNDS, get_settings
from paillier_core.crypto.arith import (
    default_rng,
    gcd,
    l_function,
    lcm,
    modinv,
    modpow,
    random_in_range,
)
from paillier_core.crypto.primes import random_prime
from paillier_core.errors import (
    InvalidCiphertext,
    KeyDestroyed,
    MessageOutOfRange,
    NoInverseFound,
    RandomnessNotInvertible,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ciphertext:
    value: int


@dataclass(frozen=True)
class PublicKey:
    n: int
    n_sq: int = field(init=False, repr=False)
    g: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "n_sq", self.n * self.n)
        object.__setattr__(self, "g", self.n + 1)

    # ── Validation ─────────────────────────────────
    def check_plaintext(self, m: int) -> None:
        if not 0 <= m < self.n:
            raise MessageOutOfRange()

    def check_ciphertext(self, c: Ciphertext) -> None:
        if not 0 <= c.value < self.n_sq:
            raise InvalidCiphertext()

    def sample_zn_star(self, rng: Optional[random.Random] = None) -> int:
        """Uniform unit of Z_n by rejection sampling over [1, n)."""
        rng = rng or default_rng()
        while True:
            r = random_in_range(1, self.n, rng)
            if gcd(r, self.n) == 1:
                return r

    # ── Encryption ─────────────────────────────────
    def encrypt(self, m: int, rng: Optional[random.Random] = None) -> Ciphertext:
        self.check_plaintext(m)
        return self.encrypt_with_randomness(m, self.sample_zn_star(rng))

    def encrypt_with_randomness(self, m: int, r: int) -> Ciphertext:
        """
        Deterministic encryption c = g^m * r^n mod n^2.

        Only for tests and protocols that must reproduce or prove the
        randomness; reusing ``r`` across messages links their ciphertexts.
        """
        self.check_plaintext(m)
        if gcd(r, self.n) != 1:
            raise RandomnessNotInvertible()
        c1 = modpow(self.g, m, self.n_sq)
        c2 = modpow(r % self.n, self.n, self.n_sq)
        return Ciphertext((c1 * c2) % self.n_sq)

    # ── Homomorphic operations ─────────────────────
    def add(self, c1: Ciphertext, c2: Ciphertext) -> Ciphertext:
        """Enc(m1) * Enc(m2) = Enc(m1 + m2 mod n)."""
        self.check_ciphertext(c1)
        self.check_ciphertext(c2)
        return Ciphertext((c1.value * c2.value) % self.n_sq)

    def add_plain(self, c: Ciphertext, m2: int) -> Ciphertext:
        """Add a known plaintext to the hidden one."""
        self.check_ciphertext(c)
        self.check_plaintext(m2)
        return Ciphertext((c.value * modpow(self.g, m2, self.n_sq)) % self.n_sq)

    def mul_scalar(self, c: Ciphertext, k: int) -> Ciphertext:
        """
        Enc(m)^k = Enc(k * m mod n).

        ``k`` is reduced mod n first, so negative scalars multiply by the
        additive inverse. k = 0 (or any multiple of n) gives the fixed
        Ciphertext(1), which carries no randomness: rerandomize it before
        publishing.
        """
        self.check_ciphertext(c)
        return Ciphertext(modpow(c.value, k % self.n, self.n_sq))

    def sub(self, c1: Ciphertext, c2: Ciphertext) -> Ciphertext:
        return self.add(c1, self.mul_scalar(c2, -1))

    def add_many(self, ciphertexts: Iterable[Ciphertext]) -> Ciphertext:
        """Homomorphic sum; an empty iterable yields Ciphertext(1), i.e. Enc(0)."""
        total = Ciphertext(1)
        for c in ciphertexts:
            total = self.add(total, c)
        return total

    def rerandomize(self, c: Ciphertext, rng: Optional[random.Random] = None) -> Ciphertext:
        """Same plaintext, fresh randomness: c * s^n mod n^2."""
        self.check_ciphertext(c)
        s = self.sample_zn_star(rng)
        return Ciphertext((c.value * modpow(s, self.n, self.n_sq)) % self.n_sq)


class PrivateKey:
    """
    Decryption trapdoor: lam = lcm(p-1, q-1) and mu = lam^-1 mod n.

    Use it as a context manager so ``wipe()`` runs however the block exits::

        with keypair.private_key as sk:
            m = sk.decrypt(pub, c)

    Wiping rebinds every secret attribute to 0. Python ints are immutable, so
    the old values stay in memory until the allocator reuses them, and any
    copy made elsewhere (including by the caller) is untouched. This is
    hygiene, not a guarantee.
    """

    def __init__(self, lam: int, mu: int, p: int, q: int):
        self.lam = lam
        self.mu = mu
        self.p = p
        self.q = q
        self._destroyed = False
        self._precompute_crt()

    def _precompute_crt(self) -> None:
        p, q = self.p, self.q
        self._p_sq = p * p
        self._q_sq = q * q
        g = p * q + 1
        hp = modinv(l_function(modpow(g, p - 1, self._p_sq), p), p)
        hq = modinv(l_function(modpow(g, q - 1, self._q_sq), q), q)
        q_inv = modinv(q, p)
        if hp is None or hq is None or q_inv is None:
            raise NoInverseFound()
        self._hp = hp
        self._hq = hq
        self._q_inv = q_inv

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def _ensure_alive(self) -> None:
        if self._destroyed:
            raise KeyDestroyed()

    def decrypt(self, public_key: PublicKey, c: Ciphertext) -> int:
        """
        m = L(c^lam mod n^2) * mu mod n.

        ``c`` must come from ``public_key``; a foreign ciphertext decrypts to
        garbage rather than raising.
        """
        self._ensure_alive()
        public_key.check_ciphertext(c)
        u = modpow(c.value, self.lam, public_key.n_sq)
        return (l_function(u, public_key.n) * self.mu) % public_key.n

    def decrypt_crt(self, public_key: PublicKey, c: Ciphertext) -> int:
        """Same result as ``decrypt``, working mod p^2 and q^2 and recombining."""
        self._ensure_alive()
        public_key.check_ciphertext(c)
        p, q = self.p, self.q
        mp = (l_function(modpow(c.value, p - 1, self._p_sq), p) * self._hp) % p
        mq = (l_function(modpow(c.value, q - 1, self._q_sq), q) * self._hq) % q
        return mq + q * (((mp - mq) * self._q_inv) % p)

    def wipe(self) -> None:
        self.lam = 0
        self.mu = 0
        self.p = 0
        self.q = 0
        self._p_sq = self._q_sq = 0
        self._hp = self._hq = self._q_inv = 0
        self._destroyed = True

    def __enter__(self) -> "PrivateKey":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wipe()

    def __del__(self):
        # fallback only, collection time is not guaranteed
        if not getattr(self, "_destroyed", True):
            self.wipe()

    def __repr__(self) -> str:
        return "PrivateKey(<wiped>)" if self._destroyed else "PrivateKey(<secret>)"


class KeyPair(NamedTuple):
    public_key: PublicKey
    private_key: PrivateKey

    def __enter__(self) -> "KeyPair":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.private_key.wipe()


def generate_keypair(bits_n: Optional[int] = None, rng: Optional[random.Random] = None) -> KeyPair:
    """
    Generate a key pair whose modulus is the product of two distinct
    ``bits_n / 2``-bit primes.

    With ``bits_n`` omitted, the size and the Miller-Rabin round count come
    from the PAILLIER_* environment; an explicit size uses 64 rounds and
    never reads the environment.
    """
    rounds = DEFAULT_MR_ROUNDS
    if bits_n is None:
        settings = get_settings()
        bits_n, rounds = settings.key_bits, settings.mr_rounds
    if bits_n % 2:
        raise ValueError("bits_n must be even (p and q have the same size)")
    half = bits_n // 2

    p = random_prime(half, rng, rounds)
    q = random_prime(half, rng, rounds)
    while q == p:
        q = random_prime(half, rng, rounds)

    n = p * q
    lam = lcm(p - 1, q - 1)
    # with g = n + 1, L(g^lam mod n^2) = lam mod n, so mu = lam^-1
    mu = modinv(lam, n)
    if mu is None:
        raise NoInverseFound()

    logger.debug("generated Paillier key pair with %d-bit modulus", n.bit_length())
    return KeyPair(PublicKey(n=n), PrivateKey(lam=lam, mu=mu, p=p, q=q))
