import random

import pytest

from paillier_core.crypto.primes import is_probable_prime, random_prime

PRIMES_BELOW_40 = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37]
COMPOSITES_BELOW_40 = [n for n in range(40) if n not in PRIMES_BELOW_40]


@pytest.mark.parametrize("n", PRIMES_BELOW_40)
def test_small_primes_are_prime(n):
    assert is_probable_prime(n, 5)


@pytest.mark.parametrize("n", COMPOSITES_BELOW_40)
def test_small_composites_are_not_prime(n):
    assert not is_probable_prime(n, 5)


def test_negative_numbers_are_not_prime():
    assert not is_probable_prime(-7, 5)


@pytest.mark.parametrize("n", [41, 7919, 2**31 - 1, 2**61 - 1, 2**127 - 1])
def test_known_primes(n):
    assert is_probable_prime(n, 20)


@pytest.mark.parametrize("n", [561, 1105, 1729, 2465, 2821, 6601])
def test_carmichael_numbers_are_rejected(n):
    assert not is_probable_prime(n, 5, random.Random(n))


def test_strong_pseudoprime_is_rejected():
    # 151 * 751 * 28351 passes bases 2, 3, 5 and 7, none of its factors is small
    assert not is_probable_prime(3215031751, 10, random.Random(1))


def test_product_of_large_primes_is_rejected():
    assert not is_probable_prime((2**61 - 1) * (2**89 - 1), 10)


def test_rounds_must_be_positive():
    with pytest.raises(ValueError):
        is_probable_prime(97, 0)


@pytest.mark.parametrize("bits", [256, 300, 512])
def test_random_prime_has_exact_bit_length(bits, rng):
    p = random_prime(bits, rng)
    assert p.bit_length() == bits
    assert p % 2 == 1
    assert is_probable_prime(p, 32)


def test_random_prime_is_reproducible_with_seeded_rng():
    assert random_prime(256, random.Random(99)) == random_prime(256, random.Random(99))


@pytest.mark.parametrize("bits", [0, 64, 255])
def test_random_prime_rejects_short_primes(bits):
    with pytest.raises(ValueError):
        random_prime(bits)


@pytest.mark.parametrize("rounds", [1, 63])
def test_random_prime_rejects_weak_round_counts(rounds):
    with pytest.raises(ValueError):
        random_prime(256, rounds=rounds)
