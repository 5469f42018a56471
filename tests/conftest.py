"""Shared pytest fixtures for the paillier-core test suite."""

import random

import pytest

from paillier_core import generate_keypair


@pytest.fixture(scope="session")
def keypair_1024():
    return generate_keypair(1024)


@pytest.fixture(scope="session")
def keypair_1536():
    return generate_keypair(1536)


@pytest.fixture(scope="session")
def keypair_2048():
    return generate_keypair(2048)


@pytest.fixture()
def rng():
    """Seeded generator for reproducible sampling."""
    return random.Random(1234)


@pytest.fixture()
def fresh_keypair(rng):
    """Small throwaway key pair, for tests that wipe or tamper with it."""
    return generate_keypair(512, rng=rng)
