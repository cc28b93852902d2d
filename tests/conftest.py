"""Shared fixtures: RNG stand-ins that force every roll one way."""
from __future__ import annotations

import random

import pytest


class QuietRandom(random.Random):
    """Every chance roll lands at the top of its range, so nothing fires."""

    def randint(self, a: int, b: int) -> int:
        return b

    def random(self) -> float:
        return 0.99


class EagerRandom(random.Random):
    """Every chance roll lands at the bottom of its range, so everything fires."""

    def randint(self, a: int, b: int) -> int:
        return a

    def random(self) -> float:
        return 0.0


@pytest.fixture
def quiet_rng() -> random.Random:
    return QuietRandom(0)


@pytest.fixture
def eager_rng() -> random.Random:
    return EagerRandom(0)
