"""Shared fixtures for stress tests: seeded random number generators."""

from __future__ import annotations

import random

import pytest


@pytest.fixture(params=[7, 42, 1234])
def rng(request: pytest.FixtureRequest) -> random.Random:
    """Seeded generator, one per parameter."""
    return random.Random(request.param)
