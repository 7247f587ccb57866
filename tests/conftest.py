"""
Shared fixtures for the dynaport test suite.
"""
import random

import pytest

from dynaport.PROBER.port_prober import PortProber


class FakeProbe:
    """
    Stands in for the socket probe, treating a fixed set of ports as busy.
    """
    def __init__(self, occupied=()):
        self.occupied = set(occupied)
        self.calls = []

    def __call__(self, port, host):
        self.calls.append((port, host))
        return port not in self.occupied


@pytest.fixture
def fake_probe():
    return FakeProbe()


@pytest.fixture
def prober(fake_probe):
    """A prober over the fake probe with a seeded random source."""
    return PortProber(probe=fake_probe, rng=random.Random(1234))
