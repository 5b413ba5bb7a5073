"""Shared fixtures for the election tests."""

import pytest

from panchayat import _settings
from panchayat.actors import Candidate, Voter
from panchayat.election import ElectionRegistry


@pytest.fixture(autouse=True)
def _reset_voting_age():
    yield
    _settings.set_voting_age()


@pytest.fixture
def candidates() -> list[Candidate]:
    return [
        Candidate("C1", "Sarpanch Ram", "Janata"),
        Candidate("C2", "Pradhan Sita", "Lok"),
        Candidate("C3", "Mukhiya Shyam", "Kisan"),
    ]


@pytest.fixture
def election(candidates) -> ElectionRegistry:
    return ElectionRegistry(candidates)


@pytest.fixture
def voters() -> list[Voter]:
    return [
        Voter("V1", "Mohan", 25),
        Voter("V2", "Geeta", 31),
        Voter("V3", "Raju", 18),
        Voter("V4", "Lata", 64),
    ]


@pytest.fixture
def registered(election, voters) -> ElectionRegistry:
    for voter in voters:
        assert election.register_voter(voter)
    return election
