"""
Tally helper tests.
"""

import pytest

from panchayat.election.ballots import Simple, tally_all, tally_pure


class TestTallyPure:
    def test_adds_missing_candidate(self):
        tally = {"a": 2}
        assert tally_pure(tally, "b") == {"a": 2, "b": 1}
        assert tally == {"a": 2}

    def test_increments_existing_candidate(self):
        tally = Simple({"a": 2, "b": 5})
        new = tally_pure(tally, "b")
        assert new == {"a": 2, "b": 6}
        assert tally == {"a": 2, "b": 5}
        assert new is not tally

    def test_returns_simple(self):
        assert isinstance(tally_pure({}, "a"), Simple)

    @pytest.mark.parametrize("tally", [None, 0, "a", ["a"]])
    def test_rejects_non_mapping(self, tally):
        with pytest.raises(TypeError):
            tally_pure(tally, "a")


class TestTallyAll:
    def test_counts_ballots(self):
        assert tally_all(["C1", "C2", "C1"]) == {"C1": 2, "C2": 1}

    def test_starts_from_initial(self):
        initial = Simple.fromkeys(["C1", "C2", "C3"], 0)
        tally = tally_all(["C2"], initial)
        assert tally == {"C1": 0, "C2": 1, "C3": 0}
        assert list(tally) == ["C1", "C2", "C3"]
        assert initial == {"C1": 0, "C2": 0, "C3": 0}

    def test_empty(self):
        assert tally_all([]) == {}
