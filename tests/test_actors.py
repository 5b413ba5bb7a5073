from panchayat.actors import Candidate, Voter, field, has_field


def test_candidate_from_mapping():
    data = {"id": "C1", "name": "Sarpanch Ram", "party": "Janata"}
    assert Candidate.from_mapping(data) == Candidate("C1", "Sarpanch Ram", "Janata")


def test_voter_from_mapping():
    assert Voter.from_mapping({"id": "V1", "name": "Mohan", "age": 25}) == Voter("V1", "Mohan", 25)


def test_field_reads_mappings_and_records():
    assert field({"age": 30}, "age") == 30
    assert field(Voter("V1", "Mohan", 25), "age") == 25
    assert field({}, "age") is None
    assert field(object(), "age", 0) == 0


def test_has_field():
    assert has_field({"ward": None}, "ward")
    assert not has_field({}, "ward")
    assert has_field(Voter("V1", "Mohan", 25), "name")
    assert not has_field(Voter("V1", "Mohan", 25), "ward")
