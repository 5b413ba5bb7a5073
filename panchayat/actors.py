from collections.abc import Mapping
from typing import NamedTuple, Self

__all__ = ("Candidate", "Voter")

def field(record, name: str, default=None):
    """Reads the `name` field of a record.

    Records can be mappings (keyed by field name) or objects exposing the
    fields as attributes, such as the NamedTuples below.
    """
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)

def has_field(record, name: str) -> bool:
    if isinstance(record, Mapping):
        return name in record
    return hasattr(record, name)

class Candidate(NamedTuple):
    """A contestant, fixed for the lifetime of an election."""

    id: str
    name: str
    party: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, str], /) -> Self:
        return cls(data["id"], data["name"], data["party"])

class Voter(NamedTuple):
    """A citizen who may register to vote.

    Only the `id` and `age` are checked by the registries, the `name` only needs
    to be a string.
    """

    id: str
    name: str
    age: int

    @classmethod
    def from_mapping(cls, data: Mapping, /) -> Self:
        return cls(data["id"], data["name"], data["age"])
