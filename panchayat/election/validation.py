"""Eligibility checks applied to voters.

Two levels are provided. `is_valid_voter` is the fixed check the registries
apply at registration. `create_vote_validator` builds a reusable validator out
of a set of rules, reporting why a voter was rejected.
"""

from collections.abc import Callable, Collection, Iterable, Mapping
from numbers import Real
from typing import NamedTuple

from ..actors import field, has_field

__all__ = ("Rules", "Validation", "create_vote_validator", "is_valid_voter")

class Rules(NamedTuple):
    min_age: int|None
    required_fields: Collection[str]|None = ("id", "name", "age")

class Validation(NamedTuple):
    valid: bool
    reason: str

    def __bool__(self):
        return self.valid

OKAY = Validation(True, "OKAY")
INVALID_OBJECT = Validation(False, "Invalid object")
INVALID_FIELDS = Validation(False, "Invalid fields")
RULES_UNMATCHED = Validation(False, "Rules unmatched")

def _is_integer(value) -> bool:
    # bool is an int subclass, but not an age
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, int):
        return True
    return float(value).is_integer()

def _is_record(voter) -> bool:
    return isinstance(voter, Mapping) or hasattr(voter, "id")

def _nonempty_str(value) -> bool:
    return isinstance(value, str) and bool(value.strip())

def is_valid_voter(voter, min_age: int) -> bool:
    """Whether `voter` is well-formed and old enough to register.

    The id must be a non-empty string, the name a string and the age an integer
    at least equal to `min_age`.
    """
    if not _is_record(voter):
        return False
    voter_id = field(voter, "id")
    name = field(voter, "name")
    age = field(voter, "age")
    return (isinstance(voter_id, str) and voter_id != ""
        and isinstance(name, str)
        and _is_integer(age)
        and age >= min_age)

def _read_rules(rules) -> tuple[Real|None, tuple[str, ...]|None]:
    """Returns the minimum age and required fields of `rules`.

    Either may be None when the rule set does not give it, in which case the
    rules match no voter.
    """
    if isinstance(rules, Rules):
        min_age, required_fields = rules
    elif isinstance(rules, Mapping):
        min_age = rules.get("min_age")
        required_fields = rules.get("required_fields")
    else:
        raise TypeError(f"Validation rules must be a Rules or a mapping, not {type(rules).__name__}")

    if min_age is not None and (isinstance(min_age, bool) or not isinstance(min_age, Real)):
        raise TypeError(f"The minimum age must be a number, not {type(min_age).__name__}")
    if required_fields is not None:
        if isinstance(required_fields, str) or not isinstance(required_fields, Iterable):
            raise TypeError("The required fields must be a collection of field names")
        required_fields = tuple(required_fields)
    return min_age, required_fields

def create_vote_validator(rules: Rules|Mapping, /) -> Callable[[object], Validation]:
    """Returns a function validating voters against the `rules`.

    `rules` is a Rules instance, or a mapping with "min_age" and
    "required_fields" keys.

    The returned function first checks the shape of the voter, independently of
    the rules : the id and name must be non-empty strings and the age a positive
    integer. Then the voter must be at least `min_age` years old and have all
    the `required_fields`. A rule set without a minimum age or without required
    fields matches no voter.
    Malformed rules make this function raise TypeError.
    """
    min_age, required_fields = _read_rules(rules)

    def validate(voter, /) -> Validation:
        if not _is_record(voter):
            return INVALID_OBJECT

        age = field(voter, "age")
        if not (_nonempty_str(field(voter, "id"))
                and _nonempty_str(field(voter, "name"))
                and _is_integer(age)
                and age > 0):
            return INVALID_FIELDS

        if (min_age is not None and required_fields is not None
                and age >= min_age
                and all(has_field(voter, f) for f in required_fields)):
            return OKAY
        return RULES_UNMATCHED

    return validate
