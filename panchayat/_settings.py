voting_age: int

def set_voting_age(age: int = 18, /):
    """Sets the minimum age required to register as a voter.

    Defaults to 18.
    Only registries created after the call are affected, as each registry reads
    the setting once, when it is built.
    """
    global voting_age
    if isinstance(age, bool) or not isinstance(age, int):
        raise TypeError(f"The voting age must be an integer, not {age!r}")
    if age < 0:
        raise ValueError(f"The voting age cannot be negative, got {age}")
    voting_age = age

set_voting_age()
