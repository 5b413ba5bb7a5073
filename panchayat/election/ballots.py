"""Module storing the tally format and the pure helpers building it.

A tally is what you get after opening each ballot of a single-vote election :
the number of ballots cast for each candidate.
"""

from collections import Counter
from collections.abc import Iterable, Mapping
from functools import reduce

__all__ = ("Simple", "tally_pure", "tally_all")

class Simple[C](Counter[C]):
    """Simple : Counter(candidate id : number of ballots)

    {"C1" : 5, "C2" : 7} -> 5 ballots for C1, 7 for C2
    """

    __slots__ = () # useless for Counter

    @classmethod
    def fromkeys(cls, keys: Iterable[C], value: int, /) -> "Simple[C]":
        return cls(dict.fromkeys(keys, value))

def tally_pure[C](tally: Mapping[C, int], candidate_id: C, /) -> Simple[C]:
    """Returns a new tally with one more ballot for `candidate_id`.

    The candidate is added with one ballot if it was not in `tally`.
    The passed `tally` is never modified.
    """
    if not isinstance(tally, Mapping):
        raise TypeError(f"A tally must be a mapping, not {type(tally).__name__}")
    rv = Simple(tally)
    rv[candidate_id] += 1
    return rv

def tally_all[C](candidate_ids: Iterable[C], initial: Mapping[C, int]|None = None, /) -> Simple[C]:
    """Counts the ballots in `candidate_ids`, one ballot per item.

    The counts start from `initial` if passed, which is left untouched.
    """
    if initial is None:
        initial = Simple()
    return reduce(tally_pure, candidate_ids, Simple(initial))
