from collections.abc import Callable, Iterable
from functools import cmp_to_key
from operator import attrgetter
from typing import Any, NamedTuple

__all__ = ("CandidateResult", "rank")

class CandidateResult(NamedTuple):
    """The score of one candidate, as returned by the registries."""

    id: str
    name: str
    party: str
    votes: int

type Comparator = Callable[[CandidateResult, CandidateResult], int]

def rank(results: Iterable[CandidateResult],
        compare: Comparator|None = None,
        *,
        key: Callable[[CandidateResult], Any]|None = None,
        ) -> list[CandidateResult]:
    """Returns the results sorted for display.

    `compare` is an old-style comparator, returning a negative number if its
    first argument comes first, a positive one if it comes last, and 0 if both
    are equivalent. `key` is a key function, as taken by `sorted`. Only one of
    them may be passed.
    By default, the candidates with the most votes come first.

    The sort is stable : equivalent results keep the order they were passed in,
    which is how ties are broken.
    """
    if compare is not None:
        if key is not None:
            raise TypeError("Only one of compare and key must be provided.")
        return sorted(results, key=cmp_to_key(compare))
    if key is not None:
        return sorted(results, key=key)
    # reverse=True keeps equal items in their original order
    return sorted(results, key=attrgetter("votes"), reverse=True)
