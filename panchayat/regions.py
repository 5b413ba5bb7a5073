"""Aggregation of vote counts over a hierarchy of regions.

A region tree is made of nodes having a name, a number of votes and an iterable
of sub-regions, themselves region trees. The nodes may be Region instances or
mappings with "name", "votes" and "sub_regions" keys.
"""

from collections.abc import Iterable, Mapping
from math import isfinite
from numbers import Real
from typing import NamedTuple

from .actors import field

__all__ = ("Region", "count_votes_in_regions")

class Region(NamedTuple):
    name: str
    votes: int
    sub_regions: Iterable["Region"] = ()

def _counts(votes) -> bool:
    if isinstance(votes, bool) or not isinstance(votes, Real):
        return False
    return isfinite(votes) and votes > 0

def count_votes_in_regions(tree, /):
    """Returns the total number of votes in the region tree.

    A region only counts if its own number of votes is a finite positive number.
    When it isn't, its sub-regions are not counted either, even if they do have
    votes of their own.
    Anything that is not a region tree counts for 0. Sub-regions may be given as
    any iterable other than a string.
    """
    if not isinstance(tree, (Region, Mapping)):
        return 0

    votes = field(tree, "votes")
    if not _counts(votes):
        return 0

    sub_regions = field(tree, "sub_regions")
    if not isinstance(sub_regions, Iterable) or isinstance(sub_regions, str):
        sub_regions = ()
    return votes + sum(count_votes_in_regions(sub) for sub in sub_regions)
