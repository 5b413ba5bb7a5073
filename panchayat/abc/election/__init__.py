import abc
from collections.abc import Callable
from typing import Any

from ...results import CandidateResult, Comparator

__all__ = ("Election",)

class Election(abc.ABC):
    """
    Implements the rules to go from a set of registered voters and the ballots
    they cast, to the ranking of the candidates.
    """

    @abc.abstractmethod
    def register_voter(self, voter, /) -> bool:
        """Registers the `voter` on the electoral roll.

        Returns whether the registration happened. A voter that is invalid,
        ineligible or already registered is not registered, and False is
        returned : this is not an exception.
        """

    @abc.abstractmethod
    def cast_vote[R](self,
            voter_id: str,
            candidate_id: str,
            on_success: Callable[[dict[str, str]], R],
            on_error: Callable[[str], R],
            /) -> R:
        """Records the vote of a registered voter for a candidate.

        Exactly one of the two callbacks is called, synchronously, before the
        method returns : `on_success` with a {"voter_id", "candidate_id"} dict,
        or `on_error` with a string giving the reason of the rejection.
        Returns whatever the called callback returned.
        """

    @abc.abstractmethod
    def get_results(self,
            compare: Comparator|None = None, /, *,
            key: Callable[[CandidateResult], Any]|None = None,
            ) -> list[CandidateResult]|None:
        """Returns the score of every candidate, or None if no vote was cast.

        By default the candidates with the most votes come first, ties being
        broken by the order in which the candidates were given.
        """

    def get_winner(self) -> CandidateResult|None:
        """Returns the candidate with the most votes, or None if no vote was cast.

        In case of a tie, the first tied candidate in the original order wins.
        """
        results = self.get_results()
        if results is None:
            return None
        return results[0]
