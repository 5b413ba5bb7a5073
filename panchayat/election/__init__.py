from collections.abc import Callable, Iterable, Mapping
import logging
from typing import Any

from . import ballots, validation
from .. import _settings
from ..actors import Candidate, field
from ..abc.election import Election
from ..results import CandidateResult, Comparator, rank

__all__ = ("ElectionRegistry",)

logger = logging.getLogger(__name__)

INVALID_IDENTIFIERS = "Invalid identifiers"
NOT_REGISTERED = "Voter not registered"
UNKNOWN_CANDIDATE = "Unknown candidate"
ALREADY_VOTED = "Voter has already voted"

class ElectionRegistry(Election):
    """An election held in memory, among a fixed list of candidates.

    Voters go through three states : unregistered, registered, and voted. They
    can only move forward, once : there is no way to unregister, or to change
    or withdraw a vote.
    The electoral roll and the ballots are private to the instance, and only
    the methods give access to them.
    """

    __slots__ = ("_candidates", "_candidate_ids", "_min_age", "_registered", "_ballots")

    def __init__(self, candidates: Iterable[Candidate|Mapping[str, str]], /, *,
            min_age: int|None = None,
            ):
        """
        The order of the `candidates` is kept, and is used to break ties in the
        results. Their ids are expected to be unique.
        The optional `min_age` parameter is the minimum age to register, and
        defaults to the voting age set in the settings when the registry is
        created.
        """
        self._candidates = tuple(c if isinstance(c, Candidate) else Candidate.from_mapping(c)
            for c in candidates)
        self._candidate_ids = frozenset(c.id for c in self._candidates)
        if min_age is None:
            min_age = _settings.voting_age
        self._min_age = min_age
        self._registered: set[str] = set()
        # voter id : candidate id, insertion-ordered
        self._ballots: dict[str, str] = {}

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        return self._candidates

    @property
    def total_votes(self) -> int:
        return len(self._ballots)

    def __len__(self):
        return len(self._registered)

    def is_registered(self, voter_id: str, /) -> bool:
        return voter_id in self._registered

    def has_voted(self, voter_id: str, /) -> bool:
        return voter_id in self._ballots

    def register_voter(self, voter, /) -> bool:
        if not validation.is_valid_voter(voter, self._min_age):
            logger.debug("Rejected voter registration: %r", voter)
            return False
        voter_id = field(voter, "id")
        if voter_id in self._registered:
            logger.debug("Voter %s is already registered", voter_id)
            return False
        self._registered.add(voter_id)
        logger.debug("Registered voter %s", voter_id)
        return True

    def _check_ballot(self, voter_id, candidate_id) -> str|None:
        if not (isinstance(voter_id, str) and isinstance(candidate_id, str)):
            return INVALID_IDENTIFIERS
        if voter_id not in self._registered:
            return NOT_REGISTERED
        if candidate_id not in self._candidate_ids:
            return UNKNOWN_CANDIDATE
        if voter_id in self._ballots:
            return ALREADY_VOTED
        return None

    def cast_vote[R](self,
            voter_id: str,
            candidate_id: str,
            on_success: Callable[[dict[str, str]], R],
            on_error: Callable[[str], R],
            /) -> R:
        reason = self._check_ballot(voter_id, candidate_id)
        if reason is not None:
            logger.debug("Rejected ballot from %r for %r: %s", voter_id, candidate_id, reason)
            return on_error(reason)
        self._ballots[voter_id] = candidate_id
        logger.debug("Voter %s voted for %s", voter_id, candidate_id)
        return on_success({"voter_id": voter_id, "candidate_id": candidate_id})

    def tally(self) -> ballots.Simple[str]:
        """Returns the number of ballots cast for each candidate.

        Every candidate is included, with 0 if nobody voted for it.
        """
        tally = ballots.Simple.fromkeys((c.id for c in self._candidates), 0)
        tally.update(self._ballots.values())
        return tally

    def get_results(self,
            compare: Comparator|None = None, /, *,
            key: Callable[[CandidateResult], Any]|None = None,
            ) -> list[CandidateResult]|None:
        """
        `compare` is a comparator taking two results, and `key` a key function.
        Only one of them may be passed, and if either is, it replaces the
        default ordering. See results.rank.
        Returns None as long as no vote has been cast, even though every
        candidate could be reported with 0 votes.
        """
        if not self._ballots:
            return None
        tally = self.tally()
        results = [CandidateResult(c.id, c.name, c.party, tally[c.id]) for c in self._candidates]
        return rank(results, compare, key=key)
