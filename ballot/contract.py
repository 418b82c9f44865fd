# ballot/contract.py
# Election store and owner guard. Every call is one all-or-nothing transaction.
import logging
import threading
from typing import List, Tuple

from ballot.errors import (
    AlreadyVoted,
    InactiveElection,
    NotFound,
    OutOfRange,
    Unauthorized,
)
from ballot.models.election_model import Election
from ballot.storage import MemoryStorage

logger = logging.getLogger(__name__)


def normalize_address(address: str) -> str:
    """Addresses compare case-insensitively (checksummed or not)."""
    if not isinstance(address, str) or not address.strip():
        raise ValueError("address must be a non-empty string")
    return address.strip().lower()


class Ballot:
    """
    Elections with candidate lists and one vote per address.

    The owner is fixed at construction. Only the owner may create or
    deactivate elections and add or remove candidates; anyone may vote
    once per active election.

    Calls are serialised by a lock. A mutation is applied to a copy of the
    election, written to storage, and only then made visible, so a rejected
    or failed call leaves no trace.

    Removing a candidate shifts the indices of the candidates after it down
    by one; callers must re-read the candidate list before voting by index.
    """

    def __init__(self, owner: str, storage=None):
        self.owner = normalize_address(owner)
        self.storage = storage if storage is not None else MemoryStorage()
        self._lock = threading.Lock()
        self._elections: List[Election] = self.storage.load_elections()

        for position, election in enumerate(self._elections):
            if election.id != position:
                raise ValueError(
                    f"Stored election ids are not sequential: expected {position}, got {election.id}"
                )
        logger.info(f"Ballot ready for owner {self.owner} with {len(self._elections)} elections")

    # --- guards ---

    def is_owner(self, caller: str) -> bool:
        return normalize_address(caller) == self.owner

    def _only_owner(self, caller: str, action: str) -> None:
        if not self.is_owner(caller):
            logger.warning(f"Rejected {action} from {caller}: not the owner")
            raise Unauthorized()

    def _get(self, election_id: int) -> Election:
        if (
            isinstance(election_id, bool)
            or not isinstance(election_id, int)
            or election_id < 0
            or election_id >= len(self._elections)
        ):
            logger.warning(f"Rejected call on election {election_id!r}: no such election")
            raise NotFound()
        return self._elections[election_id]

    def _commit(self, election: Election) -> None:
        # storage first; memory only changes once the write went through
        self.storage.save_election(election)
        if election.id == len(self._elections):
            self._elections.append(election)
        else:
            self._elections[election.id] = election

    # --- owner operations ---

    def create_election(self, caller: str, name: str, candidate_names: List[str]) -> int:
        with self._lock:
            self._only_owner(caller, "createElection")
            candidates = list(candidate_names)
            election = Election(
                id=len(self._elections),
                name=name,
                is_active=True,
                candidates=candidates,
                vote_counts=[0] * len(candidates),
            )
            self._commit(election)
            logger.info(f"Election {election.id} '{name}' created with {len(candidates)} candidates")
            return election.id

    def deactivate_election(self, caller: str, election_id: int) -> None:
        with self._lock:
            self._only_owner(caller, "deactivateElection")
            election = self._get(election_id).model_copy(deep=True)
            election.is_active = False
            self._commit(election)
            logger.info(f"Election {election_id} deactivated")

    def add_candidate(self, caller: str, election_id: int, candidate_name: str) -> None:
        with self._lock:
            self._only_owner(caller, "addCandidate")
            election = self._get(election_id).model_copy(deep=True)
            election.candidates.append(candidate_name)
            election.vote_counts.append(0)
            self._commit(election)
            logger.info(f"Candidate '{candidate_name}' added to election {election_id}")

    def remove_candidate(self, caller: str, election_id: int, candidate_index: int) -> None:
        with self._lock:
            self._only_owner(caller, "removeCandidate")
            election = self._get(election_id).model_copy(deep=True)
            self._check_index(election, candidate_index)
            removed = election.candidates.pop(candidate_index)
            election.vote_counts.pop(candidate_index)
            self._commit(election)
            logger.info(f"Candidate '{removed}' removed from election {election_id}")

    # --- voter operations ---

    def vote(self, caller: str, election_id: int, candidate_index: int) -> None:
        voter = normalize_address(caller)
        with self._lock:
            current = self._get(election_id)
            if not current.is_active:
                logger.warning(f"Rejected vote from {voter}: election {election_id} is not active")
                raise InactiveElection()
            if voter in current.has_voted:
                logger.warning(f"Rejected vote from {voter}: already voted in election {election_id}")
                raise AlreadyVoted()
            self._check_index(current, candidate_index)

            election = current.model_copy(deep=True)
            election.vote_counts[candidate_index] += 1
            election.has_voted.append(voter)
            self._commit(election)
            logger.info(f"Vote recorded in election {election_id} for candidate {candidate_index}")

    @staticmethod
    def _check_index(election: Election, candidate_index: int) -> None:
        if (
            isinstance(candidate_index, bool)
            or not isinstance(candidate_index, int)
            or candidate_index < 0
            or candidate_index >= len(election.candidates)
        ):
            logger.warning(
                f"Rejected candidate index {candidate_index!r} in election {election.id}: out of range"
            )
            raise OutOfRange()

    # --- reads ---

    def election(self, election_id: int) -> Election:
        with self._lock:
            return self._get(election_id).model_copy(deep=True)

    def get_candidates(self, election_id: int) -> List[str]:
        with self._lock:
            return list(self._get(election_id).candidates)

    def get_results(self, election_id: int) -> List[int]:
        with self._lock:
            return list(self._get(election_id).vote_counts)

    def get_all_elections(self) -> Tuple[List[str], List[bool], List[List[str]]]:
        with self._lock:
            names = [e.name for e in self._elections]
            statuses = [e.is_active for e in self._elections]
            candidates = [list(e.candidates) for e in self._elections]
            return names, statuses, candidates

    def has_voted(self, election_id: int, voter: str) -> bool:
        with self._lock:
            return normalize_address(voter) in self._get(election_id).has_voted

    def election_count(self) -> int:
        with self._lock:
            return len(self._elections)
