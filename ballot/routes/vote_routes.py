from fastapi import APIRouter, Depends

from ballot.contract import Ballot
from ballot.dependencies import get_ballot, get_current_caller
from ballot.models.vote_model import Vote, VoteReceipt, VoteStatus

vote_router = APIRouter(prefix="/vote", tags=["Vote"])


@vote_router.post("/cast", response_model=VoteReceipt)
def cast_vote(
    vote: Vote,
    caller: str = Depends(get_current_caller),
    ballot: Ballot = Depends(get_ballot),
):
    """
    Casts the caller's single vote in an election.
    Rejections (inactive election, second vote, bad index) come back with the reason as detail.
    """
    ballot.vote(caller, vote.election_id, vote.candidate_index)
    return VoteReceipt(
        message="Vote cast successfully!",
        election_id=vote.election_id,
        candidate_index=vote.candidate_index,
        results=ballot.get_results(vote.election_id),
    )


@vote_router.get("/check/{election_id}/{address}", response_model=VoteStatus)
def check_vote(election_id: int, address: str, ballot: Ballot = Depends(get_ballot)):
    """Checks whether an address has already voted in an election."""
    voted = ballot.has_voted(election_id, address)
    return VoteStatus(
        status="already_voted" if voted else "not_voted",
        election_id=election_id,
        address=address,
    )
