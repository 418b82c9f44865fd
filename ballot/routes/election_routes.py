from fastapi import APIRouter, Depends, status

from ballot.contract import Ballot
from ballot.dependencies import get_ballot, get_current_caller
from ballot.models.election_model import (
    CandidateIn,
    ElectionCreate,
    ElectionListing,
    ElectionOut,
)

router = APIRouter(prefix="/election", tags=["Election"])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_election(
    election: ElectionCreate,
    caller: str = Depends(get_current_caller),
    ballot: Ballot = Depends(get_ballot),
):
    election_id = ballot.create_election(caller, election.name, election.candidates)
    return {"message": "Election created successfully!", "election_id": election_id}


@router.post("/{election_id}/deactivate")
def deactivate_election(
    election_id: int,
    caller: str = Depends(get_current_caller),
    ballot: Ballot = Depends(get_ballot),
):
    ballot.deactivate_election(caller, election_id)
    return {"message": "Election deactivated successfully!", "election_id": election_id}


@router.post("/{election_id}/candidates", status_code=status.HTTP_201_CREATED)
def add_candidate(
    election_id: int,
    candidate: CandidateIn,
    caller: str = Depends(get_current_caller),
    ballot: Ballot = Depends(get_ballot),
):
    ballot.add_candidate(caller, election_id, candidate.name)
    return {
        "message": "Candidate added successfully!",
        "candidates": ballot.get_candidates(election_id),
    }


@router.delete("/{election_id}/candidates/{candidate_index}")
def remove_candidate(
    election_id: int,
    candidate_index: int,
    caller: str = Depends(get_current_caller),
    ballot: Ballot = Depends(get_ballot),
):
    # later candidates shift down one index; the response carries the new order
    ballot.remove_candidate(caller, election_id, candidate_index)
    return {
        "message": "Candidate removed successfully!",
        "candidates": ballot.get_candidates(election_id),
    }


@router.get("/all", response_model=ElectionListing)
def get_all_elections(ballot: Ballot = Depends(get_ballot)):
    names, statuses, candidates = ballot.get_all_elections()
    return ElectionListing(names=names, active_statuses=statuses, candidates=candidates)


@router.get("/{election_id}", response_model=ElectionOut)
def get_election(election_id: int, ballot: Ballot = Depends(get_ballot)):
    election = ballot.election(election_id)
    return ElectionOut(id=election.id, name=election.name, is_active=election.is_active)


@router.get("/{election_id}/candidates")
def get_candidates(election_id: int, ballot: Ballot = Depends(get_ballot)):
    return {"candidates": ballot.get_candidates(election_id)}


@router.get("/{election_id}/results")
def get_results(election_id: int, ballot: Ballot = Depends(get_ballot)):
    return {"results": ballot.get_results(election_id)}
