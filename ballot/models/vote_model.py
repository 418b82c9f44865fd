from pydantic import BaseModel
from typing import List


class Vote(BaseModel):
    # range checks belong to the store so the rejection reason reaches the caller
    election_id: int
    candidate_index: int


class VoteReceipt(BaseModel):
    message: str
    election_id: int
    candidate_index: int
    results: List[int]


class VoteStatus(BaseModel):
    status: str
    election_id: int
    address: str
