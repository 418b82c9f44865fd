from pydantic import BaseModel, Field
from typing import List


class Election(BaseModel):
    """Stored election record. `vote_counts` is index-aligned with `candidates`."""

    id: int
    name: str
    is_active: bool = True
    candidates: List[str] = Field(default_factory=list)
    vote_counts: List[int] = Field(default_factory=list)
    has_voted: List[str] = Field(default_factory=list)  # addresses, each at most once


class ElectionCreate(BaseModel):
    name: str = Field(..., examples=["Election 1"])
    candidates: List[str] = Field(..., examples=[["Alice", "Bob"]])


class CandidateIn(BaseModel):
    name: str = Field(..., examples=["Charlie"])


class ElectionOut(BaseModel):
    id: int
    name: str
    is_active: bool


class ElectionListing(BaseModel):
    # three index-aligned sequences, one slot per election
    names: List[str]
    active_statuses: List[bool]
    candidates: List[List[str]]
