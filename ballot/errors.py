# ballot/errors.py
# Failures raised by the election store. The reason strings are shown to users verbatim.

ONLY_OWNER = "Only the owner can perform this action"
ALREADY_VOTED = "You have already voted"
ELECTION_NOT_ACTIVE = "Election is not active"
ELECTION_NOT_FOUND = "Election does not exist"
INVALID_CANDIDATE = "Invalid candidate index"


class BallotError(Exception):
    """Base class for every rejected call against the store."""

    status_code = 400
    default_reason = "Transaction rejected"

    def __init__(self, reason: str = None):
        self.reason = reason or self.default_reason
        super().__init__(self.reason)


class Unauthorized(BallotError):
    status_code = 403
    default_reason = ONLY_OWNER


class NotFound(BallotError):
    status_code = 404
    default_reason = ELECTION_NOT_FOUND


class OutOfRange(BallotError):
    status_code = 400
    default_reason = INVALID_CANDIDATE


class InactiveElection(BallotError):
    status_code = 409
    default_reason = ELECTION_NOT_ACTIVE


class AlreadyVoted(BallotError):
    status_code = 409
    default_reason = ALREADY_VOTED
