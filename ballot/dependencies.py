from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from ballot.contract import Ballot
from ballot.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/accounts/login", auto_error=False)


def get_ballot(request: Request) -> Ballot:
    return request.app.state.ballot


def get_current_caller(token: str = Depends(oauth2_scheme)) -> str:
    """Address of the caller, taken from the bearer token."""
    address = decode_access_token(token) if token else None
    if not address:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return address
