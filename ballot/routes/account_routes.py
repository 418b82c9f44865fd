from fastapi import APIRouter, Depends, Form, HTTPException, status

from ballot.contract import Ballot
from ballot.crud import create_account, login_account
from ballot.dependencies import get_ballot, get_current_caller
from ballot.schemas import AccountCreate, AccountOut, Token
from ballot.security import create_access_token

account_router = APIRouter(prefix="/accounts", tags=["Accounts"])


@account_router.post("/register", response_model=AccountOut, status_code=status.HTTP_201_CREATED)
def register(data: AccountCreate, ballot: Ballot = Depends(get_ballot)):
    try:
        account, error = create_account(ballot.storage, data, owner=ballot.owner)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if error:
        raise HTTPException(status_code=400, detail=error)
    return AccountOut(address=account.address, is_owner=ballot.is_owner(account.address))


@account_router.post("/login", response_model=Token)
def login(
    address: str = Form(...),
    password: str = Form(...),
    ballot: Ballot = Depends(get_ballot),
):
    account, error = login_account(ballot.storage, address, password)
    if error:
        raise HTTPException(status_code=401, detail=error)
    return Token(access_token=create_access_token({"sub": account.address}))


@account_router.get("/me", response_model=AccountOut)
def me(caller: str = Depends(get_current_caller), ballot: Ballot = Depends(get_ballot)):
    return AccountOut(address=caller, is_owner=ballot.is_owner(caller))
