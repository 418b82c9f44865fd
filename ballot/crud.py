import logging

from ballot.contract import normalize_address
from ballot.models.account_model import Account
from ballot.schemas import AccountCreate
from ballot.security import hash_password, verify_password

logger = logging.getLogger(__name__)

OWNER_RESERVED = "This address is reserved for the owner account."
ACCOUNT_EXISTS = "Account already exists for this address."


# Register an account with a hashed password; returns (account, None) or (None, error message).
# The owner's address is never open for registration.
def create_account(storage, data: AccountCreate, owner: str = None):
    address = normalize_address(data.address)
    if owner is not None and address == normalize_address(owner):
        logger.warning(f"Rejected registration of owner address {address}")
        return None, OWNER_RESERVED
    if storage.get_account(address) is not None:
        logger.warning(f"Account {address} already exists")
        return None, ACCOUNT_EXISTS
    account = Account(address=address, hashed_password=hash_password(data.password))
    storage.save_account(account)
    return account, None


# Provision the owner's login at deploy time; an existing owner account is kept as is
def ensure_owner_account(storage, owner: str, password: str) -> Account:
    address = normalize_address(owner)
    account = storage.get_account(address)
    if account is not None:
        return account
    account = Account(address=address, hashed_password=hash_password(password))
    storage.save_account(account)
    logger.info(f"Owner account {address} provisioned")
    return account


# Login; returns (account, None) or (None, error message)
def login_account(storage, address: str, password: str):
    try:
        address = normalize_address(address)
    except ValueError:
        return None, "Invalid address or password"

    account = storage.get_account(address)
    if not account:
        return None, "Invalid address or password"

    if not verify_password(password, account.hashed_password):
        return None, "Invalid address or password"

    return account, None
