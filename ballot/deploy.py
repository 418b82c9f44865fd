# Deploys a Ballot owned by the deployer and serves it over HTTP.
import logging

import uvicorn

from ballot import config
from ballot.contract import Ballot
from ballot.crud import ensure_owner_account

logger = logging.getLogger(__name__)


def deploy(owner: str = None, storage=None, owner_password: str = None) -> Ballot:
    """
    Create the Ballot; the deployer becomes its owner.

    The owner's login exists only if a password is given here (or in
    BALLOT_OWNER_PASSWORD); the owner address cannot be registered over HTTP.
    """
    if storage is None:
        storage = config.storage_from_config()
    ballot = Ballot(owner or config.OWNER_ADDRESS, storage)

    password = owner_password or config.OWNER_PASSWORD
    if password:
        ensure_owner_account(storage, ballot.owner, password)
    else:
        logger.warning("BALLOT_OWNER_PASSWORD not set; the owner account cannot log in")

    logger.info(f"Ballot deployed, owner {ballot.owner}, storage {getattr(storage, 'name', 'custom')}")
    return ballot


def main():
    logging.basicConfig(level=config.LOG_LEVEL)
    from ballot.main import app

    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
