# ballot/storage_mongo.py
import logging
from typing import List, Optional

from pymongo import ASCENDING

from ballot.models.account_model import Account
from ballot.models.election_model import Election

logger = logging.getLogger(__name__)

ELECTIONS_COLLECTION_NAME = "elections"
ACCOUNTS_COLLECTION_NAME = "accounts"


class MongoStorage:
    """
    Elections and accounts kept in MongoDB.

    Election documents use the sequential election id as `_id`,
    account documents use the address.
    """

    name = "mongo"

    def __init__(self, db):
        self.db = db
        self.elections = db[ELECTIONS_COLLECTION_NAME]
        self.accounts = db[ACCOUNTS_COLLECTION_NAME]
        self.accounts.create_index("address", unique=True)

    def load_elections(self) -> List[Election]:
        """
        Load every stored election ordered by id.

        Returns:
            List of Election records, oldest first
        """
        elections = []
        for doc in self.elections.find({}).sort("_id", ASCENDING):
            doc.pop("_id", None)
            elections.append(Election(**doc))
        logger.info(f"Loaded {len(elections)} elections from MongoDB")
        return elections

    def save_election(self, election: Election) -> None:
        """Insert or replace one election document."""
        self.elections.replace_one(
            {"_id": election.id},
            {"_id": election.id, **election.model_dump()},
            upsert=True,
        )

    def get_account(self, address: str) -> Optional[Account]:
        doc = self.accounts.find_one({"_id": address})
        if not doc:
            return None
        doc.pop("_id", None)
        return Account(**doc)

    def save_account(self, account: Account) -> None:
        self.accounts.replace_one(
            {"_id": account.address},
            {"_id": account.address, **account.model_dump()},
            upsert=True,
        )
        logger.info(f"Account {account.address} saved")
