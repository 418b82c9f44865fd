# ballot/storage.py
import json
import logging
import os
import tempfile
import threading
from typing import Dict, List, Optional

from ballot.models.account_model import Account
from ballot.models.election_model import Election

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Keeps elections and accounts for the lifetime of the process."""

    name = "memory"

    def __init__(self):
        self._elections: Dict[int, dict] = {}
        self._accounts: Dict[str, dict] = {}

    def load_elections(self) -> List[Election]:
        return [Election(**self._elections[i]) for i in sorted(self._elections)]

    def save_election(self, election: Election) -> None:
        self._elections[election.id] = election.model_dump()

    def get_account(self, address: str) -> Optional[Account]:
        record = self._accounts.get(address)
        return Account(**record) if record else None

    def save_account(self, account: Account) -> None:
        self._accounts[account.address] = account.model_dump()


class JsonFileStorage:
    """
    Single JSON file holding {"elections": {...}, "accounts": {...}}.
    The file is created on first use and reset if it is empty or corrupted.
    Every read-modify-write holds one lock and the file is swapped in whole,
    so concurrent account and election writes never drop each other.
    """

    name = "json"

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.RLock()
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        if not os.path.exists(path):
            self._write_db(self._empty())

    @staticmethod
    def _empty() -> dict:
        return {"elections": {}, "accounts": {}}

    def _read_db(self) -> dict:
        with self._lock:
            try:
                with open(self.path, "r") as f:
                    return json.load(f)
            except (json.JSONDecodeError, FileNotFoundError):
                logger.warning(f"Ballot DB at {self.path} unreadable, resetting it")
                reset_data = self._empty()
                self._write_db(reset_data)
                return reset_data

    def _write_db(self, data: dict) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def load_elections(self) -> List[Election]:
        # JSON object keys are strings; order by the numeric election id
        elections = self._read_db().get("elections", {})
        return [Election(**elections[k]) for k in sorted(elections, key=int)]

    def save_election(self, election: Election) -> None:
        with self._lock:
            db = self._read_db()
            db.setdefault("elections", {})[str(election.id)] = election.model_dump()
            self._write_db(db)

    def get_account(self, address: str) -> Optional[Account]:
        record = self._read_db().get("accounts", {}).get(address)
        return Account(**record) if record else None

    def save_account(self, account: Account) -> None:
        with self._lock:
            db = self._read_db()
            db.setdefault("accounts", {})[account.address] = account.model_dump()
            self._write_db(db)
