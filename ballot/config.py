# ballot/config.py
# Central place for settings and constants. Values come from the environment (.env is honoured).
import os
from dotenv import load_dotenv

load_dotenv()

# Deployer identity; the only address allowed to manage elections.
# Defaults to the first account of a local Hardhat/Anvil node.
OWNER_ADDRESS = os.getenv("BALLOT_OWNER", "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266")

# Password for the owner's login, provisioned at deploy time. Unset: the owner cannot log in.
OWNER_PASSWORD = os.getenv("BALLOT_OWNER_PASSWORD")

# Persistence backend: "memory", "json" or "mongo"
STORAGE_BACKEND = os.getenv("BALLOT_STORAGE", "memory").lower()

# JSON file used by the "json" backend
DB_PATH = os.getenv("BALLOT_DB_PATH", "data/ballot_db.json")

MONGO_URI = os.getenv("MONGO_URI")
MONGO_DB = os.getenv("MONGO_DB", "ballot")

# --- Security & JWT ---
SECRET_KEY = os.getenv("SECRET_KEY", "a_very_secret_key_for_dev_only")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if o.strip()
]

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def storage_from_config(backend: str = None):
    """Build the persistence backend selected by BALLOT_STORAGE."""
    backend = (backend or STORAGE_BACKEND).lower()
    if backend == "memory":
        from ballot.storage import MemoryStorage
        return MemoryStorage()
    if backend == "json":
        from ballot.storage import JsonFileStorage
        return JsonFileStorage(DB_PATH)
    if backend == "mongo":
        from ballot.database.connection import get_database
        from ballot.storage_mongo import MongoStorage
        return MongoStorage(get_database())
    raise ValueError(f"Unknown storage backend: {backend!r}")
