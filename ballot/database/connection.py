import logging

from pymongo import MongoClient

from ballot import config

logger = logging.getLogger(__name__)

# one client per connection string
_clients = {}


def get_database(uri: str = None, db_name: str = None):
    """Return the configured Mongo database, creating the client for its URI on first use."""
    uri = uri or config.MONGO_URI
    db_name = db_name or config.MONGO_DB

    if not uri:
        raise ValueError("MONGO_URI not set. Check your .env file or environment.")
    if not db_name:
        raise ValueError("MONGO_DB not set. Check your .env file or environment.")

    client = _clients.get(uri)
    if client is None:
        client = MongoClient(uri)
        client.server_info()
        _clients[uri] = client
        logger.info(f"Connected to MongoDB, database: {db_name}")
    return client[db_name]
