"""Shared fixtures for the Ballot tests."""

import pytest

from fastapi.testclient import TestClient

from ballot.contract import Ballot
from ballot.crud import ensure_owner_account
from ballot.main import create_app
from ballot.storage import MemoryStorage


OWNER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
ADDR1 = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
ADDR2 = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"
PASSWORD = "correct-horse"


@pytest.fixture
def ballot() -> Ballot:
    """A freshly deployed Ballot owned by OWNER."""
    return Ballot(OWNER, MemoryStorage())


@pytest.fixture
def app(ballot: Ballot):
    return create_app(ballot)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def register_and_login(client: TestClient, address: str, password: str = PASSWORD) -> dict:
    """Register an account and return the Authorization header for it."""
    response = client.post("/accounts/register", json={"address": address, "password": password})
    assert response.status_code == 201, response.text
    return login(client, address, password)


def login(client: TestClient, address: str, password: str = PASSWORD) -> dict:
    response = client.post("/accounts/login", data={"address": address, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def owner_headers(client: TestClient, ballot: Ballot) -> dict:
    """The owner logs in with the account provisioned at deploy time."""
    ensure_owner_account(ballot.storage, OWNER, PASSWORD)
    return login(client, OWNER)


@pytest.fixture
def voter_headers(client: TestClient) -> dict:
    return register_and_login(client, ADDR1)
