"""HTTP tests for the Ballot API."""

import pytest

from fastapi.testclient import TestClient

from ballot.crud import OWNER_RESERVED
from ballot.errors import (
    ALREADY_VOTED,
    ELECTION_NOT_ACTIVE,
    ELECTION_NOT_FOUND,
    INVALID_CANDIDATE,
    ONLY_OWNER,
)
from tests.conftest import ADDR1, ADDR2, OWNER, register_and_login


def create(client: TestClient, headers: dict, name: str = "Election 1", candidates=None) -> int:
    response = client.post(
        "/election/create",
        json={"name": name, "candidates": candidates or ["Alice", "Bob"]},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["election_id"]


class TestRoot:
    def test_root(self, client: TestClient) -> None:
        assert client.get("/").json() == {"message": "Welcome to the Ballot API"}

    def test_owner(self, client: TestClient) -> None:
        assert client.get("/owner").json() == {"owner": OWNER.lower()}

    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "healthy", "storage": "memory", "elections": 0}


class TestAccounts:
    def test_owner_address_cannot_be_registered(self, client: TestClient, voter_headers: dict) -> None:
        response = client.post("/accounts/register", json={"address": OWNER, "password": "attacker-pw"})

        assert response.status_code == 400
        assert response.json()["detail"] == OWNER_RESERVED
        login = client.post("/accounts/login", data={"address": OWNER, "password": "attacker-pw"})
        assert login.status_code == 401
        create = client.post(
            "/election/create", json={"name": "hijack", "candidates": ["Mallory"]}, headers=voter_headers
        )
        assert create.status_code == 403
        assert client.get("/election/all").json()["names"] == []

    def test_owner_address_in_other_case_cannot_be_registered(self, client: TestClient) -> None:
        response = client.post("/accounts/register", json={"address": OWNER.lower(), "password": "attacker-pw"})
        assert response.status_code == 400

    def test_provisioned_owner_keeps_password(self, client: TestClient, owner_headers: dict) -> None:
        response = client.post("/accounts/register", json={"address": OWNER, "password": "attacker-pw"})
        assert response.status_code == 400
        assert client.post("/accounts/login", data={"address": OWNER, "password": "attacker-pw"}).status_code == 401
        assert client.get("/accounts/me", headers=owner_headers).json() == {"address": OWNER.lower(), "is_owner": True}

    def test_register_duplicate(self, client: TestClient, voter_headers: dict) -> None:
        response = client.post("/accounts/register", json={"address": ADDR1, "password": "secret1"})
        assert response.status_code == 400

    def test_register_short_password(self, client: TestClient) -> None:
        response = client.post("/accounts/register", json={"address": ADDR1, "password": "123"})
        assert response.status_code == 422

    def test_login_wrong_password(self, client: TestClient, voter_headers: dict) -> None:
        response = client.post("/accounts/login", data={"address": ADDR1, "password": "wrong-password"})
        assert response.status_code == 401

    def test_me(self, client: TestClient, voter_headers: dict) -> None:
        response = client.get("/accounts/me", headers=voter_headers)
        assert response.json() == {"address": ADDR1.lower(), "is_owner": False}


class TestElectionRoutes:
    def test_owner_creates_election(self, client: TestClient, owner_headers: dict) -> None:
        election_id = create(client, owner_headers)

        assert election_id == 0
        assert client.get("/election/0").json() == {"id": 0, "name": "Election 1", "is_active": True}
        assert client.get("/election/0/candidates").json() == {"candidates": ["Alice", "Bob"]}
        assert client.get("/election/0/results").json() == {"results": [0, 0]}

    def test_write_without_token(self, client: TestClient) -> None:
        response = client.post("/election/create", json={"name": "E", "candidates": []})
        assert response.status_code == 401
        assert response.json()["detail"] == "Could not validate credentials"

    def test_write_with_bad_token(self, client: TestClient) -> None:
        response = client.post(
            "/election/create",
            json={"name": "E", "candidates": []},
            headers={"Authorization": "Bearer nonsense"},
        )
        assert response.status_code == 401

    def test_non_owner_cannot_create(self, client: TestClient, voter_headers: dict) -> None:
        response = client.post(
            "/election/create",
            json={"name": "Election 2", "candidates": ["Alice", "Bob"]},
            headers=voter_headers,
        )

        assert response.status_code == 403
        assert response.json()["detail"] == ONLY_OWNER
        assert client.get("/election/all").json() == {"names": [], "active_statuses": [], "candidates": []}

    def test_deactivate(self, client: TestClient, owner_headers: dict, voter_headers: dict) -> None:
        create(client, owner_headers)

        response = client.post("/election/0/deactivate", headers=voter_headers)
        assert response.status_code == 403
        assert client.get("/election/0").json()["is_active"] is True

        response = client.post("/election/0/deactivate", headers=owner_headers)
        assert response.status_code == 200
        assert client.get("/election/0").json()["is_active"] is False

    def test_add_and_remove_candidate(self, client: TestClient, owner_headers: dict) -> None:
        create(client, owner_headers, candidates=["Alice", "Bob"])

        response = client.post("/election/0/candidates", json={"name": "Charlie"}, headers=owner_headers)
        assert response.status_code == 201
        assert response.json()["candidates"] == ["Alice", "Bob", "Charlie"]
        assert client.get("/election/0/results").json() == {"results": [0, 0, 0]}

        response = client.delete("/election/0/candidates/1", headers=owner_headers)
        assert response.status_code == 200
        assert "Bob" not in response.json()["candidates"]
        assert client.get("/election/0/results").json() == {"results": [0, 0]}

    def test_non_owner_cannot_change_candidates(
        self, client: TestClient, owner_headers: dict, voter_headers: dict
    ) -> None:
        create(client, owner_headers, candidates=["Alice", "Bob", "Charlie"])

        added = client.post("/election/0/candidates", json={"name": "Dave"}, headers=voter_headers)
        removed = client.delete("/election/0/candidates/1", headers=voter_headers)

        assert added.status_code == removed.status_code == 403
        assert added.json()["detail"] == removed.json()["detail"] == ONLY_OWNER
        assert client.get("/election/0/candidates").json()["candidates"] == ["Alice", "Bob", "Charlie"]

    def test_remove_invalid_index(self, client: TestClient, owner_headers: dict) -> None:
        create(client, owner_headers)
        response = client.delete("/election/0/candidates/5", headers=owner_headers)
        assert response.status_code == 400

    @pytest.mark.parametrize("path", ["/election/9", "/election/9/candidates", "/election/9/results"])
    def test_unknown_election(self, client: TestClient, path: str) -> None:
        response = client.get(path)
        assert response.status_code == 404
        assert response.json()["detail"] == ELECTION_NOT_FOUND

    def test_all_elections(self, client: TestClient, owner_headers: dict) -> None:
        create(client, owner_headers, "First", ["Alice", "Bob"])
        create(client, owner_headers, "Second", ["Carol"])
        client.post("/election/1/deactivate", headers=owner_headers)

        first = client.get("/election/all").json()

        assert first == {
            "names": ["First", "Second"],
            "active_statuses": [True, False],
            "candidates": [["Alice", "Bob"], ["Carol"]],
        }
        assert client.get("/election/all").json() == first


class TestVoteRoutes:
    def test_vote(self, client: TestClient, owner_headers: dict, voter_headers: dict) -> None:
        create(client, owner_headers)

        response = client.post("/vote/cast", json={"election_id": 0, "candidate_index": 0}, headers=voter_headers)

        assert response.status_code == 200
        assert response.json() == {
            "message": "Vote cast successfully!",
            "election_id": 0,
            "candidate_index": 0,
            "results": [1, 0],
        }
        assert client.get("/election/0/results").json() == {"results": [1, 0]}

    def test_vote_requires_token(self, client: TestClient, owner_headers: dict) -> None:
        create(client, owner_headers)
        response = client.post("/vote/cast", json={"election_id": 0, "candidate_index": 0})
        assert response.status_code == 401

    def test_cannot_vote_twice(self, client: TestClient, owner_headers: dict, voter_headers: dict) -> None:
        create(client, owner_headers)
        client.post("/vote/cast", json={"election_id": 0, "candidate_index": 0}, headers=voter_headers)

        response = client.post("/vote/cast", json={"election_id": 0, "candidate_index": 1}, headers=voter_headers)

        assert response.status_code == 409
        assert response.json()["detail"] == ALREADY_VOTED
        assert client.get("/election/0/results").json() == {"results": [1, 0]}

    def test_cannot_vote_in_inactive_election(
        self, client: TestClient, owner_headers: dict, voter_headers: dict
    ) -> None:
        create(client, owner_headers)
        client.post("/election/0/deactivate", headers=owner_headers)

        response = client.post("/vote/cast", json={"election_id": 0, "candidate_index": 0}, headers=voter_headers)

        assert response.status_code == 409
        assert response.json()["detail"] == ELECTION_NOT_ACTIVE
        assert client.get("/election/0/results").json() == {"results": [0, 0]}

    def test_invalid_candidate(self, client: TestClient, owner_headers: dict, voter_headers: dict) -> None:
        create(client, owner_headers)
        response = client.post("/vote/cast", json={"election_id": 0, "candidate_index": 2}, headers=voter_headers)
        assert response.status_code == 400

    def test_negative_index_is_out_of_range(
        self, client: TestClient, owner_headers: dict, voter_headers: dict
    ) -> None:
        create(client, owner_headers)
        response = client.post("/vote/cast", json={"election_id": 0, "candidate_index": -1}, headers=voter_headers)
        assert response.status_code == 400
        assert response.json()["detail"] == INVALID_CANDIDATE
        assert client.get("/election/0/results").json() == {"results": [0, 0]}

    def test_negative_election_is_not_found(self, client: TestClient, voter_headers: dict) -> None:
        response = client.post("/vote/cast", json={"election_id": -1, "candidate_index": 0}, headers=voter_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == ELECTION_NOT_FOUND

    def test_check_vote(self, client: TestClient, owner_headers: dict, voter_headers: dict) -> None:
        create(client, owner_headers)
        client.post("/vote/cast", json={"election_id": 0, "candidate_index": 1}, headers=voter_headers)

        assert client.get(f"/vote/check/0/{ADDR1}").json()["status"] == "already_voted"
        assert client.get(f"/vote/check/0/{ADDR2}").json()["status"] == "not_voted"

    def test_two_voters(self, client: TestClient, owner_headers: dict, voter_headers: dict) -> None:
        create(client, owner_headers)
        second = register_and_login(client, ADDR2)

        client.post("/vote/cast", json={"election_id": 0, "candidate_index": 1}, headers=voter_headers)
        client.post("/vote/cast", json={"election_id": 0, "candidate_index": 1}, headers=second)

        assert client.get("/election/0/results").json() == {"results": [0, 2]}
