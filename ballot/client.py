"""Async client for the Ballot HTTP API.

Each write is submitted and awaited until the server has committed it (or
rejected it). Rejections surface the server's reason verbatim; transport
failures are reported as transient and are never retried here.
"""

from __future__ import annotations

import logging

from typing import Any

import httpx


logger = logging.getLogger(__name__)


class BallotClientError(Exception):
    """The server rejected the call. `reason` is the server's message, unchanged."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class TransientBallotError(BallotClientError):
    """No usable answer from the server (timeout, connection error). Safe to resubmit."""


class BallotClient:
    """Ballot API client (httpx async)."""

    DEFAULT_TIMEOUT = 30.0
    # gateway answers that mean the server itself never responded
    TRANSIENT_STATUSES = (502, 503, 504)

    def __init__(
        self, base_url: str = "http://localhost:8000", client: httpx.AsyncClient | None = None
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.DEFAULT_TIMEOUT)
        self._token: str | None = None

    async def __aenter__(self) -> BallotClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if it was created here."""
        if self._owns_client:
            await self._client.aclose()

    # --- auth ---

    async def register(self, address: str, password: str) -> dict[str, Any]:
        return await self._request(
            "POST", "/accounts/register", json={"address": address, "password": password}
        )

    async def login(self, address: str, password: str) -> None:
        """Log in and keep the bearer token for subsequent writes."""
        data = await self._request(
            "POST", "/accounts/login", data={"address": address, "password": password}
        )
        self._token = data["access_token"]

    def logout(self) -> None:
        self._token = None

    # --- writes ---

    async def create_election(self, name: str, candidates: list[str]) -> int:
        data = await self._request(
            "POST", "/election/create", json={"name": name, "candidates": candidates}
        )
        return data["election_id"]

    async def deactivate_election(self, election_id: int) -> None:
        await self._request("POST", f"/election/{election_id}/deactivate")

    async def add_candidate(self, election_id: int, name: str) -> list[str]:
        data = await self._request(
            "POST", f"/election/{election_id}/candidates", json={"name": name}
        )
        return data["candidates"]

    async def remove_candidate(self, election_id: int, candidate_index: int) -> list[str]:
        """Remove by index. Returns the new candidate order (later indices shift down)."""
        data = await self._request(
            "DELETE", f"/election/{election_id}/candidates/{candidate_index}"
        )
        return data["candidates"]

    async def vote(self, election_id: int, candidate_index: int) -> list[int]:
        """Cast a vote. Returns the results as committed with this vote."""
        data = await self._request(
            "POST",
            "/vote/cast",
            json={"election_id": election_id, "candidate_index": candidate_index},
        )
        return data["results"]

    # --- reads ---

    async def owner(self) -> str:
        data = await self._request("GET", "/owner")
        return data["owner"]

    async def get_election(self, election_id: int) -> dict[str, Any]:
        return await self._request("GET", f"/election/{election_id}")

    async def get_candidates(self, election_id: int) -> list[str]:
        data = await self._request("GET", f"/election/{election_id}/candidates")
        return data["candidates"]

    async def get_results(self, election_id: int) -> list[int]:
        data = await self._request("GET", f"/election/{election_id}/results")
        return data["results"]

    async def get_all_elections(self) -> list[dict[str, Any]]:
        """All elections as {id, name, is_active, candidates}, in id order."""
        data = await self._request("GET", "/election/all")
        return [
            {"id": index, "name": name, "is_active": active, "candidates": candidates}
            for index, (name, active, candidates) in enumerate(
                zip(data["names"], data["active_statuses"], data["candidates"])
            )
        ]

    async def has_voted(self, election_id: int, address: str) -> bool:
        data = await self._request("GET", f"/vote/check/{election_id}/{address}")
        return data["status"] == "already_voted"

    # --- internals ---

    def _headers(self) -> dict[str, str]:
        if self._token is None:
            return {}
        return {"Authorization": f"Bearer {self._token}"}

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = await self._client.request(
                method, url, headers=self._headers(), **kwargs
            )
        except httpx.TransportError as e:
            logger.warning("Ballot API unreachable: %s %s (%s)", method, path, e)
            raise TransientBallotError(f"Ballot API unreachable: {e}") from e

        if response.status_code in self.TRANSIENT_STATUSES:
            logger.warning("Ballot API unavailable: %s %s (%s)", method, path, response.status_code)
            raise TransientBallotError(
                f"Ballot API unavailable (HTTP {response.status_code})",
                status_code=response.status_code,
            )
        if response.status_code >= 400:
            reason = self._reason(response)
            logger.info("Ballot API rejected %s %s: %s", method, path, reason)
            raise BallotClientError(reason, status_code=response.status_code)

        return response.json()

    @staticmethod
    def _reason(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        detail = body.get("detail") if isinstance(body, dict) else None
        if isinstance(detail, str):
            return detail
        # pydantic validation errors arrive as a list
        return str(detail) if detail is not None else f"HTTP {response.status_code}"
