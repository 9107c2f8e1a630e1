"""Async HTTP client for the Medicine Cabinet API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from medicine_cabinet.schemas.auth import TokenResponse
from medicine_cabinet.schemas.strain import StrainResponse, StrainsResponse
from medicine_cabinet.schemas.user import UserResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."
UNREACHABLE_MESSAGE = "Could not reach the server. Please try again."


class ApiClientError(Exception):
    """Raised when the API rejects a request or cannot be reached."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        location: str | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.location = location
        super().__init__(message)


def _error_from_response(resp: httpx.Response) -> ApiClientError:
    """Build an ApiClientError from the server's error body, or a generic fallback."""
    message = None
    location = None
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message")
        location = body.get("location")
    if not message:
        message = resp.text.strip() or GENERIC_ERROR_MESSAGE
    return ApiClientError(str(message), status_code=resp.status_code, location=location)


class CabinetApiClient:
    """
    Thin wrapper over httpx.AsyncClient with one method per endpoint.

    Pass an existing client (e.g. one bound to an ASGI transport) or a base_url.
    Tokens are passed per call; the session store owns them.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        if client is None:
            if not base_url:
                raise ValueError("base_url is required when no client is given")
            client = httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self._client = client

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> CabinetApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(
        self,
        method: str,
        url: str,
        *,
        token: str | None = None,
        json: Any = None,
    ) -> Any:
        headers = {"Authorization": f"Bearer {token}"} if token else None
        try:
            resp = await self._client.request(method, url, headers=headers, json=json)
        except httpx.HTTPError as e:
            logger.warning("Request failed: %s %s: %s", method, url, e)
            raise ApiClientError(UNREACHABLE_MESSAGE) from e
        if resp.status_code >= 400:
            raise _error_from_response(resp)
        return resp.json()

    async def login(self, user_name: str, password: str) -> str:
        data = await self._request(
            "POST", "/auth/login", json={"userName": user_name, "password": password}
        )
        return TokenResponse.model_validate(data).auth_token

    async def refresh(self, token: str) -> str:
        data = await self._request("POST", "/auth/refresh", token=token)
        return TokenResponse.model_validate(data).auth_token

    async def create_user(
        self,
        user_name: str,
        password: str,
        first_name: str = "",
        last_name: str = "",
    ) -> UserResponse:
        data = await self._request(
            "POST",
            "/users",
            json={
                "userName": user_name,
                "password": password,
                "firstName": first_name,
                "lastName": last_name,
            },
        )
        return UserResponse.model_validate(data)

    async def list_strains(self) -> list[StrainResponse]:
        data = await self._request("GET", "/strains")
        return StrainsResponse.model_validate(data).strains

    async def create_strain(
        self,
        token: str,
        name: str,
        type: str = "",
        flavor: str = "",
        description: str = "",
    ) -> StrainResponse:
        data = await self._request(
            "POST",
            "/strains",
            token=token,
            json={"name": name, "type": type, "flavor": flavor, "description": description},
        )
        return StrainResponse.model_validate(data)

    async def list_user_strains(self, token: str) -> list[StrainResponse]:
        data = await self._request("GET", "/users/strains", token=token)
        return StrainsResponse.model_validate(data).strains

    async def get_user_strain(self, token: str, strain_id: int) -> StrainResponse:
        data = await self._request("GET", f"/users/strains/{strain_id}", token=token)
        return StrainResponse.model_validate(data)

    async def add_strain_to_cabinet(self, token: str, strain_id: int) -> UserResponse:
        data = await self._request("PUT", f"/users/strains/{strain_id}", token=token)
        return UserResponse.model_validate(data)

    async def remove_strain_from_cabinet(self, token: str, strain_id: int) -> UserResponse:
        data = await self._request("DELETE", f"/users/strains/{strain_id}", token=token)
        return UserResponse.model_validate(data)

    async def add_comment(
        self, token: str, strain_id: int, content: str, author: str
    ) -> StrainResponse:
        data = await self._request(
            "POST",
            f"/users/strains/{strain_id}",
            token=token,
            json={"comment": {"content": content, "author": author}},
        )
        return StrainResponse.model_validate(data)

    async def remove_comment(
        self, token: str, strain_id: int, comment_id: int
    ) -> StrainResponse:
        data = await self._request(
            "DELETE", f"/users/strains/{strain_id}/{comment_id}", token=token
        )
        return StrainResponse.model_validate(data)
