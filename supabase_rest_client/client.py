from __future__ import annotations

import json
from typing import Any, Mapping

import httpx

from . import constants
from .config_types import ClientConfig
from .filters import primary_key_filter, table_path
from .payloads import (
    AuthTokenResponse,
    EmailPayload,
    PasswordCredentials,
    RefreshTokenPayload,
    ResetPasswordPayload,
    VerifyOTPPayload,
)
from .transport import AsyncTransport, Transport, append_query, build_headers, parse_body, resolve_url

QueryParams = Mapping[str, Any]


class _ClientState:
    """Configuration shared by the sync and async clients.

    ``base_url`` and ``api_key`` are fixed for the lifetime of the instance;
    the bearer token can be replaced or cleared at any time and is read
    when each request builds its headers.
    """

    TOKEN_API_PATH = constants.TOKEN_API_PATH
    SIGNUP_API_PATH = constants.SIGNUP_API_PATH
    MAGIC_LINK_API_PATH = constants.MAGIC_LINK_API_PATH
    RECOVER_API_PATH = constants.RECOVER_API_PATH
    VERIFY_API_PATH = constants.VERIFY_API_PATH
    USER_API_PATH = constants.USER_API_PATH
    LOGOUT_API_PATH = constants.LOGOUT_API_PATH
    INVITE_API_PATH = constants.INVITE_API_PATH
    RESET_API_PATH = constants.RESET_API_PATH
    ERROR_MESSAGES = constants.ERROR_MESSAGES

    def __init__(self, cfg: ClientConfig):
        cfg.validate()
        self._cfg = cfg
        self._token = cfg.token

    @property
    def base_url(self) -> str:
        return self._cfg.base_url

    @property
    def api_key(self) -> str:
        return self._cfg.api_key

    @property
    def token(self) -> str | None:
        return self._token

    def set_token(self, token: str | None) -> None:
        self._token = token

    def get_token(self) -> str | None:
        return self._token

    def _url(self, endpoint: str, query_params: QueryParams | None = None) -> str:
        return append_query(resolve_url(self._cfg.base_url, endpoint), query_params)

    def _headers(self) -> dict[str, str]:
        return build_headers(self._cfg.api_key, self._token)


class SupabaseClient(_ClientState):
    def __init__(self, cfg: ClientConfig, *, http_client: httpx.Client | None = None):
        super().__init__(cfg)
        self._t = Transport(timeout_s=cfg.timeout_s, client=http_client)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> SupabaseClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request(
            self,
            method: str,
            endpoint: str,
            body: Any | None = None,
            query_params: QueryParams | None = None,
    ) -> Any:
        """Send one request and return the decoded body.

        Empty bodies decode to ``{}``; bodies that are not JSON come back as
        the raw text.
        """
        url = self._url(endpoint, query_params)
        text = self._t.send(method.upper(), url, headers=self._headers(), body=body)
        return parse_body(text).value

    def auth_request(self, endpoint: str, payload: Mapping[str, Any]) -> AuthTokenResponse:
        """POST to a token endpoint. The response must be JSON."""
        text = self._t.send("POST", self._url(endpoint), headers=self._headers(), body=dict(payload))
        return json.loads(text)

    # --- auth ---
    def sign_up(self, email: str, password: str) -> Any:
        payload = PasswordCredentials(email=email, password=password)
        return self.request("POST", f"{constants.SIGNUP_API_PATH}?grant_type=signup", payload.to_dict())

    def sign_in(self, email: str, password: str) -> AuthTokenResponse:
        payload = PasswordCredentials(email=email, password=password)
        return self.auth_request(f"{constants.TOKEN_API_PATH}?grant_type=password", payload.to_dict())

    def refresh_token(self, refresh_token: str) -> AuthTokenResponse:
        payload = RefreshTokenPayload(refresh_token=refresh_token)
        return self.auth_request(f"{constants.TOKEN_API_PATH}?grant_type=refresh_token", payload.to_dict())

    def send_magic_link(self, email: str) -> Any:
        return self.request("POST", constants.MAGIC_LINK_API_PATH, EmailPayload(email=email).to_dict())

    def send_password_recovery(self, email: str) -> Any:
        return self.request("POST", constants.RECOVER_API_PATH, EmailPayload(email=email).to_dict())

    def verify_otp(self, email: str, token: str, otp_type: str) -> Any:
        payload = VerifyOTPPayload(email=email, token=token, type=otp_type)
        return self.request("POST", constants.VERIFY_API_PATH, payload.to_dict())

    # --- user ---
    def get_user(self) -> Any:
        return self.request("GET", constants.USER_API_PATH)

    def update_user(self, payload: Mapping[str, Any]) -> Any:
        return self.request("PUT", constants.USER_API_PATH, dict(payload))

    def sign_out(self) -> Any:
        return self.request("POST", constants.LOGOUT_API_PATH)

    def invite_user(self, email: str) -> Any:
        return self.request("POST", constants.INVITE_API_PATH, EmailPayload(email=email).to_dict())

    def reset_password(self, token: str, new_password: str) -> Any:
        payload = ResetPasswordPayload(token=token, password=new_password)
        return self.request("POST", f"{constants.RESET_API_PATH}?grant_type=reset_password", payload.to_dict())

    # --- rest ---
    def get(self, endpoint: str, query_params: QueryParams | None = None) -> Any:
        return self.request("GET", table_path(endpoint), query_params=query_params)

    def post(self, endpoint: str, data: Any) -> Any:
        return self.request("POST", table_path(endpoint), data)

    def put(self, endpoint: str, primary_key_name: str, primary_key_value: Any, data: Any) -> Any:
        params = primary_key_filter(primary_key_name, primary_key_value)
        return self.request("PUT", table_path(endpoint), data, params)

    def patch(self, endpoint: str, query_params: QueryParams, data: Any) -> Any:
        return self.request("PATCH", table_path(endpoint), data, query_params)

    def delete(self, endpoint: str, primary_key_name: str, primary_key_value: Any) -> Any:
        params = primary_key_filter(primary_key_name, primary_key_value)
        return self.request("DELETE", table_path(endpoint), query_params=params)

    del_ = delete


class AsyncSupabaseClient(_ClientState):
    def __init__(self, cfg: ClientConfig, *, http_client: httpx.AsyncClient | None = None):
        super().__init__(cfg)
        self._t = AsyncTransport(timeout_s=cfg.timeout_s, client=http_client)

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> AsyncSupabaseClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def request(
            self,
            method: str,
            endpoint: str,
            body: Any | None = None,
            query_params: QueryParams | None = None,
    ) -> Any:
        url = self._url(endpoint, query_params)
        text = await self._t.send(method.upper(), url, headers=self._headers(), body=body)
        return parse_body(text).value

    async def auth_request(self, endpoint: str, payload: Mapping[str, Any]) -> AuthTokenResponse:
        text = await self._t.send("POST", self._url(endpoint), headers=self._headers(), body=dict(payload))
        return json.loads(text)

    # --- auth ---
    async def sign_up(self, email: str, password: str) -> Any:
        payload = PasswordCredentials(email=email, password=password)
        return await self.request("POST", f"{constants.SIGNUP_API_PATH}?grant_type=signup", payload.to_dict())

    async def sign_in(self, email: str, password: str) -> AuthTokenResponse:
        payload = PasswordCredentials(email=email, password=password)
        return await self.auth_request(f"{constants.TOKEN_API_PATH}?grant_type=password", payload.to_dict())

    async def refresh_token(self, refresh_token: str) -> AuthTokenResponse:
        payload = RefreshTokenPayload(refresh_token=refresh_token)
        return await self.auth_request(f"{constants.TOKEN_API_PATH}?grant_type=refresh_token", payload.to_dict())

    async def send_magic_link(self, email: str) -> Any:
        return await self.request("POST", constants.MAGIC_LINK_API_PATH, EmailPayload(email=email).to_dict())

    async def send_password_recovery(self, email: str) -> Any:
        return await self.request("POST", constants.RECOVER_API_PATH, EmailPayload(email=email).to_dict())

    async def verify_otp(self, email: str, token: str, otp_type: str) -> Any:
        payload = VerifyOTPPayload(email=email, token=token, type=otp_type)
        return await self.request("POST", constants.VERIFY_API_PATH, payload.to_dict())

    # --- user ---
    async def get_user(self) -> Any:
        return await self.request("GET", constants.USER_API_PATH)

    async def update_user(self, payload: Mapping[str, Any]) -> Any:
        return await self.request("PUT", constants.USER_API_PATH, dict(payload))

    async def sign_out(self) -> Any:
        return await self.request("POST", constants.LOGOUT_API_PATH)

    async def invite_user(self, email: str) -> Any:
        return await self.request("POST", constants.INVITE_API_PATH, EmailPayload(email=email).to_dict())

    async def reset_password(self, token: str, new_password: str) -> Any:
        payload = ResetPasswordPayload(token=token, password=new_password)
        path = f"{constants.RESET_API_PATH}?grant_type=reset_password"
        return await self.request("POST", path, payload.to_dict())

    # --- rest ---
    async def get(self, endpoint: str, query_params: QueryParams | None = None) -> Any:
        return await self.request("GET", table_path(endpoint), query_params=query_params)

    async def post(self, endpoint: str, data: Any) -> Any:
        return await self.request("POST", table_path(endpoint), data)

    async def put(self, endpoint: str, primary_key_name: str, primary_key_value: Any, data: Any) -> Any:
        params = primary_key_filter(primary_key_name, primary_key_value)
        return await self.request("PUT", table_path(endpoint), data, params)

    async def patch(self, endpoint: str, query_params: QueryParams, data: Any) -> Any:
        return await self.request("PATCH", table_path(endpoint), data, query_params)

    async def delete(self, endpoint: str, primary_key_name: str, primary_key_value: Any) -> Any:
        params = primary_key_filter(primary_key_name, primary_key_value)
        return await self.request("DELETE", table_path(endpoint), query_params=params)

    del_ = delete


def create_client(
        base_url: str,
        api_key: str,
        token: str | None = None,
        *,
        http_client: httpx.Client | None = None,
) -> SupabaseClient:
    return SupabaseClient(ClientConfig(base_url=base_url, api_key=api_key, token=token), http_client=http_client)


def create_async_client(
        base_url: str,
        api_key: str,
        token: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
) -> AsyncSupabaseClient:
    return AsyncSupabaseClient(
        ClientConfig(base_url=base_url, api_key=api_key, token=token),
        http_client=http_client,
    )
